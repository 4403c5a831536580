"""Task routes."""

from __future__ import annotations

from fastapi import APIRouter

from ..deps import CurrentUserId, Db
from . import service
from .models import TaskCreate, TaskDeletedResponse, TaskMove, TaskResponse, TaskUpdate

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(body: TaskCreate, user_id: CurrentUserId, db: Db):
    return await service.create_task(db, user_id, body.title, body.description)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(task_id: str, body: TaskUpdate, user_id: CurrentUserId, db: Db):
    # exclude_unset keeps "description": null (clear it) apart from an omitted description
    fields = body.model_dump(exclude_unset=True)
    return await service.update_task(db, user_id, task_id, **fields)


@router.patch("/{task_id}/move", response_model=TaskResponse)
async def move_task(task_id: str, body: TaskMove, user_id: CurrentUserId, db: Db):
    return await service.move_task(
        db, user_id, task_id, body.target_column_id, body.new_position
    )


@router.delete("/{task_id}", response_model=TaskDeletedResponse)
async def delete_task(task_id: str, user_id: CurrentUserId, db: Db):
    snapshot = await service.delete_task(db, user_id, task_id)
    return {"deleted": snapshot}
