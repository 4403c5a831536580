"""Board routes (the caller's own board only)."""

from __future__ import annotations

from fastapi import APIRouter

from ..deps import CurrentUserId, Db
from ..tasks import service as task_service
from . import service
from .models import ClearDoneResponse, FullBoardResponse

router = APIRouter(prefix="/api/me", tags=["boards"])


@router.get("/board", response_model=FullBoardResponse)
async def get_my_board(user_id: CurrentUserId, db: Db):
    return await service.get_board(db, user_id)


@router.post("/board/remove-done-tasks", response_model=ClearDoneResponse)
async def remove_done_tasks(user_id: CurrentUserId, db: Db):
    removed = await task_service.clear_done_tasks(db, user_id)
    return ClearDoneResponse(removed_count=removed)
