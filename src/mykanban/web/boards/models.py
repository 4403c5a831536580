"""Board and column models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from ..tasks.models import TaskResponse


class ColumnSlug(StrEnum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


# (slug, display name, position) for the columns every board is provisioned with.
DEFAULT_COLUMNS: tuple[tuple[ColumnSlug, str, int], ...] = (
    (ColumnSlug.TODO, "To do", 1),
    (ColumnSlug.IN_PROGRESS, "In progress", 2),
    (ColumnSlug.DONE, "Done", 3),
)


class BoardResponse(BaseModel):
    id: str
    owner_id: str
    name: str
    created_at: str
    updated_at: str


class ColumnResponse(BaseModel):
    id: str
    board_id: str
    name: str
    slug: ColumnSlug
    position: int


class ColumnWithTasks(ColumnResponse):
    tasks: list[TaskResponse]


class FullBoardResponse(BaseModel):
    board: BoardResponse
    columns: list[ColumnWithTasks]


class ClearDoneResponse(BaseModel):
    removed_count: int
