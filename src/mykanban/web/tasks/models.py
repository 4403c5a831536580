"""Task Pydantic models."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaskColor(StrEnum):
    PASTEL_YELLOW = "pastel-yellow"
    PASTEL_PINK = "pastel-pink"
    PASTEL_GREEN = "pastel-green"
    PASTEL_BLUE = "pastel-blue"


class TaskCreate(BaseModel):
    title: str
    description: str | None = None


class TaskUpdate(BaseModel):
    """Only title and description are editable; anything else is rejected."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None


class TaskMove(BaseModel):
    target_column_id: str = Field(min_length=1)
    # Anything that is not a positive integer means "append to the end".
    new_position: Any = None


class TaskResponse(BaseModel):
    id: str
    board_id: str
    column_id: str
    title: str
    description: str | None
    position: int
    color: TaskColor
    is_deleted: bool
    deleted_at: str | None
    created_at: str
    updated_at: str


class TaskDeletedResponse(BaseModel):
    deleted: TaskResponse
