"""Task lifecycle service - create, move, update, delete, clear DONE.

A task is ACTIVE in one of the three columns of its owner's board until it
is soft-deleted, which is terminal. Every mutation of an existing task goes
through ``store.find_active``, so a task that is missing, deleted, or owned by
another user is reported the same way: ``NotFound``.
"""

from __future__ import annotations

import logging
import random

import aiosqlite

from ..boards import service as board_service
from ..boards.models import ColumnSlug
from ..errors import Forbidden, NotFound, ValidationError
from . import store
from .models import TaskColor
from .store import UNSET

logger = logging.getLogger(__name__)

TASK_COLORS: tuple[str, ...] = tuple(str(c) for c in TaskColor)


def pick_color() -> str:
    """Uniformly random pastel color; each call re-rolls independently."""
    return random.choice(TASK_COLORS)


# Largest value a SQLite INTEGER column can hold.
MAX_POSITION = 2**63 - 1


def _is_valid_position(value: object) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 1 <= value <= MAX_POSITION
    )


async def _get_owned_task(db: aiosqlite.Connection, user_id: str, task_id: str) -> dict:
    task = await store.find_active(db, task_id, user_id)
    if task is None:
        raise NotFound("Task not found")
    return task


async def create_task(
    db: aiosqlite.Connection,
    user_id: str,
    title: str,
    description: str | None = None,
) -> dict:
    """Create a task at the end of the caller's TODO column."""
    if title is None or not title.strip():
        raise ValidationError("title is required and cannot be blank")

    board = await board_service.resolve_board_for_user(db, user_id)
    todo = await board_service.find_column_by_slug(db, board["id"], ColumnSlug.TODO)

    position = await store.next_position(db, todo["id"])
    task = await store.insert_task(
        db,
        board_id=board["id"],
        column_id=todo["id"],
        title=title.strip(),
        description=description,
        position=position,
        color=pick_color(),
    )
    logger.info("Created task %s on board %s at position %d", task["id"], board["id"], position)
    return task


async def move_task(
    db: aiosqlite.Connection,
    user_id: str,
    task_id: str,
    target_column_id: str,
    new_position: object = None,
) -> dict:
    """Move a task to a column of its own board.

    Without a usable ``new_position`` the task is appended to the end of the
    target column. Moving into the column the task is already in is treated
    the same way: it is re-appended after the current last task.
    """
    task = await _get_owned_task(db, user_id, task_id)
    column = await board_service.find_column(db, target_column_id)

    if column["board_id"] != task["board_id"]:
        logger.warning(
            "Rejected move of task %s to column %s on another board", task_id, target_column_id
        )
        raise Forbidden("Cannot move task to a column of another board")

    position = new_position
    if not _is_valid_position(position):
        position = await store.next_position(db, column["id"])

    moved = await store.relocate(db, task_id, column["id"], position)
    logger.info("Moved task %s to column %s at position %d", task_id, column["slug"], position)
    return moved


async def update_task(
    db: aiosqlite.Connection,
    user_id: str,
    task_id: str,
    *,
    title: str | None = UNSET,
    description: str | None = UNSET,
) -> dict:
    """Edit a task's title and/or description. Omitted fields stay as they are."""
    if title is UNSET and description is UNSET:
        raise ValidationError("Provide at least one of: title, description")

    fields = {}
    if title is not UNSET:
        if title is None or not title.strip():
            raise ValidationError("title cannot be blank")
        fields["title"] = title.strip()
    if description is not UNSET:
        fields["description"] = description

    await _get_owned_task(db, user_id, task_id)
    updated = await store.update_fields(db, task_id, **fields)
    logger.debug("Updated task %s fields %s", task_id, sorted(fields))
    return updated


async def delete_task(db: aiosqlite.Connection, user_id: str, task_id: str) -> dict:
    """Soft-delete one task and return it as it was before deletion.

    Deleting the same task twice raises NotFound the second time.
    """
    await _get_owned_task(db, user_id, task_id)
    snapshot = await store.soft_delete(db, task_id)
    if snapshot is None:
        raise NotFound("Task not found")
    logger.info("Deleted task %s", task_id)
    return snapshot


async def clear_done_tasks(db: aiosqlite.Connection, user_id: str) -> int:
    """Soft-delete every active task in the caller's DONE column.

    Returns how many tasks were removed; 0 when DONE is already empty.
    """
    board = await board_service.resolve_board_for_user(db, user_id)
    done = await board_service.find_column_by_slug(db, board["id"], ColumnSlug.DONE)

    removed = await store.soft_delete_done_for_board(db, board["id"], done["id"])
    logger.info("Cleared %d done task(s) from board %s", removed, board["id"])
    return removed
