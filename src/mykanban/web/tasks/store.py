"""Task store - SQL access to task rows.

Every function is scoped by the ids passed in. Nothing is cached: each call
reads the current state of the tasks table.
"""

from __future__ import annotations

import secrets
from typing import Any

import aiosqlite

from ..db.database import utcnow
from ..errors import NotFound


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


# Marks a keyword argument the caller did not supply (distinct from None).
UNSET: Any = _Unset()


def _to_task(row: aiosqlite.Row) -> dict:
    task = dict(row)
    task["is_deleted"] = bool(task["is_deleted"])
    return task


async def get_task(db: aiosqlite.Connection, task_id: str) -> dict | None:
    """Fetch a task row regardless of owner or deletion state."""
    cursor = await db.execute("SELECT * FROM tasks WHERE id = ?", (task_id,))
    row = await cursor.fetchone()
    return _to_task(row) if row else None


async def next_position(db: aiosqlite.Connection, column_id: str) -> int:
    """Position for a task appended to the end of a column."""
    cursor = await db.execute(
        """SELECT COALESCE(MAX(position), 0) + 1 FROM tasks
           WHERE column_id = ? AND is_deleted = 0""",
        (column_id,),
    )
    row = await cursor.fetchone()
    return row[0]


async def insert_task(
    db: aiosqlite.Connection,
    board_id: str,
    column_id: str,
    title: str,
    description: str | None,
    position: int,
    color: str,
) -> dict:
    task_id = secrets.token_hex(8)
    now = utcnow()
    await db.execute(
        """INSERT INTO tasks (id, board_id, column_id, title, description, position,
           color, created_at, updated_at)
           VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
        (task_id, board_id, column_id, title, description, position, color, now, now),
    )
    await db.commit()
    return await get_task(db, task_id)


async def find_active(
    db: aiosqlite.Connection, task_id: str, owner_user_id: str
) -> dict | None:
    """Return the task only if it is active and its board belongs to the owner.

    Missing, deleted and foreign tasks all come back as None from one query.
    """
    cursor = await db.execute(
        """SELECT t.* FROM tasks t
           JOIN boards b ON t.board_id = b.id
           WHERE t.id = ? AND b.owner_id = ? AND t.is_deleted = 0""",
        (task_id, owner_user_id),
    )
    row = await cursor.fetchone()
    return _to_task(row) if row else None


async def update_fields(
    db: aiosqlite.Connection,
    task_id: str,
    *,
    title: str = UNSET,
    description: str | None = UNSET,
) -> dict:
    """Apply the supplied fields only. An explicit None description clears it.

    Raises NotFound if the task is missing or already deleted.
    """
    sets = []
    values: list[Any] = []
    if title is not UNSET:
        sets.append("title = ?")
        values.append(title)
    if description is not UNSET:
        sets.append("description = ?")
        values.append(description)

    sets.append("updated_at = ?")
    values.append(utcnow())
    values.append(task_id)

    cursor = await db.execute(
        f"UPDATE tasks SET {', '.join(sets)} WHERE id = ? AND is_deleted = 0",
        values,
    )
    await db.commit()
    if cursor.rowcount == 0:
        raise NotFound("Task not found")
    return await get_task(db, task_id)


async def relocate(
    db: aiosqlite.Connection, task_id: str, column_id: str, position: int
) -> dict:
    cursor = await db.execute(
        """UPDATE tasks SET column_id = ?, position = ?, updated_at = ?
           WHERE id = ? AND is_deleted = 0""",
        (column_id, position, utcnow(), task_id),
    )
    await db.commit()
    if cursor.rowcount == 0:
        raise NotFound("Task not found")
    return await get_task(db, task_id)


async def soft_delete(db: aiosqlite.Connection, task_id: str) -> dict | None:
    """Mark one task deleted. Returns the task as it was just before."""
    before = await get_task(db, task_id)
    if before is None or before["is_deleted"]:
        return None

    now = utcnow()
    await db.execute(
        """UPDATE tasks SET is_deleted = 1, deleted_at = ?, updated_at = ?
           WHERE id = ? AND is_deleted = 0""",
        (now, now, task_id),
    )
    await db.commit()
    return before


async def soft_delete_done_for_board(
    db: aiosqlite.Connection, board_id: str, done_column_id: str
) -> int:
    """Mark every active task in the board's DONE column deleted. Returns the count."""
    now = utcnow()
    cursor = await db.execute(
        """UPDATE tasks SET is_deleted = 1, deleted_at = ?, updated_at = ?
           WHERE board_id = ? AND column_id = ? AND is_deleted = 0""",
        (now, now, board_id, done_column_id),
    )
    await db.commit()
    return cursor.rowcount


async def active_tasks_for_board(db: aiosqlite.Connection, board_id: str) -> list[dict]:
    cursor = await db.execute(
        """SELECT * FROM tasks
           WHERE board_id = ? AND is_deleted = 0
           ORDER BY column_id, position, created_at""",
        (board_id,),
    )
    return [_to_task(r) for r in await cursor.fetchall()]
