"""Board service - ownership resolution, column registry, board reads."""

from __future__ import annotations

import logging
import secrets

import aiosqlite

from ..db.database import utcnow
from ..errors import Conflict, NotFound
from ..tasks import store as task_store
from .models import DEFAULT_COLUMNS, ColumnSlug

logger = logging.getLogger(__name__)


async def resolve_board_for_user(db: aiosqlite.Connection, user_id: str) -> dict:
    """Return the single board owned by a user. Raises NotFound if there is none."""
    cursor = await db.execute("SELECT * FROM boards WHERE owner_id = ?", (user_id,))
    row = await cursor.fetchone()
    if not row:
        raise NotFound("Board not found for user")
    return dict(row)


async def create_board_for_user(
    db: aiosqlite.Connection,
    owner_id: str,
    name: str = "Personal board",
    *,
    commit: bool = True,
) -> dict:
    """Create a user's board together with its three fixed columns.

    The board and its columns are committed together. A second board for the
    same owner raises Conflict and leaves nothing behind. With commit=False
    the rows stay in the caller's open transaction.
    """
    board_id = secrets.token_hex(8)
    now = utcnow()
    try:
        await db.execute(
            """INSERT INTO boards (id, owner_id, name, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?)""",
            (board_id, owner_id, name, now, now),
        )
        await db.executemany(
            """INSERT INTO columns (id, board_id, name, slug, position, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            [
                (secrets.token_hex(8), board_id, col_name, str(slug), position, now, now)
                for slug, col_name, position in DEFAULT_COLUMNS
            ],
        )
    except aiosqlite.IntegrityError as e:
        await db.rollback()
        if "UNIQUE" not in str(e):
            raise
        raise Conflict("User already has a board") from None
    if commit:
        await db.commit()

    logger.info("Provisioned board %s for user %s", board_id, owner_id)
    cursor = await db.execute("SELECT * FROM boards WHERE id = ?", (board_id,))
    return dict(await cursor.fetchone())


async def get_board(db: aiosqlite.Connection, user_id: str) -> dict:
    """Get the user's board with its columns and their active tasks."""
    board = await resolve_board_for_user(db, user_id)
    columns = await columns_for_board(db, board["id"])
    tasks = await task_store.active_tasks_for_board(db, board["id"])

    # Group tasks by column
    tasks_by_column: dict[str, list[dict]] = {}
    for task in tasks:
        tasks_by_column.setdefault(task["column_id"], []).append(task)

    for col in columns:
        col["tasks"] = tasks_by_column.get(col["id"], [])

    return {"board": board, "columns": columns}


# --- Column registry ---


async def columns_for_board(db: aiosqlite.Connection, board_id: str) -> list[dict]:
    """List a board's columns, ordered by position."""
    cursor = await db.execute(
        "SELECT * FROM columns WHERE board_id = ? ORDER BY position", (board_id,)
    )
    return [dict(r) for r in await cursor.fetchall()]


async def find_column(db: aiosqlite.Connection, column_id: str) -> dict:
    cursor = await db.execute("SELECT * FROM columns WHERE id = ?", (column_id,))
    row = await cursor.fetchone()
    if not row:
        raise NotFound("Column not found")
    return dict(row)


async def find_column_by_slug(
    db: aiosqlite.Connection, board_id: str, slug: ColumnSlug
) -> dict:
    cursor = await db.execute(
        "SELECT * FROM columns WHERE board_id = ? AND slug = ?",
        (board_id, str(slug)),
    )
    row = await cursor.fetchone()
    if not row:
        raise NotFound(f"{slug} column not found for board")
    return dict(row)
