"""Shared fixtures: a fresh SQLite database with two users and their boards."""

from __future__ import annotations

import aiosqlite
import pytest_asyncio

from mykanban.web.boards.service import columns_for_board, create_board_for_user
from mykanban.web.db.database import apply_schema, connect


async def _insert_user(conn: aiosqlite.Connection, user_id: str, email: str) -> None:
    await conn.execute(
        "INSERT INTO users (id, email, password_hash, name) VALUES (?, ?, ?, ?)",
        (user_id, email, "not-a-real-hash", email.split("@")[0].title()),
    )
    await conn.commit()


@pytest_asyncio.fixture
async def db(tmp_path):
    """Create a test database with the full schema and two provisioned users."""
    conn = await connect(str(tmp_path / "test.db"))
    await apply_schema(conn)

    await _insert_user(conn, "alice", "alice@example.com")
    await _insert_user(conn, "bob", "bob@example.com")
    await create_board_for_user(conn, "alice")
    await create_board_for_user(conn, "bob")

    yield conn

    await conn.close()


async def _columns_by_slug(conn: aiosqlite.Connection, user_id: str) -> dict[str, dict]:
    cursor = await conn.execute("SELECT id FROM boards WHERE owner_id = ?", (user_id,))
    board_id = (await cursor.fetchone())["id"]
    return {c["slug"]: c for c in await columns_for_board(conn, board_id)}


@pytest_asyncio.fixture
async def alice_cols(db) -> dict[str, dict]:
    """Alice's columns keyed by slug."""
    return await _columns_by_slug(db, "alice")


@pytest_asyncio.fixture
async def bob_cols(db) -> dict[str, dict]:
    """Bob's columns keyed by slug."""
    return await _columns_by_slug(db, "bob")
