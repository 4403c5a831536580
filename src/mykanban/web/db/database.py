"""Async SQLite connection manager (singleton pattern)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

_db: aiosqlite.Connection | None = None
_db_path: str = ""


def utcnow() -> str:
    """Current UTC time as an ISO-8601 string with microseconds."""
    return datetime.now(UTC).isoformat(timespec="microseconds")


async def connect(db_path: str) -> aiosqlite.Connection:
    """Open a connection configured the way every caller expects."""
    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    await conn.execute("PRAGMA foreign_keys=ON")
    if db_path != ":memory:":
        await conn.execute("PRAGMA journal_mode=WAL")
    return conn


async def apply_schema(conn: aiosqlite.Connection) -> None:
    """Create tables, indexes and triggers if they are missing."""
    await conn.executescript(SCHEMA_PATH.read_text())
    await conn.commit()


async def init_db(db_path: str) -> None:
    """Initialize the database connection and run schema."""
    global _db, _db_path
    _db_path = db_path

    _db = await connect(db_path)
    await apply_schema(_db)
    logger.info("Database ready at %s", db_path)


async def get_db() -> aiosqlite.Connection:
    """Get the active database connection."""
    if _db is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _db


async def close_db() -> None:
    """Close the database connection."""
    global _db
    if _db is not None:
        await _db.close()
        _db = None
