"""Auth service: registration, credential checks and JWT operations."""

from __future__ import annotations

import logging
import secrets
from datetime import UTC, datetime, timedelta

import aiosqlite
import bcrypt
import jwt

from ..boards.service import create_board_for_user
from ..config import WebConfig
from ..db.database import utcnow
from ..errors import Conflict, Unauthorized

logger = logging.getLogger(__name__)

_config: WebConfig | None = None


def _get_config() -> WebConfig:
    global _config
    if _config is None:
        _config = WebConfig.load()
    return _config


def init_auth(config: WebConfig) -> None:
    """Use this config for token signing instead of loading from the environment."""
    global _config
    _config = config


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode(), password_hash.encode())


def _public_user(row: aiosqlite.Row | dict) -> dict:
    return {
        "id": row["id"],
        "email": row["email"],
        "name": row["name"],
        "created_at": row["created_at"],
    }


async def register_user(
    db: aiosqlite.Connection, email: str, password: str, name: str
) -> dict:
    """Create a user and provision their board with its default columns.

    The user, board and columns are committed in one transaction: if
    provisioning fails no user row is left behind.
    """
    email = email.strip().lower()
    cursor = await db.execute("SELECT 1 FROM users WHERE email = ?", (email,))
    if await cursor.fetchone():
        raise Conflict("Email already registered")

    user_id = secrets.token_hex(8)
    now = utcnow()
    try:
        await db.execute(
            """INSERT INTO users (id, email, password_hash, name, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (user_id, email, hash_password(password), name.strip(), now, now),
        )
    except aiosqlite.IntegrityError:
        await db.rollback()
        raise Conflict("Email already registered") from None

    try:
        await create_board_for_user(db, user_id, commit=False)
    except Exception:
        await db.rollback()
        logger.exception("Board provisioning failed for %s, registration rolled back", email)
        raise
    await db.commit()
    logger.info("Registered user %s", user_id)

    cursor = await db.execute("SELECT * FROM users WHERE id = ?", (user_id,))
    return _public_user(await cursor.fetchone())


async def authenticate(db: aiosqlite.Connection, email: str, password: str) -> dict:
    """Return the public user for valid credentials, else raise Unauthorized."""
    cursor = await db.execute(
        "SELECT * FROM users WHERE email = ?", (email.strip().lower(),)
    )
    row = await cursor.fetchone()
    if row is None or not verify_password(password, row["password_hash"]):
        raise Unauthorized("Invalid credentials")
    return _public_user(row)


def create_token(user_id: str) -> str:
    """Create a JWT token for a user."""
    config = _get_config()
    now = datetime.now(UTC)
    payload = {
        "sub": user_id,
        "exp": now + timedelta(hours=config.jwt_expire_hours),
        "iat": now,
        "jti": secrets.token_hex(8),
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token. Raises jwt.InvalidTokenError on failure."""
    config = _get_config()
    return jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
