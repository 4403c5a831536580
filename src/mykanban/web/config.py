"""Web server configuration."""

from __future__ import annotations

import logging
import os
import secrets
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class WebConfig:
    """Configuration for the web server."""

    host: str = "0.0.0.0"
    port: int = 8000
    db_path: str = ".mykanban/kanban.db"
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24
    cors_origins: list[str] | None = None
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> WebConfig:
        config = cls()
        config.host = os.environ.get("MYKANBAN_HOST", config.host)
        config.port = int(os.environ.get("MYKANBAN_PORT", config.port))
        config.db_path = os.environ.get("MYKANBAN_DB_PATH", config.db_path)
        config.jwt_secret = os.environ.get("MYKANBAN_JWT_SECRET", "")
        config.jwt_expire_hours = int(
            os.environ.get("MYKANBAN_JWT_EXPIRE_HOURS", config.jwt_expire_hours)
        )
        config.debug = os.environ.get("MYKANBAN_DEBUG", "").lower() in ("1", "true")
        config.log_level = os.environ.get("MYKANBAN_LOG_LEVEL", config.log_level).upper()
        origins = os.environ.get("MYKANBAN_CORS_ORIGINS")
        if origins:
            config.cors_origins = [o.strip() for o in origins.split(",")]

        # Fail-closed: refuse to start without a signing key unless in debug mode.
        if not config.jwt_secret:
            if not config.debug:
                raise RuntimeError(
                    "MYKANBAN_JWT_SECRET must be set to a strong random value outside "
                    "debug mode. Generate one with: "
                    "python -c \"import secrets; print(secrets.token_hex(32))\""
                )
            config.jwt_secret = secrets.token_hex(32)
            logger.warning(
                "MYKANBAN_JWT_SECRET not set -- using random ephemeral secret. "
                "Set MYKANBAN_JWT_SECRET for persistent sessions."
            )

        return config
