"""FastAPI app factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import WebConfig
from .errors import KanbanError

logger = logging.getLogger(__name__)


def create_app(config: WebConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or WebConfig.load()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """App lifespan: init DB and auth, close DB on shutdown."""
        from .auth.service import init_auth
        from .db.database import close_db, init_db

        init_auth(config)
        await init_db(config.db_path)

        yield

        await close_db()

    app = FastAPI(
        title="mykanban",
        description="Personal Kanban board with a fixed TODO / IN_PROGRESS / DONE workflow",
        version="0.1.0",
        lifespan=lifespan,
        debug=config.debug,
    )

    # CORS
    origins = config.cors_origins or [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    from .auth.router import router as auth_router
    from .boards.router import router as boards_router
    from .tasks.router import router as tasks_router

    app.include_router(auth_router)
    app.include_router(boards_router)
    app.include_router(tasks_router)

    # Error handlers
    @app.exception_handler(KanbanError)
    async def kanban_error_handler(request: Request, exc: KanbanError):
        logger.debug("%s %s -> %s: %s", request.method, request.url.path, exc.kind, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "kind": str(exc.kind)},
        )

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    return app
