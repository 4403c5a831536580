"""Command line interface: database setup and the API server."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Annotated, Optional

import typer

from .output import console, print_error, print_info, print_success

app = typer.Typer(
    name="mykanban",
    help="Personal Kanban board server",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


async def _init_db(db_path: str) -> None:
    from ..web.db.database import apply_schema, connect

    conn = await connect(db_path)
    try:
        await apply_schema(conn)
    finally:
        await conn.close()


@app.command("init-db")
def init_db(
    db_path: Annotated[
        Optional[str],
        typer.Option("--db-path", help="SQLite file (default: MYKANBAN_DB_PATH or .mykanban/kanban.db)"),
    ] = None,
):
    """Create the database schema if it does not exist yet."""
    from ..web.config import WebConfig

    path = db_path or os.environ.get("MYKANBAN_DB_PATH", WebConfig.db_path)
    asyncio.run(_init_db(path))
    print_success(f"Database ready at {path}")


@app.command("serve")
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to listen on")] = None,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level (default: MYKANBAN_LOG_LEVEL or INFO)"),
    ] = None,
):
    """Run the API server with uvicorn."""
    import uvicorn

    from ..web.config import WebConfig

    try:
        config = WebConfig.load()
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(1) from None

    level = log_level or config.log_level
    _configure_logging(level)

    host = host or config.host
    port = port or config.port
    print_info(f"Database: {config.db_path}")
    console.print(f"[cyan]Serving on http://{host}:{port}[/cyan]")

    uvicorn.run(
        "mykanban.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=level.lower(),
    )


@app.command("version")
def version():
    """Show version information."""
    from .. import __version__

    console.print(f"mykanban version: {__version__}")
