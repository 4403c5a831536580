"""mykanban: a personal Kanban task tracker.

Each user owns one board with three fixed columns (TODO, IN_PROGRESS, DONE).
Tasks are created in TODO, moved between columns, edited, and soft-deleted.

Usage:
    # Create the database schema
    $ mykanban init-db

    # Run the API server
    $ mykanban serve --port 8000

    # Python API
    from mykanban.web.app import create_app

    app = create_app()
"""

try:
    from importlib.metadata import version as _get_version

    __version__ = _get_version("mykanban")
except Exception:
    __version__ = "0.0.0-dev"

__all__ = ["__version__"]
