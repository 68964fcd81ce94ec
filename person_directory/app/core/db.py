"""
SQLite database integration.

The ``Database`` class is the single process-wide storage handle.  It
is created once by ``create_app``, stored on ``app.state.db`` and
handed to request handlers through the ``get_db`` dependency.  Each
operation opens its own short-lived connection, so the handle itself
carries no per-request state and is safe to share between requests.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from fastapi import Request

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS individuos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nome TEXT NOT NULL
);
"""


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and the special ``:memory:`` name are returned as
    is.  Relative paths are resolved against the current working
    directory, so an installed package never writes inside itself.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    return str(Path(database_url).resolve())


class Database:
    """Handle on the SQLite file holding the ``individuos`` table."""

    def __init__(self, database_url: str) -> None:
        self.path = resolve_database_path(database_url)

    def connect(self) -> sqlite3.Connection:
        """Create and return a new connection with name-addressable rows."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and always close the connection."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create the ``individuos`` table if it does not exist yet."""
        with self.cursor() as cursor:
            cursor.executescript(SCHEMA)
        logger.info("Database ready at %s", self.path)


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the application's database handle."""
    return request.app.state.db
