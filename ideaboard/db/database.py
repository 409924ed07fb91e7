from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

class PersistenceError(RuntimeError):
    """The store is unreachable or rejected the statement."""

def _connect(db_path: Path, timeout: float) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path, timeout=timeout)
    conn.row_factory = sqlite3.Row
    return conn

class Database:
    """Process-scoped handle on the sqlite file.

    Every call to ``connect()`` opens a short-lived connection, commits on
    success and rolls back on error, so one service operation is one
    transaction.
    """

    def __init__(self, db_path: Path, timeout: float = 5.0):
        self.db_path = Path(db_path)
        self.timeout = timeout

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = _connect(self.db_path, self.timeout)
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot open database at {self.db_path}") from e
        try:
            yield conn
            conn.commit()
        except (sqlite3.Error, OverflowError, UnicodeEncodeError) as e:
            # The last two come from binding parameters the driver cannot store.
            conn.rollback()
            raise PersistenceError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create the ideas table if missing. Safe to run on every startup."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f"Cannot create database directory {self.db_path.parent}") from e

        with self.connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS ideas (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    text TEXT NOT NULL CHECK (length(text) <= 280),
                    upvotes INTEGER NOT NULL DEFAULT 0 CHECK (upvotes >= 0),
                    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now'))
                );
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_ideas_created_at ON ideas (created_at);")
        logger.info("Database initialized at %s", self.db_path)
