from __future__ import annotations

import sqlite3
from typing import List, Optional

from ideaboard.db.database import Database
from ideaboard.models.idea import Idea

_COLUMNS = "id, text, upvotes, created_at"

def _row_to_idea(row: sqlite3.Row) -> Idea:
    return Idea(id=row["id"], text=row["text"], upvotes=row["upvotes"], created_at=row["created_at"])

class IdeaRepo:
    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> List[Idea]:
        with self.db.connect() as conn:
            rows = conn.execute(
                f"""SELECT {_COLUMNS}
                     FROM ideas
                     ORDER BY created_at DESC, id DESC"""
            ).fetchall()
        return [_row_to_idea(r) for r in rows]

    def create(self, text: str) -> Idea:
        # created_at and upvotes come from the column defaults.
        with self.db.connect() as conn:
            cur = conn.execute("INSERT INTO ideas (text) VALUES (?)", (text,))
            idea_id = int(cur.lastrowid)
            row = conn.execute(f"SELECT {_COLUMNS} FROM ideas WHERE id = ?", (idea_id,)).fetchone()
        return _row_to_idea(row)

    def increment_upvotes(self, idea_id: int) -> Optional[Idea]:
        # The increment is one statement; the read-back shares its transaction.
        with self.db.connect() as conn:
            cur = conn.execute("UPDATE ideas SET upvotes = upvotes + 1 WHERE id = ?", (idea_id,))
            if cur.rowcount == 0:
                return None
            row = conn.execute(f"SELECT {_COLUMNS} FROM ideas WHERE id = ?", (idea_id,)).fetchone()
        return _row_to_idea(row)
