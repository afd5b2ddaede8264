"""Local ticket storage used by the desktop client."""

from __future__ import annotations

import random
import sqlite3
import string
from dataclasses import dataclass
from typing import Any

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS tickets("
    "sid INTEGER PRIMARY KEY,"
    "factory TEXT,"
    "expert TEXT,"
    "status TEXT,"
    "title TEXT,"
    "description TEXT"
    ")"
)

_ID_LENGTH = 10


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class Ticket:
    """One ticket as shown in the detail view."""

    sid: str
    status: str = ""
    factory: str = ""
    expert: str = ""
    title: str = ""
    description: str = ""

    def can_connect(self) -> bool:
        """A session may only be opened while the ticket is being processed."""
        return self.status == "processing"


class TicketStore:
    """Tickets kept in an SQLite database."""

    def __init__(self, database: str = ":memory:", rng: Any = None) -> None:
        self._conn = sqlite3.connect(database)
        self._rng = rng if rng is not None else random.SystemRandom()
        self.ensure_schema()

    def __enter__(self) -> TicketStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def ensure_schema(self) -> None:
        with self._conn:
            self._conn.execute(_SCHEMA)

    def _exists(self, sid: str) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM tickets WHERE sid = ?", (sid,)
        ).fetchone()
        return row is not None

    def random_id(self) -> str:
        """Draw ten random digits not yet used as a ticket id."""
        while True:
            candidate = "".join(self._rng.choice(string.digits) for _ in range(_ID_LENGTH))
            if not self._exists(candidate):
                return candidate

    def add(self, factory: str, expert: str, title: str, description: str) -> str:
        """Insert a new open ticket and return its id as stored."""
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO tickets (sid, factory, expert, status, title, description) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (self.random_id(), factory, expert, "open", title, description),
            )
        return str(cursor.lastrowid)

    def ids_for(self, name: str, is_expert: bool) -> list[str]:
        """Ids of the tickets of a factory user, or of an expert."""
        column = "expert" if is_expert else "factory"
        rows = self._conn.execute(
            f"SELECT sid FROM tickets WHERE {column} = ? ORDER BY sid", (name,)
        )
        return [_text(sid) for (sid,) in rows]

    def title(self, sid: str) -> str | None:
        row = self._conn.execute(
            "SELECT title FROM tickets WHERE sid = ?", (sid,)
        ).fetchone()
        return None if row is None else _text(row[0])

    def get(self, sid: str) -> Ticket | None:
        row = self._conn.execute(
            "SELECT status, factory, expert, title, description "
            "FROM tickets WHERE sid = ?",
            (sid,),
        ).fetchone()
        if row is None:
            return None
        status, factory, expert, title, description = (_text(v) for v in row)
        return Ticket(
            sid=_text(sid),
            status=status,
            factory=factory,
            expert=expert,
            title=title,
            description=description,
        )

    def delete(self, sid: str) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM tickets WHERE sid = ?", (sid,))