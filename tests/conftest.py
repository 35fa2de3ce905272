"""Shared fixtures: a fake MySQL driver with a small seeded table."""

from typing import Any
from unittest.mock import MagicMock

import pytest
from mysql.connector import errors

from config import AppConfig, DbConfig


SEEDED_MEDICAMENTS = [
    {"id": 1, "nom": "Doliprane 500mg", "stock": 120},
    {"id": 2, "nom": "Amoxicilline 1g", "stock": 40},
    {"id": 3, "nom": "Spasfon", "stock": 75},
]


class FakeConnection:
    """
    Follows mysql.connector's unread-result rule: an unbuffered cursor that
    still has rows pending blocks any new cursor on the same connection.
    """

    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self.rows = rows
        self.unread_result = False
        self.cursor_kwargs: list[dict[str, bool]] = []
        self.closed = False

    def cursor(self, dictionary: bool = False, buffered: bool = False) -> "FakeCursor":
        if self.unread_result:
            raise errors.InternalError("Unread result found")
        self.cursor_kwargs.append({"dictionary": dictionary, "buffered": buffered})
        return FakeCursor(self, buffered)

    def close(self) -> None:
        self.closed = True


class FakeCursor:
    """Records what was executed and serves the seeded rows as dicts."""

    def __init__(self, conn: FakeConnection, buffered: bool) -> None:
        self._conn = conn
        self._buffered = buffered
        self._rows: list[dict[str, Any]] = []
        self.executed: list[tuple] = []

    def execute(self, sql: str, *args: Any) -> None:
        self.executed.append((sql, *args))
        self._rows = [dict(r) for r in self._conn.rows]
        self._sync_unread()

    def fetchone(self) -> dict[str, Any] | None:
        row = self._rows.pop(0) if self._rows else None
        self._sync_unread()
        return row

    def fetchall(self) -> list[dict[str, Any]]:
        rows, self._rows = self._rows, []
        self._sync_unread()
        return rows

    def _sync_unread(self) -> None:
        if not self._buffered:
            self._conn.unread_result = bool(self._rows)


@pytest.fixture
def db_cfg() -> DbConfig:
    return DbConfig(
        host="localhost",
        database="pharmatrixdb",
        port=3306,
        charset="utf8",
        username="root",
        password="",
    )


@pytest.fixture
def app_cfg(db_cfg: DbConfig) -> AppConfig:
    return AppConfig(app_name="Pharmatri+", db=db_cfg, log_level="INFO")


@pytest.fixture
def seeded_rows() -> list[dict[str, Any]]:
    return [dict(r) for r in SEEDED_MEDICAMENTS]


@pytest.fixture
def fake_conn(seeded_rows: list[dict[str, Any]]) -> FakeConnection:
    return FakeConnection(seeded_rows)


@pytest.fixture
def connector(fake_conn: FakeConnection) -> MagicMock:
    """Stand-in for mysql.connector.connect."""
    return MagicMock(return_value=fake_conn)
