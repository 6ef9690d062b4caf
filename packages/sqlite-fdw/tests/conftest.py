"""
Pytest configuration and shared fixtures
"""

import sqlite3

import pytest

from sqlite_fdw.errors import ErrorKind, FdwError
from sqlite_fdw.memory import MemoryCatalog
from sqlite_fdw.models.datatypes import StepResult


class FakeHandle:
    """Connection handle handed out by RecordingClient"""

    def __init__(self, location):
        self.location = location
        self.closed = False


class FakeCursor:
    """Cursor over a fixed list of rows"""

    def __init__(self, rows):
        self.rows = rows
        self.position = -1
        self.finalized = False


class RecordingClient:
    """
    Store client that serves in-memory rows and records every call

    Failures can be injected at open, prepare, or at a given step number
    (1-based).
    """

    def __init__(self, rows=(), fail_open=False, fail_prepare=False, fail_step_at=None):
        self.rows = [list(row) for row in rows]
        self.fail_open = fail_open
        self.fail_prepare = fail_prepare
        self.fail_step_at = fail_step_at
        self.calls = []
        self.queries = []
        self.steps = 0

    def open(self, location):
        self.calls.append("open")
        if self.fail_open:
            raise FdwError(f"Can't open sqlite database {location}: boom", kind=ErrorKind.CONNECTION)
        return FakeHandle(location)

    def prepare(self, handle, query):
        self.calls.append("prepare")
        self.queries.append(query)
        if self.fail_prepare:
            raise FdwError("SQL error during prepare: boom", kind=ErrorKind.QUERY)
        return FakeCursor(self.rows)

    def step(self, cursor):
        self.calls.append("step")
        self.steps += 1
        if self.fail_step_at is not None and self.steps == self.fail_step_at:
            raise FdwError("SQL error during step: boom", kind=ErrorKind.STEP)
        cursor.position += 1
        if cursor.position >= len(cursor.rows):
            return StepResult.DONE
        return StepResult.ROW

    def column_count(self, cursor):
        return len(cursor.rows[cursor.position])

    def column_text(self, cursor, index):
        return cursor.rows[cursor.position][index]

    def finalize(self, cursor):
        if cursor is None or cursor.finalized:
            return
        cursor.finalized = True
        self.calls.append("finalize")

    def close(self, handle):
        if handle is None or handle.closed:
            return
        handle.closed = True
        self.calls.append("close")


@pytest.fixture
def events_db(tmp_path):
    """SQLite database with an `events` table of 3 rows x 2 columns"""
    path = tmp_path / "app.db"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE events (id INTEGER, name TEXT)")
    conn.executemany(
        "INSERT INTO events VALUES (?, ?)",
        [(1, "signup"), (2, "login"), (3, "logout")],
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def catalog():
    """Empty in-memory catalog"""
    return MemoryCatalog()


@pytest.fixture
def events_table(catalog, events_db):
    """Foreign table `events` on a server pointing at events_db"""
    server = catalog.create_server("app", [("database", str(events_db))])
    return catalog.create_table("events", server.id, [("table", "events")])


@pytest.fixture
def recording_client():
    """Recording client serving 3 rows x 2 columns"""
    return RecordingClient(rows=[("1", "signup"), ("2", "login"), ("3", "logout")])
