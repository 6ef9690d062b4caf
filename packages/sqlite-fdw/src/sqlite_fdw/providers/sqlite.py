"""SQLite store client using the sqlite3 driver."""

import logging
import math
import sqlite3
from typing import ClassVar

from sqlite_fdw.errors import ErrorKind, FdwError
from sqlite_fdw.models.config import SqliteParams
from sqlite_fdw.models.datatypes import StepResult

logger = logging.getLogger(__name__)


def _decode_text(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


def _real_text(value: float) -> str:
    # Matches SQLite's own REAL to TEXT rendering (printf "%!.15g").
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    mantissa, sep, exponent = f"{value:.15g}".partition("e")
    if "." not in mantissa:
        mantissa += ".0"
    return mantissa + sep + exponent


class SqliteHandle:
    """An open SQLite connection owned by one scan."""

    __slots__: ClassVar[tuple[str, str]] = ("connection", "location")

    connection: sqlite3.Connection | None
    location: str

    def __init__(self, connection: sqlite3.Connection, location: str) -> None:
        self.connection = connection
        self.location = location

    @property
    def closed(self) -> bool:
        return self.connection is None


class SqliteCursor:
    """A prepared statement and its position in the result set."""

    __slots__: ClassVar[tuple[str, str, str]] = ("done", "row", "statement")

    done: bool
    row: tuple[object, ...] | None
    statement: sqlite3.Cursor | None

    def __init__(self, cursor: sqlite3.Cursor) -> None:
        self.statement = cursor
        self.done = False
        self.row = None

    @property
    def closed(self) -> bool:
        return self.statement is None


class SqliteClient:
    """SQLite client for streaming query results row by row.

    Implements StoreClient[SqliteHandle, SqliteCursor].
    """

    __slots__: ClassVar[tuple[str]] = ("_params",)

    _params: SqliteParams

    def __init__(self, params: SqliteParams | None = None) -> None:
        self._params = params or SqliteParams()

    def open(self, location: str | None) -> SqliteHandle:
        """Open the database at `location`.

        Nothing is acquired when this fails, so there is nothing to close.
        """
        if location is None:
            msg = "Can't open sqlite database: no database location given"
            raise FdwError(msg, kind=ErrorKind.CONNECTION)
        try:
            connection = sqlite3.connect(
                location,
                timeout=self._params.timeout,
                isolation_level=self._params.isolation_level,
                uri=self._params.uri,
            )
            connection.text_factory = _decode_text
        except (sqlite3.Error, ValueError) as e:
            msg = f"Can't open sqlite database {location}: {e}"
            raise FdwError(msg, kind=ErrorKind.CONNECTION, source=e) from e

        logger.debug("opened sqlite database %s", location)
        return SqliteHandle(connection, location)

    def prepare(self, handle: SqliteHandle, query: str) -> SqliteCursor:
        """Compile and start `query`; rows are fetched by `step`."""
        assert handle.connection is not None, "prepare on a closed connection"
        cursor = handle.connection.cursor()
        try:
            _ = cursor.execute(query)
        except sqlite3.Error as e:
            cursor.close()
            msg = f"SQL error during prepare: {e}"
            raise FdwError(msg, kind=ErrorKind.QUERY, source=e) from e

        logger.debug("prepared %r on %s", query, handle.location)
        return SqliteCursor(cursor)

    def step(self, cursor: SqliteCursor) -> StepResult:
        """Fetch the next row into the cursor."""
        if cursor.done:
            return StepResult.DONE
        assert cursor.statement is not None, "step on a finalized cursor"

        try:
            row = cursor.statement.fetchone()
        except sqlite3.Error as e:
            msg = f"SQL error during step: {e}"
            raise FdwError(msg, kind=ErrorKind.STEP, source=e) from e

        cursor.row = row
        if row is None:
            cursor.done = True
            return StepResult.DONE
        return StepResult.ROW

    def column_count(self, cursor: SqliteCursor) -> int:
        """Return the column count of the current row."""
        assert cursor.row is not None, "column access without a current row"
        return len(cursor.row)

    def column_text(self, cursor: SqliteCursor, index: int) -> str | None:
        """Return a column of the current row as text, or `None` for NULL."""
        assert cursor.row is not None, "column access without a current row"
        value = cursor.row[index]
        if value is None:
            return None
        if isinstance(value, bytes):
            return _decode_text(value)
        if isinstance(value, float):
            return _real_text(value)
        return str(value)

    def finalize(self, cursor: SqliteCursor | None) -> None:
        """Release the statement; a no-op for `None` or a finalized cursor."""
        if cursor is None or cursor.statement is None:
            return
        cursor.statement.close()
        cursor.statement = None
        cursor.row = None

    def close(self, handle: SqliteHandle | None) -> None:
        """Close the connection; a no-op for `None` or a closed handle."""
        if handle is None or handle.connection is None:
            return
        handle.connection.close()
        handle.connection = None
        logger.debug("closed sqlite database %s", handle.location)


Client = SqliteClient
