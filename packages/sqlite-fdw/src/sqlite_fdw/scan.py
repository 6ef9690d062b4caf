"""Foreign scan over an SQLite table.

A scan moves through `ScanPhase` as the host engine drives it:

    unopened --begin--> prepared --iterate--> streaming --iterate--> exhausted
                                                                         |
    any phase --end--> closed  <-----------------------------------------+

`begin` resolves options and opens the connection; the query is prepared
lazily on the first `iterate`. Every resource is registered on an
`ExitStack` as soon as it is acquired, so `end`, a failing `iterate`, a
`with` block or garbage collection all release it exactly once.
"""

import logging
import weakref
from contextlib import ExitStack
from types import TracebackType
from typing import ClassVar, Generic, Self, TypeVar

from sqlite_fdw.models.datatypes import Row, ScanFlags, ScanPhase, StepResult
from sqlite_fdw.options import resolve_options
from sqlite_fdw.protocols import Catalog, StoreClient

logger = logging.getLogger(__name__)

H = TypeVar("H")
C = TypeVar("C")


def build_query(table: str | None) -> str:
    """Build the scan query for `table`.

    The name is substituted verbatim: it is neither quoted nor escaped, so it
    may carry an alias or a quoted identifier. Filters and column lists are
    never pushed down.
    """
    return f"SELECT * FROM {table or ''}"  # noqa: S608


def _release(stack: ExitStack) -> None:
    try:
        stack.close()
    except Exception:
        logger.warning("failed to release foreign scan resources", exc_info=True)


class SqliteForeignScan(Generic[H, C]):
    """One scan of a foreign table, from `begin` to `end`.

    Implements ForeignScan. The scan exclusively owns its connection handle,
    cursor and query text; none of them outlives the scan.
    """

    __slots__: ClassVar[tuple[str, ...]] = (
        "__weakref__",
        "_catalog",
        "_client",
        "_finalizer",
        "_resources",
        "connection",
        "cursor",
        "flags",
        "phase",
        "query",
    )

    _catalog: Catalog
    _client: StoreClient[H, C]
    _finalizer: weakref.finalize | None
    _resources: ExitStack
    connection: H | None
    cursor: C | None
    flags: ScanFlags
    phase: ScanPhase
    query: str | None

    def __init__(self, catalog: Catalog, client: StoreClient[H, C]) -> None:
        self._catalog = catalog
        self._client = client
        self._finalizer = None
        self._resources = ExitStack()
        self.connection = None
        self.cursor = None
        self.flags = ScanFlags.NONE
        self.phase = ScanPhase.UNOPENED
        self.query = None

    def begin(self, table_id: int, flags: ScanFlags = ScanFlags.NONE) -> None:
        """Resolve the table's options and open the connection.

        Raises:
            FdwError: `MISSING_OPTIONS` or `NOT_FOUND` from option resolution,
                `CONNECTION` when the database cannot be opened.
        """
        logger.debug("entering begin for foreign table %d (flags=%r)", table_id, flags)
        assert self.phase is ScanPhase.UNOPENED, f"begin called on a {self.phase} scan"

        config = resolve_options(self._catalog, table_id)
        connection = self._client.open(config.database)

        self._resources.callback(self._client.close, connection)
        self._finalizer = weakref.finalize(self, _release, self._resources)
        self.connection = connection
        self.query = build_query(config.table)
        self.flags = flags
        self.phase = ScanPhase.PREPARED

    def iterate(self) -> Row | None:
        """Return the next row, or `None` once the result set is exhausted.

        Raises:
            FdwError: `QUERY` when the query cannot be prepared, `STEP` when the
                store fails mid-stream. The scan's resources are released
                before any error raised while preparing or stepping propagates.
        """
        logger.debug("entering iterate (%s)", self.phase)
        if self.phase is ScanPhase.EXHAUSTED:
            return None
        assert self.phase in {ScanPhase.PREPARED, ScanPhase.STREAMING}, (
            f"iterate called on a {self.phase} scan"
        )

        try:
            if self.phase is ScanPhase.PREPARED:
                self._prepare()
            return self._next_row()
        except Exception:
            self._teardown()
            raise

    def rescan(self) -> None:
        """Restart the scan.

        The cursor is not reset: after a partial read, a rescan continues from
        the current position, and an exhausted scan stays exhausted.
        """
        logger.debug("entering rescan (%s)", self.phase)

    def end(self) -> None:
        """Finalize the cursor, close the connection and drop the query text.

        Safe to call more than once and after a failed `begin`; never raises.
        """
        logger.debug("entering end (%s)", self.phase)
        self._teardown()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.end()

    def _prepare(self) -> None:
        assert self.connection is not None
        assert self.query is not None
        cursor = self._client.prepare(self.connection, self.query)
        self._resources.callback(self._client.finalize, cursor)
        self.cursor = cursor
        self.phase = ScanPhase.STREAMING

    def _next_row(self) -> Row | None:
        assert self.cursor is not None
        if self._client.step(self.cursor) is StepResult.DONE:
            self.phase = ScanPhase.EXHAUSTED
            return None
        count = self._client.column_count(self.cursor)
        return [self._client.column_text(self.cursor, i) for i in range(count)]

    def _teardown(self) -> None:
        # The stack runs LIFO: finalize the cursor, then close the connection.
        if self._finalizer is not None:
            self._finalizer.detach()
            self._finalizer = None
        _release(self._resources)
        self.cursor = None
        self.connection = None
        self.query = None
        self.phase = ScanPhase.CLOSED
