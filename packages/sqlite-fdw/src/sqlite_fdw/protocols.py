"""Core protocols for catalogs, store clients and foreign scans."""

from typing import Protocol, TypeVar, runtime_checkable

from sqlite_fdw.models.catalog import ForeignServer, ForeignTable
from sqlite_fdw.models.datatypes import Row, ScanFlags, StepResult

H = TypeVar("H")  # Invariant: handles are both returned and accepted
C = TypeVar("C")  # Invariant: cursors are both returned and accepted


@runtime_checkable
class Catalog(Protocol):
    """Protocol for looking up foreign table and server definitions."""

    def get_foreign_table(self, table_id: int) -> ForeignTable:
        """Return the foreign table with the given identifier."""
        ...

    def get_foreign_server(self, server_id: int) -> ForeignServer:
        """Return the foreign server with the given identifier."""
        ...


@runtime_checkable
class StoreClient(Protocol[H, C]):
    """Protocol for a synchronous client over an external row store.

    All calls block until the store responds. `finalize` and `close` must be
    idempotent and accept `None`, since teardown can run after a partial
    failure.
    """

    def open(self, location: str | None) -> H:
        """Open a connection to the store at `location`."""
        ...

    def prepare(self, handle: H, query: str) -> C:
        """Compile `query` against an open connection."""
        ...

    def step(self, cursor: C) -> StepResult:
        """Advance the cursor by one row."""
        ...

    def column_count(self, cursor: C) -> int:
        """Return the number of columns of the current row."""
        ...

    def column_text(self, cursor: C, index: int) -> str | None:
        """Return column `index` of the current row as text."""
        ...

    def finalize(self, cursor: C | None) -> None:
        """Release a cursor."""
        ...

    def close(self, handle: H | None) -> None:
        """Release a connection."""
        ...


@runtime_checkable
class ForeignScan(Protocol):
    """Protocol for the scan lifecycle driven by the host engine."""

    def begin(self, table_id: int, flags: ScanFlags = ScanFlags.NONE) -> None:
        """Resolve options and connect to the store."""
        ...

    def iterate(self) -> Row | None:
        """Return the next row, or `None` once the scan is exhausted."""
        ...

    def rescan(self) -> None:
        """Restart the scan."""
        ...

    def end(self) -> None:
        """Release every resource held by the scan."""
        ...
