"""Entry point a host engine registers for SQLite foreign tables."""

import logging
from collections.abc import Iterable, Iterator
from typing import ClassVar

from sqlite_fdw.models.config import SqliteParams
from sqlite_fdw.models.datatypes import Row, ScanFlags
from sqlite_fdw.models.options import OptionContext, OptionPair
from sqlite_fdw.protocols import Catalog
from sqlite_fdw.providers.sqlite import SqliteClient, SqliteCursor, SqliteHandle
from sqlite_fdw.scan import SqliteForeignScan
from sqlite_fdw.validator import validate_options

logger = logging.getLogger(__name__)


class SqliteFdw:
    """SQLite foreign data wrapper.

    Bundles the two callbacks a host engine needs: the option validator, run
    when servers and tables are defined, and a factory for foreign scans.
    """

    __slots__: ClassVar[tuple[str, str]] = ("_catalog", "_client")

    _catalog: Catalog
    _client: SqliteClient

    def __init__(self, catalog: Catalog, params: SqliteParams | None = None) -> None:
        self._catalog = catalog
        self._client = SqliteClient(params)

    def validator(self, options: Iterable[OptionPair], context: OptionContext) -> None:
        """Validate an option list for a wrapper object."""
        validate_options(options, context)

    def begin_scan(
        self,
        table_id: int,
        flags: ScanFlags = ScanFlags.NONE,
    ) -> SqliteForeignScan[SqliteHandle, SqliteCursor]:
        """Create a scan for `table_id` and begin it."""
        scan = SqliteForeignScan(self._catalog, self._client)
        scan.begin(table_id, flags)
        return scan

    def execute(self, table_id: int) -> Iterator[Row]:
        """Yield every row of a foreign table.

        The scan is ended when the generator is exhausted, closed early or
        abandoned with an error.
        """
        with self.begin_scan(table_id) as scan:
            while (row := scan.iterate()) is not None:
                yield row
