"""In-memory catalog of foreign servers and tables."""

import logging
from collections.abc import Iterable
from typing import ClassVar

from sqlite_fdw.errors import ErrorKind, FdwError
from sqlite_fdw.models.catalog import ForeignServer, ForeignTable
from sqlite_fdw.models.options import OptionContext, OptionPair
from sqlite_fdw.validator import validate_options

logger = logging.getLogger(__name__)


class MemoryCatalog:
    """Catalog that keeps server and table definitions in process memory.

    Implements the `Catalog` protocol. Creating or altering an object runs
    the option validator first, so an invalid option list is never stored.
    """

    __slots__: ClassVar[tuple[str, str, str]] = ("_next_id", "_servers", "_tables")

    _next_id: int
    _servers: dict[int, ForeignServer]
    _tables: dict[int, ForeignTable]

    def __init__(self) -> None:
        self._next_id = 1
        self._servers = {}
        self._tables = {}

    def create_server(self, name: str, options: Iterable[OptionPair] = ()) -> ForeignServer:
        """Validate and store a new foreign server."""
        opts = tuple(options)
        validate_options(opts, OptionContext.SERVER)
        server = ForeignServer(id=self._allocate_id(), name=name, options=opts)
        self._servers[server.id] = server
        logger.debug("created foreign server %s (%d)", name, server.id)
        return server

    def create_table(
        self,
        name: str,
        server_id: int,
        options: Iterable[OptionPair] = (),
    ) -> ForeignTable:
        """Validate and store a new foreign table on an existing server."""
        opts = tuple(options)
        validate_options(opts, OptionContext.TABLE)
        _ = self.get_foreign_server(server_id)
        table = ForeignTable(id=self._allocate_id(), server_id=server_id, name=name, options=opts)
        self._tables[table.id] = table
        logger.debug("created foreign table %s (%d)", name, table.id)
        return table

    def alter_server(self, server_id: int, options: Iterable[OptionPair]) -> ForeignServer:
        """Replace the option list of a foreign server."""
        opts = tuple(options)
        validate_options(opts, OptionContext.SERVER)
        server = self.get_foreign_server(server_id).model_copy(update={"options": opts})
        self._servers[server_id] = server
        return server

    def alter_table(self, table_id: int, options: Iterable[OptionPair]) -> ForeignTable:
        """Replace the option list of a foreign table."""
        opts = tuple(options)
        validate_options(opts, OptionContext.TABLE)
        table = self.get_foreign_table(table_id).model_copy(update={"options": opts})
        self._tables[table_id] = table
        return table

    def get_foreign_table(self, table_id: int) -> ForeignTable:
        """Return the foreign table with the given identifier."""
        try:
            return self._tables[table_id]
        except KeyError as e:
            msg = f"foreign table {table_id} does not exist"
            raise FdwError(msg, kind=ErrorKind.NOT_FOUND, source=e) from e

    def get_foreign_server(self, server_id: int) -> ForeignServer:
        """Return the foreign server with the given identifier."""
        try:
            return self._servers[server_id]
        except KeyError as e:
            msg = f"foreign server {server_id} does not exist"
            raise FdwError(msg, kind=ErrorKind.NOT_FOUND, source=e) from e

    def _allocate_id(self) -> int:
        object_id = self._next_id
        self._next_id += 1
        return object_id
