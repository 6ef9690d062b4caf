"""Foreign-table adapter that streams rows from SQLite into a host query engine."""

from sqlite_fdw.errors import ErrorKind, FdwError
from sqlite_fdw.memory import MemoryCatalog
from sqlite_fdw.protocols import Catalog, ForeignScan, StoreClient
from sqlite_fdw.scan import SqliteForeignScan
from sqlite_fdw.wrapper import SqliteFdw

__all__ = [
    "Catalog",
    "ErrorKind",
    "FdwError",
    "ForeignScan",
    "MemoryCatalog",
    "SqliteFdw",
    "SqliteForeignScan",
    "StoreClient",
]
