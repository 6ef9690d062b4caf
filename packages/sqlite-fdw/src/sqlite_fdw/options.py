"""Resolution of a foreign table's connection options."""

import logging

from sqlite_fdw.errors import ErrorKind, FdwError
from sqlite_fdw.models.config import ResolvedConfig
from sqlite_fdw.models.options import OptionKey
from sqlite_fdw.protocols import Catalog

logger = logging.getLogger(__name__)


def resolve_options(catalog: Catalog, table_id: int) -> ResolvedConfig:
    """Merge the options of a foreign table and its server.

    Table options are evaluated first and server options after them, so a
    server option overrides a table option with the same key.

    Only a configuration with neither `database` nor `table` is rejected;
    one with exactly one of them resolves with the other left as `None`.

    Raises:
        FdwError: `MISSING_OPTIONS` when neither option is set, or
            `NOT_FOUND` when the catalog has no such table or server.
    """
    table = catalog.get_foreign_table(table_id)
    server = catalog.get_foreign_server(table.server_id)

    values: dict[OptionKey, str] = {}
    for name, value in (*table.options, *server.options):
        if name in {key.value for key in OptionKey}:
            values[OptionKey(name)] = value

    if not values:
        msg = "a database and a table must be specified"
        raise FdwError(msg, kind=ErrorKind.MISSING_OPTIONS)

    config = ResolvedConfig(
        database=values.get(OptionKey.DATABASE),
        table=values.get(OptionKey.TABLE),
    )
    logger.debug("resolved options for foreign table %d: %s", table_id, config)
    return config
