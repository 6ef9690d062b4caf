"""Option types for server and table definitions.

The set of recognized options is closed: each `OptionKey` names exactly one
object context it may appear in.
"""

from enum import StrEnum
from typing import TypeAlias

from pydantic import BaseModel

# A single `key=value` option as supplied by a DDL statement or stored in the catalog.
OptionPair: TypeAlias = tuple[str, str]


class OptionContext(StrEnum):
    """Kind of object an option list is attached to."""

    WRAPPER = "wrapper"
    """The foreign data wrapper itself."""

    SERVER = "server"
    """A foreign server definition."""

    USER_MAPPING = "user_mapping"
    """A user mapping for a foreign server."""

    TABLE = "table"
    """A foreign table definition."""


class OptionKey(StrEnum):
    """Options recognized by the wrapper."""

    DATABASE = "database"
    """Location of the SQLite database (server option)."""

    TABLE = "table"
    """Name of the remote table, substituted verbatim into the scan query (table option)."""

    @property
    def context(self) -> OptionContext:
        """Object context this option is legal in."""
        return _KEY_CONTEXTS[self]


_KEY_CONTEXTS: dict[OptionKey, OptionContext] = {
    OptionKey.DATABASE: OptionContext.SERVER,
    OptionKey.TABLE: OptionContext.TABLE,
}


class OptionDescriptor(BaseModel, frozen=True):
    """An (option name, allowed context) pair in the option catalog."""

    name: str
    """Option name as written in DDL."""

    context: OptionContext
    """Object context the option may appear in."""
