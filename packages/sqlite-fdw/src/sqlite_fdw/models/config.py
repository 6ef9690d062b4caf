"""Configuration types.

`ResolvedConfig` is built per scan from catalog options, while
`SqliteParams` tunes how the store client opens connections and is fixed
when the wrapper is constructed.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ResolvedConfig(BaseModel, frozen=True):
    """Connection parameters merged from table and server options."""

    database: str | None = None
    """Location of the SQLite database."""

    table: str | None = None
    """Remote table to scan."""


class SqliteParams(BaseModel, frozen=True):
    """Parameters for opening SQLite connections."""

    timeout: float = Field(default=5.0, gt=0)
    """Seconds to wait for a locked database before failing."""

    uri: bool = False
    """Interpret the `database` option as an SQLite URI (e.g. `file:app.db?mode=ro`)."""

    isolation_level: Literal["", "DEFERRED", "IMMEDIATE", "EXCLUSIVE"] | None = None
    """Driver isolation level; `None` keeps the connection in autocommit mode."""
