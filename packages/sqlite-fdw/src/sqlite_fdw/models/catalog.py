"""Catalog objects the wrapper reads its options from."""

from pydantic import BaseModel

from sqlite_fdw.models.options import OptionPair


class ForeignServer(BaseModel, frozen=True):
    """A foreign server definition."""

    id: int
    """Catalog identifier."""

    name: str
    """Server name."""

    options: tuple[OptionPair, ...] = ()
    """Server options in definition order."""


class ForeignTable(BaseModel, frozen=True):
    """A foreign table definition bound to a server."""

    id: int
    """Catalog identifier."""

    server_id: int
    """Identifier of the owning foreign server."""

    name: str
    """Local table name."""

    options: tuple[OptionPair, ...] = ()
    """Table options in definition order."""
