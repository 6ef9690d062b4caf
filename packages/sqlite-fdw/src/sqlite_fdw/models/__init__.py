"""Pydantic models and value types shared across the wrapper."""

from sqlite_fdw.models.catalog import ForeignServer, ForeignTable
from sqlite_fdw.models.config import ResolvedConfig, SqliteParams
from sqlite_fdw.models.datatypes import Row, ScanFlags, ScanPhase, StepResult
from sqlite_fdw.models.options import (
    OptionContext,
    OptionDescriptor,
    OptionKey,
    OptionPair,
)

__all__ = [
    # Catalog objects
    "ForeignServer",
    "ForeignTable",
    # Configuration
    "ResolvedConfig",
    "SqliteParams",
    # Options
    "OptionContext",
    "OptionDescriptor",
    "OptionKey",
    "OptionPair",
    # Scan data types
    "Row",
    "ScanFlags",
    "ScanPhase",
    "StepResult",
]
