"""Data types that flow between the scan and the host engine.

- `Row` is one result row rendered as text, `None` standing for SQL NULL
- `StepResult` is the outcome of advancing a cursor
- `ScanFlags` are the executor flags a host passes to `begin`
- `ScanPhase` is the lifecycle state of a foreign scan
"""

from enum import IntFlag, StrEnum
from typing import TypeAlias

# One text value per column; the host engine coerces them to the declared column types.
Row: TypeAlias = list[str | None]


class StepResult(StrEnum):
    """Outcome of advancing a cursor by one row."""

    ROW = "row"
    """A row is available for column access."""

    DONE = "done"
    """The result set is exhausted."""


class ScanFlags(IntFlag):
    """Executor flags passed to `begin`."""

    NONE = 0
    EXPLAIN_ONLY = 0x0001
    REWIND = 0x0002
    BACKWARD = 0x0004
    MARK = 0x0008


class ScanPhase(StrEnum):
    """Lifecycle state of a foreign scan."""

    UNOPENED = "unopened"
    PREPARED = "prepared"
    STREAMING = "streaming"
    EXHAUSTED = "exhausted"
    CLOSED = "closed"
