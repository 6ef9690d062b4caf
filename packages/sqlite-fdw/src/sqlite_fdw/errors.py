"""Error types for option validation and foreign scans."""

from enum import StrEnum
from typing import final


class ErrorKind(StrEnum):
    """Classification of wrapper errors."""

    INVALID_OPTION_NAME = "invalid_option_name"
    DUPLICATE_OPTION = "duplicate_option"
    MISSING_OPTIONS = "missing_options"
    NOT_FOUND = "not_found"
    CONNECTION = "connection"
    QUERY = "query"
    STEP = "step"


_SQLSTATES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_OPTION_NAME: "HV00D",
    ErrorKind.DUPLICATE_OPTION: "42601",
    ErrorKind.MISSING_OPTIONS: "42601",
    ErrorKind.NOT_FOUND: "42704",
    ErrorKind.CONNECTION: "HV001",
    ErrorKind.QUERY: "HV00L",
    ErrorKind.STEP: "HV000",
}


@final
class FdwError(Exception):
    """Base error for all wrapper operations.

    Every error is fatal to the statement that raised it; the host engine is
    expected to abort the statement and report `message` (and `hint`, when
    present) to the user.
    """

    __slots__ = ("hint", "kind", "message", "source")

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        hint: str | None = None,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.hint = hint
        self.source = source

    @property
    def sqlstate(self) -> str:
        """Host error code reported alongside the message."""
        return _SQLSTATES[self.kind]

    def __repr__(self) -> str:
        return f"FdwError({self.message!r}, kind={self.kind!r})"
