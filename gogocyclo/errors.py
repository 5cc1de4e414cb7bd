"""
Exception types raised by gogocyclo.

Every error is terminal for a run. The CLI maps them to exit codes so
that CI can tell "complexity found" (1) apart from "the tool failed".
"""

from typing import Optional


class GoGoCycloError(Exception):
    """Base class for all gogocyclo errors."""


class UsageError(GoGoCycloError):
    """Raised when the tool is invoked with bad flags or arguments."""


class ConfigError(GoGoCycloError):
    """
    Raised when the configuration cannot be loaded.

    Covers a missing or unreadable file, storage-level syntax errors and
    ``ignores`` values that are not in the ```Package`.Func`` format.
    """

    def __init__(self, message: str, path: Optional[str] = None, value: Optional[str] = None):
        self.path = path
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.path:
            return f"{self.path}: {message}"
        return message


class MalformedRecord(GoGoCycloError):
    """Raised when a report line cannot be parsed into a statistic."""

    def __init__(self, message: str, line: str, lineno: Optional[int] = None):
        self.line = line
        self.lineno = lineno
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.lineno is not None:
            return f"line {self.lineno}: {message}: {self.line!r}"
        return f"{message}: {self.line!r}"


class InputError(GoGoCycloError):
    """Raised when the report stream cannot be read or decoded."""
