"""
Statistic data structures for gogocyclo.

A statistic is one line of ``gocyclo`` output: the complexity score of a
single function together with its package and source position.

    15 database Query file.go:120:42
"""

import re
from dataclasses import dataclass
from typing import Dict, Any

from gogocyclo.errors import MalformedRecord


FIELD_SEPARATOR = " "
POSITION_SEPARATOR = ":"

# Signed base-10 integer, ASCII digits only
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Position:
    """Source location of a function."""
    filename: str
    offset: int
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.offset}:{self.line}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "offset": self.offset,
            "line": self.line,
        }


@dataclass(frozen=True)
class Statistic:
    """Cyclomatic complexity of one function."""
    complexity: int
    package: str
    function: str
    position: Position

    def __str__(self) -> str:
        return format_statistic(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "complexity": self.complexity,
            "package": self.package,
            "function": self.function,
            "position": self.position.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Statistic":
        """Create a Statistic from a dictionary produced by to_dict."""
        return cls(
            complexity=data["complexity"],
            package=data["package"],
            function=data["function"],
            position=Position(**data["position"]),
        )


def _parse_int(token: str, name: str, line: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise MalformedRecord(f"{name} {token!r} is not an integer", line)
    return int(token)


def parse_position(token: str, line: str) -> Position:
    """
    Parse a ``filename:offset:line`` token.

    ``line`` is the full report line, used for error context only.
    """
    parts = token.split(POSITION_SEPARATOR)
    if len(parts) != 3:
        raise MalformedRecord(
            f"position {token!r} is not in the form filename:offset:line", line
        )

    filename, offset, lineno = parts
    return Position(
        filename=filename,
        offset=_parse_int(offset, "offset", line),
        line=_parse_int(lineno, "line", line),
    )


def parse_line(line: str) -> Statistic:
    """
    Parse one report line into a Statistic.

    The line must hold exactly four fields separated by single spaces.
    Surrounding whitespace is not trimmed, so doubled separators show up
    as a wrong field count rather than shifted fields.

    Raises MalformedRecord if any field is missing or not numeric where
    a number is expected.
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != 4:
        raise MalformedRecord(
            f"expected 4 space-separated fields, got {len(fields)}", line
        )

    complexity, package, function, position = fields

    score = _parse_int(complexity, "complexity", line)
    if score < 0:
        raise MalformedRecord(f"complexity {complexity!r} is negative", line)

    return Statistic(
        complexity=score,
        package=package,
        function=function,
        position=parse_position(position, line),
    )


def format_statistic(stat: Statistic) -> str:
    """Render a statistic in the same format parse_line reads."""
    return FIELD_SEPARATOR.join([
        str(stat.complexity),
        stat.package,
        stat.function,
        str(stat.position),
    ])
