"""
Text output formatter.

Reported statistics are written back in the format gocyclo produced
them, so the output can be piped to anything that reads gocyclo output.
"""

from typing import Iterable

from gogocyclo.core.engine import FilterResult
from gogocyclo.core.statistics import Statistic, format_statistic


class TextFormatter:
    """Formats reported statistics one per line."""

    def format_statistics(self, statistics: Iterable[Statistic]) -> str:
        return "\n".join(format_statistic(s) for s in statistics)

    def format_result(self, result: FilterResult) -> str:
        """Format reported statistics; empty string when there are none."""
        return self.format_statistics(result.reported)
