"""
JSON output formatter for machine-readable results.
"""

import json

from gogocyclo.core.engine import FilterResult


class JSONFormatter:
    """
    Formats filter results as JSON for machine consumption.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format_result(self, result: FilterResult) -> str:
        """Format a complete filter result as JSON."""
        return json.dumps(result.to_dict(), indent=self.indent)
