"""
Output formatters for filter results.

- text: gocyclo's own line format, one reported function per line
- json: machine-readable summary with reported and ignored entries
"""

from gogocyclo.formatters.text import TextFormatter
from gogocyclo.formatters.json_formatter import JSONFormatter

__all__ = [
    "TextFormatter",
    "JSONFormatter",
    "FORMATS",
    "get_formatter",
]

FORMATS = {
    "text": TextFormatter,
    "json": JSONFormatter,
}


def get_formatter(format_name: str):
    """Get a formatter by name."""
    formatter_class = FORMATS.get(format_name.lower())
    if formatter_class:
        return formatter_class()

    raise ValueError(f"Unknown format: {format_name}")
