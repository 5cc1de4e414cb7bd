"""Core parsing and filtering of complexity statistics."""

from gogocyclo.core.statistics import Statistic, Position, parse_line, format_statistic
from gogocyclo.core.rules import IgnoreRule, IgnoreRules, parse_ignore
from gogocyclo.core.engine import FilterEngine, FilterResult, is_ignored

__all__ = [
    "Statistic",
    "Position",
    "parse_line",
    "format_statistic",
    "IgnoreRule",
    "IgnoreRules",
    "parse_ignore",
    "FilterEngine",
    "FilterResult",
    "is_ignored",
]
