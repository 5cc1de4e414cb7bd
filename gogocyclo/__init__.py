"""
gogocyclo

Filters gocyclo output against a list of known, accepted complex
functions so CI only fails on unexpected complexity.
"""

__version__ = "1.0.0"
__author__ = "gogocyclo developers"

from gogocyclo.core.engine import FilterEngine, FilterResult
from gogocyclo.core.statistics import Statistic, Position
from gogocyclo.core.rules import IgnoreRule
from gogocyclo.config import Configuration, load_config

__all__ = [
    "FilterEngine",
    "FilterResult",
    "Statistic",
    "Position",
    "IgnoreRule",
    "Configuration",
    "load_config",
]
