"""
Filter engine for gogocyclo.

Applies the configured ignore rules to parsed statistics and splits them
into the ones that are exempt and the ones that must be reported.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, TYPE_CHECKING

from gogocyclo.core.statistics import Statistic

if TYPE_CHECKING:
    from gogocyclo.config import Configuration


logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """Statistics partitioned by the ignore rules, in input order."""
    reported: List[Statistic] = field(default_factory=list)
    ignored: List[Statistic] = field(default_factory=list)
    rule_count: int = 0

    @property
    def reported_count(self) -> int:
        return len(self.reported)

    @property
    def ignored_count(self) -> int:
        return len(self.ignored)

    @property
    def total(self) -> int:
        return self.reported_count + self.ignored_count

    @property
    def passed(self) -> bool:
        """True when nothing is left to report."""
        return not self.reported

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": {
                "total": self.total,
                "reported": self.reported_count,
                "ignored": self.ignored_count,
                "rules": self.rule_count,
            },
            "reported": [s.to_dict() for s in self.reported],
            "ignored": [s.to_dict() for s in self.ignored],
        }


def is_ignored(stat: Statistic, config: "Configuration") -> bool:
    """Check if any configured rule exempts the statistic."""
    return config.ignores.match(stat)


class FilterEngine:
    """
    Filters statistics against a configuration.

    The configuration is passed in explicitly and never modified.
    """

    def __init__(self, config: "Configuration"):
        self.config = config

    def filter(self, statistics: Iterable[Statistic]) -> FilterResult:
        """Split statistics into reported and ignored, keeping their order."""
        result = FilterResult(rule_count=self.config.rule_count)

        for stat in statistics:
            rule = self.config.ignores.find(stat)
            if rule is None:
                result.reported.append(stat)
            else:
                logger.debug("ignoring %s (matched %s)", stat, rule)
                result.ignored.append(stat)

        logger.debug(
            "%d statistic(s) read, %d ignored, %d reported",
            result.total, result.ignored_count, result.reported_count,
        )
        return result
