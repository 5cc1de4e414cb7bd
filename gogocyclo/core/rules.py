"""
Ignore rules for gogocyclo.

A rule exempts functions from being reported. It is written in the
configuration as

    `Package`.Func

where ``Package`` is matched as a prefix of the statistic's package and
``Func`` is either an exact function name or the wildcard ``*``.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from gogocyclo.core.statistics import Statistic
from gogocyclo.errors import ConfigError


WILDCARD = "*"
IGNORE_FORMAT = "`Package`.Func"

# Whole value must match: backtick, package, backtick, literal dot, function
IGNORE_PATTERN = re.compile(r"`(.+)`\.(.+)")


@dataclass(frozen=True)
class IgnoreRule:
    """A (package prefix, function or wildcard) exemption."""
    package: str
    function: str

    def __str__(self) -> str:
        return f"`{self.package}`.{self.function}"

    @property
    def is_wildcard(self) -> bool:
        return self.function == WILDCARD

    def match(self, stat: Statistic) -> bool:
        """Check if this rule exempts the given statistic."""
        if not stat.package.startswith(self.package):
            return False
        return self.is_wildcard or stat.function == self.function


class IgnoreRules:
    """
    Ordered, immutable collection of ignore rules.

    A statistic is ignored when any rule matches it. Rules carry no
    precedence, so their order never changes the outcome.
    """

    def __init__(self, rules: Iterable[IgnoreRule] = ()):
        self._rules: Tuple[IgnoreRule, ...] = tuple(rules)

    def __iter__(self) -> Iterator[IgnoreRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IgnoreRules):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"IgnoreRules({list(self._rules)!r})"

    def find(self, stat: Statistic) -> Optional[IgnoreRule]:
        """Return the first rule matching the statistic, if any."""
        for rule in self._rules:
            if rule.match(stat):
                return rule
        return None

    def match(self, stat: Statistic) -> bool:
        return self.find(stat) is not None


def parse_ignore(raw: str) -> IgnoreRule:
    """
    Parse one ``ignores`` value into an IgnoreRule.

    Raises ConfigError if the value is not exactly ```Package`.Func``.
    """
    match = IGNORE_PATTERN.fullmatch(raw)
    if match is None:
        raise ConfigError(
            f"parse {raw}: ignores not in format {IGNORE_FORMAT}",
            value=raw,
        )

    package, function = match.groups()
    return IgnoreRule(package=package, function=function)
