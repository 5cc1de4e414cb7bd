"""
Configuration loading for gogocyclo.

The configuration is a gitconfig style file with a single section:

    [gogocyclo]
    ignores = `database`.Query
    ignores = `database/sql`.*

``ignores`` may be repeated; each value becomes one IgnoreRule.
"""

import configparser
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from gogocyclo.core.rules import IgnoreRules, parse_ignore
from gogocyclo.errors import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = ".gogocyclo"
SECTION = "gogocyclo"
IGNORES_KEY = "ignores"

# Keys accepted inside the gogocyclo section
KNOWN_KEYS = {IGNORES_KEY}


class _MultiValueDict(dict):
    """
    Option store that keeps every value of a repeated key.

    configparser stores a fresh list of lines for each ``key = value``
    line and appends indented continuation lines to it, then joins the
    list into a string. Each list is remembered here so the joined value
    holds one line per assignment instead of the last one winning.
    Continuation lines have no place in gitconfig and are rejected.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._assignments = {}

    def __setitem__(self, key, value):
        if isinstance(value, list):
            self._assignments.setdefault(key, []).append(value)
            super().__setitem__(key, value)
        elif key in self._assignments:
            super().__setitem__(key, "\n".join(
                _single_line(key, lines) for lines in self._assignments.pop(key)
            ))
        else:
            super().__setitem__(key, value)


def _single_line(key: str, lines: List[str]) -> str:
    if len(lines) != 1:
        raise ConfigError(f"invalid continuation line {lines[1]!r} in {key!r} value")
    return lines[0]


def _create_parser() -> configparser.ConfigParser:
    return configparser.ConfigParser(
        dict_type=_MultiValueDict,
        strict=False,
        interpolation=None,
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=("#", ";"),
        empty_lines_in_values=False,
        default_section="\x00",
    )


def _unquote(value: str) -> str:
    """Strip one pair of enclosing double quotes, as git does."""
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


@dataclass(frozen=True)
class Configuration:
    """Ignore rules loaded once at startup."""
    ignores: IgnoreRules = field(default_factory=IgnoreRules)
    path: Optional[str] = None

    @property
    def rule_count(self) -> int:
        return len(self.ignores)

    @classmethod
    def from_values(cls, values: List[str], path: Optional[str] = None) -> "Configuration":
        """Build a configuration from raw ``ignores`` values."""
        return cls(ignores=IgnoreRules(parse_ignore(v) for v in values), path=path)


def read_ignores(text: str, source: str = "<string>") -> List[str]:
    """
    Extract the raw ``ignores`` values from configuration text.

    Section and key names are case-insensitive. A missing section or key
    yields no values. Unknown sections or keys are rejected.
    """
    parser = _create_parser()
    try:
        parser.read_string(text, source=source)
    except configparser.Error as e:
        raise ConfigError(f"invalid configuration: {e}", path=source) from e
    except ConfigError as e:
        e.path = source
        raise

    values: List[str] = []
    for section in parser.sections():
        if section.lower() != SECTION:
            raise ConfigError(f"invalid section {section!r}", path=source)

        for key, raw in parser.items(section):
            if key not in KNOWN_KEYS:
                raise ConfigError(
                    f"invalid variable {key!r} in section {section!r}", path=source
                )
            values.extend(_unquote(v.strip()) for v in raw.split("\n"))

    return values


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Configuration:
    """
    Load the configuration from a file.

    Raises ConfigError if the file is missing, cannot be parsed, or holds
    an ``ignores`` value in the wrong format.
    """
    path = str(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read configuration: {e}", path=path) from e

    values = read_ignores(text, source=path)
    try:
        config = Configuration.from_values(values, path=path)
    except ConfigError as e:
        e.path = path
        raise

    logger.debug("loaded %d ignore rule(s) from %s", config.rule_count, path)
    return config

