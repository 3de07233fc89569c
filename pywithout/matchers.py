"""
Module name matchers.

A matcher decides whether a canonical module name is blocked. Three
variants are provided:

- ExactMatcher: the name itself
- RegexMatcher: ``re.search`` against the name
- GlobMatcher: shell-style wildcards, case-sensitive

Matchers compare and hash by variant and representation only, so two
different regexes that happen to match the same names are distinct
entries.
"""

from __future__ import annotations

import fnmatch
import re
from dataclasses import dataclass, field
from typing import Any

from .exceptions import ConfigurationError
from .names import normalize
from .protocols import MatcherLike

REGEX_PREFIX = "re:"
GLOB_CHARS = ("*", "?", "[")


@dataclass(frozen=True)
class ExactMatcher:
    """Matches a single module by name."""

    name: str

    @property
    def key(self) -> str:
        return self.name

    def matches(self, name: str) -> bool:
        return name == self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class RegexMatcher:
    """
    Matches every module whose name contains a match for ``pattern``.

    The search is unanchored; use ``^`` and ``$`` to pin it down.

    Example:
        RegexMatcher(re.compile(r"^numpy(\\.|$)"))
    """

    pattern: re.Pattern[str] = field(compare=False)
    key: tuple[str, int] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", (self.pattern.pattern, self.pattern.flags))

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None

    def __str__(self) -> str:
        return f"re:{self.pattern.pattern}"


@dataclass(frozen=True)
class GlobMatcher:
    """
    Matches module names against a shell-style pattern.

    Example:
        GlobMatcher("numpy.*")  # every numpy submodule, not numpy itself
    """

    glob: str

    @property
    def key(self) -> str:
        return self.glob

    def matches(self, name: str) -> bool:
        return fnmatch.fnmatchcase(name, self.glob)

    def __str__(self) -> str:
        return self.glob


def as_matcher(value: Any) -> MatcherLike:
    """
    Coerce a name, compiled regex or matcher into a matcher.

    Strings are always exact names (normalized first); use
    ``parse_matcher`` to interpret wildcard or ``re:`` text.

    Raises:
        TypeError: If ``value`` is none of the supported kinds.
    """
    if isinstance(value, str):
        return ExactMatcher(normalize(value))
    if isinstance(value, re.Pattern):
        return RegexMatcher(value)
    if isinstance(value, MatcherLike):
        return value
    raise TypeError(f"Cannot block {value!r}: expected a module name, compiled regex or matcher")


def parse_matcher(text: str) -> MatcherLike:
    """
    Parse a textual matcher, as found in configuration.

    - ``re:<regex>`` gives a RegexMatcher
    - text containing ``*``, ``?`` or ``[`` gives a GlobMatcher
    - anything else is an exact module name

    Raises:
        ConfigurationError: If the text is empty or the regex is invalid.
    """
    text = text.strip()
    if not text:
        raise ConfigurationError("Empty module matcher")

    if text.startswith(REGEX_PREFIX):
        source = text[len(REGEX_PREFIX) :]
        try:
            return RegexMatcher(re.compile(source))
        except re.error as e:
            raise ConfigurationError(f"Invalid module pattern {source!r}: {e}") from e

    if any(ch in text for ch in GLOB_CHARS):
        return GlobMatcher(text)

    return ExactMatcher(normalize(text))
