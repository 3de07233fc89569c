"""
Blocked-set registry.

Holds the matchers currently blocked. A module name is blocked iff at
least one registered matcher matches its canonical form.
"""

from collections.abc import Iterator

from .exceptions import NotBlocked
from .names import normalize
from .protocols import MatcherLike


class BlockedSet:
    """
    Insertion-ordered set of blocked matchers.

    Example:
        blocked = BlockedSet()
        blocked.add(ExactMatcher("numpy"))
        blocked.matches("numpy")        # True
        blocked.matches("numpy.linalg")  # False
    """

    def __init__(self) -> None:
        self._matchers: dict[MatcherLike, MatcherLike] = {}

    def add(self, matcher: MatcherLike) -> None:
        """Register a matcher. Adding one that is already present is a no-op."""
        self._matchers.setdefault(matcher, matcher)

    def remove(self, matcher: MatcherLike) -> None:
        """
        Unregister a matcher.

        Raises:
            NotBlocked: If the matcher is not registered.
        """
        if matcher not in self._matchers:
            raise NotBlocked(matcher)
        del self._matchers[matcher]

    def matches(self, name: str) -> bool:
        """Return True if any registered matcher matches ``name``."""
        canonical = normalize(name)
        return any(m.matches(canonical) for m in self._matchers)

    def all(self) -> list[MatcherLike]:
        """Registered matchers, in registration order."""
        return list(self._matchers)

    def clear(self) -> None:
        self._matchers.clear()

    def __contains__(self, matcher: object) -> bool:
        return matcher in self._matchers

    def __iter__(self) -> Iterator[MatcherLike]:
        return iter(list(self._matchers))

    def __len__(self) -> int:
        return len(self._matchers)

    def __repr__(self) -> str:
        return f"BlockedSet({[str(m) for m in self._matchers]!r})"
