"""
Protocol classes for structural typing in pywithout.

These protocols let callers plug in their own matchers and host
collaborators without inheriting from pywithout classes.
"""

from collections.abc import Hashable, MutableMapping, MutableSequence
from types import ModuleType
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MatcherLike(Protocol):
    """Protocol for module name matchers.

    Any hashable object with a ``key`` and a ``matches`` method can be
    registered as a block.

    Attributes:
        key: Representation used for identity in the blocked set
    """

    key: Hashable

    def matches(self, name: str) -> bool:
        """Return True if the canonical module name is matched."""
        ...


# sys.meta_path and sys.modules shapes, for injecting fakes in tests
ResolutionChain = MutableSequence[Any]
ModuleCache = MutableMapping[str, ModuleType]
