"""
Exception classes for pywithout.

Provides typed exceptions for the block/unblock control calls and the
import hook.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .protocols import MatcherLike


class PyWithoutError(Exception):
    """Base exception for all pywithout errors."""

    pass


class NotBlocked(PyWithoutError, LookupError):
    """
    Raised when disabling a matcher that is not currently blocked.

    Attributes:
        matcher: The matcher that was expected to be registered.
    """

    def __init__(self, matcher: "MatcherLike", message: str | None = None):
        super().__init__(message or f"{matcher!r} is not blocked")
        self.matcher = matcher


class ResolutionSynthesisFailure(PyWithoutError, ImportError):
    """
    Raised when the import hook cannot build a stand-in spec for a
    blocked module.

    Subclasses ImportError so the import statement that triggered the
    lookup fails through the normal import error path.

    Attributes:
        name: The module name being resolved.
        original_error: The exception raised while building the spec.
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, name=name)
        self.original_error = original_error

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.name:
            parts.append(f"Module: {self.name}")
        if self.original_error:
            parts.append(f"Cause: {type(self.original_error).__name__}: {self.original_error}")
        return " | ".join(parts)


class ConfigurationError(PyWithoutError):
    """Raised when configuration is invalid."""

    pass
