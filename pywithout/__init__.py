"""
pywithout - Pretend an installed module is missing

Lets a test suite exercise the code paths that run when an optional
dependency is not installed, without uninstalling anything:

    import pywithout

    pywithout.enable(["yaml"])
    import yaml  # ModuleNotFoundError: No module named 'yaml'

    pywithout.disable(["yaml"])
    import yaml  # the real module

Blocks are process-wide and last until disabled.
"""

from .blocker import (
    Blocker,
    blocked,
    disable,
    enable,
    enable_from_settings,
    get_blocker,
    is_blocked,
    set_blocker,
)
from .config import BlockerSettings, load_settings
from .exceptions import (
    ConfigurationError,
    NotBlocked,
    PyWithoutError,
    ResolutionSynthesisFailure,
)
from .hook import BlockedLoader, ModuleBlocker
from .logging import configure_logging, get_logger
from .matchers import ExactMatcher, GlobMatcher, RegexMatcher, as_matcher, parse_matcher
from .names import normalize
from .protocols import MatcherLike
from .registry import BlockedSet
from .scrubber import scrub

__all__ = [
    # Control interface
    "enable",
    "disable",
    "blocked",
    "is_blocked",
    "enable_from_settings",
    "Blocker",
    "get_blocker",
    "set_blocker",
    # Matchers
    "MatcherLike",
    "ExactMatcher",
    "RegexMatcher",
    "GlobMatcher",
    "as_matcher",
    "parse_matcher",
    "normalize",
    # Internals
    "BlockedSet",
    "ModuleBlocker",
    "BlockedLoader",
    "scrub",
    # Configuration
    "BlockerSettings",
    "load_settings",
    # Exceptions
    "PyWithoutError",
    "NotBlocked",
    "ResolutionSynthesisFailure",
    "ConfigurationError",
    # Logging
    "configure_logging",
    "get_logger",
]

__version__ = "0.1.0"
