"""
Blocker - enable and disable simulated missing modules.

The Blocker ties the registry, the cache scrubber and the import hook
together. A process normally uses the single default Blocker behind the
module-level ``enable`` / ``disable`` functions; tests can build their
own with fake collaborators.
"""

import sys
from collections.abc import Iterable
from typing import Any

from .config import BlockerSettings, load_settings
from .hook import ModuleBlocker, install, is_installed, uninstall
from .logging import blocker_logger, configure_logging
from .matchers import as_matcher
from .names import normalize
from .protocols import MatcherLike, ModuleCache, ResolutionChain
from .registry import BlockedSet
from .scrubber import scrub


def _as_matchers(names: Any) -> list[MatcherLike]:
    # A bare string is one name, not an iterable of characters
    if isinstance(names, str) or not isinstance(names, Iterable):
        names = [names]
    return [as_matcher(n) for n in names]


class Blocker:
    """
    Process-wide block state and the operations that change it.

    Once ``enable`` has been called the import hook stays on the meta
    path; ``disable`` only changes which names it intercepts.

    Example:
        blocker = Blocker()
        blocker.enable(["yaml"])

        try:
            import yaml
        except ImportError:
            yaml = None  # the fallback path under test

        blocker.disable(["yaml"])
        import yaml  # the real module again
    """

    def __init__(
        self,
        registry: BlockedSet | None = None,
        meta_path: ResolutionChain | None = None,
        modules: ModuleCache | None = None,
    ):
        """
        Initialize the Blocker.

        Args:
            registry: Blocked set to use. If None, starts empty.
            meta_path: Resolution chain. If None, ``sys.meta_path``.
            modules: Module cache. If None, ``sys.modules``.
        """
        self._registry = registry if registry is not None else BlockedSet()
        self._meta_path = meta_path
        self._modules = modules
        self._hook = ModuleBlocker(self._registry)

    @property
    def registry(self) -> BlockedSet:
        return self._registry

    @property
    def hook(self) -> ModuleBlocker:
        return self._hook

    @property
    def installed(self) -> bool:
        """True if the hook is first on the meta path."""
        return is_installed(self._hook, self.meta_path)

    @property
    def meta_path(self) -> ResolutionChain:
        return self._meta_path if self._meta_path is not None else sys.meta_path

    @property
    def modules(self) -> ModuleCache:
        return self._modules if self._modules is not None else sys.modules

    def enable(self, names: Any) -> None:
        """
        Block one or more modules.

        Each matcher is registered and then every matching module is
        removed from the module cache. The hook is (re)installed at the
        front of the meta path afterwards, even if it is already there.

        Args:
            names: A module name, compiled regex or matcher, or an
                iterable of them.
        """
        for matcher in _as_matchers(names):
            self._registry.add(matcher)
            removed = scrub(matcher, self.modules)
            blocker_logger.info("Blocked %s (%d cached module(s) removed)", matcher, len(removed))

        if not self.installed:
            blocker_logger.debug("Hook not first on meta path, moving it to the front")
        install(self._hook, self.meta_path)

    def disable(self, names: Any) -> None:
        """
        Unblock one or more modules.

        Matchers are processed in order. Each is unregistered and its
        matching cache entries are removed, so the next import goes
        through the real finders.

        Args:
            names: A module name, compiled regex or matcher, or an
                iterable of them.

        Raises:
            NotBlocked: If a matcher is not currently blocked. Matchers
                before it stay unblocked; the rest are not processed.
        """
        for matcher in _as_matchers(names):
            self._registry.remove(matcher)
            removed = scrub(matcher, self.modules)
            blocker_logger.info("Unblocked %s (%d cached module(s) removed)", matcher, len(removed))

    def blocked(self) -> list[MatcherLike]:
        """Currently blocked matchers, in the order they were enabled."""
        return self._registry.all()

    def is_blocked(self, name: str) -> bool:
        """Return True if importing ``name`` would be intercepted."""
        return self._registry.matches(normalize(name))

    def enable_from_settings(self, settings: BlockerSettings | None = None) -> list[MatcherLike]:
        """
        Configure logging and block the modules named in settings.

        Args:
            settings: Settings to apply. If None, loaded from the
                ``PYWITHOUT_*`` environment variables.

        Returns:
            The matchers that were enabled.
        """
        if settings is None:
            settings = load_settings()
        configure_logging(level=settings.log_level_value)

        matchers = settings.matchers()
        if matchers:
            self.enable(matchers)
        return matchers

    def reset(self) -> None:
        """
        Forget every block and take the hook off the meta path.

        Cached modules are left alone. Meant for test isolation.
        """
        self._registry.clear()
        uninstall(self._hook, self.meta_path)
        blocker_logger.debug("Blocker reset")

    def __repr__(self) -> str:
        return f"Blocker({self._registry!r}, installed={self.installed})"


_default_blocker: Blocker | None = None


def get_blocker() -> Blocker:
    """Get the process-wide default Blocker, creating it on first use."""
    global _default_blocker
    if _default_blocker is None:
        _default_blocker = Blocker()
    return _default_blocker


def set_blocker(blocker: Blocker | None) -> None:
    """Replace the process-wide default Blocker (None to recreate lazily)."""
    global _default_blocker
    _default_blocker = blocker


def enable(names: Any) -> None:
    """Block modules using the default Blocker. See ``Blocker.enable``."""
    get_blocker().enable(names)


def disable(names: Any) -> None:
    """Unblock modules using the default Blocker. See ``Blocker.disable``."""
    get_blocker().disable(names)


def blocked() -> list[MatcherLike]:
    """Currently blocked matchers of the default Blocker."""
    return get_blocker().blocked()


def is_blocked(name: str) -> bool:
    """Return True if the default Blocker intercepts ``name``."""
    return get_blocker().is_blocked(name)


def enable_from_settings(settings: BlockerSettings | None = None) -> list[MatcherLike]:
    """Apply ``PYWITHOUT_*`` settings to the default Blocker."""
    return get_blocker().enable_from_settings(settings)
