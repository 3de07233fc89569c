"""
Import hook that makes blocked modules fail to import.

ModuleBlocker sits at the front of ``sys.meta_path``. For a blocked name
it returns a spec whose loader raises ``ModuleNotFoundError`` when the
import system executes it, so ``import x`` fails exactly the way it does
when ``x`` is not installed. For any other name it returns None and the
remaining finders run as usual.
"""

import importlib.abc
import importlib.util
import sys
from importlib.machinery import ModuleSpec
from types import ModuleType

from .exceptions import ResolutionSynthesisFailure
from .logging import hook_logger
from .names import normalize
from .protocols import ResolutionChain
from .registry import BlockedSet


class BlockedLoader(importlib.abc.Loader):
    """Loader for a blocked module: creating it works, executing it fails."""

    def __init__(self, name: str):
        self.name = name

    def create_module(self, spec: ModuleSpec) -> ModuleType | None:
        return None

    def exec_module(self, module: ModuleType) -> None:
        # Same message and .name as the import system's own error; the
        # half-initialized module is dropped from sys.modules by the caller.
        raise ModuleNotFoundError(f"No module named {self.name!r}", name=self.name)

    def __repr__(self) -> str:
        return f"BlockedLoader({self.name!r})"


class ModuleBlocker(importlib.abc.MetaPathFinder):
    """
    Meta path finder that intercepts imports of blocked modules.

    Two blockers are equal when they consult the same registry, which is
    what ``install`` uses to avoid stacking duplicates on the chain.

    Example:
        registry = BlockedSet()
        registry.add(ExactMatcher("yaml"))
        install(ModuleBlocker(registry))

        import yaml  # ModuleNotFoundError: No module named 'yaml'
    """

    def __init__(self, registry: BlockedSet):
        self.registry = registry

    def find_spec(self, fullname, path=None, target=None) -> ModuleSpec | None:
        name = normalize(fullname)
        if not self.registry.matches(name):
            return None

        hook_logger.debug("Blocking import of %s", name)
        try:
            spec = importlib.util.spec_from_loader(fullname, BlockedLoader(name))
        except Exception as e:
            raise ResolutionSynthesisFailure(
                f"Could not build stand-in for blocked module {name!r}",
                name=name,
                original_error=e,
            ) from e
        if spec is None:
            raise ResolutionSynthesisFailure(
                f"Could not build stand-in for blocked module {name!r}", name=name
            )
        return spec

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModuleBlocker):
            return NotImplemented
        return self.registry is other.registry

    def __hash__(self) -> int:
        return id(self.registry)

    def __repr__(self) -> str:
        return f"ModuleBlocker({self.registry!r})"


def install(hook: ModuleBlocker, meta_path: ResolutionChain | None = None) -> None:
    """
    Put ``hook`` at the front of the resolution chain.

    Any equivalent hook already on the chain is removed first, so calling
    this repeatedly leaves exactly one copy, always in first position.

    Args:
        hook: The blocker to install.
        meta_path: Resolution chain. Defaults to ``sys.meta_path``.
    """
    if meta_path is None:
        meta_path = sys.meta_path

    uninstall(hook, meta_path)
    meta_path.insert(0, hook)
    hook_logger.debug("Installed %r at front of meta path", hook)


def uninstall(hook: ModuleBlocker, meta_path: ResolutionChain | None = None) -> bool:
    """
    Remove every copy of ``hook`` from the resolution chain.

    Returns:
        True if at least one copy was removed.
    """
    if meta_path is None:
        meta_path = sys.meta_path

    removed = False
    while hook in meta_path:
        meta_path.remove(hook)
        removed = True
    return removed


def is_installed(hook: ModuleBlocker, meta_path: ResolutionChain | None = None) -> bool:
    """Return True if ``hook`` is first on the resolution chain."""
    if meta_path is None:
        meta_path = sys.meta_path
    return bool(meta_path) and meta_path[0] == hook
