"""Removal of already-imported modules from the module cache."""

import sys

from .logging import scrubber_logger
from .names import lineage, normalize
from .protocols import MatcherLike, ModuleCache


def scrub(matcher: MatcherLike, modules: ModuleCache | None = None) -> list[str]:
    """
    Delete every cached module that ``matcher`` hides.

    A module is hidden when its canonical name or the name of any
    package above it matches: a submodule cannot be imported without
    its parent. A module left in the cache would be returned by the
    next import without consulting any finder, so it has to go before
    a block or an unblock can take effect.

    Args:
        matcher: The matcher being blocked or unblocked.
        modules: Module cache to scrub. Defaults to ``sys.modules``.

    Returns:
        Names of the removed entries, in cache order. Empty if nothing
        matched.
    """
    if modules is None:
        modules = sys.modules

    removed = []
    # Snapshot: deleting while iterating the live mapping is not allowed
    for key in list(modules):
        if any(matcher.matches(name) for name in lineage(normalize(key))):
            del modules[key]
            removed.append(key)

    if removed:
        scrubber_logger.debug("Scrubbed %d cached module(s) for %s: %s", len(removed), matcher, removed)
    return removed
