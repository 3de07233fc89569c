"""Canonical module names."""

SOURCE_SUFFIX = ".py"
NAMESPACE_SEPARATOR = "."
PATH_SEPARATORS = ("/", "\\")


def is_path(raw: str) -> bool:
    """Return True if ``raw`` contains a path separator."""
    return any(sep in raw for sep in PATH_SEPARATORS)


def normalize(raw: str) -> str:
    """
    Convert a path-like module identifier into a dotted module name.

    Path separators become dots and one trailing ``.py`` suffix is
    stripped. Identifiers without a separator are already dotted module
    names and come back unchanged, suffix included: ``pkg.py`` is the
    ``py`` submodule of ``pkg``, not a file. Write a top-level file as
    a plain name (``"Zzz"``).

    Example:
        normalize("Alpha/Beta.py")  # "Alpha.Beta"
        normalize("Alpha.Beta")     # "Alpha.Beta"
        normalize("pkg.py")         # "pkg.py"
    """
    if not is_path(raw):
        return raw

    name = raw
    if name.endswith(SOURCE_SUFFIX):
        name = name[: -len(SOURCE_SUFFIX)]
    for sep in PATH_SEPARATORS:
        name = name.replace(sep, NAMESPACE_SEPARATOR)
    return name


def lineage(name: str) -> list[str]:
    """
    The dotted name and every package above it, innermost first.

    Example:
        lineage("a.b.c")  # ["a.b.c", "a.b", "a"]
    """
    parts = name.split(NAMESPACE_SEPARATOR)
    return [NAMESPACE_SEPARATOR.join(parts[:i]) for i in range(len(parts), 0, -1)]
