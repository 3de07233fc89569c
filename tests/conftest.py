"""Shared fixtures for pywithout tests."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from pywithout import Blocker, set_blocker


@pytest.fixture
def blocker() -> Iterator[Blocker]:
    """A Blocker on the real meta path, removed again after the test."""
    b = Blocker()
    yield b
    b.reset()


@pytest.fixture
def default_blocker() -> Iterator[Blocker]:
    """Install a fresh default Blocker behind the module-level functions."""
    b = Blocker()
    set_blocker(b)
    yield b
    b.reset()
    set_blocker(None)


@pytest.fixture
def make_module(tmp_path: Path, monkeypatch) -> Iterator[Callable[..., str]]:
    """
    Write throwaway modules under tmp_path and make them importable.

    ``make_module("alpha.beta")`` creates ``alpha/__init__.py`` and
    ``alpha/beta.py``. Everything imported from those top-level names is
    dropped from sys.modules after the test.
    """
    monkeypatch.syspath_prepend(str(tmp_path))
    roots: set[str] = set()

    def _make(name: str, body: str = "VALUE = 42\n") -> str:
        parts = name.split(".")
        directory = tmp_path
        for part in parts[:-1]:
            directory = directory / part
            directory.mkdir(exist_ok=True)
            init = directory / "__init__.py"
            if not init.exists():
                init.write_text("")
        (directory / f"{parts[-1]}.py").write_text(body)
        importlib.invalidate_caches()
        roots.add(parts[0])
        return name

    yield _make

    for key in list(sys.modules):
        if key.split(".")[0] in roots:
            del sys.modules[key]
