"""Probe primitive - does an executable resolve on this machine?

A probe never raises for a missing executable; absence is a normal result.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from pathlib import Path

__all__ = ["Prober", "WhichFn", "probe"]

WhichFn = Callable[[str, str | None], str | None]
"""(name, search_path) -> path or None; search_path None means PATH."""


def _system_which(name: str, search_path: str | None) -> str | None:
    return shutil.which(name, path=search_path)


class Prober:
    """Finds executables, remembering what it already found.

    Search order for `probe(name)`:
    1. A hit recorded earlier in this session for the same name and directory
    2. `name` itself when it is a path to an executable (user supplied)
    3. The process PATH

    With `search_dir`, only that directory is searched.
    """

    def __init__(self, which: WhichFn | None = None) -> None:
        self._which = which or _system_which
        self._found: dict[tuple[str, str | None], str] = {}

    def probe(self, name: str, search_dir: str | Path | None = None) -> str | None:
        """Resolve `name` to an absolute executable path, or None."""
        name = name.strip()
        if not name:
            return None

        directory = str(search_dir) if search_dir is not None else None
        key = (name, directory)
        cached = self._found.get(key)
        if cached is not None:
            return cached

        # which() checks names with a directory part directly, ignoring the search path
        found = self._which(os.path.expanduser(name), directory)
        if found is None:
            return None

        resolved = os.path.abspath(found)
        self._found[key] = resolved
        return resolved

    def forget(self) -> None:
        """Drop remembered hits."""
        self._found.clear()


def probe(name: str, search_dir: str | Path | None = None) -> str | None:
    """One-shot probe using the system PATH, without session memory."""
    return Prober().probe(name, search_dir)
