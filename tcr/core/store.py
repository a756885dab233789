"""Config store - resolved values for one configuration.

The store is a flat key/value table persisted as JSON. Resolution code only
relies on get/set/save; everything else here serves the CLI.

A project store may be layered over the global store: reads fall through to
the global values, writes always land in the project store.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from tcr.core.result import Err, Ok, Result
from tcr.core.structured import as_str, as_str_dict

__all__ = ["ConfigStore", "StoreError", "load_store"]


@dataclass(frozen=True, slots=True)
class StoreError:
    """Error when a store file cannot be read or parsed."""

    message: str
    path: Path

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


class ConfigStore:
    """Mutable key/value store scoped to one configuration session.

    Values are strings or nested JSON tables. A store without a path lives
    in memory only; save() is then a no-op.
    """

    def __init__(
        self,
        path: Path | None = None,
        values: Mapping[str, object] | None = None,
        *,
        fallback: ConfigStore | None = None,
    ) -> None:
        self._path = path
        self._values: dict[str, object] = dict(values or {})
        self._fallback = fallback
        self._dirty = False

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def dirty(self) -> bool:
        """True if values changed since the last load or save."""
        return self._dirty

    def get(self, key: str) -> object | None:
        if key in self._values:
            return self._values[key]
        if self._fallback is not None:
            return self._fallback.get(key)
        return None

    def get_str(self, key: str) -> str | None:
        """Get a value as a stripped, non-blank string."""
        return as_str(self.get(key))

    def set(self, key: str, value: object) -> None:
        if value is None:
            self.unset(key)
            return
        if self._values.get(key) != value:
            self._values[key] = value
            self._dirty = True

    def unset(self, key: str) -> None:
        if key in self._values:
            del self._values[key]
            self._dirty = True

    def clear(self) -> None:
        """Drop every value held by this store (the fallback is untouched)."""
        if self._values:
            self._values.clear()
            self._dirty = True

    def keys(self) -> Iterator[str]:
        """Keys visible through this store, own keys first."""
        seen: set[str] = set()
        for key in self._values:
            seen.add(key)
            yield key
        if self._fallback is not None:
            for key in self._fallback.keys():
                if key not in seen:
                    yield key

    def as_dict(self) -> dict[str, object]:
        """Own values only, as a new dict."""
        return dict(self._values)

    def save(self) -> None:
        """Flush values to disk atomically."""
        if self._path is None:
            self._dirty = False
            return
        content = json.dumps(self._values, indent=2, sort_keys=True) + "\n"
        _write_atomic(self._path, content)
        self._dirty = False

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __repr__(self) -> str:
        return f"ConfigStore(path={self._path!r}, keys={sorted(self._values)!r})"


def load_store(path: Path, *, fallback: ConfigStore | None = None) -> Result[ConfigStore, StoreError]:
    """Load a store from a JSON file.

    A missing file is an empty store (it is created on first save).

    Args:
        path: Store file location
        fallback: Store consulted for keys this one does not hold

    Returns:
        Ok(ConfigStore) on success, Err(StoreError) if the file is unreadable
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Ok(ConfigStore(path, fallback=fallback))
    except PermissionError:
        return Err(StoreError("Permission denied reading store", path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(StoreError(f"Error reading store ({e})", path))

    if not raw.strip():
        return Ok(ConfigStore(path, fallback=fallback))

    try:
        data_obj: object = json.loads(raw)
    except json.JSONDecodeError as e:
        return Err(StoreError(f"Invalid JSON in store ({e.msg}, line {e.lineno})", path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(StoreError("Store root must be a JSON object", path))
    return Ok(ConfigStore(path, data, fallback=fallback))


def _write_atomic(path: Path, content: str) -> None:
    """Write via a sibling temp file and os.replace."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)
