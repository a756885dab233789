"""Helpers for untyped data read from the store file and tcr.toml.

Use these at the boundary where JSON/TOML enters the program; everything
past the boundary works with narrowed types.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def as_str(value: object) -> str | None:
    """Return value stripped, or None if it is not a non-blank string."""
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a non-blank string value from a mapping, stripped."""
    return as_str(table.get(key))


def get_raw_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping without stripping.

    Cross prefixes are significant byte for byte ("arm-none-eabi-"), and a
    blank string is a meaningful value ("no prefix").
    """
    value = table.get(key)
    return value if isinstance(value, str) else None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))


def get_str_list(table: Mapping[str, object], key: str) -> list[str] | None:
    """Get a list of strings; None if missing or any item is not a string."""
    items = as_obj_list(table.get(key))
    if items is None:
        return None
    out: list[str] = []
    for item in items:
        if not isinstance(item, str):
            return None
        out.append(item)
    return out
