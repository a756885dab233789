"""Store and settings locations.

The project store lives next to the project; the global store is per user.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from .detection import is_windows

__all__ = [
    "APP_NAME",
    "home",
    "user_config_dir",
    "global_store_path",
    "project_store_path",
    "settings_path",
]

APP_NAME = "tcr"


@lru_cache(maxsize=1)
def home() -> Path:
    """User home; honours USERPROFILE/HOME first for CI and containers."""
    env_name = "USERPROFILE" if is_windows() else "HOME"
    value = os.environ.get(env_name)
    if value:
        return Path(value)
    return Path.home()


@lru_cache(maxsize=1)
def user_config_dir() -> Path:
    """~/.config/tcr (XDG_CONFIG_HOME respected) or %APPDATA%/tcr."""
    if is_windows():
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / APP_NAME
        return home() / "AppData" / "Roaming" / APP_NAME

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return home() / ".config" / APP_NAME


def global_store_path() -> Path:
    return user_config_dir() / "global.json"


def project_store_path(project_dir: Path) -> Path:
    return project_dir / f".{APP_NAME}" / "config.json"


def settings_path(project_dir: Path) -> Path:
    return project_dir / f"{APP_NAME}.toml"


def clear_caches() -> None:
    """Clear cached directories (tests that change the environment)."""
    home.cache_clear()
    user_config_dir.cache_clear()
