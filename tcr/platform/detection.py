"""Host platform and architecture detection.

Detection is lazy and cached; tests clear the caches with `clear_caches()`.
"""

from __future__ import annotations

import os as _os
import platform as _platform
import sys as _sys
from enum import Enum, auto
from functools import lru_cache

__all__ = [
    "Platform",
    "detect_platform",
    "native_arch",
    "normalize_arch",
    "is_macos",
    "is_windows",
    "clear_caches",
]


class Platform(Enum):
    """Host operating system."""

    LINUX = auto()
    MACOS = auto()
    WINDOWS = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def plat(self) -> str:
        """Default target platform (`plat` store key) for this host."""
        return {
            Platform.LINUX: "linux",
            Platform.MACOS: "macosx",
            Platform.WINDOWS: "mingw",
            Platform.UNKNOWN: "linux",
        }[self]

    @property
    def exe_suffix(self) -> str:
        return ".exe" if self == Platform.WINDOWS else ""


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    # NOTE: avoid platform.system() on Windows, it may query WMI.
    system = _sys.platform.lower()
    if system.startswith("linux"):
        return Platform.LINUX
    if system.startswith("darwin"):
        return Platform.MACOS
    if system.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.UNKNOWN


_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "x86_64": "x86_64",
    "i386": "i386",
    "i486": "i386",
    "i586": "i386",
    "i686": "i386",
    "x86": "i386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "armv7",
    "armv7": "armv7",
}


def normalize_arch(machine: str) -> str:
    """Map a raw machine string to the architecture names stored in `arch`.

    Unknown machines are returned lower-cased, unchanged otherwise.
    """
    key = machine.strip().lower()
    return _ARCH_ALIASES.get(key, key)


@lru_cache(maxsize=1)
def native_arch() -> str:
    """Native architecture of the host (cached), e.g. "x86_64" or "arm64"."""
    if detect_platform() == Platform.WINDOWS:
        # NOTE: platform.machine() may call uname() and hit WMI on Windows.
        machine = (
            _os.environ.get("PROCESSOR_ARCHITEW6432")
            or _os.environ.get("PROCESSOR_ARCHITECTURE")
            or ""
        )
    else:
        machine = _platform.machine()
    return normalize_arch(machine) or "unknown"


def is_macos() -> bool:
    return detect_platform() == Platform.MACOS


def is_windows() -> bool:
    return detect_platform() == Platform.WINDOWS


def clear_caches() -> None:
    detect_platform.cache_clear()
    native_arch.cache_clear()
