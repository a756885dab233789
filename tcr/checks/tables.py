"""Built-in checker lists per target platform.

These drive the CLI. Each list starts with the architecture check, runs the
Xcode checks for Apple platforms, then resolves the toolchain kinds in
TOOLKINDS order. Candidates from tcr.toml go ahead of the built-in ones.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from tcr.checks.platform import check_arch, check_xcode_dir, check_xcode_sdkver
from tcr.checks.runner import CheckerEntry, ToolchainCheck
from tcr.toolchain.candidate import (
    Candidate,
    CommandValidator,
    LazyTable,
    StaticTable,
    ToolchainSource,
    ToolchainTable,
)

if TYPE_CHECKING:
    from tcr.core.settings import CandidateSetting, Settings
    from tcr.core.store import ConfigStore

__all__ = [
    "PLATFORMS",
    "TOOLKINDS",
    "UnknownPlatformError",
    "checkers_for",
    "candidates_from_settings",
    "toolchain_source_for",
]

TOOLKINDS: tuple[str, ...] = ("cc", "cxx", "as", "ld", "sh", "ar")

_DESCRIPTIONS = {
    "cc": "the c compiler",
    "cxx": "the c++ compiler",
    "as": "the assembler",
    "ld": "the linker",
    "sh": "the shared library linker",
    "ar": "the static library archiver",
}


class UnknownPlatformError(ValueError):
    """No built-in checker list exists for the platform."""

    def __init__(self, plat: str) -> None:
        super().__init__(f"unknown platform: {plat} (known: {', '.join(PLATFORMS)})")
        self.plat = plat


def _gnu_table() -> ToolchainTable:
    table = ToolchainTable()
    for toolkind, names in (
        ("cc", ("gcc", "clang")),
        ("cxx", ("gcc", "clang", "g++", "clang++")),
        ("as", ("gcc", "clang")),
        ("ld", ("g++", "gcc", "clang++", "clang")),
        ("sh", ("g++", "gcc", "clang++", "clang")),
    ):
        for name in names:
            table.insert(toolkind, None, name, _DESCRIPTIONS[toolkind])
    table.insert("ar", None, "ar", _DESCRIPTIONS["ar"], CommandValidator(("--version",)))
    return table


def _xcode_bin_dir(store: ConfigStore) -> Path | None:
    xcode_dir = store.get_str("xcode_dir")
    if xcode_dir is None:
        return None
    return (
        Path(xcode_dir)
        / "Contents"
        / "Developer"
        / "Toolchains"
        / "XcodeDefault.xctoolchain"
        / "usr"
        / "bin"
    )


def _apple_table(store: ConfigStore) -> ToolchainTable:
    """Xcode's own clang first, then whatever is on PATH."""
    bin_dir = _xcode_bin_dir(store)
    table = ToolchainTable()
    for toolkind, name in (
        ("cc", "clang"),
        ("cxx", "clang++"),
        ("as", "clang"),
        ("ld", "clang++"),
        ("sh", "clang++"),
        ("ar", "ar"),
    ):
        if bin_dir is not None:
            table.insert(toolkind, "", str(bin_dir / name), _DESCRIPTIONS[toolkind])
        table.insert(toolkind, "", name, _DESCRIPTIONS[toolkind])
    return table


def _mingw_table(store: ConfigStore) -> ToolchainTable:
    """MinGW tools, prefixed for the target architecture unless `cross` is set."""
    arch = store.get_str("arch")
    prefix = "i686-w64-mingw32-" if arch == "i386" else "x86_64-w64-mingw32-"
    table = ToolchainTable()
    for toolkind, name in (
        ("cc", "gcc"),
        ("cxx", "g++"),
        ("as", "gcc"),
        ("ld", "g++"),
        ("sh", "g++"),
        ("ar", "ar"),
    ):
        table.insert(toolkind, prefix, name, _DESCRIPTIONS[toolkind])
    return table


PLATFORMS: tuple[str, ...] = ("linux", "macosx", "iphoneos", "mingw")


def candidates_from_settings(settings: tuple[CandidateSetting, ...]) -> tuple[Candidate, ...]:
    """Turn tcr.toml candidate entries into Candidates."""
    return tuple(
        Candidate(
            name=s.name,
            description=s.description,
            cross=s.cross,
            validate=CommandValidator(s.validate) if s.validate is not None else None,
        )
        for s in settings
    )


def _with_settings(source: ToolchainSource, settings: Settings | None) -> ToolchainSource:
    if settings is None or not settings.toolchains:
        return source

    def provider(store: ConfigStore) -> ToolchainTable:
        base = source.load(store)
        merged = ToolchainTable({kind: base.candidates(kind) for kind in base.kinds()})
        for toolkind, entries in settings.toolchains.items():
            merged.prepend(toolkind, candidates_from_settings(entries))
        return merged

    return LazyTable(provider)


def toolchain_source_for(plat: str, settings: Settings | None = None) -> ToolchainSource:
    """Toolchain source for a platform, user candidates first.

    Raises:
        UnknownPlatformError: If `plat` has no built-in table.
    """
    if plat == "linux":
        source: ToolchainSource = StaticTable(_gnu_table())
    elif plat in ("macosx", "iphoneos"):
        source = LazyTable(_apple_table)
    elif plat == "mingw":
        source = LazyTable(_mingw_table)
    else:
        raise UnknownPlatformError(plat)
    return _with_settings(source, settings)


def checkers_for(
    plat: str,
    settings: Settings | None = None,
    *,
    toolkinds: tuple[str, ...] | None = None,
    arch: str | None = None,
) -> list[CheckerEntry]:
    """Checker list for one configuration pass on `plat`.

    Args:
        plat: Target platform (see PLATFORMS)
        settings: Parsed tcr.toml, if any
        toolkinds: Kinds to resolve, in order; None for TOOLKINDS followed
            by any extra kinds declared in tcr.toml
        arch: Default architecture when `arch` is unset

    Raises:
        UnknownPlatformError: If `plat` has no built-in table.
    """
    source = toolchain_source_for(plat, settings)

    if toolkinds is None:
        toolkinds = TOOLKINDS
        if settings is not None:
            extra = tuple(kind for kind in settings.toolchains if kind not in TOOLKINDS)
            toolkinds = (*TOOLKINDS, *extra)

    checkers: list[CheckerEntry] = [(check_arch, arch)]
    if plat in ("macosx", "iphoneos"):
        checkers.append(check_xcode_dir)
        checkers.append(check_xcode_sdkver)
    checkers.extend(ToolchainCheck(toolkind, source) for toolkind in toolkinds)
    return checkers
