"""Xcode locators.

`find_xcode_dir()` finds the Xcode application bundle and
`find_xcode_sdkvers()` lists the SDK versions it ships for a platform.
Both return nothing (rather than raising) when there is nothing to find.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from pathlib import Path

from tcr.core.result import Ok, Result
from tcr.platform.detection import is_macos
from tcr.platform.process import ProcessError, run

__all__ = ["DEFAULT_XCODE_APP", "find_xcode_dir", "find_xcode_sdkvers", "sdk_platform_name"]

DEFAULT_XCODE_APP = Path("/Applications/Xcode.app")

Runner = Callable[[list[str]], Result[str, ProcessError]]

_DEVELOPER_SUFFIX = ("Contents", "Developer")

# plat -> (device SDK platform, simulator SDK platform)
_SDK_PLATFORMS: dict[str, tuple[str, str | None]] = {
    "macosx": ("MacOSX", None),
    "iphoneos": ("iPhoneOS", "iPhoneSimulator"),
    "watchos": ("WatchOS", "WatchSimulator"),
    "appletvos": ("AppleTVOS", "AppleTVSimulator"),
}

_SIMULATOR_ARCHS = frozenset({"i386", "x86_64"})


def _default_runner(cmd: list[str]) -> Result[str, ProcessError]:
    return run(cmd, timeout=10)


def _app_from_developer_dir(developer_dir: str) -> Path | None:
    developer_dir = developer_dir.strip()
    if not developer_dir:
        return None
    path = Path(developer_dir)
    if path.parts[-2:] == _DEVELOPER_SUFFIX:
        return path.parent.parent
    # Command line tools only (/Library/Developer/CommandLineTools): no app bundle
    return None


def find_xcode_dir(
    *,
    runner: Runner | None = None,
    fallbacks: Sequence[Path] = (DEFAULT_XCODE_APP,),
    query_select: bool | None = None,
) -> str | None:
    """Locate the Xcode application directory.

    Asks `xcode-select -p` first (macOS only), then the fallback locations.

    Args:
        runner: Command runner, for tests
        fallbacks: App bundles tried when xcode-select has no answer
        query_select: Force (or skip) the xcode-select query; default is macOS only

    Returns:
        The app directory (e.g. "/Applications/Xcode.app"), or None
    """
    if query_select is None:
        query_select = is_macos()

    if query_select:
        result = (runner or _default_runner)(["xcode-select", "-p"])
        if isinstance(result, Ok):
            app = _app_from_developer_dir(result.value)
            if app is not None and app.is_dir():
                return str(app)

    for candidate in fallbacks:
        if candidate.is_dir():
            return str(candidate)
    return None


def sdk_platform_name(plat: str, arch: str | None) -> str | None:
    """SDK platform directory stem for `plat`/`arch` (e.g. "iPhoneSimulator")."""
    names = _SDK_PLATFORMS.get(plat.lower())
    if names is None:
        return None
    device, simulator = names
    if simulator is not None and arch in _SIMULATOR_ARCHS:
        return simulator
    return device


def _version_key(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in version.split("."))


def find_xcode_sdkvers(xcode_dir: str | None, plat: str | None, arch: str | None) -> list[str]:
    """List SDK versions under an Xcode app for a platform, newest first.

    Looks for `<Name><version>.sdk` bundles in
    `Contents/Developer/Platforms/<Name>.platform/Developer/SDKs`. Unversioned
    symlinks such as `MacOSX.sdk` are skipped.
    """
    if not xcode_dir or not plat:
        return []
    name = sdk_platform_name(plat, arch)
    if name is None:
        return []

    sdks_dir = (
        Path(xcode_dir)
        / "Contents"
        / "Developer"
        / "Platforms"
        / f"{name}.platform"
        / "Developer"
        / "SDKs"
    )
    if not sdks_dir.is_dir():
        return []

    pattern = re.compile(rf"^{re.escape(name)}(\d+(?:\.\d+)*)\.sdk$")
    versions: set[str] = set()
    for entry in sdks_dir.iterdir():
        match = pattern.match(entry.name)
        if match:
            versions.add(match.group(1))
    return sorted(versions, key=_version_key, reverse=True)
