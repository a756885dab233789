"""Platform checks - architecture and Xcode settings.

Same shape as toolchain resolution (cached value first, then locate, then
persist) but over directories and version strings. The Xcode checks are
required: when nothing is found they print how to set the value by hand and
raise CheckAborted. The architecture check always succeeds.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tcr.core.errors import CheckAborted
from tcr.output.console import Style
from tcr.platform.detection import native_arch
from tcr.sdk.xcode import find_xcode_dir, find_xcode_sdkvers

if TYPE_CHECKING:
    from tcr.checks.runner import CheckSession

__all__ = [
    "SdkLocators",
    "check_arch",
    "check_xcode_dir",
    "check_xcode_sdkver",
    "remediation_for",
]


@dataclass(frozen=True, slots=True)
class SdkLocators:
    """External locators used by the Xcode checks.

    Attributes:
        find_xcode_dir: () -> app directory or None
        find_xcode_sdkvers: (xcode_dir, plat, arch) -> versions, newest first
    """

    find_xcode_dir: Callable[[], str | None] = find_xcode_dir
    find_xcode_sdkvers: Callable[[str | None, str | None, str | None], list[str]] = (
        find_xcode_sdkvers
    )


def remediation_for(key: str) -> tuple[str, ...]:
    """Commands that set `key` by hand, project scope first."""
    return (
        f"tcr set {key} <value>",
        f"tcr set --global {key} <value>",
    )


def _abort(session: CheckSession, key: str) -> CheckAborted:
    commands = remediation_for(key)
    console = session.console
    console.print("please run:", Style.HEADER)
    console.print(f"    - {commands[0]}", Style.ERROR)
    console.print(f"or  - {commands[1]}", Style.ERROR)
    return CheckAborted(key, commands)


def check_arch(session: CheckSession, default: str | None = None) -> None:
    """Set `arch` to `default` or the host architecture when unset."""
    store = session.store
    if store.get_str("arch") is not None:
        return

    store.set("arch", default or native_arch())
    session.console.checking("the architecture", str(store.get_str("arch")), ok=True)


def check_xcode_dir(session: CheckSession) -> None:
    """Resolve `xcode_dir`.

    Raises:
        CheckAborted: If no Xcode application directory can be found.
    """
    store = session.store
    if store.get_str("xcode_dir") is not None:
        return

    xcode_dir = session.locators.find_xcode_dir()
    if not xcode_dir:
        session.console.checking("the Xcode application directory", "no", ok=False)
        raise _abort(session, "xcode_dir")

    store.set("xcode_dir", xcode_dir)
    session.console.checking("the Xcode application directory", xcode_dir, ok=True)


def check_xcode_sdkver(session: CheckSession) -> None:
    """Resolve `xcode_sdkver` and seed `target_minver` from it.

    `target_minver` is only written when unset, whether the SDK version was
    just found or already stored.

    Raises:
        CheckAborted: If no SDK version can be found for the platform.
    """
    store = session.store
    plat = store.get_str("plat")

    sdkver = store.get_str("xcode_sdkver")
    if sdkver is None:
        versions = session.locators.find_xcode_sdkvers(
            store.get_str("xcode_dir"), plat, store.get_str("arch")
        )
        sdkver = versions[0] if versions else None
        if sdkver is None:
            session.console.checking(f"the Xcode SDK version for {plat}", "no", ok=False)
            raise _abort(session, "xcode_sdkver")

        store.set("xcode_sdkver", sdkver)
        session.console.checking(f"the Xcode SDK version for {plat}", sdkver, ok=True)

    if store.get_str("target_minver") is None:
        store.set("target_minver", sdkver)
