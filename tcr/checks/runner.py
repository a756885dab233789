"""Check session and checker driver.

A configuration pass is a list of checkers run in order against one
session. Entries are either a checker or a tuple of a checker and its extra
arguments:

    run_checks(session, [
        (check_arch, "x86_64"),
        check_xcode_dir,
        ToolchainCheck("cc", StaticTable(table)),
    ])
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tcr.checks.platform import SdkLocators
from tcr.toolchain.resolver import ToolchainResolver

if TYPE_CHECKING:
    from tcr.core.store import ConfigStore
    from tcr.output.console import ConsoleProtocol
    from tcr.toolchain.candidate import ToolchainSource
    from tcr.toolchain.probe import Prober

__all__ = ["CheckSession", "Checker", "CheckerEntry", "ToolchainCheck", "run_checks"]


@dataclass(frozen=True, slots=True)
class CheckSession:
    """Everything one configuration pass works with.

    Attributes:
        store: Config store read and written by the checks
        console: Output sink
        resolver: Toolchain resolver sharing the console and verbosity
        verbose: Print per-candidate toolchain traces
        locators: Xcode locators (replaced in tests)
    """

    store: ConfigStore
    console: ConsoleProtocol
    resolver: ToolchainResolver
    verbose: bool = False
    locators: SdkLocators = field(default_factory=SdkLocators)

    @classmethod
    def create(
        cls,
        store: ConfigStore,
        console: ConsoleProtocol,
        *,
        verbose: bool = False,
        prober: Prober | None = None,
        environ: Mapping[str, str] | None = None,
        locators: SdkLocators | None = None,
    ) -> CheckSession:
        resolver = ToolchainResolver(
            console,
            verbose=verbose,
            prober=prober,
            environ=environ if environ is not None else os.environ,
        )
        return cls(
            store=store,
            console=console,
            resolver=resolver,
            verbose=verbose,
            locators=locators or SdkLocators(),
        )


Checker = Callable[..., object]
CheckerEntry = Checker | tuple[object, ...]


@dataclass(frozen=True, slots=True)
class ToolchainCheck:
    """Checker resolving one tool kind from a toolchain source."""

    toolkind: str
    source: ToolchainSource

    def __call__(self, session: CheckSession) -> str | None:
        return session.resolver.check(session.store, self.toolkind, self.source)


def _split_entry(entry: CheckerEntry) -> tuple[Checker, tuple[object, ...]]:
    if isinstance(entry, tuple):
        if not entry or not callable(entry[0]):
            raise TypeError(f"checker tuple must start with a callable: {entry!r}")
        return entry[0], entry[1:]
    return entry, ()


def run_checks(session: CheckSession, checkers: Sequence[CheckerEntry]) -> None:
    """Run checkers in order, then save the store.

    CheckAborted from any checker propagates before the final save.
    """
    for entry in checkers:
        checker, args = _split_entry(entry)
        checker(session, *args)
    session.store.save()
