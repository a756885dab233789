"""Toolchain resolution - turning a tool kind into a concrete path.

For one tool kind, candidates are tried in table order and the first one
that resolves wins; later candidates are never probed. Within a candidate:

1. Value already in the store (no probing at all)
2. Environment override, e.g. $CC for "cc", only without a cross prefix
3. Custom validator on `cross + name`
4. `cross + name` inside the toolchain directory (`toolchains` or `<sdk>/bin`)
5. `cross + name` on PATH
6. `name` on PATH

A success is written to the store under the tool kind. A miss leaves the
key unset and is not an error; callers decide what an absent tool means.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from tcr.toolchain.candidate import run_validator
from tcr.toolchain.probe import Prober

if TYPE_CHECKING:
    from tcr.core.store import ConfigStore
    from tcr.output.console import ConsoleProtocol
    from tcr.toolchain.candidate import Candidate, ToolchainSource

__all__ = ["ToolchainResolver", "env_hint_name", "toolchain_dir"]


def env_hint_name(toolkind: str) -> str | None:
    """Environment variable consulted for a tool kind.

    Upper-cased, truncated at the first hyphen: "cc" -> "CC",
    "c-compiler" -> "C". A kind starting with a hyphen has no hint.
    """
    head = toolkind.upper().split("-", 1)[0].strip()
    return head or None


def toolchain_dir(store: ConfigStore) -> str | None:
    """Directory holding the cross toolchain binaries, if known.

    An explicit `toolchains` value wins; otherwise `<sdk>/bin`.
    """
    toolchains = store.get_str("toolchains")
    if toolchains is not None:
        return toolchains
    sdk = store.get_str("sdk")
    if sdk is not None:
        return str(Path(sdk) / "bin")
    return None


class ToolchainResolver:
    """Resolves tool kinds against a store.

    Usage:
        resolver = ToolchainResolver(console, verbose=True)
        path = resolver.check(store, "cc", StaticTable(table))
    """

    def __init__(
        self,
        console: ConsoleProtocol,
        *,
        verbose: bool = False,
        prober: Prober | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            console: Sink for the per-candidate trace lines
            verbose: Print trace lines (never changes the outcome)
            prober: Probe primitive; a fresh PATH prober if None
            environ: Environment for overrides; os.environ if None
        """
        self._console = console
        self._verbose = verbose
        self._prober = prober or Prober()
        self._environ = environ if environ is not None else os.environ

    @property
    def prober(self) -> Prober:
        return self._prober

    def check(self, store: ConfigStore, toolkind: str, source: ToolchainSource) -> str | None:
        """Resolve `toolkind`, persist it and flush the store.

        Args:
            store: Session store, read for the cache and written on success
            toolkind: Kind to resolve (e.g. "cc")
            source: Table (or table provider) listing the candidates

        Returns:
            The resolved path, or None if no candidate resolved
        """
        table = source.load(store)

        toolpath: str | None = None
        for candidate in table.candidates(toolkind):
            toolpath = self._check_candidate(store, toolkind, candidate)
            if toolpath:
                break

        store.save()
        return toolpath

    def _check_candidate(self, store: ConfigStore, toolkind: str, candidate: Candidate) -> str | None:
        cached = store.get_str(toolkind)
        if cached is not None:
            return cached

        cross = self._cross_prefix(store, candidate)
        prefixed = candidate.prefixed(cross)

        toolpath: str | None = None
        if not cross.strip():
            toolpath = self._from_environment(toolkind)

        if toolpath is None and candidate.validate is not None:
            if run_validator(candidate.validate, prefixed).unwrap_or(False):
                toolpath = prefixed

        if toolpath is None:
            directory = toolchain_dir(store)
            if directory is not None:
                toolpath = self._prober.probe(prefixed, directory)

        if toolpath is None:
            toolpath = self._prober.probe(prefixed)

        if toolpath is None:
            toolpath = self._prober.probe(candidate.name)

        if toolpath is not None:
            store.set(toolkind, toolpath)

        self._trace(toolkind, candidate, toolpath)
        return toolpath

    def _cross_prefix(self, store: ConfigStore, candidate: Candidate) -> str:
        # A configured prefix wins even when blank: "" means native tools
        configured = store.get("cross")
        if isinstance(configured, str):
            return configured
        return candidate.cross or ""

    def _from_environment(self, toolkind: str) -> str | None:
        env_name = env_hint_name(toolkind)
        if env_name is None:
            return None
        value = self._environ.get(env_name, "").strip()
        if not value:
            return None
        return self._prober.probe(value)

    def _trace(self, toolkind: str, candidate: Candidate, toolpath: str | None) -> None:
        if not self._verbose:
            return
        if toolpath is not None:
            self._console.checking(
                f"{candidate.description} ({toolkind})",
                os.path.basename(toolpath),
                ok=True,
            )
        else:
            self._console.checking(
                f"{candidate.description} ({toolkind}: {candidate.name})",
                "no",
                ok=False,
            )
