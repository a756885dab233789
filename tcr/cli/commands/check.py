"""Check command - resolve the toolchain for the project."""

from __future__ import annotations

import typer

from tcr.checks.runner import CheckSession, ToolchainCheck, run_checks
from tcr.checks.tables import UnknownPlatformError, checkers_for
from tcr.cli.context import CLIContext, build_context
from tcr.core.errors import CheckAborted, ErrorCode
from tcr.output.console import Style
from tcr.platform.detection import detect_platform


def _seed_store(ctx: CLIContext, overrides: dict[str, str | None]) -> None:
    """Command line values win, then tcr.toml defaults for unset keys."""
    store = ctx.store
    for key, value in overrides.items():
        if value is not None:
            store.set(key, value)
    for key, value in ctx.settings.defaults.items():
        if store.get(key) is None:
            store.set(key, value)
    if store.get_str("plat") is None:
        store.set("plat", detect_platform().plat)


def check(
    kinds: list[str] | None = typer.Argument(None, help="Tool kinds to resolve (default: all)"),
    plat: str | None = typer.Option(None, "--plat", "-p", help="Target platform"),
    arch: str | None = typer.Option(None, "--arch", "-a", help="Target architecture"),
    cross: str | None = typer.Option(None, "--cross", help="Cross toolchain prefix, e.g. arm-linux-gnueabi-"),
    sdk: str | None = typer.Option(None, "--sdk", help="Cross SDK root (tools looked up in <sdk>/bin)"),
    toolchains: str | None = typer.Option(None, "--toolchains", help="Toolchain bin directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace every candidate"),
    strict: bool = typer.Option(False, "--strict", help="Fail if any tool kind stays unresolved"),
) -> None:
    """Resolve tool paths and store them for later runs."""
    ctx = build_context()
    console = ctx.console
    store = ctx.store

    _seed_store(
        ctx,
        {"plat": plat, "arch": arch, "cross": cross, "sdk": sdk, "toolchains": toolchains},
    )
    target = store.get_str("plat") or detect_platform().plat

    try:
        checkers = checkers_for(
            target,
            ctx.settings,
            toolkinds=tuple(kinds) if kinds else None,
        )
    except UnknownPlatformError as e:
        console.error(str(e))
        raise typer.Exit(code=int(ErrorCode.USER_ERROR)) from e

    session = CheckSession.create(store, console, verbose=verbose)
    try:
        run_checks(session, checkers)
    except CheckAborted as e:
        console.error(str(e))
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR)) from e
    except OSError as e:
        console.error(f"cannot save store: {e}")
        raise typer.Exit(code=int(ErrorCode.IO_ERROR)) from e

    resolved_kinds = [c.toolkind for c in checkers if isinstance(c, ToolchainCheck)]
    missing = [kind for kind in resolved_kinds if store.get_str(kind) is None]

    if not verbose:
        for kind in resolved_kinds:
            value = store.get_str(kind)
            if value is not None:
                console.print(f"{kind}: {value}", Style.SUCCESS)
            else:
                console.print(f"{kind}: not found", Style.WARNING)

    if missing:
        console.warning(f"unresolved: {', '.join(missing)}")
        if strict:
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
