"""Store commands - inspect and override resolved values."""

from __future__ import annotations

import json

import typer

from tcr.cli.context import build_context
from tcr.core.errors import ErrorCode
from tcr.output.console import Style

_GLOBAL = typer.Option(False, "--global", "-g", help="Use the per-user store")


def _format(value: object) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True)


def show(
    key: str | None = typer.Argument(None, help="Key to show (default: all)"),
    use_global: bool = _GLOBAL,
) -> None:
    """Show stored values."""
    ctx = build_context()
    store = ctx.scoped(use_global)

    if key is not None:
        value = store.get(key)
        if value is None:
            ctx.console.error(f"{key}: not set")
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        ctx.console.print(_format(value))
        return

    keys = sorted(store.keys())
    if not keys:
        ctx.console.print("(empty)", Style.DIM)
        return
    for name in keys:
        ctx.console.print(f"{name} = {_format(store.get(name))}")


def set_value(
    key: str = typer.Argument(..., help="Key, e.g. cc or xcode_dir"),
    value: str = typer.Argument(..., help="Value to store"),
    use_global: bool = _GLOBAL,
) -> None:
    """Set a value by hand; it is never re-probed."""
    ctx = build_context()
    store = ctx.scoped(use_global)
    store.set(key, value)
    store.save()
    ctx.console.success(f"{key} = {value}")


def unset(
    key: str = typer.Argument(..., help="Key to remove"),
    use_global: bool = _GLOBAL,
) -> None:
    """Remove a value so the next check probes again."""
    ctx = build_context()
    store = ctx.scoped(use_global)
    store.unset(key)
    store.save()
    ctx.console.success(f"{key} unset")


def clear(use_global: bool = _GLOBAL) -> None:
    """Remove every stored value."""
    ctx = build_context()
    store = ctx.scoped(use_global)
    store.clear()
    store.save()
    ctx.console.success("store cleared")
