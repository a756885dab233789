from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from tcr.core.errors import ErrorCode
from tcr.core.result import Err
from tcr.core.settings import Settings, load_settings_or_default
from tcr.core.store import ConfigStore, load_store
from tcr.output.console import ConsoleProtocol, RichConsole
from tcr.platform.paths import global_store_path, project_store_path, settings_path

PROJECT_ENV = "TCR_PROJECT_DIR"


@dataclass(frozen=True, slots=True)
class CLIContext:
    project_dir: Path
    store: ConfigStore
    global_store: ConfigStore
    settings: Settings
    console: ConsoleProtocol

    def scoped(self, use_global: bool) -> ConfigStore:
        """Store targeted by set/unset/clear."""
        return self.global_store if use_global else self.store


def project_dir() -> Path:
    env = os.environ.get(PROJECT_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd().resolve()


def build_context() -> CLIContext:
    root = project_dir()
    console = RichConsole()

    global_result = load_store(global_store_path())
    if isinstance(global_result, Err):
        typer.echo(f"error: {global_result.error}", err=True)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))
    global_store = global_result.value

    project_result = load_store(project_store_path(root), fallback=global_store)
    if isinstance(project_result, Err):
        typer.echo(f"error: {project_result.error}", err=True)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    settings_result = load_settings_or_default(settings_path(root))
    if isinstance(settings_result, Err):
        typer.echo(f"error: {settings_result.error}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        project_dir=root,
        store=project_result.value,
        global_store=global_store,
        settings=settings_result.value,
        console=console,
    )
