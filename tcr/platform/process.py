"""Subprocess execution with Result-based error handling.

Used by the SDK locators (xcode-select) and by command validators.

Usage:
    match run(["xcode-select", "-p"]):
        case Ok(stdout):
            print(stdout.strip())
        case Err(error):
            print(f"failed: {error}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from tcr.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that could not be started or exited non-zero.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 if the process never ran.
        stderr: Error output or the OS error message.
    """

    command: tuple[str, ...]
    returncode: int
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return its stdout.

    Args:
        cmd: Command and arguments.
        cwd: Working directory (current directory if None).
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(stdout) on exit 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return Err(ProcessError(tuple(cmd), -1, f"Command timed out after {timeout}s"))
    except OSError as e:
        return Err(ProcessError(tuple(cmd), -1, str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(tuple(cmd), proc.returncode, proc.stderr))
    return Ok(proc.stdout)
