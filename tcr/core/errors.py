"""Exit codes and the fatal check signal.

Soft misses (a tool kind nobody could resolve) are not errors at all: they
show up as an absent store key. Hard misses (SDK checks) raise
`CheckAborted`, which stops the whole configuration pass.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ErrorCode", "CheckAborted"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: User error (bad arguments, unknown key)
    - 2: Environment error (SDK not found, tool kinds unresolved)
    - 5: I/O error (store or settings file unreadable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK


class CheckAborted(Exception):
    """A required setting could not be determined.

    Raised by the SDK checks after the remediation block has been printed.
    The configuration pass must stop; nothing is saved.

    Attributes:
        key: Store key that could not be resolved (e.g. "xcode_dir")
        remediation: Commands the user can run to set the value manually
    """

    def __init__(self, key: str, remediation: tuple[str, ...] = ()) -> None:
        super().__init__(f"unable to determine {key}")
        self.key = key
        self.remediation = remediation
