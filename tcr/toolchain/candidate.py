"""Candidate definitions and toolchain tables.

A candidate is one concrete way to satisfy a tool kind: a tool name, an
optional cross prefix and an optional validator. A toolchain table maps each
tool kind to its candidates, most specific first.

Usage:
    table = ToolchainTable()
    table.insert("cc", "", "clang", "the c compiler")
    table.insert("cc", "", "gcc", "the c compiler", CommandValidator(("--version",)))
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias, Union

from tcr.core.result import Err, Ok, Result
from tcr.platform.process import run

if TYPE_CHECKING:
    from tcr.core.store import ConfigStore

__all__ = [
    "Candidate",
    "CommandValidator",
    "LazyTable",
    "StaticTable",
    "ToolchainSource",
    "ToolchainTable",
    "Validator",
    "run_validator",
]

Validator = Callable[[str], "Result[bool, str] | bool | None"]
"""Called with `cross + name`.

Returning Ok(True), True or None accepts the candidate. Ok(False), False,
Err(reason) or raising rejects it.
"""


@dataclass(frozen=True, slots=True)
class Candidate:
    """One way to satisfy a tool kind.

    Attributes:
        name: Tool name without prefix (e.g. "gcc")
        description: Human-readable role (e.g. "the c compiler")
        cross: Cross-compilation prefix (e.g. "arm-linux-gnueabi-"), None if unset
        validate: Optional validator for the prefixed name
    """

    name: str
    description: str
    cross: str | None = None
    validate: Validator | None = field(default=None, compare=False)

    def prefixed(self, cross: str) -> str:
        return f"{cross}{self.name}"


def run_validator(validate: Validator, candidate: str) -> Result[bool, str]:
    """Run a validator, turning every failure mode into a Result.

    Validators are arbitrary user code; whatever they raise means "this
    candidate did not resolve" and never escapes.
    """
    try:
        outcome = validate(candidate)
    except Exception as e:  # noqa: BLE001 - validator failure is a rejection
        return Err(f"{type(e).__name__}: {e}")

    match outcome:
        case None:
            return Ok(True)
        case bool():
            return Ok(outcome)
        case Ok() | Err():
            return outcome
    return Err(f"validator returned {outcome!r}")


@dataclass(frozen=True, slots=True)
class CommandValidator:
    """Accept a candidate if `[candidate, *args]` exits with status 0.

    Attributes:
        args: Arguments passed to the candidate (e.g. ("--version",))
        timeout: Seconds before the command is considered failed, None for no limit
    """

    args: tuple[str, ...] = ("--version",)
    timeout: float | None = None

    def __call__(self, candidate: str) -> Result[bool, str]:
        result = run([candidate, *self.args], timeout=self.timeout)
        if isinstance(result, Err):
            return Err(str(result.error))
        return Ok(True)


class ToolchainTable:
    """Ordered candidates per tool kind."""

    def __init__(self, entries: Mapping[str, Sequence[Candidate]] | None = None) -> None:
        self._entries: dict[str, list[Candidate]] = {}
        for toolkind, candidates in (entries or {}).items():
            self._entries[toolkind] = list(candidates)

    def insert(
        self,
        toolkind: str,
        cross: str | None,
        name: str,
        description: str,
        validate: Validator | None = None,
    ) -> Candidate:
        """Append a candidate for `toolkind` and return it."""
        candidate = Candidate(name=name, description=description, cross=cross, validate=validate)
        self._entries.setdefault(toolkind, []).append(candidate)
        return candidate

    def prepend(self, toolkind: str, candidates: Sequence[Candidate]) -> None:
        """Put `candidates` ahead of the existing ones for `toolkind`."""
        self._entries[toolkind] = [*candidates, *self._entries.get(toolkind, [])]

    def candidates(self, toolkind: str) -> tuple[Candidate, ...]:
        return tuple(self._entries.get(toolkind, ()))

    def kinds(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, toolkind: object) -> bool:
        return toolkind in self._entries

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(frozen=True, slots=True)
class StaticTable:
    """A table fixed before the session starts."""

    table: ToolchainTable

    def load(self, store: ConfigStore) -> ToolchainTable:
        return self.table


@dataclass(frozen=True, slots=True)
class LazyTable:
    """A table computed from the current store (e.g. from `xcode_dir`)."""

    provider: Callable[[ConfigStore], ToolchainTable]

    def load(self, store: ConfigStore) -> ToolchainTable:
        return self.provider(store)


ToolchainSource: TypeAlias = Union[StaticTable, LazyTable]
