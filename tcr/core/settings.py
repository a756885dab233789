"""Project settings loaded from tcr.toml.

Settings are optional. They seed store defaults and add user candidates
ahead of the built-in ones:

    [defaults]
    plat = "linux"
    cross = "arm-linux-gnueabihf-"

    [[toolchain.cc]]
    name = "clang-18"
    description = "the c compiler"
    validate = ["--version"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_obj_list, as_str_dict, get_raw_str, get_str, get_str_list, get_table

__all__ = [
    "CandidateSetting",
    "Settings",
    "SettingsError",
    "load_settings",
    "load_settings_or_default",
]

DEFAULT_DESCRIPTION = "the tool"


@dataclass(frozen=True, slots=True)
class SettingsError:
    """Error when tcr.toml cannot be loaded or parsed."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} ({self.path})"


@dataclass(frozen=True, slots=True)
class CandidateSetting:
    """A user-declared candidate.

    Attributes:
        name: Tool name
        description: Role shown in traces
        cross: Cross prefix, None to inherit the store/built-in prefix
        validate: Arguments for a command validator, None for no validator
    """

    name: str
    description: str = DEFAULT_DESCRIPTION
    cross: str | None = None
    validate: tuple[str, ...] | None = None


def _empty_defaults() -> dict[str, str]:
    return {}


def _empty_toolchains() -> dict[str, tuple[CandidateSetting, ...]]:
    return {}


@dataclass(frozen=True, slots=True)
class Settings:
    """Parsed tcr.toml."""

    defaults: dict[str, str] = field(default_factory=_empty_defaults)
    toolchains: dict[str, tuple[CandidateSetting, ...]] = field(default_factory=_empty_toolchains)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Settings:
        """Build Settings from parsed TOML.

        Raises:
            ValueError: On entries with the wrong shape.
        """
        defaults_table: StrDict = get_table(data, "defaults") or {}
        defaults: dict[str, str] = {}
        for key, value in defaults_table.items():
            if not isinstance(value, str):
                raise ValueError(f"defaults.{key} must be a string")
            defaults[key] = value

        toolchain_table: StrDict = get_table(data, "toolchain") or {}
        toolchains: dict[str, tuple[CandidateSetting, ...]] = {}
        for toolkind, entries_obj in toolchain_table.items():
            entries = as_obj_list(entries_obj)
            if entries is None:
                raise ValueError(f"toolchain.{toolkind} must be an array of tables")
            toolchains[toolkind] = tuple(_candidate(toolkind, entry) for entry in entries)

        return cls(defaults=defaults, toolchains=toolchains)


def _candidate(toolkind: str, entry_obj: object) -> CandidateSetting:
    entry = as_str_dict(entry_obj)
    if entry is None:
        raise ValueError(f"toolchain.{toolkind} entries must be tables")

    name = get_str(entry, "name")
    if name is None:
        raise ValueError(f"toolchain.{toolkind} entry is missing 'name'")

    validate: tuple[str, ...] | None = None
    if "validate" in entry:
        args = get_str_list(entry, "validate")
        if args is None:
            raise ValueError(f"toolchain.{toolkind}.validate must be a list of strings")
        validate = tuple(args)

    return CandidateSetting(
        name=name,
        description=get_str(entry, "description") or DEFAULT_DESCRIPTION,
        cross=get_raw_str(entry, "cross"),
        validate=validate,
    )


def load_settings(path: Path) -> Result[Settings, SettingsError]:
    """Load tcr.toml.

    Args:
        path: Settings file

    Returns:
        Ok(Settings) on success, Err(SettingsError) on failure
    """
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(SettingsError("Settings file not found", path))
    except PermissionError:
        return Err(SettingsError("Permission denied reading settings", path))
    except tomllib.TOMLDecodeError as e:
        return Err(SettingsError(f"Invalid TOML syntax: {e}", path))
    except UnicodeDecodeError as e:
        return Err(SettingsError(f"Error reading settings: {e}", path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(SettingsError("Settings root must be a TOML table", path))

    try:
        return Ok(Settings.from_dict(data))
    except ValueError as e:
        return Err(SettingsError(f"Invalid settings: {e}", path))


def load_settings_or_default(path: Path) -> Result[Settings, SettingsError]:
    """Like load_settings, but a missing file yields empty Settings."""
    if not path.exists():
        return Ok(Settings())
    return load_settings(path)
