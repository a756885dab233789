"""Tests for tcr.core.settings module."""

from __future__ import annotations

from pathlib import Path

import pytest

from tcr.core.result import Err, Ok
from tcr.core.settings import (
    CandidateSetting,
    Settings,
    load_settings,
    load_settings_or_default,
)


class TestSettingsFromDict:
    def test_empty(self) -> None:
        settings = Settings.from_dict({})
        assert settings.defaults == {}
        assert settings.toolchains == {}

    def test_defaults(self) -> None:
        settings = Settings.from_dict({"defaults": {"plat": "linux", "cross": ""}})
        assert settings.defaults == {"plat": "linux", "cross": ""}

    def test_non_string_default(self) -> None:
        with pytest.raises(ValueError, match="defaults.arch"):
            Settings.from_dict({"defaults": {"arch": 64}})

    def test_candidates(self) -> None:
        settings = Settings.from_dict(
            {
                "toolchain": {
                    "cc": [
                        {"name": "clang-18", "description": "the c compiler", "validate": ["--version"]},
                        {"name": "gcc", "cross": "arm-none-eabi-"},
                    ]
                }
            }
        )

        assert settings.toolchains["cc"] == (
            CandidateSetting(name="clang-18", description="the c compiler", validate=("--version",)),
            CandidateSetting(name="gcc", cross="arm-none-eabi-"),
        )

    def test_candidate_without_name(self) -> None:
        with pytest.raises(ValueError, match="missing 'name'"):
            Settings.from_dict({"toolchain": {"cc": [{"description": "x"}]}})

    def test_candidates_must_be_array(self) -> None:
        with pytest.raises(ValueError, match="array of tables"):
            Settings.from_dict({"toolchain": {"cc": {"name": "gcc"}}})

    def test_validate_must_be_strings(self) -> None:
        with pytest.raises(ValueError, match="validate"):
            Settings.from_dict({"toolchain": {"cc": [{"name": "gcc", "validate": [1]}]}})


class TestLoadSettings:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "tcr.toml"
        path.write_text(
            '[defaults]\nplat = "linux"\n\n'
            '[[toolchain.ld]]\nname = "ld.lld"\ndescription = "the linker"\n',
            encoding="utf-8",
        )

        result = load_settings(path)

        assert isinstance(result, Ok)
        assert result.value.defaults == {"plat": "linux"}
        assert result.value.toolchains["ld"][0].name == "ld.lld"

    def test_missing(self, tmp_path: Path) -> None:
        result = load_settings(tmp_path / "tcr.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "tcr.toml"
        path.write_text("[defaults\n", encoding="utf-8")

        result = load_settings(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "tcr.toml"
        path.write_text("[[toolchain.cc]]\ndescription = 'no name'\n", encoding="utf-8")

        result = load_settings(path)

        assert isinstance(result, Err)
        assert "Invalid settings" in result.error.message

    def test_or_default_missing(self, tmp_path: Path) -> None:
        result = load_settings_or_default(tmp_path / "tcr.toml")
        assert isinstance(result, Ok)
        assert result.value == Settings()
