"""Tests for tcr.core.result module."""

from __future__ import annotations

import pytest

from tcr.core.result import Err, Ok, Result, is_err, is_ok


def _parse_version(text: str) -> Result[tuple[int, ...], str]:
    try:
        return Ok(tuple(int(p) for p in text.split(".")))
    except ValueError:
        return Err(f"not a version: {text}")


class TestOk:
    def test_value(self) -> None:
        result = Ok("/usr/bin/gcc")
        assert result.is_ok() is True
        assert result.is_err() is False
        assert result.unwrap() == "/usr/bin/gcc"
        assert result.unwrap_or("fallback") == "/usr/bin/gcc"

    def test_map(self) -> None:
        assert Ok("14.2").map(lambda v: v.split(".")) == Ok(["14", "2"])

    def test_map_err_is_noop(self) -> None:
        ok: Ok[int] = Ok(1)
        assert ok.map_err(str) == ok

    def test_repr(self) -> None:
        assert repr(Ok("x")) == "Ok('x')"


class TestErr:
    def test_error(self) -> None:
        result = Err("missing")
        assert result.is_ok() is False
        assert result.is_err() is True
        assert result.unwrap_or(False) is False

    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="missing"):
            Err("missing").unwrap()

    def test_map_is_noop(self) -> None:
        err: Err[str] = Err("missing")
        assert err.map(lambda v: v) == err

    def test_map_err(self) -> None:
        assert Err("missing").map_err(str.upper) == Err("MISSING")


class TestGuards:
    def test_is_ok(self) -> None:
        assert is_ok(_parse_version("14.2")) is True
        assert is_ok(_parse_version("latest")) is False

    def test_is_err(self) -> None:
        assert is_err(_parse_version("latest")) is True

    def test_match(self) -> None:
        match _parse_version("17.0.1"):
            case Ok(value):
                assert value == (17, 0, 1)
            case Err(error):
                pytest.fail(error)
