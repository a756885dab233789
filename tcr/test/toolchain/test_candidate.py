"""Tests for tcr.toolchain.candidate - candidates, tables and validators."""

from __future__ import annotations

import pytest

from tcr.core.result import Err, Ok, Result
from tcr.core.store import ConfigStore
from tcr.platform.process import ProcessError
from tcr.toolchain import candidate as candidate_mod
from tcr.toolchain.candidate import (
    Candidate,
    CommandValidator,
    LazyTable,
    StaticTable,
    ToolchainTable,
    run_validator,
)


class TestCandidate:
    def test_prefixed(self) -> None:
        c = Candidate(name="gcc", description="the c compiler", cross="arm-linux-gnueabi-")
        assert c.prefixed("arm-linux-gnueabi-") == "arm-linux-gnueabi-gcc"
        assert c.prefixed("") == "gcc"

    def test_frozen(self) -> None:
        c = Candidate(name="gcc", description="the c compiler")
        with pytest.raises(AttributeError):
            c.name = "clang"  # type: ignore[misc]

    def test_validator_not_part_of_equality(self) -> None:
        a = Candidate(name="gcc", description="d", validate=lambda s: True)
        b = Candidate(name="gcc", description="d", validate=lambda s: False)
        assert a == b


class TestToolchainTable:
    def test_insert_keeps_order(self) -> None:
        table = ToolchainTable()
        table.insert("cc", None, "clang", "the c compiler")
        table.insert("cc", None, "gcc", "the c compiler")

        assert [c.name for c in table.candidates("cc")] == ["clang", "gcc"]

    def test_insert_returns_candidate(self) -> None:
        table = ToolchainTable()
        c = table.insert("ld", "arm-", "ld", "the linker")
        assert c == Candidate(name="ld", description="the linker", cross="arm-")

    def test_unknown_kind_is_empty(self) -> None:
        assert ToolchainTable().candidates("cc") == ()

    def test_prepend(self) -> None:
        table = ToolchainTable()
        table.insert("cc", None, "gcc", "the c compiler")
        table.prepend("cc", [Candidate(name="clang-18", description="the c compiler")])

        assert [c.name for c in table.candidates("cc")] == ["clang-18", "gcc"]

    def test_kinds_and_contains(self) -> None:
        table = ToolchainTable({"cc": [Candidate(name="gcc", description="d")]})
        table.insert("ar", None, "ar", "the archiver")

        assert list(table.kinds()) == ["cc", "ar"]
        assert "cc" in table
        assert "ld" not in table
        assert len(table) == 2


class TestSources:
    def test_static_table_ignores_store(self) -> None:
        table = ToolchainTable()
        assert StaticTable(table).load(ConfigStore()) is table

    def test_lazy_table_reads_store(self) -> None:
        def provider(store: ConfigStore) -> ToolchainTable:
            table = ToolchainTable()
            table.insert("cc", store.get_str("cross"), "gcc", "the c compiler")
            return table

        loaded = LazyTable(provider).load(ConfigStore(values={"cross": "arm-"}))

        assert loaded.candidates("cc")[0].cross == "arm-"


class TestRunValidator:
    @pytest.mark.parametrize(
        ("outcome", "expected"),
        [
            (None, Ok(True)),
            (True, Ok(True)),
            (False, Ok(False)),
            (Ok(True), Ok(True)),
            (Err("old"), Err("old")),
        ],
    )
    def test_outcomes(self, outcome: object, expected: object) -> None:
        assert run_validator(lambda _: outcome, "gcc") == expected  # type: ignore[arg-type,return-value]

    def test_exception_becomes_err(self) -> None:
        def boom(candidate: str) -> bool:
            raise RuntimeError(f"{candidate} is broken")

        result = run_validator(boom, "gcc")

        assert isinstance(result, Err)
        assert "RuntimeError" in result.error
        assert "gcc is broken" in result.error

    def test_unexpected_return_is_err(self) -> None:
        result = run_validator(lambda _: "yes", "gcc")  # type: ignore[arg-type,return-value]
        assert isinstance(result, Err)


class TestCommandValidator:
    def test_accepts_on_exit_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[list[str]] = []

        def fake_run(cmd: list[str], cwd: object = None, *, timeout: float | None = None) -> Result[str, ProcessError]:
            seen.append(cmd)
            return Ok("gcc 13.2\n")

        monkeypatch.setattr(candidate_mod, "run", fake_run)

        assert CommandValidator(("-v",))("arm-gcc") == Ok(True)
        assert seen == [["arm-gcc", "-v"]]

    def test_rejects_on_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(cmd: list[str], cwd: object = None, *, timeout: float | None = None) -> Result[str, ProcessError]:
            return Err(ProcessError(tuple(cmd), -1, "No such file"))

        monkeypatch.setattr(candidate_mod, "run", fake_run)

        result = CommandValidator()("arm-gcc")

        assert isinstance(result, Err)
        assert "arm-gcc --version failed" in result.error

    def test_default_args(self) -> None:
        assert CommandValidator().args == ("--version",)
