"""Tests for tcr.output.console module."""

from __future__ import annotations

import pytest

from tcr.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    """Test Style enum."""

    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.ERROR) == "error"
        assert str(Style.DEFAULT) == "default"

    def test_all_styles_exist(self) -> None:
        expected = {"DEFAULT", "SUCCESS", "ERROR", "WARNING", "DIM", "HEADER"}
        assert {s.name for s in Style} == expected


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_checking_success(self) -> None:
        console = MockConsole()
        console.checking("the c compiler (cc)", "gcc", ok=True)
        assert console.outputs == [
            OutputRecord("checking for the c compiler (cc) ... gcc", Style.SUCCESS)
        ]

    def test_checking_failure(self) -> None:
        console = MockConsole()
        console.checking("the c compiler (cc: tcc)", "no", ok=False)
        assert console.outputs[0].style == Style.ERROR
        assert console.has_error()

    def test_success(self) -> None:
        console = MockConsole()
        console.success("cc = /usr/bin/gcc")
        assert console.messages == ["OK cc = /usr/bin/gcc"]
        assert console.outputs[0].style == Style.SUCCESS

    def test_error_and_warning(self) -> None:
        console = MockConsole()
        console.error("bad")
        console.warning("careful")
        assert console.text == "error: bad\nwarning: careful"

    def test_find(self) -> None:
        console = MockConsole()
        console.print("cc: /usr/bin/gcc")
        console.print("ar: /usr/bin/ar")
        assert [r.message for r in console.find("gcc")] == ["cc: /usr/bin/gcc"]

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("typed")


class TestRichConsole:
    def test_checking_renders_plain_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.checking("the linker (ld)", "/opt/[x]/ld", ok=True)

        out = capsys.readouterr().out
        assert "checking for the linker (ld) ... /opt/[x]/ld" in out

    def test_print_escapes_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("[bold]literal[/bold]", Style.WARNING)
        assert "[bold]literal[/bold]" in capsys.readouterr().out

    def test_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole(stderr=True).error("boom")
        captured = capsys.readouterr()
        assert "error: boom" in captured.err
        assert captured.out == ""
