"""Tests for command routing and the error boundary (cli/app.py).

``main`` is called with an explicit argv; ``cli`` is driven through a
patched ``sys.argv`` so the error boundary's exit codes can be checked.
"""

from __future__ import annotations

import sys

import pytest

from problem_solving.cli import exit_codes
from problem_solving.cli.app import _parse_overrides, cli, main, number
from problem_solving.exceptions import InvalidArgumentError, InvalidFieldError

BOB = ["--name", "Bob", "--age", "25", "--email", "b@x.com"]


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------

class TestRouting:
    def test_no_args_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == exit_codes.SUCCESS
        assert "problem-solving" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0


# ---------------------------------------------------------------------------
# area
# ---------------------------------------------------------------------------

class TestAreaCommand:
    def test_circle(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["area", "--radius", "2"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "12.57"

    def test_rectangle(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["area", "--width", "3", "--height", "4"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "12"

    def test_fractional_dimensions(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["area", "--width", "1.5", "--height", "2"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "3.0"

    def test_non_numeric_dimension_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["area", "--radius", "wide"])
        assert exc_info.value.code == 2

    def test_no_match_is_not_an_error(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["area", "--width", "3"]) == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No matching shape" in captured.err


# ---------------------------------------------------------------------------
# profile / get
# ---------------------------------------------------------------------------

class TestProfileCommand:
    def test_override_rendered(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["profile", *BOB, "--set", "age=26"])
        assert code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "Bob" in out
        assert "26" in out
        assert "b@x.com" in out

    def test_unknown_field_raises(self) -> None:
        with pytest.raises(InvalidFieldError):
            main(["profile", *BOB, "--set", "phone=555"])


class TestGetCommand:
    def test_prints_field(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["get", "email", *BOB]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "b@x.com"

    def test_unknown_field_raises(self) -> None:
        with pytest.raises(InvalidFieldError):
            main(["get", "phone", *BOB])


# ---------------------------------------------------------------------------
# Bracketed user text
# ---------------------------------------------------------------------------

class TestBracketedText:
    @pytest.mark.parametrize("name", ["[bold]Bob", "[/x]", "Alice [admin]"])
    def test_get_prints_value_verbatim(
        self, name: str, capsys: pytest.CaptureFixture[str],
    ) -> None:
        argv = ["get", "name", "--name", name, "--age", "25", "--email", "b@x.com"]
        assert main(argv) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == name

    def test_profile_table_keeps_brackets(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        argv = ["profile", "--name", "Alice [admin]", "--age", "30", "--email", "a@x.com"]
        assert main(argv) == exit_codes.SUCCESS
        assert "Alice [admin]" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# number
# ---------------------------------------------------------------------------

class TestNumber:
    def test_whole_number_stays_int(self) -> None:
        assert number("3") == 3
        assert isinstance(number("3"), int)

    def test_fraction_is_float(self) -> None:
        assert number("2.5") == 2.5

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            number("wide")


# ---------------------------------------------------------------------------
# _parse_overrides
# ---------------------------------------------------------------------------

class TestParseOverrides:
    def test_age_converted_to_int(self) -> None:
        assert _parse_overrides(["age=26"]) == {"age": 26}

    def test_value_may_contain_equals(self) -> None:
        assert _parse_overrides(["name=a=b"]) == {"name": "a=b"}

    def test_last_occurrence_wins(self) -> None:
        assert _parse_overrides(["name=A", "name=B"]) == {"name": "B"}

    @pytest.mark.parametrize("item", ["age", "=26", ""])
    def test_malformed(self, item: str) -> None:
        with pytest.raises(InvalidArgumentError):
            _parse_overrides([item])

    def test_non_integer_age(self) -> None:
        with pytest.raises(InvalidArgumentError, match="integer"):
            _parse_overrides(["age=old"])


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run(self, monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
        monkeypatch.setattr(sys, "argv", ["problem-solving", *argv])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return int(exc_info.value.code)

    def test_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run(monkeypatch, "area", "--radius", "1") == exit_codes.SUCCESS

    def test_known_error_shows_hint(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run(monkeypatch, "profile", *BOB, "--set", "phone=555")
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Known fields: name, age, email" in err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from problem_solving.cli import app as app_module

        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        assert self._run(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from problem_solving.cli import app as app_module

        def _explode(argv: list[str] | None = None) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "main", _explode)
        assert self._run(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err

    def test_closing_tag_in_value_exits_cleanly(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run(
            monkeypatch,
            "get", "name", "--name", "[/x]", "--age", "25", "--email", "b@x.com",
        )
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "[/x]"

    def test_closing_tag_in_error_message(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run(monkeypatch, "get", "[/x]", *BOB)
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "no field '[/x]'" in err
        assert "Known fields: name, age, email" in err

    def test_closing_tag_in_unexpected_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from problem_solving.cli import app as app_module

        def _explode(argv: list[str] | None = None) -> int:
            raise RuntimeError("[/x] [bold]broke")

        monkeypatch.setattr(app_module, "main", _explode)
        assert self._run(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: [/x] [bold]broke" in capsys.readouterr().err
