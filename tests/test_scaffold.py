"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from manifest_tool import __version__
from manifest_tool.cli import exit_codes
from manifest_tool.cli.app import main
from manifest_tool.exceptions import (
    ConfigurationError,
    EnvironmentError,
    ManifestToolError,
    MissingFileError,
    NoInputError,
    ParseError,
    SourceReadError,
    ValidationInternalError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ParseError,
            NoInputError,
            MissingFileError,
            ValidationInternalError,
            SourceReadError,
            ConfigurationError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ManifestToolError]
    ) -> None:
        assert issubclass(exc_class, ManifestToolError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(ManifestToolError, Exception)

    def test_hint_is_stored(self) -> None:
        err = ManifestToolError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = ManifestToolError("boom")
        assert err.hint is None

    def test_parse_error_keeps_position(self) -> None:
        err = ParseError("Syntax error", origin="a.pp", line=3, column=7)
        assert (err.origin, err.line, err.column) == ("a.pp", 3, 7)

    def test_missing_file_error_without_paths(self) -> None:
        err = MissingFileError([])
        assert err.paths == ()
        assert str(err) == "One or more file(s) specified did not exist:"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "validate" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_unknown_command_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["compile"])
        assert exc_info.value.code == 2

    def test_validate_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from manifest_tool.cli import app as app_module

        seen: list[list[str]] = []
        monkeypatch.setattr(
            app_module,
            "_handle_validate",
            lambda args: seen.append(args.manifests) or exit_codes.SUCCESS,
        )
        assert main(["validate", "a.pp", "b.pp"]) == exit_codes.SUCCESS
        assert seen == [["a.pp", "b.pp"]]

    def test_dump_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from manifest_tool.cli import app as app_module

        seen: list[tuple[str | None, bool | None, bool | None]] = []
        monkeypatch.setattr(
            app_module,
            "_handle_dump",
            lambda args: seen.append((args.source, args.validate, args.headers))
            or exit_codes.SUCCESS,
        )
        assert main(["dump", "-e", "1", "--validate", "--no-headers"]) == exit_codes.SUCCESS
        assert seen == [("1", True, False)]
