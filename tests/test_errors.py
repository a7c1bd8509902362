import pytest

from dekhao.errors import ConfigError, DekhaoError, EmptyInputError, InputUnavailableError, OutputWriteError
from dekhao.cli.errors import CLIConfigError, CLIValidationError, format_cli_error, handle_cli_exception


def test_error_format_includes_location_code_and_hint() -> None:
    err = ConfigError("Could not read configuration", path="dekhao.toml", line=4, hint="Check the syntax.")

    assert err.format() == "Could not read configuration (dekhao.toml:4; DEKHAO_CONFIG) Hint: Check the syntax."
    assert err.path == "dekhao.toml"
    assert err.line == 4


def test_error_format_without_location() -> None:
    err = DekhaoError("Something failed")

    assert err.format() == "Something failed (DEKHAO_ERROR)"
    assert err.location.describe() is None


def test_input_unavailable_carries_path_and_reason() -> None:
    err = InputUnavailableError("x.dk", reason="No such file or directory")

    assert err.message == "Cannot open x.dk: No such file or directory"
    assert err.reason == "No such file or directory"
    assert err.format().startswith("Cannot open x.dk: No such file or directory (x.dk; DEKHAO_INPUT_UNAVAILABLE) Hint:")


def test_empty_input_message() -> None:
    err = EmptyInputError("a.dk")

    assert err.message == "No tokens (or failed to read input)"
    assert err.path == "a.dk"
    assert err.code == "DEKHAO_EMPTY_INPUT"
    assert EmptyInputError().location.describe() is None


def test_output_write_error_has_hint() -> None:
    err = OutputWriteError("out/generated.cpp", reason="Permission denied")

    assert err.message == "Could not write out/generated.cpp: Permission denied"
    assert "writable" in err.hint


def test_format_cli_error_uses_code_and_hint() -> None:
    formatted = format_cli_error(CLIValidationError("Bad file", hint="Pass a .dk file"))

    assert formatted == "Error [CLI_VALIDATION_ERROR]: Bad file\nHint: Pass a .dk file"


def test_cli_error_code_override() -> None:
    assert CLIConfigError("x").code == "CLI_CONFIG_ERROR"
    assert CLIConfigError("x", code="CLI_CONTEXT_NOT_INITIALIZED").code == "CLI_CONTEXT_NOT_INITIALIZED"


def test_format_cli_error_uses_domain_format() -> None:
    formatted = format_cli_error(EmptyInputError("a.dk"))

    assert formatted.startswith("Error: No tokens (or failed to read input) (a.dk; DEKHAO_EMPTY_INPUT)")


def test_format_cli_error_generic_exception() -> None:
    assert format_cli_error(ValueError("boom")) == "Error: ValueError: boom"


def test_format_cli_error_with_traceback() -> None:
    try:
        raise InputUnavailableError("x.dk")
    except InputUnavailableError as exc:
        formatted = format_cli_error(exc, include_traceback=True)

    assert "\n\nTraceback:\n" in formatted
    assert "InputUnavailableError" in formatted


def test_handle_cli_exception_verbose_env(monkeypatch, capsys) -> None:
    monkeypatch.setenv("DEKHAO_VERBOSE", "yes")

    with pytest.raises(SystemExit) as exc_info:
        try:
            raise EmptyInputError("a.dk")
        except EmptyInputError as exc:
            handle_cli_exception(exc)

    assert exc_info.value.code == 1
    assert "Traceback:" in capsys.readouterr().err
