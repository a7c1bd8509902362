"""Tests for the Dekhao CLI."""

import json

import pytest

from dekhao.cli import build_parser, main
from dekhao.cli.validation import validate_log_level, validate_path
from dekhao.cli.errors import CLIValidationError
from dekhao.errors import InputUnavailableError


pytestmark = pytest.mark.cli


def test_build_writes_generated_file(sample_file, capsys, monkeypatch):
    monkeypatch.chdir(sample_file.parent)

    main(["build", str(sample_file)])

    output = capsys.readouterr().out
    generated = (sample_file.parent / "generated.cpp").read_text(encoding="utf-8")
    assert "Tokens:" in output
    assert '[dekhao] [(] ["Hello"] [,] [x] [)] \n' in output
    assert "===== Generated C++ =====" in output
    assert "✓ Written to generated.cpp" in output
    assert '    std::cout << "Hello" << x << std::endl;\n' in generated
    assert "#include <string>\n" in generated


def test_build_reports_skipped_lines(sample_file, capsys, monkeypatch):
    monkeypatch.chdir(sample_file.parent)

    main(["build", str(sample_file), "--quiet"])

    output = capsys.readouterr().out
    assert "Tokens:" not in output
    assert "Generated C++" not in output
    assert "⚠ hello.dk:6: skipped (line does not start with a statement keyword): something else here" in output
    assert "⚠ hello.dk:7: skipped (print keyword is not followed by '('):" in output


def test_build_custom_output(sample_file, tmp_path, capsys):
    target = tmp_path / "out" / "program.cpp"

    main(["--workspace", str(tmp_path), "build", str(sample_file), "-o", str(target), "--no-tokens"])

    assert target.exists()
    assert "Tokens:" not in capsys.readouterr().out


def test_bare_invocation_builds_configured_input(tmp_path, capsys, monkeypatch):
    (tmp_path / "input.txt").write_text("dekhao(1)\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    main([])

    assert (tmp_path / "generated.cpp").read_text(encoding="utf-8").count("std::cout << 1 << std::endl;") == 1


def test_legacy_invocation_with_path(sample_file, capsys, monkeypatch):
    monkeypatch.chdir(sample_file.parent)

    main([sample_file.name, "-q"])

    captured = capsys.readouterr()
    assert "legacy invocation" in captured.err
    assert (sample_file.parent / "generated.cpp").exists()


def test_legacy_invocation_after_global_options(sample_file, capsys, monkeypatch):
    monkeypatch.chdir(sample_file.parent)

    main(["--verbose", "--log-level", "error", sample_file.name, "-q"])

    assert "legacy invocation" in capsys.readouterr().err
    assert (sample_file.parent / "generated.cpp").exists()


def test_global_options_alone_build_configured_input(tmp_path, capsys):
    (tmp_path / "input.txt").write_text("integer a te 1\n", encoding="utf-8")

    main(["--verbose", f"--workspace={tmp_path}"])

    assert "int a = 1;" in (tmp_path / "generated.cpp").read_text(encoding="utf-8")
    assert "usage:" not in capsys.readouterr().out


def test_missing_input_exits_non_zero(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--workspace", str(tmp_path), "build", "missing.dk"])

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Cannot open" in err
    assert "DEKHAO_INPUT_UNAVAILABLE" in err


def test_empty_input_exits_non_zero(tmp_path, capsys):
    (tmp_path / "empty.dk").write_text("", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--workspace", str(tmp_path), "build", "empty.dk"])

    assert exc_info.value.code == 1
    assert "DEKHAO_EMPTY_INPUT" in capsys.readouterr().err
    assert not (tmp_path / "generated.cpp").exists()


def test_reraise_env_flag(tmp_path, monkeypatch):
    monkeypatch.setenv("DEKHAO_RERAISE", "1")

    with pytest.raises(InputUnavailableError):
        main(["--workspace", str(tmp_path), "build", "missing.dk"])


def test_tokens_command(tmp_path, capsys):
    source = tmp_path / "t.dk"
    source.write_text('dekhao("Hi")\n\ninteger a te 1\n', encoding="utf-8")

    main(["tokens", str(source)])

    assert capsys.readouterr().out == '[dekhao] [(] ["Hi"] [)] \n\n[integer] [a] [te] [1] \n'


def test_check_command_json(sample_file, capsys):
    main(["check", str(sample_file), "--json"])

    report = json.loads(capsys.readouterr().out)
    assert [entry["line"] for entry in report["skipped"]] == [6, 7]
    assert report["skipped"][1]["reason"] == "malformed_call"


def test_check_command_table(tmp_path, capsys, monkeypatch):
    (tmp_path / "typo.dk").write_text("dekao(1)\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    main(["check", "typo.dk"])

    output = capsys.readouterr().out
    assert "Skipped lines" in output
    assert "dekhao" in output


def test_check_command_clean_file(tmp_path, capsys):
    source = tmp_path / "clean.dk"
    source.write_text("dekhao(1)\n", encoding="utf-8")

    main(["check", str(source)])

    assert "No skipped lines" in capsys.readouterr().out


def test_config_file_disables_token_dump(tmp_path, capsys):
    (tmp_path / ".dekhaorc").write_text(json.dumps({"defaults": {"show_tokens": False}}), encoding="utf-8")
    (tmp_path / "input.txt").write_text("integer a te 1\n", encoding="utf-8")

    main(["--workspace", str(tmp_path), "build"])

    output = capsys.readouterr().out
    assert "Tokens:" not in output
    assert "int a = 1;" in output


def test_invalid_config_exits_non_zero(tmp_path, capsys):
    (tmp_path / ".dekhaorc").write_text("{broken", encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["--workspace", str(tmp_path), "build"])

    assert "CLI_CONFIG_ERROR" in capsys.readouterr().err


def test_help_without_command(capsys):
    main(["help"])

    assert "usage: dekhao" in capsys.readouterr().out


def test_parser_registers_subcommands():
    parser = build_parser()
    args = parser.parse_args(["check", "a.dk", "--json"])

    assert args.command == "check"
    assert args.json is True


def test_validate_path():
    assert validate_path(None, allow_none=True) is None
    with pytest.raises(CLIValidationError):
        validate_path(None)
    with pytest.raises(CLIValidationError):
        validate_path(42)
    with pytest.raises(CLIValidationError):
        validate_path("  ")


def test_validate_log_level():
    assert validate_log_level(None) == "warning"
    assert validate_log_level("DEBUG") == "debug"
    with pytest.raises(CLIValidationError):
        validate_log_level("loud")
