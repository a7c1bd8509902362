"""
Build command implementation.

This module handles the 'build' subcommand which transpiles a Dekhao
source file into a C++ program.
"""

import argparse
from pathlib import Path

from dekhao.pipeline import transpile_file, write_output

from ..context import get_cli_context
from ..errors import handle_cli_exception
from ..output import print_generated_code, print_skipped_lines, print_success, print_token_dump
from ..validation import validate_path


def cmd_build(args: argparse.Namespace) -> None:
    """
    Handle the 'build' subcommand.

    This command:
    1. Resolves the input and output paths from arguments and workspace config
    2. Tokenizes the input and prints the token dump (unless disabled)
    3. Transpiles to C++ and echoes the generated code (unless disabled)
    4. Writes the generated code to the output file
    5. Reports every skipped source line as a warning

    Args:
        args: Parsed command-line arguments containing:
            - file: Path to the source file (optional)
            - output: Output file path (optional)
            - no_tokens: Skip the token dump (optional)
            - quiet: Skip the token dump and the code echo (optional)

    Raises:
        SystemExit: When the input cannot be read or the output cannot be written
    """
    ctx = get_cli_context(args)
    try:
        defaults = ctx.config.defaults
        explicit_input = validate_path(getattr(args, "file", None), allow_none=True)
        source_path = ctx.config.resolve_input(str(explicit_input) if explicit_input else None)

        explicit_output = validate_path(getattr(args, "output", None), allow_none=True)
        output_path = ctx.config.resolve_output(
            source_path, str(explicit_output) if explicit_output else None
        )

        quiet = bool(getattr(args, "quiet", False))
        show_tokens = defaults.show_tokens and not quiet and not getattr(args, "no_tokens", False)
        echo_code = defaults.echo_code and not quiet

        result = transpile_file(source_path, indent=defaults.indent)

        if show_tokens:
            print_token_dump(result.tokens)
        if echo_code:
            print_generated_code(result.code)

        written = write_output(result.code, output_path)
        print_success(f"Written to {_display_path(written, ctx.workspace_root)}")

        if result.skipped:
            print_skipped_lines(result.skipped, path=_display_path(source_path, ctx.workspace_root))

    except Exception as exc:
        handle_cli_exception(exc, verbose=ctx.verbose)


def _display_path(path: Path, root: Path) -> str:
    try:
        return str(path.resolve().relative_to(root))
    except ValueError:
        return str(path)
