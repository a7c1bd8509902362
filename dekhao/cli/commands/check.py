"""
Check command implementation.

Transpiles a source file without writing anything and reports the lines
that produced no code, with the reason each one was skipped.
"""

import argparse

from dekhao.pipeline import transpile_file

from ..context import get_cli_context
from ..errors import handle_cli_exception
from ..output import render_skip_report
from ..validation import validate_path


def cmd_check(args: argparse.Namespace) -> None:
    """
    Handle the 'check' subcommand.

    Skipped lines are not errors, so the command exits with status 0 even
    when it reports some. Only an unreadable or empty input fails.
    """
    ctx = get_cli_context(args)
    try:
        source_path = ctx.config.resolve_input(str(validate_path(args.file)))
        result = transpile_file(source_path, indent=ctx.config.defaults.indent)
        render_skip_report(
            result.skipped,
            path=str(args.file),
            json_output=bool(getattr(args, "json", False)),
        )
    except Exception as exc:
        handle_cli_exception(exc, verbose=ctx.verbose)
