"""Tokens command: print the token dump of a source file."""

import argparse

from dekhao.loader import read_tokens

from ..context import get_cli_context
from ..errors import handle_cli_exception
from ..output import format_token_dump
from ..validation import validate_path


def cmd_tokens(args: argparse.Namespace) -> None:
    """Print each token as ``[text]``, one source line per output line."""
    ctx = get_cli_context(args)
    try:
        source_path = ctx.config.resolve_input(str(validate_path(args.file)))
        tokens = read_tokens(source_path)
        print(format_token_dump(tokens), end="")
    except Exception as exc:
        handle_cli_exception(exc, verbose=ctx.verbose)
