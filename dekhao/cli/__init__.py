"""
Dekhao CLI entry point.

Dispatches the ``build``, ``tokens`` and ``check`` subcommands. A bare
invocation (``dekhao``) builds the configured input file, and
``dekhao hello.dk`` is accepted as shorthand for ``dekhao build hello.dk``.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dekhao import __version__
from dekhao.lang import LANGUAGE_VERSION

from .commands import cmd_build, cmd_check, cmd_tokens
from .context import CLIContext, build_cli_context
from .errors import handle_cli_exception
from .validation import validate_log_level


VALID_COMMANDS = {'build', 'tokens', 'check', 'help'}


def _configure_logging(level_name: Optional[str]) -> None:
    """Configure the ``dekhao`` logger from the CLI flag or DEKHAO_LOG_LEVEL."""
    log_level = validate_log_level(level_name or os.getenv('DEKHAO_LOG_LEVEL', 'warning'))

    level_map = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }
    numeric_level = level_map.get(log_level, logging.WARNING)

    package_logger = logging.getLogger('dekhao')
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        package_logger.propagate = False


_GLOBAL_VALUE_OPTIONS = {'--config', '--workspace', '--log-level'}
_GLOBAL_FLAGS = {'--verbose'}


def _command_index(argv: List[str]) -> int:
    """Index of the first argument after the leading global options."""
    index = 0
    while index < len(argv):
        arg = argv[index]
        if arg in _GLOBAL_VALUE_OPTIONS:
            index += 2
        elif arg in _GLOBAL_FLAGS or arg.split('=', 1)[0] in _GLOBAL_VALUE_OPTIONS:
            index += 1
        else:
            break
    return index


def _normalize_argv(argv: List[str]) -> List[str]:
    """Rewrite a bare invocation or a bare source path into a 'build' command."""
    index = _command_index(argv)
    if index > len(argv):
        # A global option is missing its value; let argparse report it
        return argv
    if index == len(argv):
        return argv + ['build']
    first = argv[index]
    if not first.startswith('-') and first not in VALID_COMMANDS and Path(first).exists():
        print(
            "Note: Using legacy invocation. Consider using 'dekhao build' instead.",
            file=sys.stderr
        )
        return argv[:index] + ['build'] + argv[index:]
    return argv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dekhao',
        description='Transpile Dekhao teaching-language source into C++.',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'dekhao {__version__} (language {LANGUAGE_VERSION})',
    )
    parser.add_argument('--config', help='Path to a dekhao.toml or .dekhaorc file')
    parser.add_argument('--workspace', help='Workspace root (defaults to the current directory)')
    parser.add_argument(
        '--log-level',
        dest='log_level',
        help='Logging level: debug, info, warning or error (default: warning)',
    )
    parser.add_argument('--verbose', action='store_true', help='Show tracebacks on errors')

    subparsers = parser.add_subparsers(dest='command', title='commands')

    build_parser_ = subparsers.add_parser('build', help='Transpile a source file to C++')
    build_parser_.add_argument('file', nargs='?', help='Source file (defaults to the configured input)')
    build_parser_.add_argument('-o', '--output', help='Output file (default: generated.cpp next to the input)')
    build_parser_.add_argument('--no-tokens', dest='no_tokens', action='store_true', help='Do not print the token dump')
    build_parser_.add_argument('-q', '--quiet', action='store_true', help='Print neither tokens nor generated code')
    build_parser_.set_defaults(func=cmd_build)

    tokens_parser = subparsers.add_parser('tokens', help='Print the token dump of a source file')
    tokens_parser.add_argument('file', help='Source file')
    tokens_parser.set_defaults(func=cmd_tokens)

    check_parser = subparsers.add_parser('check', help='Report source lines that produce no code')
    check_parser.add_argument('file', help='Source file')
    check_parser.add_argument('--json', action='store_true', help='Emit the report as JSON')
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['build', 'hello.dk'])  # doctest: +SKIP
        >>> main(['check', 'hello.dk', '--json'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = _normalize_argv(list(argv))

    parser = build_parser()
    index = _command_index(argv)
    if index < len(argv) and argv[index] == 'help':
        parser.print_help()
        return

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return

    try:
        _configure_logging(args.log_level)
        args.cli_context = build_cli_context(args.workspace, args.config, verbose=args.verbose)
    except Exception as exc:
        handle_cli_exception(exc, verbose=args.verbose)

    args.func(args)


__all__ = ["main", "build_parser", "CLIContext"]
