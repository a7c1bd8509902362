"""
CLI command modules.

Each command module handles a specific CLI subcommand (build, tokens, check).
"""

from .build import cmd_build
from .check import cmd_check
from .tokens import cmd_tokens

__all__ = ["cmd_build", "cmd_check", "cmd_tokens"]
