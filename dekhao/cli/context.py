"""
CLI context management.

Provides the CLIContext dataclass shared by every command of a single
invocation, and helpers to resolve input and output paths from it.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import WorkspaceConfig, load_workspace_config
from ..errors import ConfigError
from .errors import CLIConfigError


@dataclass
class CLIContext:
    """
    Shared context resolved from workspace configuration.

    Attributes:
        workspace_root: Root directory of the workspace
        config: Parsed workspace configuration
        verbose: Whether verbose error output was requested
    """

    workspace_root: Path
    config: WorkspaceConfig
    verbose: bool = False


def build_cli_context(
    workspace: Optional[str] = None,
    config: Optional[str] = None,
    *,
    verbose: bool = False,
) -> CLIContext:
    """Load workspace configuration and wrap it in a :class:`CLIContext`."""
    workspace_root = Path(workspace).resolve() if workspace else Path.cwd().resolve()
    explicit = Path(config) if config else None
    if explicit is not None and not explicit.is_absolute():
        explicit = (Path.cwd() / explicit).resolve()
    try:
        workspace_config = load_workspace_config(workspace_root, explicit)
    except ConfigError as exc:
        raise CLIConfigError(
            exc.format(),
            hint="Fix or remove the workspace configuration file",
        ) from exc
    return CLIContext(workspace_root=workspace_root, config=workspace_config, verbose=verbose)


def get_cli_context(args: argparse.Namespace) -> CLIContext:
    """
    Retrieve CLIContext from parsed arguments.

    Raises:
        CLIConfigError: If context was not initialized
    """
    ctx = getattr(args, "cli_context", None)
    if ctx is None:
        raise CLIConfigError(
            "CLI context was not initialized before command execution",
            hint="This is an internal error - please report it",
            code="CLI_CONTEXT_NOT_INITIALIZED"
        )
    return ctx
