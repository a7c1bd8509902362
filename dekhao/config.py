"""Workspace configuration support for the Dekhao CLI."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    tomllib = None  # type: ignore

from dekhao.errors import ConfigError


CONFIG_FILE_NAMES = ("dekhao.toml", ".dekhaorc")


@dataclass
class TranspilerDefaults:
    """Default paths and flags applied when the CLI is not told otherwise."""

    input: Path = Path("input.txt")
    output: Path = Path("generated.cpp")
    show_tokens: bool = True
    echo_code: bool = True
    indent: str = "    "


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    defaults: TranspilerDefaults = field(default_factory=TranspilerDefaults)
    source: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def resolve_input(self, explicit: Optional[str] = None) -> Path:
        path = Path(explicit) if explicit else self.defaults.input
        if not path.is_absolute():
            path = self.root / path
        return path

    def resolve_output(self, source_path: Path, explicit: Optional[str] = None) -> Path:
        """Resolve the output path; relative paths land next to the input file."""
        path = Path(explicit) if explicit else self.defaults.output
        if not path.is_absolute():
            path = source_path.parent / path
        return path


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    if tomllib is None:
        raise ConfigError(
            "TOML parsing requires Python 3.11 or later.",
            path=str(path),
            hint="Use a JSON .dekhaorc file instead.",
        )
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _parse_bool(value: Any, *, name: str, path: Path) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"1", "true", "yes", "on", "0", "false", "no", "off"}:
        return value.strip().lower() in {"1", "true", "yes", "on"}
    raise ConfigError(f"Option '{name}' must be a boolean, got {value!r}", path=str(path))


def _parse_defaults(data: Dict[str, Any], path: Path) -> TranspilerDefaults:
    section = data.get("defaults") or {}
    if not isinstance(section, dict):
        raise ConfigError("The [defaults] section must be a table", path=str(path))

    input_path = Path(section.get("input") or TranspilerDefaults.input)
    output_path = Path(section.get("output") or TranspilerDefaults.output)
    show_tokens = _parse_bool(
        section.get("show_tokens", TranspilerDefaults.show_tokens), name="show_tokens", path=path
    )
    echo_code = _parse_bool(
        section.get("echo_code", TranspilerDefaults.echo_code), name="echo_code", path=path
    )

    indent = TranspilerDefaults.indent
    if "indent_width" in section:
        try:
            width = int(section["indent_width"])
        except (TypeError, ValueError) as exc:
            raise ConfigError(
                f"Option 'indent_width' must be an integer, got {section['indent_width']!r}",
                path=str(path),
            ) from exc
        if width < 0:
            raise ConfigError("Option 'indent_width' cannot be negative", path=str(path))
        indent = " " * width
    elif "indent" in section:
        indent = str(section["indent"])

    return TranspilerDefaults(
        input=input_path,
        output=output_path,
        show_tokens=show_tokens,
        echo_code=echo_code,
        indent=indent,
    )


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        if explicit is not None:
            raise ConfigError(f"Configuration file not found: {explicit}", path=str(explicit))
        return WorkspaceConfig(root=root)

    try:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
    except ConfigError:
        raise
    except (OSError, ValueError) as exc:
        # JSONDecodeError always has lineno; TOMLDecodeError only on 3.14+
        raise ConfigError(
            f"Could not read configuration: {exc}",
            path=config_path,
            line=getattr(exc, "lineno", None),
        ) from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a table of options", path=str(config_path))

    return WorkspaceConfig(
        root=root,
        defaults=_parse_defaults(data, config_path),
        source=config_path,
        raw=data,
    )


__all__ = [
    "CONFIG_FILE_NAMES",
    "TranspilerDefaults",
    "WorkspaceConfig",
    "locate_config_file",
    "load_workspace_config",
]
