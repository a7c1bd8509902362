"""
Output formatting for CLI operations.

This module provides functions for printing token dumps, generated code
and skipped-line reports.
"""

import json
from typing import Any, Dict, Iterable, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from dekhao.ast import UnrecognizedLine
from dekhao.lang import suggest_keyword
from dekhao.lang.parser.grammar.lexer import Token


GENERATED_BANNER = "===== Generated C++ ====="


def format_token_dump(tokens: Iterable[Token]) -> str:
    """
    Render tokens as ``[text] `` with a real newline at every line boundary.

    Examples:
        >>> from dekhao.lang.parser import tokenize
        >>> format_token_dump(tokenize('dekhao(x)'))
        '[dekhao] [(] [x] [)] \\n'
    """
    parts: List[str] = []
    for token in tokens:
        if token.is_newline:
            parts.append("\n")
        else:
            parts.append(f"[{token.value}] ")
    return "".join(parts)


def print_token_dump(tokens: Iterable[Token]) -> None:
    print("Tokens:")
    print(format_token_dump(tokens))


def print_generated_code(code: str) -> None:
    print(GENERATED_BANNER)
    print(code)


def skip_hint(skipped: UnrecognizedLine) -> Optional[str]:
    """Suggest a keyword when a skipped line starts with a near miss."""
    first_word = skipped.text.split(" ", 1)[0] if skipped.text else ""
    suggestion = suggest_keyword(first_word)
    if suggestion:
        return f"did you mean '{suggestion}'?"
    return None


def skipped_line_records(skipped: Iterable[UnrecognizedLine]) -> List[Dict[str, Any]]:
    records = []
    for entry in skipped:
        record: Dict[str, Any] = {
            "line": entry.line,
            "reason": str(entry.reason),
            "description": entry.reason.description,
            "text": entry.text,
        }
        hint = skip_hint(entry)
        if hint:
            record["hint"] = hint
        records.append(record)
    return records


def print_skipped_lines(skipped: List[UnrecognizedLine], *, path: str = "") -> None:
    """Print one warning per skipped line."""
    prefix = f"{path}:" if path else "line "
    for record in skipped_line_records(skipped):
        message = f"{prefix}{record['line']}: skipped ({record['description']}): {record['text']}"
        if record.get("hint"):
            message = f"{message} ({record['hint']})"
        print_warning(message)


def render_skip_report(
    skipped: List[UnrecognizedLine],
    *,
    path: str = "",
    json_output: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Render skipped lines as a rich table, or as JSON."""
    console = console or Console()
    records = skipped_line_records(skipped)

    if json_output:
        console.print_json(json.dumps({"path": path, "skipped": records}))
        return

    if not records:
        console.print(f"[green]No skipped lines in {path or 'input'}.[/green]")
        return

    table = Table(title=f"Skipped lines in {path or 'input'} ({len(records)})")
    table.add_column("Line", justify="right", style="bold")
    table.add_column("Reason", style="yellow")
    table.add_column("Source", style="white", max_width=50)
    table.add_column("Hint", style="cyan")

    for record in records:
        table.add_row(
            str(record["line"]),
            Text(record["description"]),
            Text(record["text"]),
            Text(record.get("hint", "")),
        )

    console.print(table)


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Written to generated.cpp")
        ✓ Written to generated.cpp
    """
    print(f"✓ {message}")


def print_warning(message: str) -> None:
    """
    Print warning message with warning prefix.

    Examples:
        >>> print_warning("line 3: skipped")
        ⚠ line 3: skipped
    """
    print(f"⚠ {message}")

