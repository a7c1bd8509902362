"""
Dekhao language keywords and grammar constants.

This module is the single source of truth for the reserved words of the
language. The tokenizer tags these words as keywords, the parser
dispatches on them and the CLI uses them to suggest corrections for
skipped lines.

**Usage:**
    from dekhao.lang import PRINT_KEYWORD, TYPE_KEYWORDS, suggest_keyword

    if token.value not in TYPE_KEYWORDS:
        hint = suggest_keyword(token.value)
"""

from __future__ import annotations

import difflib
from typing import Dict, FrozenSet, List, Optional


# Print statement: dekhao(arg, ...)
PRINT_KEYWORD = "dekhao"

# Binding marker between a declared name and its initializer
BIND_KEYWORD = "te"

# Declaration types: <type> <name> te <expr>
TYPE_KEYWORDS: FrozenSet[str] = frozenset({
    "integer",
    "float",
    "string",
})

STATEMENT_KEYWORDS: FrozenSet[str] = frozenset({PRINT_KEYWORD}) | TYPE_KEYWORDS

RESERVED_WORDS: FrozenSet[str] = STATEMENT_KEYWORDS | frozenset({BIND_KEYWORD})

KEYWORD_DESCRIPTIONS: Dict[str, str] = {
    PRINT_KEYWORD: "Print arguments followed by a newline: dekhao(\"x =\", x)",
    "integer": "Declare an integer: integer count te 5",
    "float": "Declare a floating point number: float ratio te 1.5",
    "string": "Declare a string: string name te \"Rahim\"",
    BIND_KEYWORD: "Binds a declared name to its initializer",
}


def is_reserved(word: str) -> bool:
    return word in RESERVED_WORDS


def is_type_keyword(word: str) -> bool:
    return word in TYPE_KEYWORDS


def suggest_keyword(unknown: str) -> Optional[str]:
    """
    Suggest the statement keyword closest to an unknown leading word.

    Examples:
        >>> suggest_keyword('dekao')
        'dekhao'

        >>> suggest_keyword('intger')
        'integer'

        >>> suggest_keyword('xyz123') is None
        True
    """
    if not unknown or unknown in STATEMENT_KEYWORDS:
        return None
    close_matches = difflib.get_close_matches(unknown, sorted(STATEMENT_KEYWORDS), n=1, cutoff=0.75)
    if close_matches:
        return close_matches[0]
    return None


def get_keyword_description(keyword: str) -> Optional[str]:
    return KEYWORD_DESCRIPTIONS.get(keyword)


def format_keyword_list(keywords: FrozenSet[str]) -> str:
    ordered: List[str] = sorted(keywords)
    return ", ".join(f"'{word}'" for word in ordered)


__all__ = [
    "PRINT_KEYWORD",
    "BIND_KEYWORD",
    "TYPE_KEYWORDS",
    "STATEMENT_KEYWORDS",
    "RESERVED_WORDS",
    "KEYWORD_DESCRIPTIONS",
    "is_reserved",
    "is_type_keyword",
    "suggest_keyword",
    "get_keyword_description",
    "format_keyword_list",
]
