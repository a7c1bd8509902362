"""Dekhao language keywords and version."""

from .keywords import (
    PRINT_KEYWORD,
    BIND_KEYWORD,
    TYPE_KEYWORDS,
    STATEMENT_KEYWORDS,
    RESERVED_WORDS,
    KEYWORD_DESCRIPTIONS,
    is_reserved,
    is_type_keyword,
    suggest_keyword,
    get_keyword_description,
    format_keyword_list,
)

LANGUAGE_VERSION = "1.0"

__all__ = [
    "LANGUAGE_VERSION",
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
