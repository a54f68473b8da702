"""
marklex — CommonMark lexical primitives

The character classes, text normalizations and autolink scheme table that
block and inline scanners of a CommonMark parser consult on every character.
All functions are pure and total; all tables are immutable frozensets, safe to
share across threads (including free-threaded builds) without locks.

Quick Start:
    >>> from marklex import is_punctuation, collapse_whitespace, is_valid_scheme
    >>> is_punctuation("^")
    True
    >>> collapse_whitespace("  a   b\\tc  ")
    'a b c'
    >>> is_valid_scheme("HTTP")
    True

Configuration:
    >>> from marklex import LexConfig, detab, lex_config_context
    >>> with lex_config_context(LexConfig(tab_width=8)):
    ...     detab("a\\tb")
    'a       b'
"""

from marklex.charsets import (
    ASCII_PUNCTUATION,
    ATEXT_SYMBOLS,
    LINE_ENDINGS,
    PUNCTUATION_EXTRA,
    REPLACEMENT_CHAR,
    WHITESPACE,
)
from marklex.classify import (
    is_ascii_alphanumeric,
    is_ascii_letter,
    is_ascii_punctuation,
    is_atext,
    is_line_ending,
    is_non_space,
    is_punctuation,
    is_unicode_whitespace,
    is_whitespace,
)
from marklex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from marklex.errors import ConfigError, MarklexError
from marklex.normalize import (
    collapse_whitespace,
    detab,
    next_tab_stop,
    replace_null_chars,
    strip_atx_suffix,
    strip_edge_spaces,
    strip_edge_spaces_and_newlines,
)
from marklex.schemes import SCHEMES, has_valid_scheme, is_valid_scheme

__version__ = "0.1.0"

__all__ = [
    # Character sets
    "ASCII_PUNCTUATION",
    "ATEXT_SYMBOLS",
    "LINE_ENDINGS",
    "PUNCTUATION_EXTRA",
    "REPLACEMENT_CHAR",
    "SCHEMES",
    "WHITESPACE",
    # Classifiers
    "is_ascii_alphanumeric",
    "is_ascii_letter",
    "is_ascii_punctuation",
    "is_atext",
    "is_line_ending",
    "is_non_space",
    "is_punctuation",
    "is_unicode_whitespace",
    "is_whitespace",
    # Schemes
    "has_valid_scheme",
    "is_valid_scheme",
    # Normalization
    "collapse_whitespace",
    "detab",
    "next_tab_stop",
    "replace_null_chars",
    "strip_atx_suffix",
    "strip_edge_spaces",
    "strip_edge_spaces_and_newlines",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    # Errors
    "ConfigError",
    "MarklexError",
]
