"""Character classification predicates.

Every predicate takes a single code point (a one-character ``str``) and is
total: unassigned and private-use code points simply fail every positive
class. A string that is not exactly one character (empty, or a
multi-character span) is not a code point and fails every predicate.

Unicode general-category lookup comes from the active LexConfig so callers
can pin a Unicode database version; everything else is a fixed set.

Example:
    >>> from marklex.classify import is_punctuation, is_unicode_whitespace
    >>> is_punctuation("$")
    True
    >>> is_unicode_whitespace("\\u00a0")
    True
"""

from marklex.charsets import (
    ASCII_PUNCTUATION,
    ATEXT_SYMBOLS,
    LINE_ENDINGS,
    PUNCTUATION_CATEGORIES,
    PUNCTUATION_EXTRA,
    UNICODE_WHITESPACE_EXTRA,
    WHITESPACE,
)
from marklex.config import get_lex_config


def is_line_ending(char: str) -> bool:
    """Check for newline (U+000A) or carriage return (U+000D)."""
    return char in LINE_ENDINGS


def is_ascii_alphanumeric(char: str) -> bool:
    """Check for an ASCII digit or ASCII letter."""
    return char.isascii() and char.isalnum() and len(char) == 1


def is_whitespace(char: str) -> bool:
    """Check for one of the six ASCII whitespace characters.

    Space, tab, newline, line tabulation, form feed, carriage return.
    """
    return char in WHITESPACE


def is_unicode_whitespace(char: str) -> bool:
    """Check for Unicode whitespace.

    Any code point in category Zs, or tab, carriage return, newline, form
    feed. Line tabulation (U+000B) is not Unicode whitespace.

    """
    if len(char) != 1:
        return False
    if char in UNICODE_WHITESPACE_EXTRA:
        return True
    return get_lex_config().unicode_category(char) == "Zs"


def is_non_space(char: str) -> bool:
    """Check for any code point that is not ASCII whitespace."""
    if len(char) != 1:
        return False
    return char not in WHITESPACE


def is_ascii_punctuation(char: str) -> bool:
    return char in ASCII_PUNCTUATION


def is_punctuation(char: str) -> bool:
    """Check if character is punctuation for flanking and escaping rules.

    The union of three tests, all of which are needed:
    ASCII punctuation, Unicode categories Pc/Pd/Pe/Pf/Pi/Po/Ps, and the
    symbols ``$ + < = > ^ ` | ~`` which Unicode files under S*.

    """
    if len(char) != 1:
        return False
    if char in ASCII_PUNCTUATION or char in PUNCTUATION_EXTRA:
        return True
    return get_lex_config().unicode_category(char) in PUNCTUATION_CATEGORIES


def is_atext(char: str) -> bool:
    """Check for a character allowed in an email autolink's local part."""
    return is_ascii_alphanumeric(char) or char in ATEXT_SYMBOLS


def is_ascii_letter(char: str) -> bool:
    return char.isascii() and char.isalpha() and len(char) == 1


__all__ = [
    "is_ascii_alphanumeric",
    "is_ascii_letter",
    "is_ascii_punctuation",
    "is_atext",
    "is_line_ending",
    "is_non_space",
    "is_punctuation",
    "is_unicode_whitespace",
    "is_whitespace",
]
