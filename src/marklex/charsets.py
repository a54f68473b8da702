"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Reference: CommonMark specification, "Characters and lines"

Usage:
    from marklex.charsets import ASCII_PUNCTUATION

    if char in ASCII_PUNCTUATION:  # O(1) lookup
        ...
"""

# A line ending is a newline (U+000A) or a carriage return (U+000D).
# The CR+LF pair is the scanner's concern, not a character class.
LINE_ENDINGS: frozenset[str] = frozenset("\n\r")

# CommonMark: whitespace character (ASCII only, exactly these six)
WHITESPACE: frozenset[str] = frozenset(" \t\n\v\f\r")

# Added to the Zs category to form Unicode whitespace. No line tabulation.
UNICODE_WHITESPACE_EXTRA: frozenset[str] = frozenset("\t\r\n\f")

# CommonMark: ASCII punctuation characters
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Symbols outside the P* categories that still count as punctuation
PUNCTUATION_EXTRA: frozenset[str] = frozenset("$+<=>^`|~")

# Unicode general categories that count as punctuation
PUNCTUATION_CATEGORIES: frozenset[str] = frozenset(("Pc", "Pd", "Pe", "Pf", "Pi", "Po", "Ps"))

# Non-alphanumeric characters allowed in the local part of an email autolink
ATEXT_SYMBOLS: frozenset[str] = frozenset("!#$%&'*+\\/=?^_`{|}~-")

NULL_CHAR = "\x00"

# U+FFFD, substituted for NUL and for invalid character references
REPLACEMENT_CHAR = "\ufffd"


__all__ = [
    "ASCII_PUNCTUATION",
    "ATEXT_SYMBOLS",
    "LINE_ENDINGS",
    "NULL_CHAR",
    "PUNCTUATION_CATEGORIES",
    "PUNCTUATION_EXTRA",
    "REPLACEMENT_CHAR",
    "UNICODE_WHITESPACE_EXTRA",
    "WHITESPACE",
]
