"""Text normalization transforms.

Pure functions over text fragments. Each returns a new string and is defined
for every input, including the empty string.

Example:
    >>> from marklex.normalize import collapse_whitespace, detab, strip_atx_suffix
    >>> collapse_whitespace("  a   b\\tc  ")
    'a b c'
    >>> detab("a\\tb")
    'a   b'
    >>> strip_atx_suffix("Heading ###")
    'Heading'
"""

import re

from marklex.charsets import NULL_CHAR, REPLACEMENT_CHAR
from marklex.config import check_tab_width, get_lex_config

# Runs of the six ASCII whitespace characters; str.split() would also
# split on U+0085, U+00A0 and the other Unicode spaces.
_WHITESPACE_RUN = re.compile("[ \t\n\v\f\r]+")


def strip_edge_spaces(text: str) -> str:
    """Remove leading and trailing ASCII spaces (U+0020 only, not tabs)."""
    return text.strip(" ")


def strip_edge_spaces_and_newlines(text: str) -> str:
    """Remove leading and trailing ASCII spaces and newlines."""
    return text.strip(" \n")


def collapse_whitespace(text: str) -> str:
    """Collapse each whitespace run to a single ASCII space.

    Leading and trailing whitespace disappears entirely. Used when
    normalizing code span content and link labels.

    Args:
        text: Text fragment

    Returns:
        The non-whitespace runs of text joined by single spaces.

    """
    return " ".join(word for word in _WHITESPACE_RUN.split(text) if word)


def strip_atx_suffix(text: str) -> str:
    """Strip an ATX heading closing sequence from heading content.

    The closing sequence is a run of ``#`` preceded by a space and
    optionally followed by spaces. Trailing spaces are removed before the
    hashes, then the character before the hashes must be a space. A hash
    run with no separating space is ordinary content and text is returned
    unchanged, as is text made up only of spaces and hashes.

    Args:
        text: Heading content after the opening sequence

    Returns:
        Content without the closing sequence, or text unchanged.

    Examples:
        >>> strip_atx_suffix("Heading ###")
        'Heading'
        >>> strip_atx_suffix("Heading ###  ")
        'Heading'
        >>> strip_atx_suffix("Heading###")
        'Heading###'
        >>> strip_atx_suffix("C#")
        'C#'

    """
    stripped = text.rstrip(" ").rstrip("#")
    if not stripped or stripped[-1] != " ":
        return text
    return stripped[:-1]


def next_tab_stop(column: int, tab_width: int | None = None) -> int:
    """Return the smallest multiple of tab_width strictly greater than column.

    Args:
        column: Current 0-based column
        tab_width: Tab stop interval (None = active LexConfig.tab_width)

    Returns:
        Column the cursor moves to after a tab.

    Raises:
        ConfigError: If an explicit tab_width is not a positive int.

    """
    if tab_width is None:
        tab_width = get_lex_config().tab_width
    else:
        tab_width = check_tab_width(tab_width)
    return column - column % tab_width + tab_width


def detab(line: str, tab_width: int | None = None) -> str:
    """Expand tabs to spaces using fixed tab stops.

    Columns are counted from the start of line, and embedded newlines do
    not reset them (unlike str.expandtabs). Split multi-line input first.

    Args:
        line: A single line of input
        tab_width: Tab stop interval (None = active LexConfig.tab_width)

    Returns:
        line with every tab replaced by one or more spaces.

    Raises:
        ConfigError: If an explicit tab_width is not a positive int.

    """
    if tab_width is None:
        tab_width = get_lex_config().tab_width
    else:
        tab_width = check_tab_width(tab_width)
    if "\t" not in line:
        return line

    parts: list[str] = []
    column = 0
    for i, segment in enumerate(line.split("\t")):
        if i:
            stop = next_tab_stop(column, tab_width)
            parts.append(" " * (stop - column))
            column = stop
        parts.append(segment)
        column += len(segment)
    return "".join(parts)


def replace_null_chars(text: str) -> str:
    """Replace each U+0000 with U+FFFD. Length-preserving."""
    return text.replace(NULL_CHAR, REPLACEMENT_CHAR)


__all__ = [
    "collapse_whitespace",
    "detab",
    "next_tab_stop",
    "replace_null_chars",
    "strip_atx_suffix",
    "strip_edge_spaces",
    "strip_edge_spaces_and_newlines",
]
