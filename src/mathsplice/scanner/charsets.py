"""Character classification for the span scanner.

All sets are frozensets for O(1) membership tests and module-level reuse.

Whitespace follows ``str.isspace``. Horizontal whitespace is tab plus the
Unicode space separators (category Zs), which excludes every line break.
"""

import unicodedata

MARKER = "$"
DOUBLE_MARKER = MARKER * 2
ESCAPE = "\\"

# A marker right after one of these is never an inline boundary
MARKER_OR_ESCAPE: frozenset[str] = frozenset((MARKER, ESCAPE))

# Common ASCII horizontal whitespace, checked before the Unicode lookup
HORIZONTAL_WHITESPACE: frozenset[str] = frozenset(" \t")


def is_whitespace(char: str) -> bool:
    """Check if character is whitespace (including line breaks).

    The empty string (out of bounds) is not whitespace.
    """
    return char.isspace()


def is_horizontal_whitespace(char: str) -> bool:
    """Check if character is whitespace that does not break a line."""
    if not char:
        return False
    if char in HORIZONTAL_WHITESPACE:
        return True
    return unicodedata.category(char) == "Zs"


def is_digit(char: str) -> bool:
    """Check if character is a decimal digit (Unicode category Nd)."""
    return char.isdecimal()


def line_break_length(text: str, pos: int) -> int:
    """Length of the line break starting at ``pos`` (0 if there is none).

    Recognizes ``\\n`` and ``\\r\\n``.
    """
    if text.startswith("\n", pos):
        return 1
    if text.startswith("\r\n", pos):
        return 2
    return 0


def skip_horizontal_whitespace(text: str, pos: int, end: int) -> int:
    """Advance ``pos`` past horizontal whitespace, stopping at ``end``."""
    while pos < end and is_horizontal_whitespace(text[pos]):
        pos += 1
    return pos
