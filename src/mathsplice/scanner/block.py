"""Block ($$...$$) span scanner mixin."""

from mathsplice.scanner.charsets import (
    DOUBLE_MARKER,
    ESCAPE,
    MARKER,
    is_whitespace,
    line_break_length,
    skip_horizontal_whitespace,
)
from mathsplice.spans import MathMode, Span


class BlockScannerMixin:
    """Mixin providing block span matching.

    Two layouts are accepted::

        $$\\sum_i x_i$$

        $$
            \\sum_i x_i
        $$

    The opening ``$$`` must not be escaped. The formula starts right after
    it, or on the next line when the rest of the opening line is blank.
    The formula contains no ``$``, ends at its last non-whitespace
    character, and may be followed by at most one line break before the
    closing ``$$``.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int

    def _match_block(self, pos: int) -> Span | None:
        """Try to match a block span opening at ``pos``.

        Returns:
            The matched Span, or None if no span opens here.
        """
        source = self._source

        if pos > 0 and source[pos - 1] == ESCAPE:
            return None

        body = pos + 2
        inner_start = self._block_formula_start(body)
        if inner_start is None:
            return None

        close = source.find(MARKER, body)
        if close == -1 or not source.startswith(DOUBLE_MARKER, close):
            return None

        inner_end = close
        while inner_end > inner_start and is_whitespace(source[inner_end - 1]):
            inner_end -= 1
        if inner_end == inner_start:
            return None

        if not self._is_closing_gap(inner_end, close):
            return None

        return Span(
            outer_start=pos,
            outer_end=close + 2,
            inner_start=inner_start,
            inner_end=inner_end,
            mode=MathMode.BLOCK,
        )

    def _block_formula_start(self, body: int) -> int | None:
        """Find where the formula begins after an opening ``$$``.

        Either the very next character (when it is not whitespace), or the
        first character of the next line when the opening line is blank.
        That next line must be non-empty and not start with ``$``.
        """
        source = self._source
        end = self._source_len

        if body >= end:
            return None
        if not is_whitespace(source[body]):
            return body

        line_end = skip_horizontal_whitespace(source, body, end)
        newline = line_break_length(source, line_end)
        if not newline:
            return None

        start = skip_horizontal_whitespace(source, line_end + newline, end)
        if start >= end:
            return None
        head = source[start]
        if head == MARKER or is_whitespace(head):
            return None
        return start

    def _is_closing_gap(self, start: int, end: int) -> bool:
        """Check the whitespace between the formula and the closing ``$$``.

        Accepts nothing at all, or one blank line break with optional
        horizontal whitespace on either side.
        """
        if start == end:
            return True

        source = self._source
        line_end = skip_horizontal_whitespace(source, start, end)
        newline = line_break_length(source, line_end)
        if not newline or line_end + newline > end:
            return False
        return skip_horizontal_whitespace(source, line_end + newline, end) == end
