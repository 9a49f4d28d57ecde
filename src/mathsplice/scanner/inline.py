"""Inline ($...$) span scanner mixin."""

from mathsplice.scanner.charsets import MARKER, MARKER_OR_ESCAPE, is_digit, is_whitespace
from mathsplice.spans import MathMode, Span


class InlineScannerMixin:
    """Mixin providing inline span matching.

    An inline span is ``$formula$`` where:

    - the opening ``$`` is not escaped and not the second half of ``$$``
    - the formula does not start with whitespace or ``$``
    - the formula contains no ``$`` at all
    - the formula does not end with whitespace or ``\\``
    - the closing ``$`` is not followed by a digit or another ``$``

    The digit rule keeps adjacent prices like ``$50$60`` as prose.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int

    def _match_inline(self, pos: int) -> Span | None:
        """Try to match an inline span opening at ``pos``.

        Returns:
            The matched Span, or None if no span opens here.
        """
        source = self._source

        if pos > 0 and source[pos - 1] in MARKER_OR_ESCAPE:
            return None

        first = pos + 1
        if first >= self._source_len:
            return None
        head = source[first]
        if head == MARKER or is_whitespace(head):
            return None

        # The first $ after the formula's first char is the only candidate
        close = source.find(MARKER, first + 1)
        if close == -1:
            return None

        tail = source[close - 1]
        if tail in MARKER_OR_ESCAPE or is_whitespace(tail):
            return None

        after = source[close + 1] if close + 1 < self._source_len else ""
        if after == MARKER or is_digit(after):
            return None

        return Span(
            outer_start=pos,
            outer_end=close + 1,
            inner_start=first,
            inner_end=close,
            mode=MathMode.INLINE,
        )
