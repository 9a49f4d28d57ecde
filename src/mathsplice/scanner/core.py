"""Left-to-right span scanner.

No regex in the scan. Each candidate marker is tested with a bounded
set of local checks, and the scan always moves forward: past the
candidate on a miss, past the whole span on a match.

Thread Safety:
Scanner instances are single-use. Create one per source string and mode.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from mathsplice.scanner.block import BlockScannerMixin
from mathsplice.scanner.charsets import DOUBLE_MARKER, MARKER
from mathsplice.scanner.inline import InlineScannerMixin
from mathsplice.spans import MathMode, Span


class Scanner(InlineScannerMixin, BlockScannerMixin):
    """Span scanner for one mode over one document.

    Usage:
            >>> scanner = Scanner("Let $x$ be real.", MathMode.INLINE)
            >>> list(scanner.scan())
            [Span(INLINE, outer=4:7, inner=5:6)]

    Spans come out ordered by ``outer_start`` and never overlap. Markers
    inside a matched span are not considered as new openings.

    """

    __slots__ = ("_source", "_source_len", "_mode")

    def __init__(self, source: str, mode: MathMode) -> None:
        """Initialize scanner with source text and mode.

        Args:
            source: Document text
            mode: Which delimiter rules to apply
        """
        self._source = source
        self._source_len = len(source)
        self._mode = mode

    @property
    def mode(self) -> MathMode:
        return self._mode

    def scan(self) -> Iterator[Span]:
        """Yield every span in the document, left to right."""
        source = self._source
        if self._mode is MathMode.INLINE:
            marker = MARKER
            match = self._match_inline
        else:
            marker = DOUBLE_MARKER
            match = self._match_block

        pos = source.find(marker)
        while pos != -1:
            span = match(pos)
            if span is None:
                pos = source.find(marker, pos + 1)
            else:
                yield span
                pos = source.find(marker, span.outer_end)


def scan_spans(source: str, mode: MathMode) -> list[Span]:
    """Scan ``source`` and return all spans for ``mode``.

    Example:
        >>> scan_spans("$$x$$", MathMode.BLOCK)
        [Span(BLOCK, outer=0:5, inner=2:3)]
    """
    return list(Scanner(source, mode).scan())
