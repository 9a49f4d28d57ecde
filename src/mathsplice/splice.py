"""Substitution assembler: splice rendered markup into a document.

One pass = scan the document for one mode, then rebuild it with every
span's outer region replaced by the renderer's markup. Text between
spans is copied verbatim.

Rendering is fail-fast. The first FormulaError (in document order)
aborts the pass and propagates as the same exception object; no partial
output is returned.

Thread Safety:
SpliceBuffer instances are local to each substitute() call.
With max_workers > 1, renderer calls run on a private thread pool and
their results are spliced back in span order.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor

from mathsplice.errors import FormulaError
from mathsplice.profiling import get_render_accumulator
from mathsplice.renderers.protocol import MathRenderer
from mathsplice.scanner import scan_spans
from mathsplice.scanner.charsets import MARKER
from mathsplice.spans import MathMode, Span
from mathsplice.utils.logger import get_logger

logger = get_logger(__name__)


class SpliceBuffer:
    """Copy-and-splice accumulator over one source string.

    Appends to a list, joins once at the end.

    Usage:
            >>> buffer = SpliceBuffer("a $x$ b")
            >>> buffer.replace(Span(2, 5, 3, 4, MathMode.INLINE), "<x/>")
            >>> buffer.build()
            'a <x/> b'

    """

    __slots__ = ("_source", "_parts", "_cursor")

    def __init__(self, source: str) -> None:
        self._source = source
        self._parts: list[str] = []
        self._cursor = 0

    def copy_to(self, end: int) -> None:
        """Copy untouched source text up to ``end``.

        Raises:
            ValueError: If ``end`` is behind text already consumed
                (spans out of order or overlapping).
        """
        if end < self._cursor:
            raise ValueError(f"Span at offset {end} overlaps text consumed up to {self._cursor}")
        if end > self._cursor:
            self._parts.append(self._source[self._cursor : end])
            self._cursor = end

    def replace(self, span: Span, markup: str) -> None:
        """Replace the span's outer region with ``markup``."""
        self.copy_to(span.outer_start)
        self._parts.append(markup)
        self._cursor = span.outer_end

    def build(self) -> str:
        """Copy the trailing text and join all parts."""
        self.copy_to(len(self._source))
        return "".join(self._parts)


def _render_span(
    source: str,
    span: Span,
    renderer: MathRenderer,
    source_file: str | None,
) -> str:
    formula = span.formula(source)
    try:
        markup = renderer.render(formula, span.mode)
    except FormulaError as exc:
        if exc.location is None:
            exc.location = span.location(source, source_file)
        if exc.formula is None:
            exc.formula = formula
        if exc.mode is None:
            exc.mode = span.mode
        logger.debug(
            "Formula %r at %s failed to render: %s",
            span.outer_text(source),
            exc.location,
            exc.reason,
        )
        raise

    if MARKER in markup:
        logger.warning(
            "Renderer output for %s contains %r; later passes may misread it",
            span.location(source, source_file),
            MARKER,
        )
    return markup


def _render_parallel(
    source: str,
    spans: Sequence[Span],
    renderer: MathRenderer,
    source_file: str | None,
    max_workers: int,
) -> list[str]:
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(_render_span, source, span, renderer, source_file) for span in spans
        ]
        try:
            return [future.result() for future in futures]
        except Exception:
            for future in futures:
                future.cancel()
            raise


def substitute(
    source: str,
    spans: Iterable[Span],
    renderer: MathRenderer,
    *,
    source_file: str | None = None,
    max_workers: int | None = None,
) -> str:
    """Replace every span in ``source`` with its rendered markup.

    Args:
        source: Document text the spans were scanned from
        spans: Ordered, non-overlapping spans
        renderer: Formula renderer, called once per span
        source_file: Optional path for error locations
        max_workers: Render on a thread pool of this size when > 1

    Returns:
        The substituted text

    Raises:
        FormulaError: A span's formula failed to render
    """
    acc = get_render_accumulator()
    buffer = SpliceBuffer(source)
    spans = list(spans)

    markups: Iterator[str] | list[str]
    if max_workers is not None and max_workers > 1:
        markups = _render_parallel(source, spans, renderer, source_file, max_workers)
    else:
        # Lazy, so a failure stops rendering of the remaining spans
        markups = (_render_span(source, span, renderer, source_file) for span in spans)

    for span, markup in zip(spans, markups):
        buffer.replace(span, markup)
        if acc is not None:
            acc.record_render()

    return buffer.build()


def render_pass(
    source: str,
    mode: MathMode,
    renderer: MathRenderer,
    *,
    source_file: str | None = None,
    max_workers: int | None = None,
) -> str:
    """Run one scan-and-substitute pass over ``source``.

    Example:
        >>> from mathsplice.renderers import HtmlClassRenderer
        >>> render_pass("a $x$ b", MathMode.INLINE, HtmlClassRenderer())
        'a <span class="math notranslate nohighlight">\\\\(x\\\\)</span> b'
    """
    spans = scan_spans(source, mode)
    logger.debug("%s pass: %d span(s) in %d chars", mode.value, len(spans), len(source))

    acc = get_render_accumulator()
    if acc is not None:
        acc.record_pass(mode, len(source), len(spans))

    if not spans:
        return source
    return substitute(
        source,
        spans,
        renderer,
        source_file=source_file,
        max_workers=max_workers,
    )
