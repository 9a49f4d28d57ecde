"""RenderAccumulator: opt-in profiling for math rendering.

Accumulates, per profiled block:
- Passes run and source length scanned
- Spans matched per mode
- Formulas rendered
- Total duration

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from mathsplice import render_math
    from mathsplice.profiling import profiled_render

    with profiled_render() as metrics:
        render_math("Let $x$ be real.")

    print(metrics.summary())
    # {"total_ms": 0.4, "passes": 2, "source_length": 32, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from mathsplice.spans import MathMode


@dataclass
class RenderAccumulator:
    """Accumulated metrics during rendering.

    Attributes:
        start_time: Profiling start timestamp.
        passes: Number of scan-and-substitute passes run.
        source_length: Total length of text scanned across passes.
        inline_spans: Inline spans matched.
        block_spans: Block spans matched.
        formulas_rendered: Successful renderer calls.

    """

    start_time: float = field(default_factory=perf_counter)
    passes: int = 0
    source_length: int = 0
    inline_spans: int = 0
    block_spans: int = 0
    formulas_rendered: int = 0

    def record_pass(self, mode: MathMode, source_length: int, span_count: int) -> None:
        """Record one pass over a document.

        Args:
            mode: Which pass ran.
            source_length: Length of the text scanned.
            span_count: Spans the scanner matched.

        """
        self.passes += 1
        self.source_length += source_length
        if mode is MathMode.INLINE:
            self.inline_spans += span_count
        else:
            self.block_spans += span_count

    def record_render(self) -> None:
        """Record one successful renderer call."""
        self.formulas_rendered += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "passes": self.passes,
            "source_length": self.source_length,
            "inline_spans": self.inline_spans,
            "block_spans": self.block_spans,
            "formulas_rendered": self.formulas_rendered,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Yields:
        RenderAccumulator that will be populated during render calls.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
