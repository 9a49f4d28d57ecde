"""Span and MathMode definitions.

The scanner produces Span objects that the assembler consumes. A span
records two nested regions of the document: the outer region (markers
included) that gets replaced, and the inner region holding the formula
source handed to the renderer.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.
MathMode is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mathsplice.location import SourceLocation


class MathMode(Enum):
    """Rendering mode of a span."""

    INLINE = "inline"  # $...$
    BLOCK = "block"  # $$...$$

    @property
    def display(self) -> bool:
        """Whether the formula is typeset as a standalone display element."""
        return self is MathMode.BLOCK


@dataclass(frozen=True, slots=True)
class Span:
    """A located math span.

    Attributes:
        outer_start: Offset of the opening marker
        outer_end: Offset just past the closing marker
        inner_start: Offset of the first formula character
        inner_end: Offset just past the last formula character
        mode: INLINE for ``$...$``, BLOCK for ``$$...$$``

    Invariant:
        outer_start <= inner_start <= inner_end <= outer_end

    """

    outer_start: int
    outer_end: int
    inner_start: int
    inner_end: int
    mode: MathMode

    def __post_init__(self) -> None:
        if not (0 <= self.outer_start <= self.inner_start <= self.inner_end <= self.outer_end):
            raise ValueError(
                f"Invalid span offsets: outer=({self.outer_start}, {self.outer_end}) "
                f"inner=({self.inner_start}, {self.inner_end})"
            )

    def formula(self, source: str) -> str:
        """Formula text of this span within ``source``."""
        return source[self.inner_start : self.inner_end]

    def outer_text(self, source: str) -> str:
        """Full delimited region of this span within ``source``."""
        return source[self.outer_start : self.outer_end]

    def location(self, source: str, source_file: str | None = None) -> SourceLocation:
        """Line/column location of the opening marker."""
        from mathsplice.location import SourceLocation

        return SourceLocation.from_offset(
            source, self.outer_start, self.outer_end, source_file=source_file
        )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return (
            f"Span({self.mode.name}, outer={self.outer_start}:{self.outer_end}, "
            f"inner={self.inner_start}:{self.inner_end})"
        )
