"""Source location tracking for error messages.

Spans carry raw string offsets. SourceLocation turns an offset into the
1-indexed line/column pair a reader can find in their editor.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a span in a document.

    All line/column positions are 1-indexed. Offsets are string indices.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in the document
        end_offset: Absolute end offset in the document
        source_file: Source file path (optional, for error messages)

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=7, source_file="notes.md")
        >>> str(loc)
        'notes.md:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls,
        source: str,
        offset: int,
        end_offset: int | None = None,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Build a location from an absolute offset into ``source``.

        Args:
            source: The document the offset refers to
            offset: Start offset (clamped to the document)
            end_offset: End offset (defaults to ``offset``)
            source_file: Optional path for error messages

        Returns:
            SourceLocation with line/column computed from the offset
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            end_offset=offset if end_offset is None else end_offset,
            source_file=source_file,
        )
