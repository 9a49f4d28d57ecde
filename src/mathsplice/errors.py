"""Exception classes for mathsplice.

Scanning never raises: text that does not form a span is plain prose.
Errors only come from rendering a span that did match.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mathsplice.location import SourceLocation
    from mathsplice.spans import MathMode


class MathspliceError(Exception):
    """Base exception for all mathsplice errors.

    Subclass this for specific error categories.
    """

    pass


class FormulaError(MathspliceError):
    """A matched formula could not be rendered.

    Raised by renderers for formula source their engine rejects and
    propagated unchanged through the assembler and ``render_math``.

    The message is computed from the current attributes, so a location
    filled in after construction shows up in ``str(err)``.
    """

    def __init__(
        self,
        reason: str,
        formula: str | None = None,
        mode: MathMode | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize formula error.

        Args:
            reason: Why the engine rejected the formula
            formula: The formula source handed to the renderer (optional)
            mode: Inline or block rendering mode (optional)
            location: Where the span starts in the document (optional)
        """
        self.reason = reason
        self.formula = formula
        self.mode = mode
        self.location = location
        super().__init__(reason)

    def __str__(self) -> str:
        prefix = f"{self.location} " if self.location is not None else ""
        subject = ""
        if self.formula is not None:
            kind = f"{self.mode.value} " if self.mode is not None else ""
            subject = f"{kind}formula {self.formula!r}: "
        return f"{prefix}{subject}{self.reason}"


class RendererError(MathspliceError):
    """Error looking up or constructing a renderer.

    Raised when a renderer name is not registered.
    """

    def __init__(self, renderer_name: str, message: str) -> None:
        """Initialize renderer error.

        Args:
            renderer_name: Name that was requested
            message: Description of the error
        """
        self.renderer_name = renderer_name
        super().__init__(f"Renderer '{renderer_name}': {message}")
