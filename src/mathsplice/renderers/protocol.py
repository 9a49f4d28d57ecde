"""MathRenderer protocol: the interface to a formula-typesetting engine.

Any object with ``render(formula, mode) -> str`` conforms. Renderers
must raise FormulaError for formula source their engine rejects, and
must never emit a ``$`` in their markup (the block pass runs over the
inline pass's output).

Example:
    from mathsplice.renderers.protocol import MathRenderer

    class Upper:
        def render(self, formula: str, mode: MathMode) -> str:
            return formula.upper()

"""

from typing import Protocol, runtime_checkable

from mathsplice.spans import MathMode


@runtime_checkable
class MathRenderer(Protocol):
    """Protocol for formula renderers.

    Thread Safety:
        Renderers may be called from worker threads when parallel
        rendering is enabled. Configuration must be read-only after
        construction.

    """

    def render(self, formula: str, mode: MathMode) -> str:
        """Render formula source to markup.

        Args:
            formula: Formula source without delimiters.
            mode: INLINE or BLOCK.

        Returns:
            Markup to splice in place of the delimited span.

        Raises:
            FormulaError: The engine rejected the formula.

        """
        ...
