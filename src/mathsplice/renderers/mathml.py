"""MathML renderer backed by latex2mathml.

Converts LaTeX formula source to presentation MathML on the server side,
so the output needs no client-side JavaScript.

Macros:
    Simple argument-free macros are expanded before conversion::

        renderer = MathMLRenderer(macros={"RR": r"\\mathbb{R}"})
        renderer.render(r"x \\in \\RR", MathMode.INLINE)

    A macro name matches only when not followed by another letter, so
    ``\\RR`` does not expand inside ``\\RRx``. Expansion is a single pass;
    macro bodies are not expanded again.

"""

from __future__ import annotations

import re
from collections.abc import Mapping

from latex2mathml.converter import convert as latex2mathml_convert

from mathsplice.errors import FormulaError
from mathsplice.renderers import register_renderer
from mathsplice.spans import MathMode
from mathsplice.utils.logger import get_logger

logger = get_logger(__name__)


@register_renderer("mathml")
class MathMLRenderer:
    """Renders LaTeX formulas to MathML.

    Inline spans use ``display="inline"``, block spans ``display="block"``.

    Thread Safety:
        Macros are copied at construction and never modified afterwards.
        Safe for concurrent use.

    """

    __slots__ = ("_macros", "_macro_re")

    def __init__(self, macros: Mapping[str, str] | None = None) -> None:
        """Initialize renderer.

        Args:
            macros: Macro name (with or without leading backslash) -> body
        """
        self._macros: dict[str, str] = {
            name.lstrip("\\"): body for name, body in (macros or {}).items()
        }
        self._macro_re: re.Pattern[str] | None = None
        if self._macros:
            # Longest first so \RRR wins over \RR
            names = sorted(self._macros, key=len, reverse=True)
            alternation = "|".join(re.escape(name) for name in names)
            self._macro_re = re.compile(rf"\\({alternation})(?![A-Za-z])")

    @property
    def macros(self) -> dict[str, str]:
        return dict(self._macros)

    def expand_macros(self, formula: str) -> str:
        """Replace macro invocations in ``formula`` with their bodies."""
        if self._macro_re is None:
            return formula
        return self._macro_re.sub(lambda m: self._macros[m.group(1)], formula)

    def render(self, formula: str, mode: MathMode) -> str:
        """Render a formula to a ``<math>`` element.

        Raises:
            FormulaError: Empty formula, or latex2mathml rejected it.
        """
        if not formula.strip():
            raise FormulaError("empty formula", formula=formula, mode=mode)

        latex = self.expand_macros(formula)
        display = "block" if mode.display else "inline"
        try:
            return latex2mathml_convert(latex, display=display)
        except Exception as exc:
            # latex2mathml raises plain Exception subclasses with no common base
            logger.debug("latex2mathml rejected %r: %s", latex, exc)
            reason = str(exc) or type(exc).__name__
            raise FormulaError(reason, formula=formula, mode=mode) from exc
