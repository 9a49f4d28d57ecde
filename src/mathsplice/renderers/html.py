"""Semantic HTML renderer for client-side math typesetting.

Wraps the formula in MathJax/KaTeX delimiters inside a classed element,
leaving the typesetting to the browser.

Example:
    >>> HtmlClassRenderer().render("x < y", MathMode.INLINE)
    '<span class="math notranslate nohighlight">\\\\(x &lt; y\\\\)</span>'

"""

from __future__ import annotations

from collections.abc import Mapping
from html import escape as html_escape
from typing import ClassVar

from mathsplice.renderers import register_renderer
from mathsplice.spans import MathMode


@register_renderer("html")
class HtmlClassRenderer:
    """Renders formulas as escaped source in classed HTML elements.

    Inline spans become ``<span>`` with ``\\(...\\)`` delimiters, block
    spans become ``<div>`` with ``\\[...\\]`` delimiters.

    Macros are not expanded here. They are kept for the page's client-side
    engine (e.g. KaTeX's ``macros`` option) and formulas pass through as written.

    Thread Safety:
        Macros are copied at construction and never modified afterwards.
        Safe for concurrent use.

    """

    __slots__ = ("_macros",)

    css_class: ClassVar[str] = "math notranslate nohighlight"

    def __init__(self, macros: Mapping[str, str] | None = None) -> None:
        self._macros = dict(macros) if macros else {}

    @property
    def macros(self) -> dict[str, str]:
        """Macro definitions to hand to the client-side engine."""
        return dict(self._macros)

    def render(self, formula: str, mode: MathMode) -> str:
        escaped = html_escape(formula)
        if mode.display:
            return f'<div class="{self.css_class}">\\[{escaped}\\]</div>'
        return f'<span class="{self.css_class}">\\({escaped}\\)</span>'
