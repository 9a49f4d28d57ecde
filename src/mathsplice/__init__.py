"""
mathsplice: typeset $inline$ and $$block$$ math inside prose.

Finds dollar-delimited formulas in free-form text and replaces each one
with markup from a formula renderer, leaving everything else untouched.
Currency amounts, escaped markers and padded delimiters stay prose.

Quick Start:
    >>> from mathsplice import render_math
    >>> html = render_math("Consider $x^2$ for a moment.")  # MathML by default
    >>> render_math("That costs $50, or $60 with tax.")
    'That costs $50, or $60 with tax.'

    >>> # Or use a configured, reusable splicer
    >>> from mathsplice import MathSplicer
    >>> splice = MathSplicer(renderer="html")
    >>> splice("Let $x$ be real.")
    'Let <span class="math notranslate nohighlight">\\\\(x\\\\)</span> be real.'

Pipeline:
    1. Inline pass over the original text
    2. Block pass over the inline pass's output

Installation:
    pip install mathsplice
"""

from collections.abc import Mapping

from mathsplice.config import (
    DEFAULT_RENDERER,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from mathsplice.errors import FormulaError, MathspliceError, RendererError
from mathsplice.location import SourceLocation
from mathsplice.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from mathsplice.renderers import (
    BUILTIN_RENDERERS,
    HtmlClassRenderer,
    MathMLRenderer,
    MathRenderer,
    get_renderer,
    register_renderer,
)
from mathsplice.scanner import Scanner, scan_spans
from mathsplice.spans import MathMode, Span
from mathsplice.splice import SpliceBuffer, render_pass, substitute

__version__ = "0.1.0"


def _renderer_from_config(config: RenderConfig) -> MathRenderer:
    options = {"macros": config.macros} if config.macros else {}
    return get_renderer(config.renderer, **options)


def render_math(
    document: str,
    *,
    renderer: MathRenderer | None = None,
    source_file: str | None = None,
) -> str:
    """Render every math span in ``document``.

    Runs the inline pass, then the block pass on its output, as enabled
    by the active RenderConfig.

    Args:
        document: Prose containing $inline$ and $$block$$ formulas
        renderer: Formula renderer (built from the active config if None)
        source_file: Optional source file path for error messages

    Returns:
        The document with every matched span replaced by rendered markup

    Raises:
        FormulaError: A matched formula failed to render

    Example:
        >>> render_math(r"\\$F = ma$")
        '\\\\$F = ma$'
    """
    config = get_render_config()
    if renderer is None:
        renderer = _renderer_from_config(config)

    text = document
    if config.inline_enabled:
        text = render_pass(
            text,
            MathMode.INLINE,
            renderer,
            source_file=source_file,
            max_workers=config.max_workers,
        )
    if config.block_enabled:
        text = render_pass(
            text,
            MathMode.BLOCK,
            renderer,
            source_file=source_file,
            max_workers=config.max_workers,
        )
    return text


class MathSplicer:
    """High-level processor combining config and renderer.

    Usage:
        >>> splice = MathSplicer(macros={"RR": r"\\mathbb{R}"})
        >>> mathml = splice(r"Let $x \\in \\RR$.")

        >>> # Any MathRenderer works
        >>> splice = MathSplicer(renderer=HtmlClassRenderer(), block=False)

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        MathSplicer instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        renderer: str | MathRenderer = "mathml",
        macros: Mapping[str, str] | None = None,
        inline: bool = True,
        block: bool = True,
        max_workers: int | None = None,
    ) -> None:
        """Initialize splicer.

        Args:
            renderer: Registered renderer name, or a MathRenderer instance
            macros: LaTeX macros for renderers that accept them
            inline: Run the $inline$ pass
            block: Run the $$block$$ pass
            max_workers: Render spans on a thread pool of this size
        """
        self._config = RenderConfig(
            inline_enabled=inline,
            block_enabled=block,
            renderer=renderer if isinstance(renderer, str) else DEFAULT_RENDERER,
            macros=dict(macros) if macros else None,
            max_workers=max_workers,
        )
        if isinstance(renderer, str):
            self._renderer = _renderer_from_config(self._config)
        else:
            self._renderer = renderer

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def renderer(self) -> MathRenderer:
        return self._renderer

    def __call__(self, document: str, *, source_file: str | None = None) -> str:
        """Render every math span in ``document`` under this splicer's config."""
        with render_config_context(self._config):
            return render_math(document, renderer=self._renderer, source_file=source_file)


__all__ = [
    # High-level API
    "render_math",
    "MathSplicer",
    # Building blocks
    "Scanner",
    "scan_spans",
    "SpliceBuffer",
    "substitute",
    "render_pass",
    # Types
    "MathMode",
    "Span",
    "SourceLocation",
    # Renderers
    "MathRenderer",
    "MathMLRenderer",
    "HtmlClassRenderer",
    "BUILTIN_RENDERERS",
    "get_renderer",
    "register_renderer",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Profiling
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
    # Errors
    "MathspliceError",
    "FormulaError",
    "RendererError",
]
