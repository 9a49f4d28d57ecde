"""Renderer registry for mathsplice.

Renderers turn formula source into markup:
- mathml: server-side MathML via latex2mathml (default)
- html: classed HTML for client-side KaTeX/MathJax

Usage:
    >>> from mathsplice.renderers import get_renderer
    >>> renderer = get_renderer("mathml", macros={"RR": r"\\mathbb{R}"})

Custom renderers need no registration: any object conforming to
MathRenderer can be passed to ``render_math`` directly. Register one
to make it selectable by name from RenderConfig.

Thread Safety:
The registry is filled at import time and only read afterwards.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mathsplice.errors import RendererError
from mathsplice.renderers.protocol import MathRenderer

__all__ = [
    "MathRenderer",
    "BUILTIN_RENDERERS",
    "register_renderer",
    "get_renderer",
]

# Registry of built-in renderers
BUILTIN_RENDERERS: dict[str, type[MathRenderer]] = {}


def register_renderer(
    name: str,
) -> Callable[[type[MathRenderer]], type[MathRenderer]]:
    """Decorator to register a renderer class.

    Args:
        name: Renderer name for lookup

    Usage:
        @register_renderer("mathml")
        class MathMLRenderer:
                ...

    """

    def decorator(cls: type[MathRenderer]) -> type[MathRenderer]:
        BUILTIN_RENDERERS[name] = cls
        return cls

    return decorator


def get_renderer(name: str, **options: Any) -> MathRenderer:
    """Get a renderer instance by name.

    Args:
        name: Renderer name (e.g., "mathml", "html")
        **options: Keyword arguments for the renderer's constructor

    Raises:
        RendererError: If renderer name is not recognized, or the renderer
            does not accept the given options

    """
    if name not in BUILTIN_RENDERERS:
        available = ", ".join(sorted(BUILTIN_RENDERERS))
        raise RendererError(name, f"unknown renderer. Available: {available}")
    try:
        return BUILTIN_RENDERERS[name](**options)
    except TypeError as exc:
        raise RendererError(name, f"invalid options {sorted(options)}: {exc}") from exc


# Import built-in renderers to register them
from mathsplice.renderers.html import HtmlClassRenderer  # noqa: E402
from mathsplice.renderers.mathml import MathMLRenderer  # noqa: E402

__all__ += ["HtmlClassRenderer", "MathMLRenderer"]
