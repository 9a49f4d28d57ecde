"""ContextVar-based render configuration for mathsplice.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per MathSplicer instance and read by ``render_math``.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # In MathSplicer
    splicer = MathSplicer(renderer="html")
    html = splicer("Let $x$ be real.")  # Sets config internally via ContextVar

    # Direct usage
    from mathsplice.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(block_enabled=False)):
        text = render_math(source)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

DEFAULT_RENDERER = "mathml"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Note: source_file is excluded on purpose. It is per-call state,
    passed to ``render_math`` directly.

    Attributes:
        inline_enabled: Run the $inline$ pass
        block_enabled: Run the $$block$$ pass
        renderer: Registry name of the default renderer
        macros: LaTeX macro definitions (name without backslash -> body)
        max_workers: Render spans on a thread pool of this size (None = serial)

    """

    inline_enabled: bool = True
    block_enabled: bool = True
    renderer: str = DEFAULT_RENDERER
    macros: Mapping[str, str] | None = None
    max_workers: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "block_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.block_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(inline_enabled=False)):
        ...     get_render_config().inline_enabled
        False

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_RENDERER",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
