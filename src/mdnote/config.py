"""ContextVar-based render configuration for mdnote.

Markdown behavior is fixed; the only ambient input is the origin of the
document hosting the rendered note, used to resolve relative link targets.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # In Markdown class
    md = Markdown(origin="https://notes.example")
    html = md("[home](/)")  # Sets config internally via ContextVar

    # Direct renderer usage
    from mdnote.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(origin="https://notes.example")):
        html = HtmlRenderer().render("[home](/)")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from urllib.parse import urlsplit

from mdnote.errors import ConfigError

DEFAULT_ORIGIN = "http://localhost"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        origin: Scheme and host of the hosting document, e.g.
            ``https://notes.example``. Relative links resolve against it.

    Raises:
        ConfigError: If origin is not an absolute http or https URL.
    """

    origin: str = DEFAULT_ORIGIN

    def __post_init__(self) -> None:
        try:
            parts = urlsplit(self.origin)
        except ValueError as e:
            raise ConfigError("origin", self.origin, str(e)) from e
        if parts.scheme.lower() not in ("http", "https") or not parts.netloc:
            raise ConfigError("origin", self.origin, "expected an absolute http(s) URL")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"origin": "https://a.example", "x": 1}).origin
            'https://a.example'
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
    """Set render configuration for current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(origin="https://a.example")):
        ...     get_render_config().origin
        'https://a.example'
    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_ORIGIN",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
