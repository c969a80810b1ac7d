"""
mdnote — Safe Markdown Preview Renderer

Renders a deliberately small markdown dialect from untrusted note text into
escaped, sanitized HTML. Zero runtime dependencies, no parse tree, one
forward pass per call.

Quick Start:
    >>> from mdnote import render
    >>> render("# Hello, **World**")
    '<h1>Hello, <strong>World</strong></h1>'

    >>> # Relative links resolve against the hosting document's origin
    >>> from mdnote import Markdown
    >>> md = Markdown(origin="https://notes.example")
    >>> md("[home](/)")
    '<p><a href="https://notes.example/" target="_blank" rel="noopener noreferrer">home</a></p>'

Supported syntax:
    headings (# to ######), paragraphs, - * + and 1. lists, > quotes,
    ``` fenced code, thematic breaks, `code`, **strong**, *em*, _em_,
    [links](url "title") restricted to http, https, mailto and tel.
"""

from mdnote.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from mdnote.errors import ConfigError, MdnoteError
from mdnote.lexer import Lexer
from mdnote.renderers.html import HtmlRenderer
from mdnote.sanitize import ALLOWED_SCHEMES, sanitize_url
from mdnote.tokens import Token, TokenType
from mdnote.utils.text import escape_html

__version__ = "0.1.0"


def render(source: str, *, origin: str | None = None) -> str:
    """Render markdown source to an HTML fragment.

    Args:
        source: Untrusted markdown text
        origin: Document origin for relative links. Defaults to the active
            RenderConfig (``http://localhost`` unless configured).

    Returns:
        HTML string; "" for empty input

    Raises:
        ConfigError: If origin is given and is not an absolute http(s) URL.
            Never raised because of the content of source.

    Example:
        >>> render("- a\\n- b")
        '<ul><li>a</li><li>b</li></ul>'
    """
    if origin is None:
        return HtmlRenderer().render(source)
    return HtmlRenderer(origin=RenderConfig(origin=origin).origin).render(source)


class Markdown:
    """Markdown processor bound to one render configuration.

    Usage:
        >>> md = Markdown(origin="https://notes.example")
        >>> md("Hello *World*")
        '<p>Hello <em>World</em></p>'

    Thread Safety:
        Uses ContextVar for configuration. Safe to use multiple Markdown
        instances concurrently from different threads.
    """

    __slots__ = ("_config", "_renderer")

    def __init__(self, *, origin: str | None = None, config: RenderConfig | None = None) -> None:
        """Initialize Markdown processor.

        Args:
            origin: Document origin; shorthand for ``RenderConfig(origin=...)``
            config: Full render configuration (takes precedence over origin)

        Raises:
            ConfigError: If the origin is not an absolute http(s) URL.
        """
        if config is None:
            config = RenderConfig(origin=origin) if origin is not None else RenderConfig()
        self._config = config
        self._renderer = HtmlRenderer()

    @property
    def config(self) -> RenderConfig:
        """The render configuration used by this processor."""
        return self._config

    def __call__(self, source: str) -> str:
        """Render markdown source to HTML."""
        with render_config_context(self._config):
            return self._renderer.render(source)

    def render(self, source: str) -> str:
        """Render markdown source to HTML (alias for calling the instance)."""
        return self(source)


__all__ = [
    "ALLOWED_SCHEMES",
    "ConfigError",
    "HtmlRenderer",
    "Lexer",
    "Markdown",
    "MdnoteError",
    "RenderConfig",
    "Token",
    "TokenType",
    "__version__",
    "escape_html",
    "get_render_config",
    "render",
    "render_config_context",
    "reset_render_config",
    "sanitize_url",
    "set_render_config",
]
