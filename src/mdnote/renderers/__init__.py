"""Output renderers for mdnote."""

from mdnote.renderers.html import HtmlRenderer, OpenBlock, RenderContext

__all__ = ["HtmlRenderer", "OpenBlock", "RenderContext"]
