"""HTML renderer driving the lexer in a single forward pass.

There is no parse tree: each token from the lexer is turned into markup
immediately and appended to a StringBuilder. The only memory between lines
is which multi-line block is open, held in one OpenBlock slot rather than a
stack, so lists and block quotes never nest.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from mdnote.config import get_render_config
from mdnote.lexer import Lexer
from mdnote.parsing.inline import render_inline
from mdnote.stringbuilder import StringBuilder
from mdnote.tokens import Token, TokenType
from mdnote.utils.logger import get_logger
from mdnote.utils.text import escape_html

logger = get_logger(__name__)


class OpenBlock(Enum):
    """The multi-line block currently accepting continuation lines."""

    NONE = auto()
    UNORDERED_LIST = auto()
    ORDERED_LIST = auto()
    BLOCK_QUOTE = auto()


_OPEN_TAGS: dict[OpenBlock, str] = {
    OpenBlock.UNORDERED_LIST: "<ul>",
    OpenBlock.ORDERED_LIST: "<ol>",
    OpenBlock.BLOCK_QUOTE: "<blockquote>",
}

_CLOSE_TAGS: dict[OpenBlock, str] = {
    OpenBlock.UNORDERED_LIST: "</ul>",
    OpenBlock.ORDERED_LIST: "</ol>",
    OpenBlock.BLOCK_QUOTE: "</blockquote>",
}


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call; never shared between calls.
    """

    origin: str
    sb: StringBuilder = field(default_factory=StringBuilder)
    open_block: OpenBlock = OpenBlock.NONE
    code_lines: list[str] = field(default_factory=list)
    line_count: int = 0


class HtmlRenderer:
    """Render markdown source to sanitized HTML.

    Usage:
        >>> renderer = HtmlRenderer()
        >>> renderer.render("# Hello **World**")
        '<h1>Hello <strong>World</strong></h1>'

    The renderer is total: it returns markup for every string and never
    raises on malformed input.
    """

    __slots__ = ("_origin",)

    def __init__(self, *, origin: str | None = None) -> None:
        """Initialize renderer.

        Args:
            origin: Document origin for resolving relative links. When None,
                the origin of the active RenderConfig is read at render time.
        """
        self._origin = origin

    def render(self, source: str) -> str:
        """Render markdown source to an HTML fragment.

        Args:
            source: Untrusted markdown text, any line endings, may be empty

        Returns:
            HTML string ("" for empty input)
        """
        if not source:
            return ""

        ctx = RenderContext(origin=self._origin or get_render_config().origin)
        for token in Lexer(source).tokenize():
            self._render_token(token, ctx)

        html = ctx.sb.build()
        logger.debug("Rendered %d lines into %d characters", ctx.line_count, len(html))
        return html

    # =========================================================================
    # Token dispatch
    # =========================================================================

    def _render_token(self, token: Token, ctx: RenderContext) -> None:
        """Apply one token to the open-block state and emit its markup."""
        ctx.line_count = token.lineno
        match token.type:
            case TokenType.FENCED_CODE_START:
                self._close_block(ctx)
                ctx.code_lines.clear()
            case TokenType.FENCED_CODE_CONTENT:
                ctx.code_lines.append(token.value)
            case TokenType.FENCED_CODE_END:
                self._render_fenced_code(ctx)
            case TokenType.THEMATIC_BREAK:
                self._close_block(ctx)
                ctx.sb.append("<hr />")
            case TokenType.BLOCK_QUOTE_LINE:
                self._render_block_quote_line(token, ctx)
            case TokenType.ATX_HEADING:
                self._close_block(ctx)
                self._render_heading(token, ctx)
            case TokenType.LIST_ITEM:
                self._render_list_item(token, ctx)
            case TokenType.PARAGRAPH_LINE:
                self._close_block(ctx)
                ctx.sb.append(f"<p>{self._inline(token.value, ctx)}</p>")
            case TokenType.BLANK_LINE | TokenType.EOF:
                self._close_block(ctx)

    # =========================================================================
    # Open-block state
    # =========================================================================

    def _open_block(self, block: OpenBlock, ctx: RenderContext) -> None:
        """Make block the open block, closing a different one first."""
        if ctx.open_block is block:
            return
        self._close_block(ctx)
        ctx.sb.append(_OPEN_TAGS[block])
        ctx.open_block = block

    def _close_block(self, ctx: RenderContext) -> None:
        """Close the open list or block quote, if any."""
        if ctx.open_block is OpenBlock.NONE:
            return
        ctx.sb.append(_CLOSE_TAGS[ctx.open_block])
        ctx.open_block = OpenBlock.NONE

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_fenced_code(self, ctx: RenderContext) -> None:
        """Emit the collected code block, escaped as one unit."""
        code = "".join(f"{line}\n" for line in ctx.code_lines)
        ctx.code_lines.clear()
        ctx.sb.append("<pre><code>").append(escape_html(code)).append("</code></pre>")

    def _render_block_quote_line(self, token: Token, ctx: RenderContext) -> None:
        self._open_block(OpenBlock.BLOCK_QUOTE, ctx)
        ctx.sb.append(self._inline(token.value, ctx)).append("<br />")

    def _render_heading(self, token: Token, ctx: RenderContext) -> None:
        level = token.level
        ctx.sb.append(f"<h{level}>{self._inline(token.value, ctx)}</h{level}>")

    def _render_list_item(self, token: Token, ctx: RenderContext) -> None:
        kind = OpenBlock.ORDERED_LIST if token.ordered else OpenBlock.UNORDERED_LIST
        self._open_block(kind, ctx)
        ctx.sb.append(f"<li>{self._inline(token.value, ctx)}</li>")

    @staticmethod
    def _inline(text: str, ctx: RenderContext) -> str:
        """Escape raw line text, then render its inline spans."""
        return render_inline(escape_html(text), ctx.origin)
