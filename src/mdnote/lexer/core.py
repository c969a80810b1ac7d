"""Line-oriented state-machine lexer.

Splits the normalized source into lines and classifies them one at a time.
The cursor only moves forward; a fenced code block is consumed line by line
in CODE_FENCE mode until its closing fence or end of input.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from mdnote.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from mdnote.lexer.modes import LexerMode
from mdnote.lexer.scanners import BlockScannerMixin, FenceScannerMixin
from mdnote.tokens import Token, TokenType
from mdnote.utils.text import normalize_newlines


class Lexer(
    # Classifiers (pure logic, no cursor movement)
    FenceClassifierMixin,
    ThematicClassifierMixin,
    QuoteClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    # Scanners (mode-specific scanning logic)
    BlockScannerMixin,
    FenceScannerMixin,
):
    """Line-oriented lexer producing one token per source line.

    Usage:
            >>> lexer = Lexer("# Hello\\n\\nWorld")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(ATX_HEADING, 'Hello', 1)
        Token(BLANK_LINE, '', 2)
        Token(PARAGRAPH_LINE, 'World', 3)
        Token(EOF, '', 3)

    An unterminated fence is closed with a synthesized FENCED_CODE_END
    (empty value) before EOF.

    """

    __slots__ = (
        "_lines",
        "_line_count",
        "_index",
        "_lineno",
        "_mode",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text, any line-ending convention
        """
        self._lines = normalize_newlines(source).split("\n") if source else []
        self._line_count = len(self._lines)
        self._index = 0
        self._lineno = 0
        self._mode = LexerMode.BLOCK

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF
        """
        while self._index < self._line_count:
            yield from self._dispatch_mode()

        if self._mode == LexerMode.CODE_FENCE:
            self._mode = LexerMode.BLOCK
            yield self._make_token(TokenType.FENCED_CODE_END, "")

        yield self._make_token(TokenType.EOF, "")

    def _dispatch_mode(self) -> Iterator[Token]:
        """Dispatch to appropriate scanner based on current mode."""
        if self._mode == LexerMode.BLOCK:
            yield from self._scan_block()
        elif self._mode == LexerMode.CODE_FENCE:
            yield from self._scan_code_fence_content()

    def _advance(self) -> str:
        """Return the line under the cursor and move past it."""
        line = self._lines[self._index]
        self._index += 1
        self._lineno = self._index
        return line

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        *,
        level: int = 0,
        ordered: bool = False,
    ) -> Token:
        """Create a Token for the most recently consumed line."""
        return Token(
            type=token_type,
            value=value,
            lineno=self._lineno,
            level=level,
            ordered=ordered,
        )
