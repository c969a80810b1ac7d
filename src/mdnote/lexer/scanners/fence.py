"""Fenced code mode scanner mixin."""

from collections.abc import Iterator

from mdnote.lexer.modes import LexerMode
from mdnote.tokens import Token, TokenType


class FenceScannerMixin:
    """Mixin providing fenced code mode scanning logic.

    Emits each line inside a fenced code block verbatim until the closing
    fence. The closing fence line is consumed.

    """

    # Set by the Lexer class
    _mode: LexerMode

    def _advance(self) -> str:
        """Return the current line and move the cursor past it."""
        raise NotImplementedError

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        *,
        level: int = 0,
        ordered: bool = False,
    ) -> Token:
        """Create token for the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line is a closing fence. Implemented by FenceClassifierMixin."""
        raise NotImplementedError

    def _scan_code_fence_content(self) -> Iterator[Token]:
        """Scan one line inside a fenced code block.

        Yields:
            FENCED_CODE_CONTENT for a content line, or FENCED_CODE_END
            when the closing fence is found.
        """
        line = self._advance()

        if self._is_closing_fence(line):
            self._mode = LexerMode.BLOCK
            yield self._make_token(TokenType.FENCED_CODE_END, line)
            return

        yield self._make_token(TokenType.FENCED_CODE_CONTENT, line)
