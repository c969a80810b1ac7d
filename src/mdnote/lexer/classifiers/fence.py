"""Fenced code block classifier mixin."""

from mdnote.lexer.modes import LexerMode
from mdnote.parsing.charsets import FENCE_MARKER
from mdnote.tokens import Token, TokenType


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    # Set by the Lexer class
    _mode: LexerMode

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

    def _try_classify_fence_start(self, line: str) -> Token | None:
        """Try to classify line as an opening fence.

        The fence must start at column 0. Anything after the three backticks
        is a language tag; it is kept on the token but otherwise ignored.

        Args:
            line: Full line content

        Returns:
            Token if the line opens a fence, None otherwise.
        """
        if not line.startswith(FENCE_MARKER):
            return None

        self._mode = LexerMode.CODE_FENCE
        info = line[len(FENCE_MARKER) :].strip()
        return self._make_token(TokenType.FENCED_CODE_START, info)

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line closes the current code block.

        A closing fence is exactly three backticks at column 0, optionally
        followed by whitespace. Longer runs are code content.
        """
        if not line.startswith(FENCE_MARKER):
            return False
        rest = line[len(FENCE_MARKER) :]
        return not rest or rest.isspace()
