"""Block quote classifier mixin."""

from mdnote.parsing.charsets import BLOCK_QUOTE_MARKER
from mdnote.tokens import Token, TokenType


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

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

    def _try_classify_block_quote(self, line: str) -> Token | None:
        """Try to classify line as block quote content.

        The ``>`` marker may be indented. One whitespace character after the
        marker belongs to the marker; the rest of the line is kept as-is,
        including any further block syntax, which is rendered as text.
        """
        content = line.lstrip()
        if not content.startswith(BLOCK_QUOTE_MARKER):
            return None

        remaining = content[1:]
        if remaining and remaining[0].isspace():
            remaining = remaining[1:]

        return self._make_token(TokenType.BLOCK_QUOTE_LINE, remaining)
