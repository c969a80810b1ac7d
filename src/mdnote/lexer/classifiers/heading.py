"""ATX heading classifier mixin."""

from mdnote.parsing.charsets import HEADING_MARKER, MAX_HEADING_LEVEL
from mdnote.tokens import Token, TokenType


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

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

    def _try_classify_atx_heading(self, line: str) -> Token | None:
        """Try to classify line as ATX heading.

        ATX headings start at column 0 with 1-6 # characters, then at least
        one whitespace character, then non-blank text. Trailing # sequences
        are part of the text.

        Args:
            line: Full line content

        Returns:
            Token if valid heading, None otherwise.
        """
        level = 0
        while level < len(line) and line[level] == HEADING_MARKER:
            level += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        rest = line[level:]
        if not rest or not rest[0].isspace():
            return None

        text = rest.strip()
        if not text:
            return None

        return self._make_token(TokenType.ATX_HEADING, text, level=level)
