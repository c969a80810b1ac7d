"""Thematic break classifier mixin."""

from __future__ import annotations

from mdnote.parsing.charsets import THEMATIC_BREAK_CHARS
from mdnote.tokens import Token, TokenType


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

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

    def _try_classify_thematic_break(self, line: str) -> Token | None:
        """Try to classify line as thematic break.

        Thematic breaks are 3+ of the same character (-, *, _) with
        optional whitespace around and between them.

        Args:
            line: Full line content

        Returns:
            Token if valid break, None otherwise.
        """
        content = line.strip()
        if not content:
            return None

        char = content[0]
        if char not in THEMATIC_BREAK_CHARS:
            return None

        count = 0
        for c in content:
            if c == char:
                count += 1
            elif c.isspace():
                continue
            else:
                return None

        if count >= 3:
            return self._make_token(TokenType.THEMATIC_BREAK, content)

        return None
