"""List item classifier mixin."""

from __future__ import annotations

from mdnote.parsing.charsets import DIGITS, UNORDERED_LIST_MARKERS
from mdnote.tokens import Token, TokenType


class ListClassifierMixin:
    """Mixin providing list item classification."""

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

    def _try_classify_list_item(self, line: str) -> Token | None:
        """Try to classify line as a list item.

        Unordered: optional indent, one of ``-*+``, whitespace, text.
        Ordered: optional indent, ASCII digits, ``.``, whitespace, text.
        Indentation never nests; every item belongs to the one open list.
        """
        content = line.lstrip()
        if not content:
            return None

        # Unordered: -, *, +
        if content[0] in UNORDERED_LIST_MARKERS:
            text = self._list_item_text(content[1:])
            if text is None:
                return None
            return self._make_token(TokenType.LIST_ITEM, text)

        # Ordered: 1.
        pos = 0
        while pos < len(content) and content[pos] in DIGITS:
            pos += 1
        if pos == 0 or content[pos : pos + 1] != ".":
            return None

        text = self._list_item_text(content[pos + 1 :])
        if text is None:
            return None
        return self._make_token(TokenType.LIST_ITEM, text, ordered=True)

    @staticmethod
    def _list_item_text(after_marker: str) -> str | None:
        """Return stripped item text, or None if the marker is not followed by
        whitespace and non-blank text."""
        if not after_marker or not after_marker[0].isspace():
            return None
        text = after_marker.strip()
        return text or None
