"""Block mode scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from mdnote.tokens import Token, TokenType


class BlockScannerMixin:
    """Mixin providing block mode scanning logic.

    Takes the line under the cursor, advances past it, and emits the first
    classification that matches. The order of the checks below is the
    precedence between block types.

    """

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
        raise NotImplementedError

    # Classifier methods (provided by classifier mixins)
    def _try_classify_fence_start(self, line: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_thematic_break(self, line: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_block_quote(self, line: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_atx_heading(self, line: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_list_item(self, line: str) -> Token | None:
        raise NotImplementedError

    def _scan_block(self) -> Iterator[Token]:
        """Classify one line in block mode."""
        line = self._advance()

        token = self._try_classify_fence_start(line)
        if token:
            yield token
            return

        token = self._try_classify_thematic_break(line)
        if token:
            yield token
            return

        token = self._try_classify_block_quote(line)
        if token:
            yield token
            return

        token = self._try_classify_atx_heading(line)
        if token:
            yield token
            return

        token = self._try_classify_list_item(line)
        if token:
            yield token
            return

        if not line or line.isspace():
            yield self._make_token(TokenType.BLANK_LINE, "")
            return

        yield self._make_token(TokenType.PARAGRAPH_LINE, line.strip())
