"""Tests for per-line classification and precedence."""

import pytest

from mdnote.lexer import Lexer, LexerMode
from mdnote.tokens import Token, TokenType


def _tokens(source: str) -> list[Token]:
    return list(Lexer(source).tokenize())


def _types(source: str) -> list[TokenType]:
    return [t.type for t in _tokens(source)]


class TestSingleLines:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("```", TokenType.FENCED_CODE_START),
            ("```js", TokenType.FENCED_CODE_START),
            ("***", TokenType.THEMATIC_BREAK),
            ("- - -", TokenType.THEMATIC_BREAK),
            ("> quote", TokenType.BLOCK_QUOTE_LINE),
            ("# h", TokenType.ATX_HEADING),
            ("- item", TokenType.LIST_ITEM),
            ("1. item", TokenType.LIST_ITEM),
            ("   ", TokenType.BLANK_LINE),
            ("text", TokenType.PARAGRAPH_LINE),
        ],
    )
    def test_classification(self, line: str, expected: TokenType) -> None:
        assert _types(line)[0] is expected

    def test_heading_level_and_text(self) -> None:
        token = _tokens("###   Title  ")[0]
        assert token.level == 3
        assert token.value == "Title"

    def test_ordered_flag(self) -> None:
        unordered, ordered = _tokens("- a\n2. b")[:2]
        assert unordered.ordered is False
        assert ordered.ordered is True
        assert ordered.value == "b"

    def test_block_quote_keeps_remainder(self) -> None:
        assert _tokens(">  two spaces ")[0].value == " two spaces "

    def test_paragraph_is_stripped(self) -> None:
        assert _tokens("  text  ")[0].value == "text"

    def test_fence_info(self) -> None:
        assert _tokens("```python  ")[0].value == "python"


class TestPrecedence:
    def test_rule_before_list(self) -> None:
        assert _types("* * *")[0] is TokenType.THEMATIC_BREAK

    def test_fence_before_everything(self) -> None:
        assert _types("```\n# h\n- i\n```")[:4] == [
            TokenType.FENCED_CODE_START,
            TokenType.FENCED_CODE_CONTENT,
            TokenType.FENCED_CODE_CONTENT,
            TokenType.FENCED_CODE_END,
        ]

    def test_quote_before_heading(self) -> None:
        assert _types("> # h")[0] is TokenType.BLOCK_QUOTE_LINE

    def test_unordered_before_ordered(self) -> None:
        token = _tokens("- 1. x")[0]
        assert token.ordered is False
        assert token.value == "1. x"


class TestCursor:
    def test_line_numbers(self) -> None:
        assert [t.lineno for t in _tokens("a\n\nb")] == [1, 2, 3, 3]

    def test_fence_consumes_lines(self) -> None:
        tokens = _tokens("```\nx\n```\nafter")
        assert [t.type for t in tokens] == [
            TokenType.FENCED_CODE_START,
            TokenType.FENCED_CODE_CONTENT,
            TokenType.FENCED_CODE_END,
            TokenType.PARAGRAPH_LINE,
            TokenType.EOF,
        ]
        assert tokens[3].lineno == 4

    def test_code_content_is_verbatim(self) -> None:
        tokens = _tokens("```\n  **raw**  \n```")
        assert tokens[1].value == "  **raw**  "

    def test_mode_returns_to_block(self) -> None:
        lexer = Lexer("```\nx\n```")
        list(lexer.tokenize())
        assert lexer._mode is LexerMode.BLOCK

    def test_empty_source(self) -> None:
        assert _types("") == [TokenType.EOF]


class TestTokenRepr:
    def test_compact_repr(self) -> None:
        token = Token(TokenType.PARAGRAPH_LINE, "x" * 30, 7)
        assert repr(token) == f"Token(PARAGRAPH_LINE, {'x' * 17 + '...'!r}, 7)"
