"""Tests for fences left open at end of input."""

from mdnote import render
from mdnote.lexer import Lexer
from mdnote.tokens import TokenType


class TestUnterminatedFence:
    def test_synthesized_end_before_eof(self) -> None:
        tokens = list(Lexer("```\ncode").tokenize())
        assert [t.type for t in tokens] == [
            TokenType.FENCED_CODE_START,
            TokenType.FENCED_CODE_CONTENT,
            TokenType.FENCED_CODE_END,
            TokenType.EOF,
        ]
        assert tokens[2].value == ""

    def test_consumes_to_end_of_input(self) -> None:
        assert render("```\n# a\n- b\n> c") == "<pre><code># a\n- b\n&gt; c\n</code></pre>"

    def test_trailing_newline_is_an_empty_line(self) -> None:
        assert render("```\ncode\n") == "<pre><code>code\n\n</code></pre>"

    def test_closes_open_list_first(self) -> None:
        assert render("- a\n```\nx") == "<ul><li>a</li></ul><pre><code>x\n</code></pre>"
