"""Property-based tests for the renderer's safety guarantees.

Whatever the input, the output must be a string, every ``<`` must open a
tag the renderer itself emits, text between tags must carry no raw
HTML-significant characters, and every href must be allow-listed or ``#``.
"""

import html
import re
from urllib.parse import urlsplit

from hypothesis import given, settings
from hypothesis import strategies as st

from mdnote import render
from mdnote.lexer import Lexer
from mdnote.sanitize import ALLOWED_SCHEMES
from mdnote.tokens import TokenType

_ALLOWED_TAG = re.compile(
    r"</?(?:p|h[1-6]|ul|ol|li|blockquote|br|hr|pre|code|strong|em|a)[\s>/]"
)
_TAG = re.compile(r"<[^>]*>")
_HREF = re.compile(r'href="([^"]*)"')
_ENTITY = re.compile(r"&(?:amp|lt|gt|quot|#39);")

# Markdown-significant characters mixed with hostile HTML fragments
markdown_text = st.lists(
    st.sampled_from(
        list("#*-_+`[]()>\"'&<!/\\:. \t\r\n1aZ")
        + ["javascript:", "http://", "mailto:", "<script>", "```", "&amp;", "onerror="]
    ),
    max_size=300,
).map("".join)


class TestTotality:
    @given(st.text(max_size=1000))
    @settings(max_examples=300)
    def test_never_raises_on_arbitrary_text(self, source: str) -> None:
        assert isinstance(render(source), str)

    @given(markdown_text)
    @settings(max_examples=300)
    def test_never_raises_on_markdown_like_text(self, source: str) -> None:
        assert isinstance(render(source), str)

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_always_ends_with_single_eof(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        assert tokens[-1].type is TokenType.EOF
        assert sum(1 for t in tokens if t.type is TokenType.EOF) == 1


class TestOutputSafety:
    @given(markdown_text)
    @settings(max_examples=300)
    def test_every_angle_bracket_opens_known_tag(self, source: str) -> None:
        out = render(source)
        for match in re.finditer("<", out):
            assert _ALLOWED_TAG.match(out, match.start()), out

    @given(markdown_text)
    @settings(max_examples=300)
    def test_no_script_tags(self, source: str) -> None:
        assert "<script" not in render(source).lower()

    @given(markdown_text)
    @settings(max_examples=300)
    def test_text_between_tags_is_escaped(self, source: str) -> None:
        text = _TAG.sub("", render(source))
        for char in "<>\"'":
            assert char not in text
        assert text.count("&") == len(_ENTITY.findall(text))

    @given(markdown_text)
    @settings(max_examples=300)
    def test_hrefs_are_allow_listed(self, source: str) -> None:
        for href in _HREF.findall(render(source)):
            assert href == "#" or urlsplit(html.unescape(href)).scheme in ALLOWED_SCHEMES


class TestStructure:
    @given(
        st.lists(
            st.text(alphabet="abc xyz", min_size=1, max_size=10).filter(str.strip),
            max_size=20,
        )
    )
    def test_consecutive_items_share_one_list(self, items: list[str]) -> None:
        out = render("\n".join(f"- {item}" for item in items))
        if items:
            assert out.count("<ul>") == 1
            assert out.count("<li>") == len(items)

    @given(st.text(max_size=200))
    def test_open_and_close_tags_balance_for_blocks(self, source: str) -> None:
        out = render(source)
        for tag in ("ul", "ol", "blockquote", "pre"):
            assert out.count(f"<{tag}>") == out.count(f"</{tag}>")
