"""Inline span rendering over already-escaped line text.

The input has been through escape_html(), so it holds no raw markup and no
raw quotes; every ``<`` in the output comes from a rule below. Rules run in
a fixed order, each a global first-pair-wins substitution over the result of
the previous one:

1. Code spans      `x`            -> <code>x</code>
2. Strong          **x**          -> <strong>x</strong>
3. Emphasis        *x*            -> <em>x</em>
4. Emphasis        _x_            -> <em>x</em>
5. Links           [t](url "ti")  -> <a href=... target=... rel=...>t</a>

Code span content is set aside as ``<N>`` slots before rules 2-5 run and put
back at the end, so it is never re-parsed. Link targets and titles are set
aside the same way as ``<@N>`` slots, so emphasis delimiters inside a URL
stay part of the URL. Link labels still go through rules 2-4. Raw ``<``
cannot occur in escaped text, which keeps the slots unambiguous.

Example:
    >>> render_inline("**bold** and `**code**`", "http://localhost")
    '<strong>bold</strong> and <code>**code**</code>'
"""

from __future__ import annotations

import html
import re
from functools import partial
from typing import NamedTuple

from mdnote.sanitize import sanitize_url
from mdnote.utils.text import escape_html

_CODE_SPAN = re.compile(r"`([^`]+)`")
_CODE_SLOT = re.compile(r"<(\d+)>")

# Order matters: strong must consume ** pairs before single-asterisk emphasis
_EMPHASIS_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*([^*]+)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(?!\*)([^*]+)\*"), r"<em>\1</em>"),
    (re.compile(r"_([^_]+)_"), r"<em>\1</em>"),
)

# Title quotes arrive escaped as &quot;
_LINK = re.compile(
    r"\[([^\]]+)\]"
    r"(\(([^)\s]+)(?:\s+&quot;((?:(?!&quot;).)+)&quot;)?\))"
)
_LINK_SLOT = re.compile(r"<@(\d+)>")
_LINKED_LABEL = re.compile(r"\[([^\]]+)\]<@(\d+)>")


class _LinkTarget(NamedTuple):
    """A link's destination, held back from the emphasis rules."""

    url: str
    title: str | None
    source: str


def render_inline(escaped: str, origin: str) -> str:
    """Render inline spans in one line of escaped text.

    Args:
        escaped: Line text already passed through escape_html()
        origin: Document origin used to resolve relative link targets

    Returns:
        Markup fragment
    """
    if not escaped:
        return ""

    code_spans: list[str] = []
    text = _CODE_SPAN.sub(partial(_stash_code_span, code_spans=code_spans), escaped)

    targets: list[_LinkTarget] = []
    text = _LINK.sub(partial(_stash_link_target, targets=targets), text)

    for pattern, replacement in _EMPHASIS_RULES:
        text = pattern.sub(replacement, text)

    if targets:
        text = _LINKED_LABEL.sub(
            partial(_render_link, origin=origin, targets=targets, code_spans=code_spans),
            text,
        )
        # Slots whose label did not survive emphasis go back as written
        text = _LINK_SLOT.sub(lambda m: targets[int(m.group(1))].source, text)

    if code_spans:
        text = _CODE_SLOT.sub(partial(_restore_code_span, code_spans=code_spans), text)
    return text


def _stash_code_span(match: re.Match[str], *, code_spans: list[str]) -> str:
    code_spans.append(match.group(1))
    return f"<{len(code_spans) - 1}>"


def _restore_code_span(
    match: re.Match[str], *, code_spans: list[str], literal: bool = False
) -> str:
    index = int(match.group(1))
    if index >= len(code_spans):
        return match.group(0)
    if literal:
        return f"`{code_spans[index]}`"
    return f"<code>{code_spans[index]}</code>"


def _stash_link_target(match: re.Match[str], *, targets: list[_LinkTarget]) -> str:
    label, source, url, title = match.groups()
    targets.append(_LinkTarget(url, title, source))
    return f"[{label}]<@{len(targets) - 1}>"


def _plain_attribute_text(text: str, code_spans: list[str]) -> str:
    """Put code spans inside a link target or title back as literal text."""
    return _CODE_SLOT.sub(
        partial(_restore_code_span, code_spans=code_spans, literal=True), text
    )


def _render_link(
    match: re.Match[str],
    *,
    origin: str,
    targets: list[_LinkTarget],
    code_spans: list[str],
) -> str:
    label = match.group(1)
    target = targets[int(match.group(2))]

    raw_url = html.unescape(_plain_attribute_text(target.url, code_spans))
    href = escape_html(sanitize_url(raw_url, origin))

    title_attr = ""
    if target.title:
        # Already escaped once with the rest of the line
        title_attr = f' title="{_plain_attribute_text(target.title, code_spans)}"'

    return (
        f'<a href="{href}" target="_blank" rel="noopener noreferrer"{title_attr}>'
        f"{label}</a>"
    )
