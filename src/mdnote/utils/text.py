"""Text primitives shared by the block and inline stages.

Example:
    >>> from mdnote.utils.text import escape_html
    >>> escape_html("<b>Tom & 'Jerry'</b>")
    '&lt;b&gt;Tom &amp; &#39;Jerry&#39;&lt;/b&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters.

    Converts special characters to entities, ampersand first:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#39;

    The result is safe both as element content and inside a double-quoted
    attribute value. Escaping is not idempotent: ``&amp;`` becomes
    ``&amp;amp;``.

    Args:
        text: Raw text

    Returns:
        Escaped text
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    return escaped.replace("&#x27;", "&#39;")


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")
