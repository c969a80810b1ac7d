"""Link target sanitization for mdnote.

Every ``href`` the renderer emits passes through sanitize_url(). Targets are
resolved against the hosting document's origin; anything that fails to
resolve or lands outside the allowed scheme set collapses to the inert
placeholder ``#``.

Example:
    >>> from mdnote.sanitize import sanitize_url
    >>> sanitize_url("/notes/1", "https://notes.example")
    'https://notes.example/notes/1'
    >>> sanitize_url("javascript:alert(1)", "https://notes.example")
    '#'
"""

from urllib.parse import urljoin, urlsplit, urlunsplit

from mdnote.utils.logger import get_logger

logger = get_logger(__name__)

SAFE_PLACEHOLDER = "#"

ALLOWED_SCHEMES = frozenset(("http", "https", "mailto", "tel"))

# Schemes whose resolved form must carry a host
_HIERARCHICAL_SCHEMES = frozenset(("http", "https"))

# C0 controls and space, trimmed from both ends before parsing
_C0_CONTROL_OR_SPACE = "".join(chr(c) for c in range(0x21))

# Removed anywhere in the URL before parsing
_TAB_OR_NEWLINE = str.maketrans("", "", "\t\n\r")


def sanitize_url(url: str, origin: str) -> str:
    """Resolve a link target and constrain it to the allowed schemes.

    Args:
        url: Raw (unescaped) link target as written by the user
        origin: Absolute origin of the hosting document

    Returns:
        Normalized absolute URL, or ``#`` if the target is malformed or uses a
        scheme outside http, https, mailto and tel. The result is not
        HTML-escaped.
    """
    candidate = url.strip(_C0_CONTROL_OR_SPACE).translate(_TAB_OR_NEWLINE)
    try:
        parts = urlsplit(urljoin(origin, candidate))
        # Port is validated lazily by urllib; force it here
        parts.port
    except ValueError:
        logger.debug("Rejected malformed link target %r", url)
        return SAFE_PLACEHOLDER

    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        logger.debug("Rejected link target with scheme %r", scheme)
        return SAFE_PLACEHOLDER

    netloc = parts.netloc.lower()
    path = parts.path
    if scheme in _HIERARCHICAL_SCHEMES:
        if not parts.hostname:
            logger.debug("Rejected %s link target without host: %r", scheme, url)
            return SAFE_PLACEHOLDER
        path = path or "/"

    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


__all__ = ["ALLOWED_SCHEMES", "SAFE_PLACEHOLDER", "sanitize_url"]
