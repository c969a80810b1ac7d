"""Utility modules for mdnote.

Provides:
- text: escape_html, normalize_newlines
- logger: get_logger for logging
"""

from mdnote.utils.logger import get_logger
from mdnote.utils.text import escape_html, normalize_newlines

__all__ = [
    "escape_html",
    "get_logger",
    "normalize_newlines",
]
