"""Inline parsing and character classification for mdnote."""

from mdnote.parsing.inline import render_inline

__all__ = ["render_inline"]
