"""Render a note in one call: zero config, zero deps."""

from mdnote import render

html = render("# Hello **World**\n\n- one\n- two")
print(html)
