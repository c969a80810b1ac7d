"""Line classifiers for the mdnote lexer.

Each classifier is a mixin that decides whether a single line matches one
block type. Classifiers only look at the line they are given; precedence
between them is decided by the block scanner.
"""

from mdnote.lexer.classifiers.fence import FenceClassifierMixin
from mdnote.lexer.classifiers.heading import HeadingClassifierMixin
from mdnote.lexer.classifiers.list import ListClassifierMixin
from mdnote.lexer.classifiers.quote import QuoteClassifierMixin
from mdnote.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]
