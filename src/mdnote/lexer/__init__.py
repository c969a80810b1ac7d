"""Line-oriented lexer for the mdnote renderer.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + cursor)
├── modes.py             # LexerMode enum
├── classifiers/         # Per-line classification mixins
│   ├── fence.py         # Fenced code open/close
│   ├── thematic.py      # Thematic break
│   ├── quote.py         # Block quote
│   ├── heading.py       # ATX heading
│   └── list.py          # List items
└── scanners/            # Mode-specific scanners
    ├── block.py         # Block mode (precedence dispatch)
    └── fence.py         # Code fence mode

Usage:
    >>> from mdnote.lexer import Lexer
    >>> [t.type.name for t in Lexer("- a\\n- b").tokenize()]
    ['LIST_ITEM', 'LIST_ITEM', 'EOF']

"""

from mdnote.lexer.core import Lexer
from mdnote.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
