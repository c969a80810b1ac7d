"""Lexer operating modes."""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.
    
    The lexer switches between modes based on context:
    - BLOCK: Between blocks, classifying each line
    - CODE_FENCE: Inside fenced code block, collecting lines verbatim
        
    """

    BLOCK = auto()  # Between blocks
    CODE_FENCE = auto()  # Inside fenced code block
