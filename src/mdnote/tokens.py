"""Token and TokenType definitions for the mdnote lexer.

The lexer classifies each source line into exactly one Token; the HTML
renderer consumes the stream in a single forward pass.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer, in classification priority order."""

    # Code
    FENCED_CODE_START = auto()  # ```lang
    FENCED_CODE_CONTENT = auto()
    FENCED_CODE_END = auto()  # ``` (or synthesized at EOF)

    # Blocks
    THEMATIC_BREAK = auto()  # ***, - - -, ___
    BLOCK_QUOTE_LINE = auto()  # > text
    ATX_HEADING = auto()  # # Heading
    LIST_ITEM = auto()  # - item, 1. item

    # Document structure
    BLANK_LINE = auto()
    PARAGRAPH_LINE = auto()
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified source line.

    Attributes:
        type: The token type
        value: Text payload. For headings, list items and paragraphs this is
            the stripped text; for block quote lines the remainder after the
            marker; for code content the raw line; for a fence start the
            language tag (unused by the renderer).
        lineno: Source line number (1-indexed)
        level: Heading level 1-6 (0 for other tokens)
        ordered: True for ordered list items

    """

    type: TokenType
    value: str
    lineno: int
    level: int = 0
    ordered: bool = False

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno})"
