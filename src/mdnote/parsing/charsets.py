"""Character sets for O(1) line classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)
"""

# Fence marker; only backtick fences are recognized
FENCE_MARKER = "```"

# Thematic break characters
THEMATIC_BREAK_CHARS: frozenset[str] = frozenset("-*_")

# Unordered list marker characters
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*+")

# Block quote marker
BLOCK_QUOTE_MARKER = ">"

# ATX heading marker
HEADING_MARKER = "#"

MAX_HEADING_LEVEL = 6

# ASCII digits only; other Unicode digits do not start ordered lists
DIGITS: frozenset[str] = frozenset("0123456789")
