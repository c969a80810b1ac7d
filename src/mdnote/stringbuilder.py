"""Append-only StringBuilder for O(n) markup accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Fragments are never revisited once
appended, which is all a single forward render pass needs.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.
    
    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<h1>").append("Hello").append("</h1>")
            >>> sb.build()
            '<h1>Hello</h1>'
    
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
