"""StringBuilder for O(n) text accumulation.

The text and tree-view renderers run once per keystroke, so output is
appended to a list and joined once at the end instead of being built by
repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each render call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Appends to a list, joins once at the end.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("[").append("true").append("]")
            >>> sb.build()
            '[true]'

    Existing text can be seeded so that ``write_text`` style APIs can append
    to a caller's buffer:

            >>> StringBuilder("x = ").append("null").build()
            'x = null'

    """

    __slots__ = ("_parts",)

    def __init__(self, initial: str = "") -> None:
        """Initialize the builder, optionally seeded with existing text."""
        self._parts: list[str] = [initial] if initial else []

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

    def pop_char(self) -> str | None:
        """Remove and return the last character, or None if empty."""
        while self._parts:
            last = self._parts.pop()
            if last:
                if len(last) > 1:
                    self._parts.append(last[:-1])
                return last[-1]
        return None

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
