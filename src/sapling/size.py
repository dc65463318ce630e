"""On-screen footprint of a rendered node.

A Size records how many line breaks a node's text spans and how wide its
last line is. Concatenating two rendered pieces adds their sizes with ``+``.
Exact screen geometry (wrapping, gutters) belongs to the presentation layer;
this is only the extent of the node's own text.

Example:
    >>> Size.of_text('[\\n    true\\n]')
    Size(lines=2, last_line_length=1)
    >>> Size(0, 3) + Size(1, 2)
    Size(lines=1, last_line_length=2)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sapling.ast import Ast


@dataclass(frozen=True, slots=True)
class Size:
    """Extent of a piece of rendered text.

    Attributes:
        lines: Number of newlines the text contains
        last_line_length: Width in columns of the text after the last newline

    """

    lines: int = 0
    last_line_length: int = 0

    def __add__(self, other: Size) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        if other.lines == 0:
            return Size(self.lines, self.last_line_length + other.last_line_length)
        return Size(self.lines + other.lines, other.last_line_length)

    @classmethod
    def of_text(cls, text: str) -> Size:
        """Measure an already rendered string."""
        lines = text.count("\n")
        last_line = text.rsplit("\n", 1)[-1]
        return cls(lines, len(last_line))


def measure(node: Ast, format_style: Any = None) -> Size:
    """Measure ``node`` by rendering its own token stream.

    Consistent with ``to_text`` by construction: the same renderer loop is
    used, starting from zero indentation.
    """
    from sapling.renderers.text import render_tokens
    from sapling.tokens import iter_node_tokens

    return Size.of_text(render_tokens(iter_node_tokens(node, format_style)))
