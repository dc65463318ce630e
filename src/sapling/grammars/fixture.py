"""Fixture grammar: nodes whose arity is data.

Useful for exercising the node contract against arbitrary child-count
ranges without a real language. Renders as ``name`` or ``name(a, b)``.

Example:
    >>> arena = Arena()
    >>> leaf = arena.alloc(FixtureNode("x"))
    >>> box = arena.alloc(FixtureNode("box", [leaf], min_children=1, max_children=1))
    >>> box.to_text()
    'box(x)'
    >>> box.node.delete_child(0)
    Traceback (most recent call last):
    ...
    sapling.errors.TooFewChildren: Node type box can't have fewer than 1 children.

"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sapling.arena import Arena, Ref
from sapling.ast import Ast
from sapling.tokens import IDENT, RecTok, space, text


class FixtureNode(Ast):
    """A generic node with a name and a configurable child-count range.

    Args:
        name: Display name, also the rendered text
        items: Child Refs
        min_children: Floor enforced by ``delete_child``
        max_children: Ceiling enforced by ``insert_child`` (None = unbounded)

    """

    __slots__ = ("_max", "_min", "items", "name")

    def __init__(
        self,
        name: str,
        items: list[Ref] | None = None,
        *,
        min_children: int = 0,
        max_children: int | None = None,
    ) -> None:
        self.name = name
        self.items: list[Ref] = list(items) if items is not None else []
        self._min = min_children
        self._max = max_children

    def __repr__(self) -> str:
        return f"FixtureNode({self.name!r}, {self.items!r}, min={self._min}, max={self._max})"

    def children(self) -> Sequence[Ref]:
        return self.items

    def children_mut(self) -> list[Ref]:
        return self.items

    def min_children(self) -> int:
        return self._min

    def max_children(self) -> int | None:
        return self._max

    def delete_child(self, index: int) -> None:
        self.check_delete(index)
        del self.items[index]

    def insert_child(self, new_node: Ref, arena: Arena, index: int) -> None:
        self.check_insert(index)
        self.items.insert(index, new_node)

    def display_name(self) -> str:
        return self.name

    def payload(self) -> tuple[Any, ...]:
        return (self.name, self._min, self._max)

    def replace_chars(self) -> list[str]:
        return []

    def from_char(self, c: str) -> Ast | None:
        return None

    def insert_chars(self) -> list[str]:
        return []

    def display_tokens_rec(self, format_style: Any) -> list[RecTok]:
        toks: list[RecTok] = [text(self.name, IDENT)]
        if self.items:
            toks.append(text("("))
            for i, ref in enumerate(self.items):
                if i:
                    toks.extend((text(","), space()))
                toks.append(ref)
            toks.append(text(")"))
        return toks
