"""Arena ownership for Sapling trees.

An Arena is the sole owner of every node in one tree. Nodes never point at
each other directly: a node's children are Refs, small handles that are
resolved through the arena that issued them.

Lifecycle:
- Nodes enter the arena through ``alloc`` and are never freed or moved.
- A Ref stays valid for as long as its arena is alive.
- A whole-document rebuild creates a new Arena rather than reclaiming nodes.

Example:
    >>> from sapling.arena import Arena
    >>> from sapling.grammars.json import JsonArray, JsonTrue
    >>> arena = Arena()
    >>> root = arena.alloc(JsonArray())
    >>> root.node.insert_child(arena.alloc(JsonTrue()), arena, 0)
    >>> root.to_text()
    '[true]'

Thread Safety:
    None. The editing session owns the arena and accesses it from one logical
    thread at a time; hosts that share it must serialize access themselves.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sapling.errors import ForeignRefError

if TYPE_CHECKING:
    from sapling.size import Size
    from sapling.tokens import DisplayToken


@dataclass(frozen=True, slots=True, eq=False)
class Ref[N]:
    """Handle to a node owned by an Arena.

    Refs compare by identity of the slot they name (same arena object, same
    index), not by the structure of the node behind them. Use ``ref.node``
    and ``==`` on nodes for structural comparison.

    Attributes:
        arena: The arena that issued this handle
        index: Position of the node in allocation order

    """

    arena: Arena[N]
    index: int

    @property
    def node(self) -> N:
        """Resolve this handle to the node it names."""
        return self.arena.get(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return self.arena is other.arena and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.arena), self.index))

    def __repr__(self) -> str:
        return f"Ref({self.index})"

    # -- Rendering entry points -------------------------------------------

    def display_tokens(self, format_style: Any = None) -> list[tuple[Ref[N], DisplayToken]]:
        """Flatten this subtree into ``(originating ref, token)`` pairs."""
        from sapling.tokens import display_tokens

        return display_tokens(self, format_style)

    def to_text(self, format_style: Any = None) -> str:
        """Render this subtree to text."""
        from sapling.renderers.text import to_text

        return to_text(self, format_style)

    def write_text(self, sb: Any, format_style: Any = None) -> None:
        """Append the text of this subtree to a StringBuilder."""
        from sapling.renderers.text import write_text

        write_text(self, sb, format_style)

    def tree_view(self) -> str:
        """Render an indented outline of node display names."""
        from sapling.renderers.tree import tree_view

        return tree_view(self.node)

    def write_tree_view(self, sb: Any) -> None:
        """Append the outline of this subtree to a StringBuilder."""
        from sapling.renderers.tree import write_tree_view

        write_tree_view(self.node, sb)

    def size(self, format_style: Any = None) -> Size:
        """On-screen footprint of the node behind this handle."""
        return self.node.size(format_style)  # type: ignore[attr-defined]


class Arena[N]:
    """Allocation-only owner of a tree's nodes.

    Usage:
        >>> arena = Arena()
        >>> ref = arena.alloc(node)
        >>> arena[ref] is node
        True

    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: list[N] = []

    def alloc(self, node: N) -> Ref[N]:
        """Take ownership of ``node`` and return a handle to it."""
        self._nodes.append(node)
        return Ref(self, len(self._nodes) - 1)

    def get(self, ref: Ref[N]) -> N:
        """Resolve a handle issued by this arena.

        Raises:
            ForeignRefError: If ``ref`` came from another arena or names a
                slot this arena never allocated.
        """
        if ref.arena is not self:
            raise ForeignRefError(f"{ref!r} was not issued by this arena")
        if not 0 <= ref.index < len(self._nodes):
            raise ForeignRefError(f"{ref!r} is outside this arena (size {len(self._nodes)})")
        return self._nodes[ref.index]

    def __getitem__(self, ref: Ref[N]) -> N:
        return self.get(ref)

    def __contains__(self, ref: object) -> bool:
        return (
            isinstance(ref, Ref)
            and ref.arena is self
            and 0 <= ref.index < len(self._nodes)
        )

    def __iter__(self) -> Iterator[Ref[N]]:
        """Yield a handle for every node, in allocation order."""
        for index in range(len(self._nodes)):
            yield Ref(self, index)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Arena(nodes={len(self._nodes)})"
