"""The node contract every editable tree grammar implements.

``Ast`` is the single extension point for new grammars. A grammar subclasses
it once per node kind and provides children access, mutation, display
metadata and the rendering hook; rendering, measuring, tree views and
structural equality come for free.

Grammar checklist:
- ``children`` / ``children_mut``: the node's child Refs, in order
- ``min_children`` / ``max_children``: the arity range (``None`` = unbounded)
- ``delete_child`` / ``insert_child``: mutate or raise, never half-apply
- ``display_name``: short label for debug views
- ``replace_chars`` / ``from_char`` / ``insert_chars``: typed-key shortcuts
- ``display_tokens_rec``: literal tokens interleaved with child Refs
- ``payload``: the node's own data, for structural equality

Example — a minimal grammar node:

    @dataclass(eq=False, slots=True)
    class Leaf(Ast):
        value: str

        def children(self): return ()
        def children_mut(self): return []
        ...

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sapling.errors import IndexOutOfRange, TooFewChildren, TooManyChildren
from sapling.size import Size, measure
from sapling.utils.logger import get_logger

if TYPE_CHECKING:
    from sapling.arena import Arena, Ref
    from sapling.tokens import RecTok

logger = get_logger(__name__)


class Ast(ABC):
    """Base class for all editable tree nodes.

    Nodes compare and hash by structure: node type, ``payload()`` and the
    resolved children, recursively. A node's hash changes when it is edited,
    so don't keep nodes in sets or dict keys across mutations.

    """

    __slots__ = ()

    # -- Children ------------------------------------------------------------

    @abstractmethod
    def children(self) -> Sequence[Ref[Any]]:
        """The direct children of this node, in order.

        Expected to be cheap: callers use it repeatedly without caching.
        """

    @abstractmethod
    def children_mut(self) -> list[Ref[Any]]:
        """The same children, mutable in place.

        Meant for swapping a child Ref for another one (e.g. replacing a
        child wholesale). Changing the length of this list bypasses the
        arity checks; use ``insert_child`` / ``delete_child`` for that.
        """

    def min_children(self) -> int:
        """Fewest children this node may have."""
        return 0

    def max_children(self) -> int | None:
        """Most children this node may have, or None for no limit."""
        return None

    # -- Mutation ------------------------------------------------------------

    @abstractmethod
    def delete_child(self, index: int) -> None:
        """Remove the child at ``index``.

        Raises:
            TooFewChildren: Removal would go below ``min_children``
            IndexOutOfRange: ``index`` is not a child position
        """

    @abstractmethod
    def insert_child(self, new_node: Ref[Any], arena: Arena[Any], index: int) -> None:
        """Insert ``new_node`` as the child at ``index``.

        May allocate auxiliary nodes in ``arena`` to keep the tree well
        formed (e.g. a key and field around a value inserted into a JSON
        object). Nothing is allocated if the insert is rejected.

        Raises:
            TooManyChildren: Insertion would exceed ``max_children``
            IndexOutOfRange: ``index`` is past the end of the children
        """

    def check_delete(self, index: int) -> None:
        """Raise the error ``delete_child(index)`` must raise, if any.

        Bounds are checked before arity, so an out-of-range index is reported
        as such even on a node that is already at its minimum.
        """
        count = len(self.children())
        if not 0 <= index < count:
            logger.debug("Rejected delete of child %d from %s", index, self.display_name())
            raise IndexOutOfRange(count, index)
        if count - 1 < self.min_children():
            logger.debug("Rejected delete from %s: minimum reached", self.display_name())
            raise TooFewChildren(self.display_name(), self.min_children())

    def check_insert(self, index: int) -> None:
        """Raise the error ``insert_child(..., index)`` must raise, if any."""
        count = len(self.children())
        limit = self.max_children()
        if limit is not None and count + 1 > limit:
            logger.debug("Rejected insert into %s: limit %d reached", self.display_name(), limit)
            raise TooManyChildren(self.display_name(), limit)
        if not 0 <= index <= count:
            logger.debug("Rejected insert at %d into %s", index, self.display_name())
            raise IndexOutOfRange(count, index, action="Inserting")

    # -- Metadata ------------------------------------------------------------

    @abstractmethod
    def display_name(self) -> str:
        """Short human label for debug views. Not used for equality."""

    @abstractmethod
    def payload(self) -> tuple[Any, ...]:
        """The node's own data (excluding children), for equality and hashing."""

    # -- Typed-key shortcuts -------------------------------------------------

    @abstractmethod
    def replace_chars(self) -> list[str]:
        """Distinct characters that each produce a replacement via ``from_char``."""

    def is_replace_char(self, c: str) -> bool:
        return c in self.replace_chars()

    @abstractmethod
    def from_char(self, c: str) -> Ast | None:
        """Build the node that replaces this one when ``c`` is typed.

        Returns a node for every char in ``replace_chars`` and None for any
        other char. None means "no such shortcut", not an error.
        """

    @abstractmethod
    def insert_chars(self) -> list[str]:
        """Characters that insert a new child into this node."""

    def is_insert_char(self, c: str) -> bool:
        return c in self.insert_chars()

    def child_from_char(self, c: str) -> Ast | None:
        """Build the node to insert as a child when ``c`` is typed.

        Defaults to ``from_char``; override when a grammar's insert and
        replace shortcuts build different nodes.
        """
        if not self.is_insert_char(c):
            return None
        return self.from_char(c)

    def accepts_child(self, index: int, node: Ast) -> bool:
        """Whether ``node`` may sit at child position ``index``.

        Consulted before a child is replaced wholesale. Any node is accepted
        by default; grammars with typed slots (such as a key position)
        override this.
        """
        return True

    # -- Rendering -----------------------------------------------------------

    @abstractmethod
    def display_tokens_rec(self, format_style: Any) -> list[RecTok]:
        """This node's tokens and child Refs, in left-to-right order.

        Every Indent must be matched by a later Dedent.
        """

    def size(self, format_style: Any = None) -> Size:
        """Extent of this node's rendered text for ``format_style``."""
        return measure(self, format_style)

    def tree_view(self) -> str:
        """Indented outline of this subtree's display names."""
        from sapling.renderers.tree import tree_view

        return tree_view(self)

    # -- Structural identity -------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ast):
            return NotImplemented
        if type(self) is not type(other) or self.payload() != other.payload():
            return False
        mine, theirs = self.children(), other.children()
        if len(mine) != len(theirs):
            return False
        return all(a.node == b.node for a, b in zip(mine, theirs, strict=True))

    def __hash__(self) -> int:
        return hash(
            (
                type(self).__name__,
                self.payload(),
                tuple(hash(child.node) for child in self.children()),
            )
        )
