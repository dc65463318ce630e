"""Typed-key edit operations built on the node contract.

These are the calls an interaction layer makes when the user presses a key
with the cursor on a node. They only use the ``Ast`` contract, so they work
for every grammar.

Failure Handling:
    Arity failures are raised as InsertError / DeleteError subclasses and
    leave the tree untouched; the caller reports ``str(error)`` to the user.
    A key that isn't a shortcut is not an error: the helpers return None.

Example:
    >>> arena = Arena()
    >>> root = arena.alloc(JsonObject())
    >>> insert_from_char(root, 0, "t")
    Ref(1)
    >>> root.to_text()
    '{"": true}'

"""

from __future__ import annotations

from sapling.arena import Ref
from sapling.errors import IndexOutOfRange
from sapling.utils.logger import get_logger

logger = get_logger(__name__)


def replace_child(parent: Ref, index: int, c: str) -> Ref | None:
    """Replace the child at ``index`` with the node typed key ``c`` builds.

    The replacement is allocated in the parent's arena and swapped in
    through ``children_mut()``; the old child stays allocated but
    unreferenced.

    Returns:
        Ref of the new child, or None if ``c`` isn't a replace key for the
        current child or the parent doesn't accept the result in that
        position (nothing is allocated or changed).

    Raises:
        IndexOutOfRange: ``index`` is not a child position
    """
    slots = parent.node.children_mut()
    if not 0 <= index < len(slots):
        raise IndexOutOfRange(len(slots), index, action="Replacing")
    replacement = slots[index].node.from_char(c)
    if replacement is None:
        logger.debug("%r is not a replace key for child %d", c, index)
        return None
    if not parent.node.accepts_child(index, replacement):
        logger.debug(
            "%s rejected %s at child %d",
            parent.node.display_name(),
            replacement.display_name(),
            index,
        )
        return None
    new_ref = parent.arena.alloc(replacement)
    slots[index] = new_ref
    return new_ref


def insert_from_char(parent: Ref, index: int, c: str) -> Ref | None:
    """Insert the node typed key ``c`` builds as a child at ``index``.

    Returns:
        Ref of the inserted node (which the grammar may have wrapped in
        auxiliary nodes), or None if ``c`` isn't an insert key for
        ``parent``.

    Raises:
        InsertError: The parent rejected the insert
    """
    node = parent.node
    new_node = node.child_from_char(c)
    if new_node is None:
        logger.debug("%r is not an insert key for %s", c, node.display_name())
        return None
    # Check before allocating so a rejected insert leaves the arena untouched
    node.check_insert(index)
    new_ref = parent.arena.alloc(new_node)
    node.insert_child(new_ref, parent.arena, index)
    return new_ref


def delete_child(parent: Ref, index: int) -> None:
    """Delete the child at ``index`` of ``parent``.

    Raises:
        DeleteError: The parent rejected the delete
    """
    parent.node.delete_child(index)
