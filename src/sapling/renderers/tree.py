"""Tree-view debug renderer.

Produces an outline of display names, one line per node, indented two
spaces per level, similar to the Unix ``tree`` command. Independent of the
token pipeline: it only uses ``display_name()`` and ``children()``.

Example:
    object
      field
        string
        true

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sapling.errors import ContractViolation
from sapling.stringbuilder import StringBuilder

if TYPE_CHECKING:
    from sapling.ast import Ast

TREE_INDENT = "  "


def _write_recursive(node: Ast, sb: StringBuilder, indentation: str) -> None:
    sb.append(indentation).append(node.display_name()).append("\n")
    for child in node.children():
        _write_recursive(child.node, sb, indentation + TREE_INDENT)


def write_tree_view(node: Ast, sb: StringBuilder) -> None:
    """Append the outline of ``node`` to ``sb``, without a trailing newline."""
    _write_recursive(node, sb, "")
    if sb.pop_char() != "\n":
        raise ContractViolation("Tree view did not end with a newline")


def tree_view(node: Ast) -> str:
    """Build the outline of ``node`` as a new string."""
    sb = StringBuilder()
    write_tree_view(node, sb)
    return sb.build()


class TreeViewRenderer:
    """Renderer-protocol wrapper around ``tree_view``."""

    __slots__ = ()

    def render(self, root) -> str:  # type: ignore[no-untyped-def]
        """Render the outline of the tree under ``root`` (a Ref)."""
        return tree_view(root.node)
