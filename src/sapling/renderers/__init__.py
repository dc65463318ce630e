"""Sapling renderers.

Renderers turn a tree (through its flattened token stream, or directly
through its children for the debug outline) into output.

Available Renderers:
- TextRenderer: plain text, the canonical serialization
- StyledRenderer: syntax-highlighted ``rich.text.Text``
- TreeViewRenderer: indented outline of node display names

Thread Safety:
All per-render state is local to each render call.
Safe to share renderer instances between threads.

"""

from sapling.renderers.protocol import TreeRenderer
from sapling.renderers.styled import StyledRenderer
from sapling.renderers.text import TextRenderer, to_text, write_text
from sapling.renderers.tree import TreeViewRenderer, tree_view, write_tree_view

__all__ = [
    "StyledRenderer",
    "TextRenderer",
    "TreeRenderer",
    "TreeViewRenderer",
    "to_text",
    "tree_view",
    "write_text",
    "write_tree_view",
]
