"""TreeRenderer protocol — stable interface for whole-tree renderers.

Any renderer that implements ``render(root) -> str`` for a root Ref conforms.
``TextRenderer`` and ``TreeViewRenderer`` are the built-in implementations.

Example:
    from sapling.renderers.protocol import TreeRenderer

    def dump(renderer: TreeRenderer, root: Ref) -> None:
        print(renderer.render(root))

"""

from typing import Protocol

from sapling.arena import Ref


class TreeRenderer(Protocol):
    """Protocol for tree renderers producing a string."""

    def render(self, root: Ref) -> str:
        """Render the tree under ``root``.

        Args:
            root: Handle of the subtree to render.

        Returns:
            Rendered string output.

        """
        ...
