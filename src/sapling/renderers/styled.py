"""Styled renderer: syntax-highlighted rich Text from a token stream.

Consumes the same ``(ref, token)`` stream as the plain-text renderer, with
identical whitespace and indentation handling, and attaches a style span to
every Text token. The plain text of the result is always equal to
``to_text`` for the same tree and format style.

Styles come from the active RenderConfig (see ``sapling.config``): by
syntax category normally, or by originating node hash in debug mode.

Thread Safety:
All per-render state is local to each render() call.

"""

from __future__ import annotations

from typing import Any

from rich.style import Style
from rich.text import Text as RichText

from sapling.arena import Ref
from sapling.config import DEBUG_PALETTE, RenderConfig, get_render_config
from sapling.renderers.text import layout
from sapling.tokens import Text, display_tokens


class StyledRenderer:
    """Render trees to ``rich.text.Text`` with syntax highlighting.

    Usage:
        >>> from rich.console import Console
        >>> renderer = StyledRenderer()
        >>> Console().print(renderer.render(root, JsonFormat.PRETTY))

    Args:
        config: Render configuration; the context's active config is read
            at render time when omitted.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> RenderConfig:
        return self._config if self._config is not None else get_render_config()

    def style_for(self, origin: Ref, tok: Text, config: RenderConfig) -> Style:
        """Style for one Text token emitted by ``origin``."""
        if config.debug_highlighting:
            color = DEBUG_PALETTE[hash(origin.node) % len(DEBUG_PALETTE)]
            return Style(color=color)
        return config.color_scheme.style_for(tok.category)

    def render(self, root: Ref, format_style: Any = None) -> RichText:
        """Render the tree under ``root``.

        Raises:
            ContractViolation: A Dedent had no matching Indent.
        """
        config = self.config
        out = RichText(end="")
        pairs = display_tokens(root, format_style)
        laid_out = layout(tok for _, tok in pairs)
        for (origin, _), (tok, chunk) in zip(pairs, laid_out, strict=True):
            if isinstance(tok, Text):
                out.append(chunk, style=self.style_for(origin, tok, config))
            elif chunk:
                out.append(chunk)
        return out
