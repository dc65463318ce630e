"""Plain-text renderer for flattened token streams.

Materializes a tree's display tokens as text. Syntax categories are ignored
here; they only matter to a styled consumer such as StyledRenderer.

Token Semantics:
- Text: appended verbatim
- Whitespace(n): n spaces
- Newline: a newline followed by the current indentation string
- Indent: grow the indentation string by INDENT_WIDTH spaces
- Dedent: shrink it by INDENT_WIDTH spaces (ContractViolation if it can't)

Thread Safety:
All per-render state (the StringBuilder and indentation string) is local to
each call. TextRenderer instances hold only their format style.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from sapling.arena import Ref
from sapling.errors import ContractViolation
from sapling.stringbuilder import StringBuilder
from sapling.tokens import (
    INDENT_WIDTH,
    Dedent,
    DisplayToken,
    Indent,
    Newline,
    Text,
    Whitespace,
    display_tokens,
)
from sapling.utils.logger import get_logger

logger = get_logger(__name__)


def layout(tokens: Iterable[DisplayToken]) -> Iterator[tuple[DisplayToken, str]]:
    """Pair every token with the text it contributes, in stream order.

    Indentation starts empty and is tracked across the whole stream; Indent
    and Dedent contribute no text of their own. Shared by every renderer
    that consumes the token stream, so they agree on layout.

    Raises:
        ContractViolation: A Dedent had no matching Indent, or an item
            isn't a display token.
    """
    indentation = ""
    for tok in tokens:
        match tok:
            case Text(content=content):
                yield tok, content
            case Whitespace(count=count):
                yield tok, " " * count
            case Newline():
                yield tok, "\n" + indentation
            case Indent():
                indentation += " " * INDENT_WIDTH
                yield tok, ""
            case Dedent():
                if not indentation.endswith(" " * INDENT_WIDTH):
                    logger.debug("Dedent with indentation %r", indentation)
                    raise ContractViolation("Dedent without a matching Indent")
                indentation = indentation[:-INDENT_WIDTH]
                yield tok, ""
            case _:
                raise ContractViolation(f"Not a display token: {tok!r}")


def write_tokens(tokens: Iterable[DisplayToken], sb: StringBuilder) -> None:
    """Append rendered ``tokens`` to ``sb``.

    Raises:
        ContractViolation: A Dedent had no matching Indent.
    """
    for _, chunk in layout(tokens):
        sb.append(chunk)


def render_tokens(tokens: Iterable[DisplayToken]) -> str:
    """Render ``tokens`` into a new string."""
    sb = StringBuilder()
    write_tokens(tokens, sb)
    return sb.build()


def write_text(root: Ref, sb: StringBuilder, format_style: Any = None) -> None:
    """Append the text of the tree under ``root`` to ``sb``."""
    write_tokens((tok for _, tok in display_tokens(root, format_style)), sb)


def to_text(root: Ref, format_style: Any = None) -> str:
    """Render the tree under ``root`` to a new string.

    A pure, deterministic function of the tree and ``format_style``.
    """
    sb = StringBuilder()
    write_text(root, sb, format_style)
    return sb.build()


class TextRenderer:
    """Render trees to plain text with a fixed format style.

    Usage:
        >>> renderer = TextRenderer(JsonFormat.PRETTY)
        >>> renderer.render(root)
        '[\\n    true\\n]'

    """

    __slots__ = ("_format_style",)

    def __init__(self, format_style: Any = None) -> None:
        self._format_style = format_style

    def render(self, root: Ref) -> str:
        """Render the tree under ``root``."""
        return to_text(root, self._format_style)
