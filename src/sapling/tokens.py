"""Display tokens: how nodes describe their own rendering.

Every node emits a list of RecTok items from ``display_tokens_rec``: either a
DisplayToken to output now, or the Ref of a child whose own tokens are
spliced in at that point. ``display_tokens`` flattens that description into
one ordered stream, tagging each token with the Ref of the node that emitted
it. The text renderer, the styled renderer and any cursor/layout component
all consume this same stream.

Token Kinds:
- Text: a run of text with a syntax category
- Whitespace: some number of spaces
- Newline: break the line, then re-apply the current indentation
- Indent / Dedent: push or pop one indentation level

Determinism:
    The flattened stream is a pure function of tree structure and format
    style. Nothing is cached between calls; every render is a fresh total
    recomputation.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sapling.arena import Ref

if TYPE_CHECKING:
    from sapling.ast import Ast

# How many spaces correspond to one indentation level
INDENT_WIDTH = 4

# =============================================================================
# Syntax categories
# =============================================================================

# Open-ended: grammars may use any string. Consumers map categories to
# presentation and fall back to DEFAULT for names they don't know.
type SyntaxCategory = str

DEFAULT: SyntaxCategory = "default"  # punctuation and other unhighlighted text
CONST: SyntaxCategory = "const"  # constant values like true, false
LITERAL: SyntaxCategory = "literal"  # strings, numbers
COMMENT: SyntaxCategory = "comment"
IDENT: SyntaxCategory = "ident"  # variable and function names
KEYWORD: SyntaxCategory = "keyword"  # if, while, use
PREPROC: SyntaxCategory = "preproc"  # #define, #[derive(...)]
TYPE: SyntaxCategory = "type"  # int, usize, String
SPECIAL: SyntaxCategory = "special"  # escapes inside string literals
UNDERLINED: SyntaxCategory = "underlined"  # legacy Vim group, kept for schemes that map it
ERROR: SyntaxCategory = "error"

STANDARD_CATEGORIES: tuple[SyntaxCategory, ...] = (
    DEFAULT,
    CONST,
    LITERAL,
    COMMENT,
    IDENT,
    KEYWORD,
    PREPROC,
    TYPE,
    SPECIAL,
    UNDERLINED,
    ERROR,
)

# =============================================================================
# Display tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """A run of text, highlighted according to ``category``."""

    content: str
    category: SyntaxCategory = DEFAULT


@dataclass(frozen=True, slots=True)
class Whitespace:
    """``count`` columns of horizontal space."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Whitespace count must be non-negative, got {self.count}")


@dataclass(frozen=True, slots=True)
class Newline:
    """Start a new line at the current indentation."""


@dataclass(frozen=True, slots=True)
class Indent:
    """Increase indentation by one level for following lines."""


@dataclass(frozen=True, slots=True)
class Dedent:
    """Decrease indentation by one level. Must pair with an earlier Indent."""


type DisplayToken = Text | Whitespace | Newline | Indent | Dedent

# A node's self-description unit: a literal token, or a child to splice in
type RecTok = DisplayToken | Ref

# Shared instances for the payload-free tokens
NEWLINE = Newline()
INDENT = Indent()
DEDENT = Dedent()


def text(content: str, category: SyntaxCategory = DEFAULT) -> Text:
    """Shorthand constructor used by grammars."""
    return Text(content, category)


def space(count: int = 1) -> Whitespace:
    """Shorthand constructor used by grammars."""
    return Whitespace(count)


# =============================================================================
# Flattening
# =============================================================================


def display_tokens(root: Ref, format_style: Any = None) -> list[tuple[Ref, DisplayToken]]:
    """Flatten a subtree into ``(originating ref, token)`` pairs.

    Walks ``root``'s ``display_tokens_rec`` output in order. Literal tokens
    are paired with ``root``; child refs are expanded recursively and their
    whole output is spliced in place. Recursion depth equals tree depth.

    Args:
        root: Handle of the subtree to flatten
        format_style: Grammar-defined formatting options, passed through

    Returns:
        Tokens in document order, each tagged with its emitting node's Ref
    """
    pairs: list[tuple[Ref, DisplayToken]] = []
    for item in root.node.display_tokens_rec(format_style):
        if isinstance(item, Ref):
            pairs.extend(display_tokens(item, format_style))
        else:
            pairs.append((root, item))
    return pairs


def iter_node_tokens(node: Ast, format_style: Any = None) -> Iterator[DisplayToken]:
    """Yield the flattened tokens of ``node`` without origin tags.

    Same order as ``display_tokens``; works from a node value, so it can be
    used by a node that doesn't know its own Ref (e.g. to measure itself).
    """
    for item in node.display_tokens_rec(format_style):
        if isinstance(item, Ref):
            yield from iter_node_tokens(item.node, format_style)
        else:
            yield item


def is_balanced(tokens: list[DisplayToken] | Iterator[DisplayToken]) -> bool:
    """Return True if every Dedent closes an earlier Indent and none are left open."""
    depth = 0
    for tok in tokens:
        if isinstance(tok, Indent):
            depth += 1
        elif isinstance(tok, Dedent):
            depth -= 1
            if depth < 0:
                return False
    return depth == 0
