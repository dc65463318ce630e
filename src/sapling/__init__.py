"""
Sapling — the editing and rendering core of a structural text editor

Trees live in an Arena and are edited only through the node contract
(``Ast``): insertions and deletions either apply completely or raise a typed
error and change nothing. Every node describes its own rendering as a token
stream, which is flattened and turned into text, styled text, or on-screen
coordinates.

Quick Start:
    >>> from sapling import Arena, JsonFormat, build_json
    >>> arena = Arena()
    >>> root = build_json({"name": "sapling", "tags": [True, None]}, arena)
    >>> root.to_text(JsonFormat.COMPACT)
    '{"name": "sapling", "tags": [true, null]}'
    >>> print(root.tree_view())
    object
      field
        string
        string
      field
        string
        array
          true
          null

Editing:
    >>> from sapling import JsonObject, insert_from_char
    >>> obj = arena.alloc(JsonObject())
    >>> new = insert_from_char(obj, 0, "t")
    >>> obj.to_text()
    '{"": true}'

Installation:
    pip install sapling              # Core, grammars and styled renderer
    pip install sapling[test]        # + pytest and hypothesis
"""

from sapling.arena import Arena, Ref
from sapling.ast import Ast
from sapling.config import (
    ColorScheme,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from sapling.editing import delete_child, insert_from_char, replace_child
from sapling.errors import (
    ContractViolation,
    DeleteError,
    ForeignRefError,
    IndexOutOfRange,
    InsertError,
    SaplingError,
    TooFewChildren,
    TooManyChildren,
)
from sapling.grammars.fixture import FixtureNode
from sapling.grammars.json import (
    Json,
    JsonArray,
    JsonFalse,
    JsonField,
    JsonFormat,
    JsonNull,
    JsonObject,
    JsonStr,
    JsonTrue,
)
from sapling.grammars.json import build as build_json
from sapling.renderers import (
    StyledRenderer,
    TextRenderer,
    TreeRenderer,
    TreeViewRenderer,
    to_text,
    tree_view,
    write_text,
    write_tree_view,
)
from sapling.size import Size
from sapling.stringbuilder import StringBuilder
from sapling.tokens import (
    Dedent,
    DisplayToken,
    Indent,
    Newline,
    RecTok,
    SyntaxCategory,
    Text,
    Whitespace,
    display_tokens,
)

__version__ = "0.1.0"

__all__ = [
    "Arena",
    "Ast",
    "ColorScheme",
    "ContractViolation",
    "Dedent",
    "DeleteError",
    "DisplayToken",
    "FixtureNode",
    "ForeignRefError",
    "Indent",
    "IndexOutOfRange",
    "InsertError",
    "Json",
    "JsonArray",
    "JsonFalse",
    "JsonField",
    "JsonFormat",
    "JsonNull",
    "JsonObject",
    "JsonStr",
    "JsonTrue",
    "Newline",
    "RecTok",
    "Ref",
    "RenderConfig",
    "SaplingError",
    "Size",
    "StringBuilder",
    "StyledRenderer",
    "SyntaxCategory",
    "Text",
    "TextRenderer",
    "TooFewChildren",
    "TooManyChildren",
    "TreeRenderer",
    "TreeViewRenderer",
    "Whitespace",
    "__version__",
    "build_json",
    "delete_child",
    "display_tokens",
    "get_render_config",
    "insert_from_char",
    "render_config_context",
    "replace_child",
    "reset_render_config",
    "set_render_config",
    "to_text",
    "tree_view",
    "write_text",
    "write_tree_view",
]
