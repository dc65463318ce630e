"""JSON grammar for Sapling.

Node Kinds:
Json (base)
├── JsonTrue, JsonFalse, JsonNull   (leaves, 0 children)
├── JsonStr                         (leaf with a string value)
├── JsonArray                       (0..∞ values)
├── JsonObject                      (0..∞ fields)
└── JsonField                       (exactly 2 children: key string, value)

Output:
- ``JsonFormat.COMPACT`` renders exactly like ``json.dumps(value)``
- ``JsonFormat.PRETTY`` renders exactly like ``json.dumps(value, indent=4)``

Typed Keys:
    t → true    f → false    n → null
    s → ""      a → []       o → {}

Inserting a bare value into an object wraps it in a field with an empty
key, so ``{}`` + ``true`` becomes ``{"": true}``.

"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from sapling.arena import Arena, Ref
from sapling.ast import Ast
from sapling.tokens import (
    CONST,
    DEDENT,
    INDENT,
    LITERAL,
    NEWLINE,
    RecTok,
    space,
    text,
)
from sapling.utils.logger import get_logger

logger = get_logger(__name__)


class JsonFormat(Enum):
    """Ways a JSON tree can be rendered."""

    COMPACT = auto()  # [true, {"a": null}]
    PRETTY = auto()  # one value per line, 4-space indentation


CHAR_TRUE = "t"
CHAR_FALSE = "f"
CHAR_NULL = "n"
CHAR_STR = "s"
CHAR_ARRAY = "a"
CHAR_OBJECT = "o"

VALUE_CHARS: tuple[str, ...] = (
    CHAR_TRUE,
    CHAR_FALSE,
    CHAR_NULL,
    CHAR_STR,
    CHAR_ARRAY,
    CHAR_OBJECT,
)


def value_from_char(c: str) -> Json | None:
    """Build the empty JSON value a typed key stands for, or None."""
    match c:
        case "t":
            return JsonTrue()
        case "f":
            return JsonFalse()
        case "n":
            return JsonNull()
        case "s":
            return JsonStr()
        case "a":
            return JsonArray()
        case "o":
            return JsonObject()
        case _:
            return None


def _delimited(open_: str, close: str, items: Sequence[Ref], format_style: Any) -> list[RecTok]:
    """Tokens for a bracketed, comma-separated run of children."""
    if not items:
        return [text(open_), text(close)]
    toks: list[RecTok] = [text(open_)]
    if format_style is JsonFormat.PRETTY:
        toks.append(INDENT)
        for i, ref in enumerate(items):
            if i:
                toks.append(text(","))
            toks.extend((NEWLINE, ref))
        toks.extend((DEDENT, NEWLINE))
    else:
        for i, ref in enumerate(items):
            if i:
                toks.extend((text(","), space()))
            toks.append(ref)
    toks.append(text(close))
    return toks


# =============================================================================
# Base
# =============================================================================


class Json(Ast):
    """Base class for every JSON node.

    Any value can be replaced by any other value through a typed key; fields
    override this since they are not values.
    """

    __slots__ = ()

    def replace_chars(self) -> list[str]:
        return list(VALUE_CHARS)

    def from_char(self, c: str) -> Json | None:
        return value_from_char(c)

    def insert_chars(self) -> list[str]:
        return []


class _JsonLeaf(Json):
    """A JSON node that can never have children."""

    __slots__ = ()

    def children(self) -> Sequence[Ref]:
        return ()

    def children_mut(self) -> list[Ref]:
        return []

    def max_children(self) -> int:
        return 0

    def delete_child(self, index: int) -> None:
        self.check_delete(index)

    def insert_child(self, new_node: Ref, arena: Arena, index: int) -> None:
        self.check_insert(index)

    def payload(self) -> tuple[Any, ...]:
        return ()


class _JsonSequence(Json):
    """Shared storage and deletion for nodes backed by an ``items`` list."""

    __slots__ = ()

    items: list[Ref]

    def children(self) -> Sequence[Ref]:
        return self.items

    def children_mut(self) -> list[Ref]:
        return self.items

    def delete_child(self, index: int) -> None:
        self.check_delete(index)
        del self.items[index]

    def payload(self) -> tuple[Any, ...]:
        return ()


# =============================================================================
# Leaves
# =============================================================================


@dataclass(eq=False, slots=True)
class JsonTrue(_JsonLeaf):
    """The constant ``true``."""

    def display_name(self) -> str:
        return "true"

    def display_tokens_rec(self, format_style: Any) -> list[RecTok]:
        return [text("true", CONST)]


@dataclass(eq=False, slots=True)
class JsonFalse(_JsonLeaf):
    """The constant ``false``."""

    def display_name(self) -> str:
        return "false"

    def display_tokens_rec(self, format_style: Any) -> list[RecTok]:
        return [text("false", CONST)]


@dataclass(eq=False, slots=True)
class JsonNull(_JsonLeaf):
    """The constant ``null``."""

    def display_name(self) -> str:
        return "null"

    def display_tokens_rec(self, format_style: Any) -> list[RecTok]:
        return [text("null", CONST)]


@dataclass(eq=False, slots=True)
class JsonStr(_JsonLeaf):
    """A string value, also used for object keys.

    Rendered with JSON escaping, so ``JsonStr('a"b')`` shows as ``"a\\"b"``.
    """

    value: str = ""

    def display_name(self) -> str:
        return "string"

    def payload(self) -> tuple[Any, ...]:
        return (self.value,)

    def display_tokens_rec(self, format_style: Any) -> list[RecTok]:
        return [text(json.dumps(self.value), LITERAL)]


# =============================================================================
# Containers
# =============================================================================


@dataclass(eq=False, slots=True)
class JsonArray(_JsonSequence):
    """An ordered list of values."""

    items: list[Ref] = field(default_factory=list)

    def display_name(self) -> str:
        return "array"

    def insert_chars(self) -> list[str]:
        return list(VALUE_CHARS)

    def insert_child(self, new_node: Ref, arena: Arena, index: int) -> None:
        """Insert a value; a field is unwrapped to its value.

        The value's Ref is moved, not copied, so only pass a freshly
        allocated field (one not already attached to an object). A field
        that is still in a tree would leave its value with two parents.
        """
        self.check_insert(index)
        node = new_node.node
        if isinstance(node, JsonField):
            # Arrays hold values, not fields; keep the field's value
            new_node = node.value
        self.items.insert(index, new_node)

    def display_tokens_rec(self, format_style: Any) -> list[RecTok]:
        return _delimited("[", "]", self.items, format_style)


@dataclass(eq=False, slots=True)
class JsonObject(_JsonSequence):
    """An ordered collection of key/value fields."""

    items: list[Ref] = field(default_factory=list)

    def display_name(self) -> str:
        return "object"

    def insert_chars(self) -> list[str]:
        return list(VALUE_CHARS)

    def insert_child(self, new_node: Ref, arena: Arena, index: int) -> None:
        """Insert a field, wrapping bare values in a field with an empty key."""
        self.check_insert(index)
        if not isinstance(new_node.node, JsonField):
            key = arena.alloc(JsonStr(""))
            new_node = arena.alloc(JsonField([key, new_node]))
            logger.debug("Wrapped inserted value in field %r", new_node)
        self.items.insert(index, new_node)

    def display_tokens_rec(self, format_style: Any) -> list[RecTok]:
        return _delimited("{", "}", self.items, format_style)


@dataclass(eq=False, slots=True)
class JsonField(_JsonSequence):
    """A ``"key": value`` pair inside an object. Always has two children."""

    items: list[Ref] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.items) != 2:
            raise ValueError(f"JsonField needs exactly 2 children, got {len(self.items)}")

    @property
    def key(self) -> Ref:
        return self.items[0]

    @property
    def value(self) -> Ref:
        return self.items[1]

    def min_children(self) -> int:
        return 2

    def max_children(self) -> int:
        return 2

    def display_name(self) -> str:
        return "field"

    def replace_chars(self) -> list[str]:
        return []

    def from_char(self, c: str) -> Json | None:
        return None

    def accepts_child(self, index: int, node: Ast) -> bool:
        # Keys are always strings
        if index == 0:
            return isinstance(node, JsonStr)
        return isinstance(node, Json) and not isinstance(node, JsonField)

    def insert_child(self, new_node: Ref, arena: Arena, index: int) -> None:
        self.check_insert(index)

    def display_tokens_rec(self, format_style: Any) -> list[RecTok]:
        return [self.key, text(":"), space(), self.value]


# =============================================================================
# Construction from Python values
# =============================================================================


def build(value: Any, arena: Arena) -> Ref:
    """Allocate a tree for a Python JSON value in ``arena``.

    Accepts bool, None, str, list and dict with str keys. Numbers are not
    part of this grammar.

    Returns:
        Ref to the root of the new subtree

    Raises:
        TypeError: If ``value`` (or anything inside it) isn't representable.
    """
    # Identity checks, so 0 and 1 are not taken for booleans
    if value is True:
        return arena.alloc(JsonTrue())
    if value is False:
        return arena.alloc(JsonFalse())
    if value is None:
        return arena.alloc(JsonNull())
    if isinstance(value, str):
        return arena.alloc(JsonStr(value))
    if isinstance(value, list):
        return arena.alloc(JsonArray([build(item, arena) for item in value]))
    if isinstance(value, dict):
        fields: list[Ref] = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            key_ref = arena.alloc(JsonStr(key))
            fields.append(arena.alloc(JsonField([key_ref, build(item, arena)])))
        return arena.alloc(JsonObject(fields))
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
