"""Bundled grammars.

Each grammar is just a set of ``Ast`` subclasses; nothing in the core
depends on this package.

Available Grammars:
- json: JSON values (true/false/null/strings/arrays/objects)
- fixture: generic nodes with configurable arity, for tests and demos
"""

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

__all__ = [
    "FixtureNode",
    "Json",
    "JsonArray",
    "JsonFalse",
    "JsonField",
    "JsonFormat",
    "JsonNull",
    "JsonObject",
    "JsonStr",
    "JsonTrue",
]
