"""Tests for the JSON grammar's implementation of the node contract."""

import pytest

from sapling.arena import Arena
from sapling.errors import IndexOutOfRange, TooFewChildren, TooManyChildren
from sapling.grammars.json import (
    VALUE_CHARS,
    JsonArray,
    JsonFalse,
    JsonField,
    JsonFormat,
    JsonNull,
    JsonObject,
    JsonStr,
    JsonTrue,
    build,
    value_from_char,
)
from sapling.size import Size
from sapling.tokens import Text

# =============================================================================
# Scenarios
# =============================================================================


class TestScenarios:
    """Concrete editing scenarios end to end."""

    def test_insert_true_into_empty_object(self) -> None:
        arena = Arena()
        root = arena.alloc(JsonObject())
        value = arena.alloc(JsonTrue())

        root.node.insert_child(value, arena, 0)

        children = root.node.children()
        assert len(children) == 1
        field = children[0].node
        assert isinstance(field, JsonField)
        assert field.key.node == JsonStr("")
        assert field.value == value
        assert field.value.to_text() == "true"
        assert root.to_text(JsonFormat.COMPACT) == '{"": true}'

    def test_delete_only_child_of_array(self) -> None:
        arena = Arena()
        root = build([True], arena)
        root.node.delete_child(0)
        assert root.node.children() == []
        assert root.to_text() == "[]"

    def test_delete_index_equal_to_len(self) -> None:
        arena = Arena()
        root = build([True, False], arena)
        with pytest.raises(IndexOutOfRange) as exc_info:
            root.node.delete_child(2)
        assert exc_info.value == IndexOutOfRange(2, 2)
        assert root.to_text() == "[true, false]"


# =============================================================================
# Arity
# =============================================================================


class TestArity:
    """Child-count ranges per node kind."""

    @pytest.mark.parametrize("node", [JsonTrue(), JsonFalse(), JsonNull(), JsonStr("x")])
    def test_leaves_have_no_children(self, node) -> None:  # type: ignore[no-untyped-def]
        assert node.children() == ()
        assert node.min_children() == 0
        assert node.max_children() == 0

    def test_leaf_rejects_insert_without_allocating(self) -> None:
        arena = Arena()
        leaf = arena.alloc(JsonTrue())
        new = arena.alloc(JsonNull())
        size_before = len(arena)
        with pytest.raises(TooManyChildren) as exc_info:
            leaf.node.insert_child(new, arena, 0)
        assert exc_info.value == TooManyChildren("true", 0)
        assert len(arena) == size_before

    def test_leaf_delete_is_out_of_range(self) -> None:
        with pytest.raises(IndexOutOfRange):
            JsonNull().delete_child(0)

    def test_containers_are_unbounded(self) -> None:
        assert JsonArray().max_children() is None
        assert JsonObject().max_children() is None
        assert JsonArray().min_children() == 0

    def test_field_is_fixed_at_two(self) -> None:
        arena = Arena()
        root = build({"k": True}, arena)
        field_ref = root.node.children()[0]
        field = field_ref.node
        assert (field.min_children(), field.max_children()) == (2, 2)

        with pytest.raises(TooFewChildren) as exc_info:
            field.delete_child(1)
        assert exc_info.value == TooFewChildren("field", 2)

        with pytest.raises(TooManyChildren):
            field.insert_child(arena.alloc(JsonNull()), arena, 0)
        assert root.to_text() == '{"k": true}'

    def test_field_needs_two_children(self) -> None:
        with pytest.raises(ValueError):
            JsonField([])


# =============================================================================
# Mutation
# =============================================================================


class TestMutation:
    """Insert and delete reshape children in place."""

    def test_delete_shifts_later_children(self) -> None:
        arena = Arena()
        root = build([True, False, None], arena)
        last = root.node.children()[2]
        root.node.delete_child(0)
        assert root.node.children()[1] == last
        assert root.to_text() == "[false, null]"

    def test_insert_at_positions(self) -> None:
        arena = Arena()
        root = build([True], arena)
        root.node.insert_child(arena.alloc(JsonNull()), arena, 0)
        root.node.insert_child(arena.alloc(JsonFalse()), arena, 2)
        assert root.to_text() == "[null, true, false]"

    def test_insert_past_end_is_rejected(self) -> None:
        arena = Arena()
        root = build([True], arena)
        with pytest.raises(IndexOutOfRange):
            root.node.insert_child(arena.alloc(JsonNull()), arena, 5)
        assert root.to_text() == "[true]"

    def test_insert_field_into_object_is_not_rewrapped(self) -> None:
        arena = Arena()
        root = arena.alloc(JsonObject())
        field = arena.alloc(JsonField([arena.alloc(JsonStr("a")), arena.alloc(JsonNull())]))
        size_before = len(arena)
        root.node.insert_child(field, arena, 0)
        assert root.node.children() == [field]
        assert len(arena) == size_before
        assert root.to_text() == '{"a": null}'

    def test_insert_field_into_array_keeps_value(self) -> None:
        arena = Arena()
        root = arena.alloc(JsonArray())
        field = arena.alloc(JsonField([arena.alloc(JsonStr("a")), arena.alloc(JsonTrue())]))
        root.node.insert_child(field, arena, 0)
        assert root.to_text() == "[true]"

    def test_insert_field_into_array_moves_value_ref(self) -> None:
        arena = Arena()
        root = arena.alloc(JsonArray())
        value = arena.alloc(JsonTrue())
        field = arena.alloc(JsonField([arena.alloc(JsonStr("a")), value]))
        root.node.insert_child(field, arena, 0)
        assert root.node.children() == [value]
        assert field not in root.node.children()

    def test_object_insert_allocates_key_and_field(self) -> None:
        arena = Arena()
        root = arena.alloc(JsonObject())
        value = arena.alloc(JsonFalse())
        before = len(arena)
        root.node.insert_child(value, arena, 0)
        assert len(arena) == before + 2

    def test_children_mut_swaps_in_place(self) -> None:
        arena = Arena()
        root = build([True, True], arena)
        root.node.children_mut()[1] = arena.alloc(JsonNull())
        assert root.to_text() == "[true, null]"


# =============================================================================
# Typed keys
# =============================================================================


class TestChars:
    """Replace and insert shortcuts."""

    def test_value_chars_are_distinct(self) -> None:
        assert len(set(VALUE_CHARS)) == len(VALUE_CHARS)

    @pytest.mark.parametrize(
        ("c", "expected"),
        [
            ("t", JsonTrue()),
            ("f", JsonFalse()),
            ("n", JsonNull()),
            ("s", JsonStr("")),
            ("a", JsonArray()),
            ("o", JsonObject()),
        ],
    )
    def test_from_char(self, c: str, expected) -> None:  # type: ignore[no-untyped-def]
        assert JsonNull().from_char(c) == expected
        assert value_from_char(c) == expected

    def test_from_char_is_defined_exactly_on_replace_chars(self) -> None:
        node = JsonTrue()
        for c in "tfnsaoxyz[]{} 1":
            assert (node.from_char(c) is not None) == node.is_replace_char(c)

    def test_unknown_char_is_none(self) -> None:
        assert JsonArray().from_char("q") is None

    def test_insert_chars(self) -> None:
        assert JsonArray().insert_chars() == list(VALUE_CHARS)
        assert JsonObject().is_insert_char("o")
        assert not JsonTrue().is_insert_char("t")
        assert JsonStr().insert_chars() == []

    def test_field_has_no_shortcuts(self) -> None:
        arena = Arena()
        field = JsonField([arena.alloc(JsonStr("")), arena.alloc(JsonNull())])
        assert field.replace_chars() == []
        assert field.from_char("t") is None
        assert not field.is_insert_char("t")

    def test_child_from_char(self) -> None:
        assert JsonArray().child_from_char("t") == JsonTrue()
        assert JsonTrue().child_from_char("t") is None


# =============================================================================
# Display
# =============================================================================


class TestDisplay:
    """Names, categories and formatting."""

    def test_display_names(self) -> None:
        arena = Arena()
        field = JsonField([arena.alloc(JsonStr("")), arena.alloc(JsonNull())])
        names = [
            n.display_name()
            for n in (JsonTrue(), JsonFalse(), JsonNull(), JsonStr(), JsonArray(), JsonObject(), field)
        ]
        assert names == ["true", "false", "null", "string", "array", "object", "field"]

    def test_categories(self) -> None:
        assert JsonTrue().display_tokens_rec(None) == [Text("true", "const")]
        assert JsonStr("x").display_tokens_rec(None) == [Text('"x"', "literal")]

    def test_string_escaping(self) -> None:
        arena = Arena()
        assert arena.alloc(JsonStr('a"b\n')).to_text() == '"a\\"b\\n"'

    def test_pretty_empty_containers(self) -> None:
        arena = Arena()
        assert build([], arena).to_text(JsonFormat.PRETTY) == "[]"
        assert build({}, arena).to_text(JsonFormat.PRETTY) == "{}"

    def test_pretty_nested(self) -> None:
        arena = Arena()
        root = build([{"a": None}], arena)
        assert root.to_text(JsonFormat.PRETTY) == '[\n    {\n        "a": null\n    }\n]'

    def test_size(self) -> None:
        arena = Arena()
        root = build({"a": [True]}, arena)
        assert root.node.size(JsonFormat.COMPACT) == Size(0, len('{"a": [true]}'))
        assert root.node.size(JsonFormat.PRETTY) == Size(4, 1)


# =============================================================================
# Structural equality and construction
# =============================================================================


class TestEquality:
    """Nodes compare by value, across arenas."""

    def test_equal_trees_in_different_arenas(self) -> None:
        a = build({"x": [True, "y"]}, Arena())
        b = build({"x": [True, "y"]}, Arena())
        assert a.node == b.node
        assert hash(a.node) == hash(b.node)

    def test_payload_difference(self) -> None:
        assert JsonStr("a") != JsonStr("b")
        assert JsonTrue() != JsonFalse()

    def test_children_difference(self) -> None:
        assert build([True], Arena()).node != build([False], Arena()).node
        assert build([True], Arena()).node != build([True, True], Arena()).node

    def test_not_equal_to_other_types(self) -> None:
        assert JsonNull() != None  # noqa: E711
        assert JsonStr("a") != "a"


class TestBuild:
    """Building trees from Python values."""

    def test_rejects_numbers(self) -> None:
        with pytest.raises(TypeError):
            build(1, Arena())

    def test_rejects_non_string_keys(self) -> None:
        with pytest.raises(TypeError):
            build({1: True}, Arena())

    def test_bool_is_not_treated_as_number(self) -> None:
        arena = Arena()
        assert isinstance(build(True, arena).node, JsonTrue)
        assert isinstance(build(False, arena).node, JsonFalse)


class TestAcceptsChild:
    """Fields only take a string in key position."""

    def test_key_position(self) -> None:
        arena = Arena()
        field = JsonField([arena.alloc(JsonStr("k")), arena.alloc(JsonNull())])
        assert field.accepts_child(0, JsonStr("other"))
        assert not field.accepts_child(0, JsonArray())
        assert not field.accepts_child(0, JsonTrue())

    def test_value_position(self) -> None:
        arena = Arena()
        field = JsonField([arena.alloc(JsonStr("k")), arena.alloc(JsonNull())])
        assert field.accepts_child(1, JsonArray())
        assert field.accepts_child(1, JsonStr())
        assert not field.accepts_child(1, field)

    def test_containers_accept_any_value(self) -> None:
        assert JsonArray().accepts_child(0, JsonObject())
        assert JsonObject().accepts_child(0, JsonTrue())
