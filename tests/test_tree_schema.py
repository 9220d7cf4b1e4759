"""Tests for tree/schema.py and tree/hierarchy.py.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from localfmt.core.depth_guard import DepthLimitExceededError
from localfmt.message import AllocMessage
from localfmt.tree import GroupSpec, Hierarchy, LeafSpec, MessageSchema
from tests.helpers.catalog import CATALOG, SCHEMA_MAPPING


class TestHierarchy:
    """Key paths."""

    def test_root(self) -> None:
        root = Hierarchy()

        assert root.is_root
        assert root.depth == 0
        assert str(root) == ""

    def test_child_and_join(self) -> None:
        path = Hierarchy().child("words").child("ownership")

        assert str(path) == "words.ownership"
        assert path.depth == 2
        assert path.join("extra") == "words.ownership.extra"

    def test_parse(self) -> None:
        assert Hierarchy.parse("a.b") == Hierarchy(("a", "b"))
        assert Hierarchy.parse("") == Hierarchy()


class TestLeafSpec:
    """LeafSpec validation."""

    def test_default_has_no_arity(self) -> None:
        assert LeafSpec().arity is None

    def test_negative_arity_rejected(self) -> None:
        with pytest.raises(ValueError, match="arity"):
            LeafSpec(-1)


class TestGroupSpec:
    """GroupSpec immutability and equality."""

    def test_fields_are_read_only(self) -> None:
        group = GroupSpec({"a": LeafSpec(0)})

        with pytest.raises(TypeError):
            group.fields["b"] = LeafSpec(1)  # type: ignore[index]

    def test_source_mapping_is_copied(self) -> None:
        fields = {"a": LeafSpec(0)}
        group = GroupSpec(fields)
        fields["b"] = LeafSpec(1)

        assert list(group.fields) == ["a"]

    def test_equality_is_order_sensitive(self) -> None:
        first = GroupSpec({"a": LeafSpec(), "b": LeafSpec()})

        assert first == GroupSpec({"a": LeafSpec(), "b": LeafSpec()})
        assert first != GroupSpec({"b": LeafSpec(), "a": LeafSpec()})
        assert hash(first) == hash(GroupSpec({"a": LeafSpec(), "b": LeafSpec()}))


class TestMessageSchemaFromMapping:
    """MessageSchema.from_mapping()."""

    def test_leaves_in_field_order(self) -> None:
        schema = MessageSchema.from_mapping(SCHEMA_MAPPING)

        assert [(str(path), spec.arity) for path, spec in schema.leaves()] == [
            ("hello", 1),
            ("farewell", 0),
            ("words.ownership", 0),
            ("words.borrow", None),
        ]

    def test_accepts_specs(self) -> None:
        schema = MessageSchema.from_mapping(
            {"a": LeafSpec(2), "g": GroupSpec({"b": LeafSpec()})}
        )

        assert schema.get("a") == LeafSpec(2)
        assert schema.get("g.b") == LeafSpec()

    def test_get_missing(self) -> None:
        schema = MessageSchema.from_mapping({"a": 0})

        assert schema.get("b") is None
        assert schema.get("a.b") is None
        assert schema.get("") == schema.root

    @pytest.mark.parametrize("value", [True, "1", 1.0, [1]])
    def test_invalid_value(self, value: object) -> None:
        with pytest.raises(ValueError, match="Invalid schema value"):
            MessageSchema.from_mapping({"a": value})

    def test_non_string_key(self) -> None:
        with pytest.raises(ValueError, match="keys must be str"):
            MessageSchema.from_mapping({1: 0})  # type: ignore[dict-item]

    def test_negative_arity(self) -> None:
        with pytest.raises(ValueError, match="arity"):
            MessageSchema.from_mapping({"a": -1})

    def test_depth_limit(self) -> None:
        nested: dict[str, object] = {"leaf": 0}
        for _ in range(5):
            nested = {"g": nested}

        with pytest.raises(DepthLimitExceededError):
            MessageSchema.from_mapping(nested, max_depth=3)

    def test_equality(self) -> None:
        assert MessageSchema.from_mapping({"a": 1}) == MessageSchema.from_mapping(
            {"a": LeafSpec(1)}
        )
        assert MessageSchema.from_mapping({"a": 1}) != MessageSchema.from_mapping({"a": 2})

    def test_repr(self) -> None:
        assert repr(MessageSchema.from_mapping(SCHEMA_MAPPING)) == "MessageSchema(leaves=4)"


class TestMessageSchemaInfer:
    """MessageSchema.infer()."""

    def test_infer_from_text(self) -> None:
        schema = MessageSchema.infer(CATALOG["EN"])

        assert schema == MessageSchema.from_mapping(
            {"hello": 1, "farewell": 0, "words": {"ownership": 0, "borrow": 2}}
        )

    def test_infer_from_messages(self) -> None:
        schema = MessageSchema.infer({"a": AllocMessage.parse("{0}{1}")})

        assert schema.get("a") == LeafSpec(2)

    def test_infer_rejects_other_values(self) -> None:
        with pytest.raises(ValueError, match="Cannot infer"):
            MessageSchema.infer({"a": 3})
