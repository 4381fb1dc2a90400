"""Tests for RowBuilder and select()."""

from __future__ import annotations

import pytest

from json_node_patch.errors import UnresolvedPathError
from json_node_patch.rows.builder import RowBuilder, select
from json_node_patch.rows.nodes import NodeRow, RowKind, ScalarNode

DOC = {
    "customer": {"name": "Bob", "age": 30, "tags": ["a", "b"], "address": {}},
    "orders": [{"id": 1}, 5],
}


@pytest.fixture
def builder() -> RowBuilder:
    """A fresh RowBuilder instance for each test."""
    return RowBuilder()


class TestBuild:
    """Flattening of single JSON values."""

    def test_object_rows_follow_key_order(self, builder: RowBuilder) -> None:
        rows = builder.build(DOC["customer"])
        assert rows == [
            NodeRow("name", "Bob", RowKind.SCALAR),
            NodeRow("age", 30, RowKind.SCALAR),
            NodeRow("tags", ["a", "b"], RowKind.ARRAY),
            NodeRow("address", {}, RowKind.OBJECT),
        ]

    @pytest.mark.parametrize("value", ["x", 1, 1.5, True, None])
    def test_scalar_is_single_unnamed_row(
        self, builder: RowBuilder, value: object
    ) -> None:
        assert builder.build(value) == [NodeRow(None, value, RowKind.SCALAR)]

    def test_array_has_no_rows(self, builder: RowBuilder) -> None:
        assert builder.build([1, 2]) == []

    def test_empty_object_has_no_rows(self, builder: RowBuilder) -> None:
        assert builder.build({}) == []

    def test_rejects_non_json_values(self, builder: RowBuilder) -> None:
        with pytest.raises(TypeError):
            builder.build({1, 2})


class TestSelect:
    """Selection snapshots for nodes at a path."""

    def test_root(self) -> None:
        selection = select(DOC, [])
        assert selection.path == ()
        assert [r.key for r in selection.rows] == ["customer", "orders"]

    def test_nested_object(self) -> None:
        selection = select(DOC, ["orders", 0])
        assert selection.rows == (NodeRow("id", 1),)
        assert selection.path == ("orders", 0)

    def test_scalar_element(self) -> None:
        selection = select(DOC, ["orders", 1])
        assert selection.node == ScalarNode(5)

    def test_missing_path_raises(self) -> None:
        with pytest.raises(UnresolvedPathError) as excinfo:
            select(DOC, ["customer", "email"])
        assert excinfo.value.depth == 1
        assert excinfo.value.path == ("customer", "email")
