"""Tests for RowNormalizer."""

from __future__ import annotations

import json

import pytest

from json_node_patch.config import EditorConfig
from json_node_patch.rows.nodes import NodeRow, RowKind
from json_node_patch.rows.normalizer import RowNormalizer


@pytest.fixture
def normalizer() -> RowNormalizer:
    return RowNormalizer()


class TestNormalize:
    """Canonical value of a node's rows."""

    def test_empty_rows_give_empty_object(self, normalizer: RowNormalizer) -> None:
        assert normalizer.normalize([]) == {}

    def test_single_unnamed_row_is_unwrapped(self, normalizer: RowNormalizer) -> None:
        assert normalizer.normalize([NodeRow(None, 42)]) == 42

    def test_single_unnamed_null_is_unwrapped(self, normalizer: RowNormalizer) -> None:
        assert normalizer.normalize([NodeRow(None, None)]) is None

    def test_containers_are_dropped(self, normalizer: RowNormalizer) -> None:
        rows = [
            NodeRow("name", "Bob"),
            NodeRow("tags", ["a"], RowKind.ARRAY),
            NodeRow("address", {"city": "X"}, RowKind.OBJECT),
            NodeRow("age", 30),
        ]
        assert normalizer.normalize(rows) == {"name": "Bob", "age": 30}

    def test_key_order_follows_rows(self, normalizer: RowNormalizer) -> None:
        rows = [NodeRow("z", 1), NodeRow("a", 2), NodeRow("m", 3)]
        assert list(normalizer.normalize(rows)) == ["z", "a", "m"]

    def test_last_duplicate_wins(self, normalizer: RowNormalizer) -> None:
        rows = [NodeRow("a", 1), NodeRow("b", 2), NodeRow("a", 3)]
        result = normalizer.normalize(rows)
        assert result == {"a": 3, "b": 2}
        assert list(result) == ["a", "b"]

    def test_idempotent(self, normalizer: RowNormalizer) -> None:
        rows = [NodeRow("a", 1), NodeRow("b", None)]
        assert normalizer.normalize(rows) == normalizer.normalize(rows)


class TestRender:
    """Display text of a node's rows."""

    def test_empty_rows(self, normalizer: RowNormalizer) -> None:
        assert normalizer.render([]) == "{}"

    def test_single_scalar_is_plain_text(self, normalizer: RowNormalizer) -> None:
        assert normalizer.render([NodeRow(None, "hello")]) == "hello"
        assert normalizer.render([NodeRow(None, True)]) == "true"

    def test_object_is_pretty_printed(self, normalizer: RowNormalizer) -> None:
        text = normalizer.render([NodeRow("name", "Bob"), NodeRow("age", 30)])
        assert text == '{\n  "name": "Bob",\n  "age": 30\n}'

    def test_indent_from_config(self, normalizer: RowNormalizer) -> None:
        text = normalizer.render([NodeRow("a", 1)], EditorConfig(indent=4))
        assert text == '{\n    "a": 1\n}'

    def test_non_ascii_written_as_is(self, normalizer: RowNormalizer) -> None:
        text = normalizer.render([NodeRow("city", "Zürich")])
        assert "Zürich" in text
        assert json.loads(text) == {"city": "Zürich"}
