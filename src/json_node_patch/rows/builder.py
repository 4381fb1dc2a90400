"""RowBuilder: flattens one JSON value into the rows the inspector shows.

Uses type dispatch, mirroring what the graph view displays for a node:
- An object yields one row per key, in key order; the row kind follows the
  child value's type.
- A scalar (string, number, bool, null) yields a single unnamed row.
- An array yields no rows: each element is a node of its own.

``select`` combines path walking with row building to produce the
``NodeSelection`` snapshot for the node at a given path.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from json_node_patch.errors import UnresolvedPathError
from json_node_patch.paths.resolver import step
from json_node_patch.rows.nodes import (
    MISSING,
    NodeRow,
    NodeSelection,
    RowKind,
    Segment,
)

__all__ = ["RowBuilder", "select"]


@dataclass
class RowBuilder:
    """Converts a JSON value into the flattened rows of its node.

    The dispatch order matters: bool is checked with the other scalars before
    anything numeric, and dict/list are recognised before the scalar case.

    Example::
        builder = RowBuilder()
        builder.build({"name": "Bob", "tags": ["a"]})
        # [NodeRow("name", "Bob", SCALAR), NodeRow("tags", ["a"], ARRAY)]
        builder.build(42)
        # [NodeRow(None, 42, SCALAR)]
    """

    def build(self, value: Any) -> list[NodeRow]:
        """Return the rows for ``value``.

        Raises:
            TypeError: If value is not a valid JSON type.
        """
        if isinstance(value, dict):
            return [
                NodeRow(key=key, value=child, kind=RowKind.of(child))
                for key, child in value.items()
            ]

        if isinstance(value, list):
            return []

        if value is None or isinstance(value, (bool, str, int, float)):
            return [NodeRow(key=None, value=value, kind=RowKind.SCALAR)]

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


_builder = RowBuilder()


def select(document: Any, path: Sequence[Segment]) -> NodeSelection:
    """Build the selection snapshot for the node at ``path``.

    Args:
        document: Parsed JSON document.
        path:     Structural path of the node; empty for the root.

    Returns:
        A ``NodeSelection`` holding the node's rows and the path.

    Raises:
        UnresolvedPathError: If ``path`` does not lead to a value.
    """
    path = tuple(path)
    current = document
    for depth, segment in enumerate(path):
        current = step(current, segment)
        if current is MISSING:
            raise UnresolvedPathError(path, depth)
    return NodeSelection(rows=tuple(_builder.build(current)), path=path)
