"""Rows subpackage: node rows, form fields and their normalization.

Re-exports the public API for the rows module:
- NodeRow, RowKind: one flattened field of a node and its kind
- FormField: one editable field seeded from a scalar row
- ScalarNode, ContainerNode, NodeSelection: node shapes and selection snapshot
- RowBuilder, select: flatten a JSON value / the node at a path into rows
- RowNormalizer: canonical display form of a node's rows
"""

from json_node_patch.rows.builder import RowBuilder, select
from json_node_patch.rows.nodes import (
    ContainerNode,
    FormField,
    NodeRow,
    NodeSelection,
    RowKind,
    ScalarNode,
    form_from_rows,
    node_from_rows,
)
from json_node_patch.rows.normalizer import RowNormalizer

__all__ = [
    "ContainerNode",
    "FormField",
    "NodeRow",
    "NodeSelection",
    "RowBuilder",
    "RowKind",
    "RowNormalizer",
    "ScalarNode",
    "form_from_rows",
    "node_from_rows",
    "select",
]
