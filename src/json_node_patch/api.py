"""Public API functions for json-node-patch.

This module provides the user-facing functions: normalize, render_rows,
format_path, resolve, coerce and apply_edits.  Each ``apply_edits`` call
creates a fresh ``PatchApplicator`` and parses its own working copy of the
document, so no state is carried between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from json_node_patch.config import EditorConfig
from json_node_patch.patch.applicator import PatchApplicator
from json_node_patch.patch.coercer import coerce
from json_node_patch.paths.formatter import format_path
from json_node_patch.paths.resolver import resolve
from json_node_patch.result import PatchResult
from json_node_patch.rows.nodes import (
    ContainerNode,
    EditableNode,
    FormField,
    NodeRow,
    ScalarNode,
    Segment,
)
from json_node_patch.rows.normalizer import RowNormalizer

__all__ = [
    "apply_edits",
    "coerce",
    "format_path",
    "normalize",
    "render_rows",
    "resolve",
]

_normalizer = RowNormalizer()


def normalize(rows: Sequence[NodeRow]) -> Any:
    """Return the canonical JSON value of a node's rows.

    Args:
        rows: The node's flattened rows.

    Returns:
        ``{}`` for no rows, the bare value of a single unnamed row, otherwise
        a dict of the scalar rows in row order.
    """
    return _normalizer.normalize(tuple(rows))


def render_rows(rows: Sequence[NodeRow], config: EditorConfig | None = None) -> str:
    """Return the read-only display text of a node's rows."""
    return _normalizer.render(tuple(rows), config)


def apply_edits(
    document_text: str | None,
    path: Sequence[Segment],
    node: EditableNode | bool,
    form: Sequence[FormField],
    config: EditorConfig | None = None,
) -> PatchResult:
    """Merge edited fields into the document and re-serialize it.

    Args:
        document_text: Current authoritative document text.
        path:          Structural path of the edited node.
        node:          Node shape (``ScalarNode``/``ContainerNode``), or a
                       bool meaning "is a single scalar".
        form:          Edited fields.
        config:        Serialization settings.  Defaults to ``EditorConfig()``.

    Returns:
        A ``PatchResult``; commit ``result.text`` when ``result.changed``.

    Raises:
        InvalidDocumentError: If the document text is missing or invalid.
    """
    if isinstance(node, bool):
        node = ScalarNode(None) if node else ContainerNode()
    return PatchApplicator(config).apply(document_text, path, node, form)

