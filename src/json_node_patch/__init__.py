"""JSON node patch - read and patch one node of a JSON document by path."""

from __future__ import annotations

import logging

from json_node_patch.api import (
    apply_edits,
    coerce,
    format_path,
    normalize,
    render_rows,
    resolve,
)
from json_node_patch.config import EditorConfig
from json_node_patch.errors import (
    InvalidDocumentError,
    PatchError,
    UnresolvedPathError,
)
from json_node_patch.patch.applicator import PatchApplicator
from json_node_patch.protocols import DocumentStore
from json_node_patch.result import PatchOutcome, PatchResult
from json_node_patch.rows import (
    ContainerNode,
    FormField,
    NodeRow,
    NodeSelection,
    RowKind,
    ScalarNode,
    select,
)
from json_node_patch.session import EditSession
from json_node_patch.store import FileDocumentStore, InMemoryDocumentStore

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ContainerNode",
    "DocumentStore",
    "EditSession",
    "EditorConfig",
    "FileDocumentStore",
    "FormField",
    "InMemoryDocumentStore",
    "InvalidDocumentError",
    "NodeRow",
    "NodeSelection",
    "PatchApplicator",
    "PatchError",
    "PatchOutcome",
    "PatchResult",
    "RowKind",
    "ScalarNode",
    "UnresolvedPathError",
    "apply_edits",
    "coerce",
    "format_path",
    "normalize",
    "render_rows",
    "resolve",
    "select",
]
