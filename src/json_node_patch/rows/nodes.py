"""Row, form and node-shape types for the node inspector.

Provides the data types shared by the row builder, the normalizer and the
patch applicator:

- ``RowKind``: StrEnum of the three kinds a flattened field can have.
- ``NodeRow``: one flattened field of a node.
- ``FormField``: one editable field seeded from a scalar row.
- ``ScalarNode`` / ``ContainerNode``: the two node shapes, decided once at
  selection time.
- ``NodeSelection``: the immutable ``(rows, path)`` snapshot for a node.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "MISSING",
    "ContainerNode",
    "EditableNode",
    "FormField",
    "JsonValue",
    "NodeRow",
    "NodeSelection",
    "RowKind",
    "ScalarNode",
    "Segment",
    "StructuralPath",
    "display_text",
    "form_from_rows",
    "node_from_rows",
    "seed_text",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# A path segment: array index (int) or object key (str)
Segment = str | int
StructuralPath = tuple[Segment, ...]


class _Missing:
    """Sentinel type for "no value" where ``None`` is a legitimate JSON null."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class RowKind(StrEnum):
    """Kind of value held by a flattened row.

    - ARRAY  -> "array"  : the row's value is a JSON array
    - OBJECT -> "object" : the row's value is a JSON object
    - SCALAR -> "scalar" : string, number, bool or null
    """

    ARRAY = auto()
    OBJECT = auto()
    SCALAR = auto()

    @classmethod
    def of(cls, value: Any) -> RowKind:
        """Return the kind matching a JSON value."""
        if isinstance(value, dict):
            return cls.OBJECT
        if isinstance(value, list):
            return cls.ARRAY
        return cls.SCALAR


@dataclass(frozen=True, slots=True)
class NodeRow:
    """One flattened field of a node.

    Attributes:
        key:   Object key of the field, or None when the whole node is a single
               unnamed value.
        value: The field's JSON value.
        kind:  Which kind of value this row holds (see RowKind).
    """

    key: str | None
    value: Any
    kind: RowKind = RowKind.SCALAR


@dataclass(frozen=True, slots=True)
class FormField:
    """One editable field of the form.

    Attributes:
        key:      Key of the row the field was seeded from (None for a single
                  unnamed value).
        value:    The text currently in the input.
        original: JSON value the field was seeded from, or MISSING when the
                  field was built by hand.
    """

    key: str | None
    value: str
    original: Any = MISSING

    @property
    def is_modified(self) -> bool:
        """True unless the text still equals the seeded display text."""
        if self.original is MISSING:
            return True
        return self.value != seed_text(self.original)

    def with_value(self, value: str) -> FormField:
        return FormField(key=self.key, value=value, original=self.original)


@dataclass(frozen=True, slots=True)
class ScalarNode:
    """A node whose entire content is one unnamed value."""

    value: Any


@dataclass(frozen=True, slots=True)
class ContainerNode:
    """An object-like node made of named fields."""

    fields: tuple[NodeRow, ...] = ()


EditableNode = ScalarNode | ContainerNode


@dataclass(frozen=True, slots=True)
class NodeSelection:
    """Snapshot of the inspected node: its rows and its structural path."""

    rows: tuple[NodeRow, ...] = ()
    path: StructuralPath = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples.
        object.__setattr__(self, "rows", tuple(self.rows))
        object.__setattr__(self, "path", tuple(self.path))

    @property
    def node(self) -> EditableNode:
        return node_from_rows(self.rows)


def node_from_rows(rows: tuple[NodeRow, ...] | list[NodeRow]) -> EditableNode:
    """Decide the node shape from its rows.

    Exactly one row with ``key is None`` makes a ``ScalarNode``; anything else
    (including no rows at all) is a ``ContainerNode``.
    """
    if len(rows) == 1 and rows[0].key is None:
        return ScalarNode(rows[0].value)
    return ContainerNode(tuple(rows))


def display_text(value: Any) -> str:
    """Render a JSON value the way the inspector shows it as plain text.

    Strings are shown verbatim, booleans and null as their JSON literals,
    numbers and containers as compact JSON.
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def seed_text(value: Any) -> str:
    """Text an input is seeded with: null becomes the empty string."""
    if value is None:
        return ""
    return display_text(value)


def form_from_rows(rows: tuple[NodeRow, ...] | list[NodeRow]) -> list[FormField]:
    """Project rows onto the editable form; only scalar rows are kept."""
    return [
        FormField(key=row.key, value=seed_text(row.value), original=row.value)
        for row in rows
        if row.kind == RowKind.SCALAR
    ]
