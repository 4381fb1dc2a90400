"""Path resolution through a parsed JSON value.

Walks a structural path through dicts and lists to find either the value at
the end of the path (``walk``) or the container holding it together with the
final segment (``resolve``).  A failed resolution is not an exception: it is
reported as ``MISSING`` by ``walk`` and as an unresolved ``Resolution`` by
``resolve``; callers check before mutating.

Indexing rules:
- A str segment indexes a dict by key.
- A non-negative int segment indexes a list within its bounds.
- Every other combination (int into a dict, str into a list, negative or
  out-of-range index, any segment into a scalar) does not resolve.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from json_node_patch.rows.nodes import MISSING, Segment

__all__ = ["Resolution", "assign", "resolve", "step", "walk"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resolution:
    """Where a path ends inside a document.

    Attributes:
        parent:       Container holding the target, or None when resolution
                      failed (or the path is the root).
        last_segment: Final segment of the path, or None for the root.
        is_root:      True for the empty path: the document itself is the
                      target and there is no parent.
    """

    parent: Any = None
    last_segment: Segment | None = None
    is_root: bool = False

    @property
    def resolved(self) -> bool:
        return self.is_root or self.parent is not None


def _index_ok(container: Any, segment: Segment) -> bool:
    if isinstance(container, dict):
        return isinstance(segment, str)
    if isinstance(container, list):
        return (
            isinstance(segment, int)
            and not isinstance(segment, bool)
            and 0 <= segment < len(container)
        )
    return False


def step(container: Any, segment: Segment) -> Any:
    """Index one level into ``container``; MISSING if that is not possible."""
    if not _index_ok(container, segment):
        return MISSING
    if isinstance(container, dict):
        return container.get(segment, MISSING)  # type: ignore[arg-type]
    return container[segment]  # type: ignore[index]


def walk(document: Any, path: Sequence[Segment]) -> Any:
    """Return the value at the end of ``path`` or MISSING.

    An empty path returns ``document`` itself.
    """
    current = document
    for depth, segment in enumerate(path):
        current = step(current, segment)
        if current is MISSING:
            logger.debug("path %r stops resolving at segment %d", list(path), depth)
            return MISSING
    return current


def resolve(document: Any, path: Sequence[Segment]) -> Resolution:
    """Locate the container that holds the value at ``path``.

    Walks every segment but the last.  The parent must itself be a dict or a
    list for the resolution to succeed; whether the last segment currently
    exists in it is left to ``assign``.

    Args:
        document: Parsed JSON value.
        path:     Structural path from the root.

    Returns:
        A ``Resolution``: ``is_root`` for the empty path, otherwise ``parent``
        and ``last_segment`` (``parent`` is None when resolution failed).
    """
    if not path:
        return Resolution(is_root=True)
    parent = walk(document, path[:-1])
    if parent is MISSING or not isinstance(parent, (dict, list)):
        return Resolution(last_segment=path[-1])
    return Resolution(parent=parent, last_segment=path[-1])


def assign(parent: Any, segment: Segment, value: Any) -> bool:
    """Set ``parent[segment] = value`` in place.

    Dict keys are created if absent; list indices must already exist.

    Returns:
        True when the assignment happened, False when the segment does not
        address a slot of ``parent``.
    """
    if isinstance(parent, dict) and isinstance(segment, str):
        parent[segment] = value
        return True
    if _index_ok(parent, segment):
        parent[segment] = value
        return True
    return False
