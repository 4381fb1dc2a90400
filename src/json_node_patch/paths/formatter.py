"""Human-readable rendering of structural paths.

    ()                        -> $
    ("customer", 0, "name")   -> $["customer"][0]["name"]

Purely presentational: the rendered string is never parsed back or used for
resolution.  Results are memoized in a module-level LRU cache; paths are
normalized to tuples so list and tuple inputs share cache entries.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from cachetools import LRUCache, cached

from json_node_patch.rows.nodes import Segment, StructuralPath

__all__ = ["ROOT_SYMBOL", "format_path", "format_segment"]

ROOT_SYMBOL = "$"

_cache: LRUCache[StructuralPath, str] = LRUCache(maxsize=1024)


def format_segment(segment: Segment) -> str:
    """Render one segment: bare digits for indices, a quoted literal for keys.

    Raises:
        TypeError: If the segment is neither a str nor a non-bool int.
    """
    # bool subclasses int; True is not an array index
    if isinstance(segment, bool):
        raise TypeError(f"Unsupported path segment: {segment!r}")
    if isinstance(segment, int):
        return f"[{segment}]"
    if isinstance(segment, str):
        return f"[{json.dumps(segment, ensure_ascii=False)}]"
    raise TypeError(f"Unsupported path segment: {segment!r}")


@cached(_cache)
def _format(path: StructuralPath) -> str:
    return ROOT_SYMBOL + "".join(format_segment(seg) for seg in path)


def format_path(path: Sequence[Segment] | None) -> str:
    """Render a structural path as ``$`` followed by one ``[...]`` per segment.

    Args:
        path: Segments from the root; None or empty means the root itself.

    Returns:
        The bracketed path string, e.g. ``$["customer"][0]``.
    """
    if not path:
        return ROOT_SYMBOL
    return _format(tuple(path))
