"""RowNormalizer: canonical form of a node's flattened rows.

Converts the rows of one node into the value the inspector displays:

- No rows             -> ``{}``
- One unnamed row     -> that row's value, unwrapped
- Anything else       -> a mapping of ``key: value`` for every scalar row,
                         in row order (last duplicate key wins)

Array- and object-valued rows are left out; they are rendered as nodes of
their own.
"""

from __future__ import annotations

from typing import Any

from json_node_patch.config import EditorConfig
from json_node_patch.rows.nodes import NodeRow, RowKind, display_text

__all__ = ["RowNormalizer"]


class RowNormalizer:
    """Normalizes node rows for display and for seeding the edit form.

    Stateless; a single instance can be shared.

    Example usage:
        normalizer = RowNormalizer()
        normalizer.normalize([NodeRow("age", 30)])   # {"age": 30}
        normalizer.normalize([NodeRow(None, 42)])    # 42
    """

    def normalize(self, rows: list[NodeRow] | tuple[NodeRow, ...]) -> Any:
        """Return the canonical JSON value for ``rows``.

        Args:
            rows: The node's flattened rows, in display order.

        Returns:
            ``{}`` for no rows, the bare value for a single unnamed row, and
            otherwise a dict of the scalar rows.
        """
        if not rows:
            return {}
        if len(rows) == 1 and rows[0].key is None:
            return rows[0].value

        obj: dict[str, Any] = {}
        for row in rows:
            if row.kind != RowKind.SCALAR or row.key is None:
                continue
            obj[row.key] = row.value
        return obj

    def render(
        self,
        rows: list[NodeRow] | tuple[NodeRow, ...],
        config: EditorConfig | None = None,
    ) -> str:
        """Return the display text for ``rows``.

        A single unnamed value is shown as plain text; every other shape is
        pretty-printed JSON.
        """
        cfg = config if config is not None else EditorConfig()
        if len(rows) == 1 and rows[0].key is None:
            return display_text(rows[0].value)
        return cfg.dumps(self.normalize(rows))
