"""EditorConfig: serialization settings for the patch cycle.

EditorConfig is a frozen (immutable) dataclass.  The same settings are used
for the pretty-printed display of a node and for re-serializing the whole
document after a save.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

__all__ = ["EditorConfig"]


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable configuration for rendering and re-serialization.

    Attributes:
        indent: Spaces per indentation level of the written document (>= 0).
            Default 2.
        ensure_ascii: When True, non-ASCII characters are written as
            ``\\uXXXX`` escapes.  Default False (written as-is).
    """

    indent: int = 2
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            msg = f"indent must be an int, got {type(self.indent).__name__}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)

    def dumps(self, value: object) -> str:
        """Serialize a JSON value with these settings."""
        return json.dumps(
            value, indent=self.indent, ensure_ascii=self.ensure_ascii, allow_nan=False
        )
