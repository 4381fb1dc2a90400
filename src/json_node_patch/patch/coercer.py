"""Value coercion for edited form text.

``coerce`` turns the text typed into an input into the most specific JSON
value it parses as, and falls back to the text itself:

    coerce("123")      -> 123
    coerce("true")     -> True
    coerce("null")     -> None
    coerce('"x"')      -> "x"
    coerce("[1,2]")    -> [1, 2]
    coerce("hello")    -> "hello"

Parsing is strict: ``NaN``, ``Infinity`` and numbers overflowing to infinity
are not JSON, so they fall back to the raw string.
"""

from __future__ import annotations

import json
import math
from typing import Any

__all__ = ["coerce", "loads_strict", "try_loads"]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def loads_strict(text: str) -> Any:
    """Parse standard JSON text.

    Raises:
        ValueError: (``json.JSONDecodeError`` included) if ``text`` is not
            standard JSON.
    """
    return json.loads(
        text, parse_constant=_reject_constant, parse_float=_parse_float
    )


def try_loads(text: str) -> tuple[bool, Any]:
    """Parse ``text``, returning ``(ok, value)`` instead of raising."""
    try:
        return True, loads_strict(text)
    except (ValueError, RecursionError):
        return False, None


def coerce(raw: str) -> Any:
    """Return the JSON value ``raw`` parses as, else ``raw`` itself.

    Total: never raises.
    """
    ok, value = try_loads(raw)
    if ok:
        return value
    return raw
