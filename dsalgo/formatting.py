"""Plain-text rendering of values and sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def format_value(value: Any) -> str:
    """Render a value the way a stream would print it.

    Floats use six significant digits with trailing zeros removed, so
    ``1.0`` renders as ``1`` and ``0.5`` as ``0.5``.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_sequence(items: Iterable[Any], prefix: str = "") -> str:
    """Render ``items`` as ``prefix[a, b, c]``."""
    body = ", ".join(format_value(item) for item in items)
    return f"{prefix}[{body}]"