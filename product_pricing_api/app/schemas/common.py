"""
Helpers shared by the request schemas.
"""

from typing import Any


def coerce_text(value: Any) -> Any:
    """Store numbers and booleans sent for text attributes as strings.

    ``128`` becomes ``"128"`` and ``true`` becomes ``"true"``; anything
    else is left for normal validation.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value
