"""Canonical text and ordering of view-record field values.

Field values may be missing (None). Missing values match only an empty
substring and order before every present value.
"""

from __future__ import annotations

from typing import Any, Mapping


def field_text(value: Any) -> str:
    """Return the canonical text of a field value used for substring matching.

    - None -> ""
    - booleans -> "true" / "false"
    - integral floats drop the fraction ("3.0" -> "3")
    - mappings -> their keys joined with ","
    - lists/tuples -> items joined with ","
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Mapping):
        return ",".join(field_text(key) for key in value)
    if isinstance(value, (list, tuple)):
        return ",".join(field_text(item) for item in value)
    return str(value)


def sort_token(value: Any) -> tuple:
    """Return a comparable token for one sort key.

    Missing values come first. Within one key, numbers order before strings
    and anything else is compared by its canonical text.
    """
    if value is None:
        return (0,)
    if isinstance(value, (bool, int, float)):
        return (1, 0, value)
    if isinstance(value, str):
        return (1, 1, value)
    return (1, 2, field_text(value))


def contains_text(value: Any, needle: str) -> bool:
    """Case-insensitive substring test on the canonical text of ``value``."""
    return needle.casefold() in field_text(value).casefold()
