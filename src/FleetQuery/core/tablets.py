"""Formatting helpers for tablet records."""

from __future__ import annotations

from typing import Final

from FleetQuery.core.models import Tablet

# Tablet type names in enum order; the index is the wire value.
TABLET_TYPES: Final[tuple[str, ...]] = (
    "UNKNOWN",
    "PRIMARY",
    "REPLICA",
    "RDONLY",
    "SPARE",
    "EXPERIMENTAL",
    "BACKUP",
    "RESTORE",
    "DRAINED",
)

# Renamed or aliased type names and the label they are displayed as.
TABLET_TYPE_ALIASES: Final[dict[str, str]] = {
    "MASTER": "PRIMARY",
    "BATCH": "RDONLY",
}

SERVING_STATES: Final[tuple[str, ...]] = ("UNKNOWN", "SERVING", "NOT_SERVING")

PRIMARY_DISPLAY_TYPE: Final[str] = "PRIMARY"


def format_alias(tablet: Tablet) -> str | None:
    """Return the "<cell>-<uid>" alias, or None when either part is missing."""
    alias = tablet.alias
    if alias is None or not alias.cell or not alias.uid:
        return None
    return f"{alias.cell}-{alias.uid}"


def format_type(tablet: Tablet) -> str | None:
    """Return the raw tablet type name as reported, without alias mapping."""
    if not tablet.type or tablet.type == "UNKNOWN":
        return None
    return tablet.type


def format_display_type(tablet: Tablet) -> str | None:
    """Return the canonical tablet type label used for display and sorting."""
    raw = format_type(tablet)
    if raw is None:
        return None
    return TABLET_TYPE_ALIASES.get(raw, raw)


def format_state(tablet: Tablet) -> str | None:
    return tablet.state or None


def type_sort_order(display_type: str | None) -> int:
    """Rank primaries ahead of every other tablet type."""
    return 1 if display_type == PRIMARY_DISPLAY_TYPE else 2
