"""Filter evaluation over view records."""

from __future__ import annotations

from typing import Iterable

from FleetQuery.core.fields import contains_text
from FleetQuery.core.query import FilterQuery
from FleetQuery.engine.view_models import ViewRecord


def matches(view: ViewRecord, query: FilterQuery) -> bool:
    """Test one view record against a parsed filter.

    Only visible fields are consulted. Each free-text term must appear in
    some visible field; each key:value term must appear in its field.
    A key that names no visible field never matches.

    Args:
        view: Candidate view record.
        query: Parsed filter.

    Returns:
        True when every term is satisfied.
    """
    visible = view.visible()
    for term in query.key_terms:
        name = view.schema.resolve_field(term.key)
        if name is None or not contains_text(visible[name], term.value):
            return False
    for term in query.text_terms:
        if not any(contains_text(value, term) for value in visible.values()):
            return False
    return True


def filter_views(views: Iterable[ViewRecord], query: FilterQuery) -> list[ViewRecord]:
    """Keep view records matching ``query``; an empty query keeps everything."""
    if query.is_empty:
        return list(views)
    return [view for view in views if matches(view, query)]
