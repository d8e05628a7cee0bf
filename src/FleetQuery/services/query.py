"""Query pipeline: join -> project -> filter -> sort."""

from __future__ import annotations

from typing import Iterable, Sequence

from FleetQuery.core.models import Keyspace, LoadState, Tablet, Workflow
from FleetQuery.core.query import FilterQuery, parse_filter
from FleetQuery.core.workflows import STREAM_STATES
from FleetQuery.engine.filtering import filter_views
from FleetQuery.engine.grouping import bucket_counts
from FleetQuery.engine.join import KeyspaceIndex
from FleetQuery.engine.mapper import map_tablets_to_views, map_workflows_to_views
from FleetQuery.engine.sorting import sort_views
from FleetQuery.engine.view_models import TABLET_SCHEMA, WORKFLOW_SCHEMA, RecordSchema, ViewRecord
from FleetQuery.utils.log import log


def query_tablets(
    tablets: Iterable[Tablet] | None,
    keyspaces: Iterable[Keyspace] | None,
    filter_text: str | None,
    *,
    keyspaces_state: LoadState | None = None,
) -> list[ViewRecord]:
    """Return filtered tablet view records, primaries first within each shard.

    Args:
        tablets: Raw tablets; None yields no rows.
        keyspaces: Keyspace topology used to resolve shard serving status;
            None means it has not been loaded.
        filter_text: Free-form filter expression.
        keyspaces_state: Load state of ``keyspaces``, derived from it when
            omitted. Anything but SUCCEEDED leaves ``is_shard_serving``
            unknown (None).

    Returns:
        Ordered tablet view records.
    """
    if not tablets:
        return []
    index = KeyspaceIndex.build(keyspaces, keyspaces_state)
    views = map_tablets_to_views(tablets, index)
    return _filter_and_sort(TABLET_SCHEMA, views, parse_filter(filter_text))


def query_workflows(workflows: Iterable[Workflow] | None, filter_text: str | None) -> list[ViewRecord]:
    """Return filtered workflow view records ordered by name, cluster, source and target."""
    if not workflows:
        return []
    views = map_workflows_to_views(workflows)
    return _filter_and_sort(WORKFLOW_SCHEMA, views, parse_filter(filter_text))


def stream_counts(view: ViewRecord, states: Sequence[str] = STREAM_STATES) -> dict[str, int | None]:
    """Return per-state stream counts of a workflow view, None for absent states."""
    counts = bucket_counts(view["streams"])
    return {state: counts.get(state) for state in states}


def _filter_and_sort(schema: RecordSchema, views: list[ViewRecord], query: FilterQuery) -> list[ViewRecord]:
    unknown = query.unknown_keys(schema.visible_fields)
    if unknown:
        log.warning(
            "Unknown filter key(s) for %s: %s; known keys: %s",
            schema.kind,
            ", ".join(unknown),
            ", ".join(schema.visible_fields),
        )
        return []

    filtered = filter_views(views, query)
    log.debug("Filtered %s: kept %d of %d", schema.kind, len(filtered), len(views))
    return sort_views(filtered, schema.sort_keys)
