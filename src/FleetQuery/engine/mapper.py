"""Mapper from raw records to view records.

Pure functions: each raw record maps to exactly one view record, the raw
record is kept by reference under ``_raw`` and never modified.
"""

from __future__ import annotations

from typing import Iterable

from FleetQuery.core.models import Tablet, Workflow
from FleetQuery.core.tablets import (
    format_alias,
    format_display_type,
    format_state,
    format_type,
    type_sort_order,
)
from FleetQuery.core.workflows import get_streams, get_time_updated
from FleetQuery.engine.grouping import group_by
from FleetQuery.engine.join import KeyspaceIndex, resolve_tablet
from FleetQuery.engine.view_models import TABLET_SCHEMA, WORKFLOW_SCHEMA, ViewRecord


def map_tablet_to_view(tablet: Tablet, index: KeyspaceIndex) -> ViewRecord:
    """Map a tablet to its view record.

    Shard serving status comes from the keyspace index and stays None while
    the keyspace collection is not loaded.

    Args:
        tablet: Raw tablet record.
        index: Keyspace index built for this query.

    Returns:
        Tablet view record.
    """
    display_type = format_display_type(tablet)
    joined = resolve_tablet(tablet, index)
    return ViewRecord(
        schema=TABLET_SCHEMA,
        fields={
            "keyspace": tablet.keyspace,
            "cluster": tablet.cluster.name if tablet.cluster else None,
            "shard": tablet.shard,
            "is_shard_serving": joined["is_shard_serving"],
            "type": display_type,
            "state": format_state(tablet),
            "alias": format_alias(tablet),
            "hostname": tablet.hostname,
            "_raw": tablet,
            "_keyspace_shard": f"{tablet.keyspace or ''}/{tablet.shard or ''}",
            # Unmapped type (e.g. "MASTER") next to the canonical display type.
            "_raw_type": format_type(tablet),
            "_type_sort_order": type_sort_order(display_type),
        },
    )


def map_workflow_to_view(workflow: Workflow) -> ViewRecord:
    """Map a workflow to its view record, grouping its streams by state."""
    cluster = workflow.cluster
    source = workflow.source
    target = workflow.target
    return ViewRecord(
        schema=WORKFLOW_SCHEMA,
        fields={
            "name": workflow.name,
            "cluster": cluster.name if cluster else None,
            "cluster_id": cluster.id if cluster else None,
            "keyspace": workflow.keyspace,
            "source": source.keyspace if source else None,
            "source_shards": tuple(source.shards) if source else (),
            "target": target.keyspace if target else None,
            "target_shards": tuple(target.shards) if target else (),
            "streams": group_by(get_streams(workflow), "state"),
            "time_updated": get_time_updated(workflow),
            "_raw": workflow,
        },
    )


def map_tablets_to_views(tablets: Iterable[Tablet], index: KeyspaceIndex) -> list[ViewRecord]:
    return [map_tablet_to_view(t, index) for t in tablets]


def map_workflows_to_views(workflows: Iterable[Workflow]) -> list[ViewRecord]:
    return [map_workflow_to_view(w) for w in workflows]
