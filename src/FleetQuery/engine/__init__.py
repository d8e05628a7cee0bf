"""Record-shaping and query engine.

Join, projection, filtering, sorting and grouping of view records. All
functions are pure and work on in-memory snapshots.
"""

from __future__ import annotations

from FleetQuery.engine.filtering import filter_views, matches
from FleetQuery.engine.grouping import UNKNOWN_BUCKET, bucket_counts, group_by
from FleetQuery.engine.join import KeyspaceIndex, resolve_tablet
from FleetQuery.engine.mapper import map_tablet_to_view, map_workflow_to_view
from FleetQuery.engine.sorting import sort_views
from FleetQuery.engine.view_models import TABLET_SCHEMA, WORKFLOW_SCHEMA, RecordSchema, ViewRecord

__all__ = [
    "KeyspaceIndex",
    "RecordSchema",
    "TABLET_SCHEMA",
    "UNKNOWN_BUCKET",
    "ViewRecord",
    "WORKFLOW_SCHEMA",
    "bucket_counts",
    "filter_views",
    "group_by",
    "map_tablet_to_view",
    "map_workflow_to_view",
    "matches",
    "resolve_tablet",
    "sort_views",
]
