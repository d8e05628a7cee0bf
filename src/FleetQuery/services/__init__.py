"""Query services over tablet and workflow snapshots."""

from __future__ import annotations

from FleetQuery.services.query import query_tablets, query_workflows, stream_counts

__all__ = ["query_tablets", "query_workflows", "stream_counts"]
