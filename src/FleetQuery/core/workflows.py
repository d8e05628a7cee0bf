"""Helpers for reading streams out of workflow records."""

from __future__ import annotations

from typing import Final

from FleetQuery.core.models import Stream, Workflow

# Stream states shown as per-row count columns, in column order.
STREAM_STATES: Final[tuple[str, ...]] = ("Error", "Copying", "Running", "Stopped")


def get_streams(workflow: Workflow) -> list[Stream]:
    """Flatten all shard streams of a workflow, keeping payload order."""
    streams: list[Stream] = []
    for shard_streams in workflow.shard_streams.values():
        streams.extend(shard_streams)
    return streams


def get_time_updated(workflow: Workflow) -> int | None:
    """Return the most recent stream update in epoch seconds.

    Returns:
        Maximum ``time_updated`` over all streams, or None when no stream reports one.
    """
    timestamps = [s.time_updated for s in get_streams(workflow) if s.time_updated is not None]
    return max(timestamps) if timestamps else None
