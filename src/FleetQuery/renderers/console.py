"""Console text output renderers.

Renders query results into aligned text tables written through the logger.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from FleetQuery.core.models import LoadState
from FleetQuery.core.workflows import STREAM_STATES
from FleetQuery.engine.view_models import TABLET_SCHEMA, WORKFLOW_SCHEMA, ViewRecord
from FleetQuery.renderers.base import OutputWriter, QueryResult
from FleetQuery.services.query import stream_counts
from FleetQuery.utils.log import log

NOT_SERVING = "NOT SERVING"


def format_timestamp(seconds: int | None) -> str:
    """Format epoch seconds as a UTC date-time, or "-" when unknown."""
    if seconds is None:
        return "-"
    return datetime.fromtimestamp(seconds, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def tablet_cells(view: ViewRecord, keyspaces_state: LoadState | None) -> list[str]:
    """Build display cells for a tablet row.

    The shard cell carries a NOT SERVING marker only once keyspaces loaded
    successfully; while loading or after a failure serving status is blank.
    """
    shard = view["shard"] or ""
    if keyspaces_state is LoadState.SUCCEEDED and not view["is_shard_serving"]:
        shard = f"{shard} ({NOT_SERVING})"
    keyspace = view["keyspace"] or ""
    if view["cluster"]:
        keyspace = f"{keyspace} ({view['cluster']})"
    return [
        keyspace,
        shard,
        view["type"] or "",
        view["state"] or "",
        view["alias"] or "",
        view["hostname"] or "",
    ]


def workflow_cells(view: ViewRecord) -> list[str]:
    name = view["name"] or ""
    if view["cluster"]:
        name = f"{name} ({view['cluster']})"
    counts = stream_counts(view, STREAM_STATES)
    return [
        name,
        _endpoint(view["source"], view["source_shards"]),
        _endpoint(view["target"], view["target_shards"]),
        *("-" if counts[state] is None else str(counts[state]) for state in STREAM_STATES),
        format_timestamp(view["time_updated"]),
    ]


def render_table(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a header and rows as left-aligned text columns."""
    widths = [len(c) for c in columns]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))

    def line(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(cells)).rstrip()

    lines = [line(columns), line(["-" * w for w in widths])]
    lines.extend(line(row) for row in rows)
    return "\n".join(lines) + "\n"


def render_text(result: QueryResult) -> str:
    """Render a query result into a text table.

    Raises:
        ValueError: If the record kind has no console layout.
    """
    if result.schema is TABLET_SCHEMA:
        rows = [tablet_cells(view, result.keyspaces_state) for view in result.rows]
    elif result.schema is WORKFLOW_SCHEMA:
        rows = [workflow_cells(view) for view in result.rows]
    else:
        raise ValueError(f"No console layout for record kind: {result.schema.kind}")
    return render_table(result.schema.columns, rows)


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_result(self, result: QueryResult) -> None:
        if result.filter_text:
            log.info("filter=%s", result.filter_text)
        for line in render_text(result).splitlines():
            log.info(line)
        log.info("%d %s", len(result.rows), result.schema.kind)

    def finalize(self, action: str) -> None:
        """No-op for console output."""


def _endpoint(keyspace: str | None, shards: Sequence[str]) -> str:
    if not keyspace:
        return "N/A"
    if not shards:
        return keyspace
    return f"{keyspace} [{', '.join(shards)}]"
