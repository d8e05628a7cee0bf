"""Command implementations for the FleetQuery CLI.

Each command loads a snapshot, runs the query pipeline and hands the rows to
the output writer.
"""

from __future__ import annotations

from dataclasses import dataclass

from FleetQuery.engine.view_models import TABLET_SCHEMA, WORKFLOW_SCHEMA
from FleetQuery.renderers import OutputWriter, QueryResult
from FleetQuery.services.query import query_tablets, query_workflows
from FleetQuery.sources.vtadmin.source import SnapshotSource
from FleetQuery.utils.log import log


@dataclass(slots=True)
class TabletsCommand:
    """List tablets joined with keyspace topology."""

    source: SnapshotSource
    output_writer: OutputWriter
    filter_text: str

    def execute(self) -> None:
        tablets = self.source.load_tablets()
        keyspaces, keyspaces_state = self.source.load_keyspaces()
        log.debug("Keyspaces state: %s", keyspaces_state.value)

        rows = query_tablets(tablets, keyspaces, self.filter_text, keyspaces_state=keyspaces_state)
        self.output_writer.write_result(
            QueryResult(
                schema=TABLET_SCHEMA,
                rows=rows,
                filter_text=self.filter_text,
                keyspaces_state=keyspaces_state,
            )
        )


@dataclass(slots=True)
class WorkflowsCommand:
    """List workflows with per-state stream counts."""

    source: SnapshotSource
    output_writer: OutputWriter
    filter_text: str

    def execute(self) -> None:
        workflows = self.source.load_workflows()
        rows = query_workflows(workflows, self.filter_text)
        self.output_writer.write_result(
            QueryResult(schema=WORKFLOW_SCHEMA, rows=rows, filter_text=self.filter_text)
        )
