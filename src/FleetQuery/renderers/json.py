"""JSON output renderers.

Renders view records into JSON-serializable objects (visible fields only)
and provides JsonFileWriter for command output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from FleetQuery.engine.grouping import bucket_counts
from FleetQuery.engine.view_models import ViewRecord
from FleetQuery.renderers.base import OutputWriter, QueryResult
from FleetQuery.utils.log import log


def render_json(views: Iterable[ViewRecord]) -> list[dict[str, Any]]:
    """Render view records into JSON-serializable dicts.

    Hidden fields are left out. Grouped sub-records (workflow streams) are
    rendered as per-bucket counts.
    """
    out: list[dict[str, Any]] = []
    for view in views:
        row: dict[str, Any] = {}
        for name, value in view.visible().items():
            if name == "streams":
                row["stream_counts"] = bucket_counts(value)
            elif isinstance(value, tuple):
                row[name] = list(value)
            else:
                row[name] = value
        out.append(row)
    return out


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to a JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []

    def write_result(self, result: QueryResult) -> None:
        self.all_results.append(
            {
                "kind": result.schema.kind,
                "filter": result.filter_text,
                "keyspaces_state": result.keyspaces_state.value if result.keyspaces_state else None,
                "rows": render_json(result.rows),
            }
        )

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<base_dir>/json/<action>_<timestamp>.json``."""
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
