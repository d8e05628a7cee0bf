"""Snapshot source backed by JSON files exported from the dashboard API.

Reads each collection once per call; nothing is cached between calls.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from FleetQuery.core.models import Keyspace, LoadState, Tablet, Workflow
from FleetQuery.sources.vtadmin.parser import parse_keyspaces, parse_tablets, parse_workflows
from FleetQuery.utils.log import log


@dataclass(slots=True)
class SnapshotSource:
    """Load tablets, keyspaces and workflows from JSON snapshot files.

    Attributes:
        tablets_path: Tablets payload file.
        keyspaces_path: Keyspaces payload file; may be empty or missing.
        workflows_path: Workflows payload file.
        strict: Raise on malformed records instead of rendering them blank.
    """

    tablets_path: str
    keyspaces_path: str
    workflows_path: str
    strict: bool = True

    def load_tablets(self) -> list[Tablet]:
        tablets = parse_tablets(_read_json(self.tablets_path), strict=self.strict)
        log.info("Loaded %d tablets from %s", len(tablets), self.tablets_path)
        return tablets

    def load_workflows(self) -> list[Workflow]:
        workflows = parse_workflows(_read_json(self.workflows_path), strict=self.strict)
        log.info("Loaded %d workflows from %s", len(workflows), self.workflows_path)
        return workflows

    def load_keyspaces(self) -> tuple[list[Keyspace] | None, LoadState]:
        """Load the keyspace topology used for shard serving status.

        Keyspaces are optional: an unset or unreadable file is reported as
        ``LoadState.FAILED`` instead of failing the query.

        Returns:
            Tuple of (keyspaces or None, load state).
        """
        if not self.keyspaces_path:
            log.warning("Keyspaces snapshot not configured; shard serving status unknown")
            return None, LoadState.FAILED
        try:
            payload = _read_json(self.keyspaces_path)
        except (OSError, ValueError) as error:
            log.warning("Keyspaces snapshot unavailable: path=%s error=%s", self.keyspaces_path, error)
            return None, LoadState.FAILED
        keyspaces = parse_keyspaces(payload, strict=self.strict)
        log.info("Loaded %d keyspaces from %s", len(keyspaces), self.keyspaces_path)
        return keyspaces, LoadState.SUCCEEDED


def _read_json(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))
