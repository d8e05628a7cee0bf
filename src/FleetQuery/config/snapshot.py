"""Snapshot domain configuration: where raw collections are read from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from FleetQuery.config.common import (
    expect_bool,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class SnapshotConfig:
    """Snapshot file locations.

    Attributes:
        tablets: Tablets payload path.
        keyspaces: Keyspaces payload path; empty disables serving-status joins.
        workflows: Workflows payload path.
        strict: Fail on malformed records instead of rendering them blank.
    """

    tablets: str
    keyspaces: str
    workflows: str
    strict: bool


def load_snapshot(raw: Mapping[str, Any]) -> SnapshotConfig:
    """Load snapshot domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "snapshot", required=True)
    return SnapshotConfig(
        tablets=expect_str(get_required_value(section, "tablets", "snapshot.tablets"), "snapshot.tablets"),
        keyspaces=expect_str(get_optional_value(section, "keyspaces", ""), "snapshot.keyspaces"),
        workflows=expect_str(get_required_value(section, "workflows", "snapshot.workflows"), "snapshot.workflows"),
        strict=expect_bool(get_optional_value(section, "strict", True), "snapshot.strict"),
    )


def check_snapshot(config: SnapshotConfig) -> None:
    if not config.tablets.strip():
        raise ValueError("snapshot.tablets must not be empty")
    if not config.workflows.strip():
        raise ValueError("snapshot.workflows must not be empty")
