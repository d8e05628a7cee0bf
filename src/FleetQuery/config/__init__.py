"""Public configuration API for FleetQuery."""

from __future__ import annotations

from FleetQuery.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from FleetQuery.config.output import OutputConfig
from FleetQuery.config.query import QueryConfig
from FleetQuery.config.runtime import RuntimeConfig
from FleetQuery.config.snapshot import SnapshotConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "OutputConfig",
    "QueryConfig",
    "RuntimeConfig",
    "SnapshotConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
