"""Factory functions for CLI component creation.

Centralizes component instantiation so commands can be built with stubs in
tests.
"""

from __future__ import annotations

from FleetQuery.config import AppConfig
from FleetQuery.sources.vtadmin.source import SnapshotSource


class SourceFactory:
    """Factory for snapshot sources."""

    @staticmethod
    def create_snapshot_source(config: AppConfig) -> SnapshotSource:
        """Create a JSON snapshot source from the ``snapshot`` config section."""
        return SnapshotSource(
            tablets_path=config.snapshot.tablets,
            keyspaces_path=config.snapshot.keyspaces,
            workflows_path=config.snapshot.workflows,
            strict=config.snapshot.strict,
        )
