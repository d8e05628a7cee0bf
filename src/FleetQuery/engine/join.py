"""Resolve tablet fields that live on the keyspace topology.

The keyspace collection is indexed once per query by (cluster id, keyspace
name), with shards keyed by name inside each entry. Lookups report a
tri-state result: None while the topology is unavailable, otherwise a bool.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from FleetQuery.core.models import Keyspace, LoadState, Shard, Tablet

KeyspaceKey = tuple[str | None, str | None]


@dataclass(frozen=True, slots=True)
class KeyspaceIndex:
    """Two-level lookup over a keyspace collection.

    Attributes:
        shards: Shards keyed by (cluster id, keyspace name), then shard name.
        state: Load state of the keyspace collection.
    """

    shards: Mapping[KeyspaceKey, Mapping[str, Shard]]
    state: LoadState

    @classmethod
    def build(
        cls,
        keyspaces: Iterable[Keyspace] | None,
        state: LoadState | None = None,
    ) -> KeyspaceIndex:
        """Index a keyspace collection.

        The first keyspace seen for a given (cluster id, name) wins.

        Args:
            keyspaces: Keyspace records; None means nothing has been loaded.
            state: Load state reported for the collection. Defaults to
                LOADING when ``keyspaces`` is None, SUCCEEDED otherwise.

        Returns:
            Index ready for per-tablet lookups.
        """
        if state is None:
            state = LoadState.LOADING if keyspaces is None else LoadState.SUCCEEDED
        index: dict[KeyspaceKey, Mapping[str, Shard]] = {}
        for keyspace in keyspaces or ():
            key = (keyspace.cluster.id if keyspace.cluster else None, keyspace.name)
            index.setdefault(key, keyspace.shards)
        return cls(shards=MappingProxyType(index), state=state)

    def find_shard(self, cluster_id: str | None, keyspace: str | None, shard: str | None) -> Shard | None:
        if not shard:
            return None
        shards = self.shards.get((cluster_id, keyspace))
        if shards is None:
            return None
        return shards.get(shard)

    def is_shard_serving(self, cluster_id: str | None, keyspace: str | None, shard: str | None) -> bool | None:
        """Return whether the shard's primary is serving.

        Returns:
            None when the keyspace collection is not loaded, False when it is
            loaded but has no such shard or the shard does not report serving,
            True otherwise.
        """
        if self.state is not LoadState.SUCCEEDED:
            return None
        found = self.find_shard(cluster_id, keyspace, shard)
        return bool(found is not None and found.is_primary_serving)


def resolve_tablet(tablet: Tablet, index: KeyspaceIndex) -> dict[str, bool | None]:
    """Return join-derived view fields for a tablet."""
    cluster_id = tablet.cluster.id if tablet.cluster else None
    return {
        "is_shard_serving": index.is_shard_serving(cluster_id, tablet.keyspace, tablet.shard),
    }
