from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence


class LoadState(str, Enum):
    """Freshness of a secondary collection as reported by the fetching layer."""

    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class Cluster:
    """Cluster a record belongs to.

    Attributes:
        id: Stable cluster identifier, used in composite join keys.
        name: Human-readable cluster name.
    """

    id: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TabletAlias:
    cell: Optional[str] = None
    uid: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Tablet:
    """A single shard replica as reported by the backend.

    Attributes:
        cluster: Owning cluster.
        alias: Cell + uid alias.
        hostname: Host the tablet runs on.
        keyspace: Keyspace name.
        shard: Shard name (key range, e.g. "-80").
        type: Tablet type name, e.g. "PRIMARY", "MASTER" or "REPLICA".
        state: Serving state name: "SERVING", "NOT_SERVING" or "UNKNOWN".
    """

    cluster: Optional[Cluster] = None
    alias: Optional[TabletAlias] = None
    hostname: Optional[str] = None
    keyspace: Optional[str] = None
    shard: Optional[str] = None
    type: Optional[str] = None
    state: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Shard:
    name: Optional[str] = None
    is_primary_serving: Optional[bool] = None


@dataclass(frozen=True, slots=True)
class Keyspace:
    """Keyspace topology used to resolve shard serving status.

    Attributes:
        cluster: Owning cluster.
        name: Keyspace name.
        shards: Shards keyed by shard name.
    """

    cluster: Optional[Cluster] = None
    name: Optional[str] = None
    shards: Mapping[str, Shard] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "shards", MappingProxyType(dict(self.shards)))


@dataclass(frozen=True, slots=True)
class Stream:
    """One replication stream of a workflow.

    Attributes:
        id: Stream id, unique within its shard.
        shard: Target shard the stream writes to.
        state: Stream state, e.g. "Running", "Copying", "Stopped" or "Error".
        time_updated: Last update as epoch seconds, if reported.
        message: Last status message, if any.
    """

    id: Optional[int] = None
    shard: Optional[str] = None
    state: Optional[str] = None
    time_updated: Optional[int] = None
    message: Optional[str] = None


@dataclass(frozen=True, slots=True)
class WorkflowEndpoint:
    keyspace: Optional[str] = None
    shards: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class Workflow:
    """A data-migration workflow and its streams grouped by shard.

    Attributes:
        cluster: Owning cluster.
        keyspace: Keyspace the workflow was found in.
        name: Workflow name.
        source: Source keyspace and shards.
        target: Target keyspace and shards.
        shard_streams: Streams keyed by "<keyspace>/<shard>".
    """

    cluster: Optional[Cluster] = None
    keyspace: Optional[str] = None
    name: Optional[str] = None
    source: Optional[WorkflowEndpoint] = None
    target: Optional[WorkflowEndpoint] = None
    shard_streams: Mapping[str, Sequence[Stream]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {key: tuple(streams) for key, streams in self.shard_streams.items()}
        object.__setattr__(self, "shard_streams", MappingProxyType(frozen))
