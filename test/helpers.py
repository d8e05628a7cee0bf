"""Shared builders for raw test records."""

from __future__ import annotations

from FleetQuery.core.models import (
    Cluster,
    Keyspace,
    Shard,
    Stream,
    Tablet,
    TabletAlias,
    Workflow,
    WorkflowEndpoint,
)


def make_tablet(
    *,
    uid: int,
    keyspace: str = "commerce",
    shard: str = "0",
    type: str = "REPLICA",
    state: str = "SERVING",
    cluster: str = "c1",
    cell: str = "zone1",
) -> Tablet:
    return Tablet(
        cluster=Cluster(id=f"{cluster}-id", name=cluster),
        alias=TabletAlias(cell=cell, uid=uid),
        hostname=f"host-{uid}",
        keyspace=keyspace,
        shard=shard,
        type=type,
        state=state,
    )


def make_keyspace(name: str, shards: dict[str, bool | None], *, cluster: str = "c1") -> Keyspace:
    return Keyspace(
        cluster=Cluster(id=f"{cluster}-id", name=cluster),
        name=name,
        shards={shard: Shard(name=shard, is_primary_serving=serving) for shard, serving in shards.items()},
    )


def make_workflow(
    name: str,
    *,
    keyspace: str = "customer",
    states: tuple[str | None, ...] = (),
    cluster: str = "c1",
    source: str | None = "commerce",
    target: str | None = "customer",
) -> Workflow:
    streams = [
        Stream(id=idx, shard="-80", state=state, time_updated=1_700_000_000 + idx)
        for idx, state in enumerate(states, start=1)
    ]
    return Workflow(
        cluster=Cluster(id=f"{cluster}-id", name=cluster),
        keyspace=keyspace,
        name=name,
        source=WorkflowEndpoint(keyspace=source, shards=("0",)) if source else None,
        target=WorkflowEndpoint(keyspace=target, shards=("-80", "80-")) if target else None,
        shard_streams={f"{keyspace}/-80": streams},
    )
