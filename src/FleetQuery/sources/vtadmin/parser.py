"""Parser for dashboard API payloads (tablets, keyspaces, workflows).

Accepts the API envelope ``{"result": {"<kind>": [...]}}``, a bare
``{"<kind>": [...]}`` mapping, or a bare list. Enum fields may be given as
names or as integer wire values.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import timezone
from typing import Any, Mapping, Sequence, TypeVar

from dateutil import parser as dt_parser

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
from FleetQuery.core.tablets import SERVING_STATES, TABLET_TYPES
from FleetQuery.utils.log import log

R = TypeVar("R")


class MalformedRecordError(ValueError):
    """Raised when a raw record lacks a structural field the projection relies on."""


def extract_items(payload: Any, kind: str) -> list[Any]:
    """Return the record list from an API payload.

    Args:
        payload: Decoded JSON payload.
        kind: Collection key, e.g. "tablets".

    Returns:
        Raw record items.

    Raises:
        MalformedRecordError: If no record list can be found.
    """
    if isinstance(payload, Mapping) and isinstance(payload.get("result"), Mapping):
        payload = payload["result"]
    if isinstance(payload, Mapping):
        payload = payload.get(kind)
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise MalformedRecordError(f"{kind} payload must be a list")
    return payload


def parse_tablets(payload: Any, *, strict: bool = True) -> list[Tablet]:
    return [
        _parse_or_blank(item, "tablet", _parse_tablet, Tablet, strict)
        for item in extract_items(payload, "tablets")
    ]


def parse_keyspaces(payload: Any, *, strict: bool = True) -> list[Keyspace]:
    return [
        _parse_or_blank(item, "keyspace", _parse_keyspace, Keyspace, strict)
        for item in extract_items(payload, "keyspaces")
    ]


def parse_workflows(payload: Any, *, strict: bool = True) -> list[Workflow]:
    return [
        _parse_or_blank(item, "workflow", _parse_workflow, Workflow, strict)
        for item in extract_items(payload, "workflows")
    ]


def _parse_or_blank(
    item: Any,
    required_key: str,
    parse: Callable[[Mapping[str, Any]], R],
    blank: Callable[[], R],
    strict: bool,
) -> R:
    """Parse one record, enforcing its mandatory nested object.

    In strict mode a missing nested object raises; otherwise a warning is
    logged and a blank record is returned so the row renders empty.
    """
    if not isinstance(item, Mapping) or not isinstance(item.get(required_key), Mapping):
        message = f"record is missing required object '{required_key}': {item!r}"
        if strict:
            raise MalformedRecordError(message)
        log.warning("Malformed record rendered blank: %s", message)
        return blank()
    return parse(item)


def _parse_tablet(item: Mapping[str, Any]) -> Tablet:
    topo = item["tablet"]
    alias = topo.get("alias")
    return Tablet(
        cluster=_parse_cluster(item.get("cluster")),
        alias=TabletAlias(cell=_opt_str(alias.get("cell")), uid=_opt_int(alias.get("uid")))
        if isinstance(alias, Mapping)
        else None,
        hostname=_opt_str(topo.get("hostname")),
        keyspace=_opt_str(topo.get("keyspace")),
        shard=_opt_str(topo.get("shard")),
        type=_enum_name(topo.get("type"), TABLET_TYPES),
        state=_enum_name(item.get("state"), SERVING_STATES),
    )


def _parse_keyspace(item: Mapping[str, Any]) -> Keyspace:
    shards: dict[str, Shard] = {}
    raw_shards = item.get("shards")
    if isinstance(raw_shards, Mapping):
        for name, raw in raw_shards.items():
            inner = raw.get("shard") if isinstance(raw, Mapping) else None
            serving = None
            if isinstance(inner, Mapping):
                # Older servers report the flag under its pre-rename name.
                serving = inner.get("is_primary_serving", inner.get("is_master_serving"))
            shards[str(name)] = Shard(name=str(name), is_primary_serving=_opt_bool(serving))
    return Keyspace(
        cluster=_parse_cluster(item.get("cluster")),
        name=_opt_str(item["keyspace"].get("name")),
        shards=shards,
    )


def _parse_workflow(item: Mapping[str, Any]) -> Workflow:
    wf = item["workflow"]
    shard_streams: dict[str, list[Stream]] = {}
    raw_shard_streams = wf.get("shard_streams")
    if isinstance(raw_shard_streams, Mapping):
        for key, entry in raw_shard_streams.items():
            raw_streams = entry.get("streams") if isinstance(entry, Mapping) else None
            shard_streams[str(key)] = [
                _parse_stream(raw) for raw in raw_streams or () if isinstance(raw, Mapping)
            ]
    return Workflow(
        cluster=_parse_cluster(item.get("cluster")),
        keyspace=_opt_str(item.get("keyspace")),
        name=_opt_str(wf.get("name")),
        source=_parse_endpoint(wf.get("source")),
        target=_parse_endpoint(wf.get("target")),
        shard_streams=shard_streams,
    )


def _parse_stream(raw: Mapping[str, Any]) -> Stream:
    return Stream(
        id=_opt_int(raw.get("id")),
        shard=_opt_str(raw.get("shard")),
        state=_opt_str(raw.get("state")),
        time_updated=_parse_epoch_seconds(raw.get("time_updated")),
        message=_opt_str(raw.get("message")),
    )


def _parse_cluster(raw: Any) -> Cluster | None:
    if not isinstance(raw, Mapping):
        return None
    return Cluster(id=_opt_str(raw.get("id")), name=_opt_str(raw.get("name")))


def _parse_endpoint(raw: Any) -> WorkflowEndpoint | None:
    if not isinstance(raw, Mapping):
        return None
    shards = raw.get("shards")
    return WorkflowEndpoint(
        keyspace=_opt_str(raw.get("keyspace")),
        shards=tuple(str(s) for s in shards) if isinstance(shards, list) else (),
    )


def _parse_epoch_seconds(raw: Any) -> int | None:
    """Parse a timestamp given as {"seconds": ...}, a number, or ISO-8601 text."""
    if isinstance(raw, Mapping):
        raw = raw.get("seconds")
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, float) and not math.isfinite(raw):
        log.warning("Ignoring unparseable timestamp: %s", raw)
        return None
    if isinstance(raw, (int, float)):
        return int(raw)
    text = str(raw).strip()
    if not text:
        return None
    if text.lstrip("-").isdigit():
        return int(text)
    try:
        parsed = dt_parser.isoparse(text)
    except (TypeError, ValueError):
        log.warning("Ignoring unparseable timestamp: %s", text)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())


def _enum_name(raw: Any, names: Sequence[str]) -> str | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return names[raw] if 0 <= raw < len(names) else None
    text = str(raw).strip().upper()
    return text or None


def _opt_str(raw: Any) -> str | None:
    if raw is None:
        return None
    text = str(raw)
    return text or None


def _opt_int(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _opt_bool(raw: Any) -> bool | None:
    return raw if isinstance(raw, bool) else None
