"""View models for record queries.

A view record is the flat, read-only projection of one raw record. Its
fields are split by name: fields prefixed with ``_`` are hidden and take no
part in filtering or display; the rest are visible, in a fixed order per
record kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping

HIDDEN_PREFIX = "_"


@dataclass(frozen=True, slots=True)
class RecordSchema:
    """Field layout of one record kind.

    Attributes:
        kind: Record kind name (e.g., "tablets").
        visible_fields: Filterable, displayable fields in display order.
        hidden_fields: Bookkeeping and sort-assist fields.
        sort_keys: Fields applied left to right as ascending sort keys.
        columns: Display column labels.
    """

    kind: str
    visible_fields: tuple[str, ...]
    hidden_fields: tuple[str, ...]
    sort_keys: tuple[str, ...]
    columns: tuple[str, ...]

    def __post_init__(self) -> None:
        for name in self.visible_fields:
            if name.startswith(HIDDEN_PREFIX):
                raise ValueError(f"{self.kind}: visible field must not start with '{HIDDEN_PREFIX}': {name}")
        for name in self.hidden_fields:
            if not name.startswith(HIDDEN_PREFIX):
                raise ValueError(f"{self.kind}: hidden field must start with '{HIDDEN_PREFIX}': {name}")
        known = set(self.visible_fields) | set(self.hidden_fields)
        missing = [key for key in self.sort_keys if key not in known]
        if missing:
            raise ValueError(f"{self.kind}: sort keys reference unknown fields: {missing}")

    @property
    def field_names(self) -> tuple[str, ...]:
        return self.visible_fields + self.hidden_fields

    def resolve_field(self, key: str) -> str | None:
        """Map a user-typed key to a visible field name, case-insensitively.

        Hidden fields never resolve, so they cannot be addressed as filter keys.
        """
        folded = key.casefold()
        for name in self.visible_fields:
            if name.casefold() == folded:
                return name
        return None


@dataclass(frozen=True, slots=True)
class ViewRecord(Mapping[str, Any]):
    """Read-only projection of a raw record.

    Behaves as a mapping over all fields (visible first, then hidden), in the
    schema's order.
    """

    schema: RecordSchema
    fields: Mapping[str, Any]

    def __post_init__(self) -> None:
        unknown = set(self.fields) - set(self.schema.field_names)
        if unknown:
            raise ValueError(f"{self.schema.kind}: unknown view fields: {sorted(unknown)}")
        ordered = {name: self.fields.get(name) for name in self.schema.field_names}
        object.__setattr__(self, "fields", MappingProxyType(ordered))

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def visible(self) -> dict[str, Any]:
        """Return visible fields in display order."""
        return {name: self.fields[name] for name in self.schema.visible_fields}


TABLET_SCHEMA = RecordSchema(
    kind="tablets",
    visible_fields=(
        "keyspace",
        "cluster",
        "shard",
        "is_shard_serving",
        "type",
        "state",
        "alias",
        "hostname",
    ),
    hidden_fields=(
        "_raw",
        "_keyspace_shard",
        "_raw_type",
        "_type_sort_order",
    ),
    sort_keys=("cluster", "keyspace", "shard", "_type_sort_order", "type", "alias"),
    columns=("Keyspace", "Shard", "Type", "Tablet State", "Alias", "Hostname"),
)

WORKFLOW_SCHEMA = RecordSchema(
    kind="workflows",
    visible_fields=(
        "name",
        "cluster",
        "cluster_id",
        "keyspace",
        "source",
        "source_shards",
        "target",
        "target_shards",
        "streams",
        "time_updated",
    ),
    hidden_fields=("_raw",),
    sort_keys=("name", "cluster", "source", "target"),
    columns=("Workflow", "Source", "Target", "Error", "Copying", "Running", "Stopped", "Last Updated"),
)
