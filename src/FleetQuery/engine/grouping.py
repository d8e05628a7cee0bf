from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import Any, Final, Iterable, Mapping, Sequence, TypeVar

T = TypeVar("T")

# Bucket for sub-records that do not carry the discriminant.
UNKNOWN_BUCKET: Final[str] = "Unknown"


def group_by(
    items: Iterable[T],
    key: str | Callable[[T], Any],
) -> Mapping[Any, tuple[T, ...]]:
    """Partition items into buckets by a discriminant.

    Buckets appear in first-seen order and keep the input order of their
    items. Items whose discriminant is missing or empty land in
    ``UNKNOWN_BUCKET``; nothing is dropped.

    Args:
        items: Sub-records to group.
        key: Attribute/mapping key name, or a function returning the discriminant.

    Returns:
        Read-only mapping of discriminant value to items.
    """
    get = key if callable(key) else _field_getter(key)
    buckets: dict[Any, list[T]] = {}
    for item in items:
        value = get(item)
        if value is None or value == "":
            value = UNKNOWN_BUCKET
        buckets.setdefault(value, []).append(item)
    return MappingProxyType({name: tuple(members) for name, members in buckets.items()})


def bucket_counts(buckets: Mapping[Any, Sequence[Any]]) -> dict[Any, int]:
    return {name: len(members) for name, members in buckets.items()}


def _field_getter(name: str) -> Callable[[Any], Any]:
    def get(item: Any) -> Any:
        if isinstance(item, Mapping):
            return item.get(name)
        return getattr(item, name, None)

    return get
