from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence, TypeVar

from FleetQuery.core.fields import sort_token

R = TypeVar("R", bound=Mapping[str, Any])


def sort_views(records: Iterable[R], keys: Sequence[str]) -> list[R]:
    """Stable ascending sort on several keys, applied left to right.

    Missing keys sort first. Records equal on every key keep input order.

    Args:
        records: View records (or any mappings) to order.
        keys: Field names, most significant first.

    Returns:
        A new ordered list.
    """
    return sorted(records, key=lambda record: tuple(sort_token(record.get(k)) for k in keys))
