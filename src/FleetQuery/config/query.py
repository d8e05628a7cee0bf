"""Query domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from FleetQuery.config.common import expect_str, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Default filter applied when the command line does not pass one."""

    default_filter: str


def load_query(raw: Mapping[str, Any]) -> QueryConfig:
    section = get_section(raw, "query", required=False)
    value = get_optional_value(section, "filter", "")
    if value is None:
        value = ""
    return QueryConfig(default_filter=expect_str(value, "query.filter"))
