"""Base classes for output writers.

Separates query control flow from how results are written.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from FleetQuery.core.models import LoadState
from FleetQuery.engine.view_models import RecordSchema, ViewRecord


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Ordered rows of one query, with the context needed to display them.

    Attributes:
        schema: Schema of the record kind.
        rows: Ordered view records.
        filter_text: Filter expression the rows were produced with.
        keyspaces_state: Load state of the keyspace join, for tablets only.
    """

    schema: RecordSchema
    rows: Sequence[ViewRecord]
    filter_text: str = ""
    keyspaces_state: LoadState | None = None


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_result(self, result: QueryResult) -> None:
        """Write the rows of a single query."""

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'tablets').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_result(self, result: QueryResult) -> None:
        for writer in self.writers:
            writer.write_result(result)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
