"""Output renderers for query results.

Exports the OutputWriter base class and a factory that instantiates writers
from configuration.
"""

from __future__ import annotations

from FleetQuery.config import AppConfig
from FleetQuery.renderers.base import MultiOutputWriter, OutputWriter, QueryResult
from FleetQuery.renderers.console import ConsoleOutputWriter, render_text
from FleetQuery.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Raises:
        ValueError: If no writer is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "OutputWriter",
    "QueryResult",
    "create_output_writer",
    "render_json",
    "render_text",
]
