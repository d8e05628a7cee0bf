"""Command runner for coordinating CLI execution.

Handles logging configuration, component creation, and the error boundary
for command execution.
"""

from __future__ import annotations

import click

from FleetQuery.cli.commands import TabletsCommand, WorkflowsCommand
from FleetQuery.cli.factories import SourceFactory
from FleetQuery.config import AppConfig
from FleetQuery.renderers import create_output_writer
from FleetQuery.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run(self, action: str, filter_text: str | None) -> None:
        """Execute the ``tablets`` or ``workflows`` command.

        Args:
            action: The CLI command name.
            filter_text: Filter expression; None falls back to ``query.filter``.

        Raises:
            click.Abort: When the command fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if filter_text is None:
            filter_text = self.config.query.default_filter
        try:
            source = SourceFactory.create_snapshot_source(self.config)
            output_writer = create_output_writer(self.config)

            if action == "tablets":
                command = TabletsCommand(source=source, output_writer=output_writer, filter_text=filter_text)
            elif action == "workflows":
                command = WorkflowsCommand(source=source, output_writer=output_writer, filter_text=filter_text)
            else:
                raise ValueError(f"Unknown action: {action}")

            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e
