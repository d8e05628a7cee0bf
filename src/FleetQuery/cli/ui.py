"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to the
runner.
"""

from __future__ import annotations

from pathlib import Path

import click

from FleetQuery.cli.runner import CommandRunner
from FleetQuery.config import DEFAULT_CONFIG_PATH, load_config_with_defaults

_filter_option = click.option(
    "--filter",
    "filter_text",
    default=None,
    help='Filter expression, e.g. \'keyspace:commerce type:primary "zone1"\'.',
)


@click.group(help="FleetQuery: list tablets and workflows from dashboard snapshots.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    envvar="FLEET_QUERY_CONFIG",
    help="Path to YAML config file, merged over config/default.yml when that exists.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    if DEFAULT_CONFIG_PATH.exists():
        ctx.obj = load_config_with_defaults(config_path)
    else:
        ctx.obj = load_config_with_defaults(config_path, default_path=config_path)


@cli.command("tablets")
@_filter_option
@click.pass_context
def tablets_cmd(ctx: click.Context, filter_text: str | None) -> None:
    """List tablets, primaries first within each shard."""
    CommandRunner(ctx.obj).run(ctx.command.name, filter_text)


@cli.command("workflows")
@_filter_option
@click.pass_context
def workflows_cmd(ctx: click.Context, filter_text: str | None) -> None:
    """List workflows with stream counts per state."""
    CommandRunner(ctx.obj).run(ctx.command.name, filter_text)
