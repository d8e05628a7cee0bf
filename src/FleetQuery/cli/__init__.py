"""CLI package for FleetQuery command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from dotenv import load_dotenv

from FleetQuery.cli.runner import CommandRunner
from FleetQuery.cli.ui import cli


def main() -> None:
    """Run FleetQuery CLI.

    Loads environment variables from a .env file first so that
    FLEET_QUERY_CONFIG can be set there. Entry point referenced by the
    console script in pyproject.toml.
    """
    load_dotenv()
    cli()
