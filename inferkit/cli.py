"""Command-line interface for inferkit using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click

from inferkit import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """inferkit: course data and helpers for statistical inference."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from inferkit.commands.libraries import libraries  # noqa: E402
from inferkit.commands.data import data  # noqa: E402
from inferkit.commands.summary import summary  # noqa: E402
from inferkit.commands.bootstrap import bootstrap  # noqa: E402

cli.add_command(libraries)
cli.add_command(data)
cli.add_command(summary)
cli.add_command(bootstrap)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
