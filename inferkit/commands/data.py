"""Print the course sample data.

Examples
--------
  inferkit data
  inferkit data --variable Data.Protein
  inferkit data --format json
"""

from __future__ import annotations

from typing import Optional
import json

import click

from inferkit.data import DATA_KEYS, define_data


def _format_value(v: object) -> str:
    return v if isinstance(v, str) else f"{float(v):.7g}"


@click.command(name="data")
@click.option(
    "variable",
    "--variable",
    type=click.Choice(list(DATA_KEYS)),
    required=False,
    help="Print a single variable (default: all)",
)
@click.option(
    "fmt",
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
def data(variable: Optional[str], fmt: str) -> None:
    """Print the course dataset or one of its variables."""

    dataset = define_data()
    keys = [variable] if variable else list(dataset)

    if fmt.lower() == "json":
        payload = {k: dataset[k].tolist() for k in keys}
        click.echo(json.dumps(payload, indent=2))
        return

    for k in keys:
        values = dataset[k]
        click.echo(f"{k} (n={values.size}):")
        click.echo("  " + ", ".join(_format_value(v) for v in values))
