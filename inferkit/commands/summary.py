"""Descriptive summaries of the numeric course variables.

Examples
--------
  inferkit summary
  inferkit summary --variable Data.Major.Minerals.Magnesium
"""

from __future__ import annotations

from typing import Optional

import click

from inferkit.data import NUMERIC_KEYS, get_variable
from inferkit.inference import describe


@click.command(name="summary")
@click.option(
    "variable",
    "--variable",
    type=click.Choice(list(NUMERIC_KEYS)),
    required=False,
    help="Summarize a single numeric variable (default: all)",
)
def summary(variable: Optional[str]) -> None:
    """Print n, mean, sd, range, skewness and kurtosis per variable."""

    keys = [variable] if variable else list(NUMERIC_KEYS)
    header = f"{'variable':<32} {'n':>3} {'mean':>9} {'sd':>9} {'min':>9} {'max':>9} {'skew':>8} {'kurt':>8}"
    click.echo(header)
    click.echo("-" * len(header))
    for k in keys:
        s = describe(get_variable(k))
        click.echo(
            f"{k:<32} {s['n']:>3} {s['mean']:>9.4f} {s['std']:>9.4f} {s['min']:>9.4f} "
            f"{s['max']:>9.4f} {s['skewness']:>8.3f} {s['kurtosis']:>8.3f}"
        )
