"""Bootstrap confidence interval for the mean of a course variable.

Examples
--------
  inferkit bootstrap --variable Data.Major.Minerals.Magnesium
  inferkit bootstrap --variable Data.Protein --seed 7 --replicates 5000 --confidence-level 0.9
"""

from __future__ import annotations

import json

import click

from inferkit.config import Config
from inferkit.data import NUMERIC_KEYS, get_variable
from inferkit.environment import setup_environment
from inferkit.errors import InvalidConfiguration
from inferkit.inference import bootstrap_ci


@click.command(name="bootstrap")
@click.option(
    "variable",
    "--variable",
    type=click.Choice(list(NUMERIC_KEYS)),
    required=True,
    help="Numeric variable to resample",
)
@click.option(
    "seed",
    "--seed",
    type=int,
    default=Config.DEFAULT_SEED,
    show_default=True,
    help="Random seed",
)
@click.option(
    "replicates",
    "--replicates",
    type=int,
    default=Config.BOOTSTRAP_N_RESAMPLES,
    show_default=True,
    help="Number of bootstrap resamples",
)
@click.option(
    "confidence_level",
    "--confidence-level",
    type=float,
    default=Config.BOOTSTRAP_CONFIDENCE_LEVEL,
    show_default=True,
    help="Confidence level of the percentile interval",
)
def bootstrap(variable: str, seed: int, replicates: int, confidence_level: float) -> None:
    """Percentile bootstrap CI for the mean of VARIABLE."""

    try:
        if not (0.0 < confidence_level < 1.0):
            raise click.ClickException("--confidence-level must be between 0 and 1 (exclusive).")
        try:
            env = setup_environment(seed=seed, bootstrap_replicate_count=replicates)
        except InvalidConfiguration as e:
            raise click.ClickException(str(e))

        res = bootstrap_ci(get_variable(variable), confidence_level=confidence_level)
        payload = {"variable": variable, "seed": env.seed, **res}
        click.echo(json.dumps(payload, indent=2))
    except click.ClickException:
        raise
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
