"""Check that every statistics capability used by the course resolves.

Examples
--------
  inferkit libraries
"""

from __future__ import annotations

import click

from inferkit.errors import DependencyUnavailable
from inferkit.libraries import LIBRARY_REGISTRY, load_libraries


@click.command(name="libraries")
def libraries() -> None:
    """Resolve all statistics capabilities and list them."""

    try:
        loaded = load_libraries()
    except DependencyUnavailable as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)

    for capability, module in loaded.items():
        spec = LIBRARY_REGISTRY[capability]
        click.echo(f"{capability:<26} {module.__name__:<15} {spec.description}")
    click.secho(f"OK: {len(loaded)} capabilities available", fg="green")
