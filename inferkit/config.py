"""Centralized configuration defaults for reproducible course analyses.

Defines immutable defaults for the random seed, bootstrap settings and the
Bayesian prior so that every helper and CLI command agrees on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Random seed (course convention)
    DEFAULT_SEED: int = 2023
    # numpy's legacy global generator only accepts seeds in [0, 2**32 - 1]
    MAX_SEED: int = 2**32 - 1

    # Bootstrap settings
    BOOTSTRAP_N_RESAMPLES: int = 1000
    BOOTSTRAP_CONFIDENCE_LEVEL: float = 0.95

    # Proportion analyses
    DEFAULT_SUCCESS_LABEL: str = "S1"

    # Beta prior for the conjugate proportion posterior (uniform)
    PRIOR_ALPHA: float = 1.0
    PRIOR_BETA: float = 1.0


# Convenience re-exports
DEFAULT_SEED: int = Config.DEFAULT_SEED
DEFAULT_BOOTSTRAP_REPLICATES: int = Config.BOOTSTRAP_N_RESAMPLES


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
