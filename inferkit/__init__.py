"""
inferkit: Course utilities for introductory statistical inference.

Loads the statistics capabilities the course relies on, seeds the session for
reproducible resampling, and provides the fixed nutrition sample data.
"""

__all__ = [
    "Config",
    "DEFAULT_SEED",
    "__version__",
    # Session setup (eager imports; lightweight)
    "load_libraries",
    "setup_environment",
    "get_environment",
    "make_rng",
    "EnvironmentConfig",
    "define_data",
    "get_variable",
    "DependencyUnavailable",
    "InvalidConfiguration",
    # Inference helpers (lazy-imported via __getattr__)
    "describe",
    "fit_distribution",
    "mean_ci",
    "proportion_ci",
    "beta_posterior",
    "bootstrap_ci",
    "compare_samples",
    "sampling_distribution_summary",
]

__version__ = "0.1.0"

from typing import Any

from inferkit.config import Config, DEFAULT_SEED
from inferkit.errors import DependencyUnavailable, InvalidConfiguration
from inferkit.libraries import load_libraries
from inferkit.environment import EnvironmentConfig, get_environment, make_rng, setup_environment
from inferkit.data import define_data, get_variable


_LAZY_INFERENCE = {
    "describe",
    "fit_distribution",
    "mean_ci",
    "proportion_ci",
    "beta_posterior",
    "bootstrap_ci",
    "compare_samples",
    "sampling_distribution_summary",
}


def __getattr__(name: str) -> Any:  # lazy attribute access to avoid importing scipy at import time
    if name in _LAZY_INFERENCE:
        from inferkit import inference as _inf

        return getattr(_inf, name)
    raise AttributeError(f"module 'inferkit' has no attribute {name!r}")
