"""Inference helpers applied to the course data.

Public API:
- describe, fit_distribution, sampling_distribution_summary
- mean_ci, proportion_ci, beta_posterior
- bootstrap_ci
- compare_samples
"""

from __future__ import annotations

from inferkit.inference.descriptive import (
    describe,
    fit_distribution,
    sampling_distribution_summary,
)
from inferkit.inference.intervals import mean_ci, proportion_ci, beta_posterior
from inferkit.inference.bootstrap import bootstrap_ci
from inferkit.inference.nonparametric import compare_samples

__all__ = [
    "describe",
    "fit_distribution",
    "sampling_distribution_summary",
    "mean_ci",
    "proportion_ci",
    "beta_posterior",
    "bootstrap_ci",
    "compare_samples",
]
