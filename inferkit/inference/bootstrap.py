"""Percentile bootstrap confidence intervals.

Resamples observations with replacement and reports the empirical percentile
interval of the statistic. The replicate count and seed default to the values
applied by :func:`inferkit.environment.setup_environment`.

References
----------
- Efron, B., & Tibshirani, R. J. (1993). An Introduction to the Bootstrap.

Examples
--------
>>> from inferkit.data import get_variable
>>> from inferkit.environment import setup_environment
>>> from inferkit.inference import bootstrap_ci
>>> _ = setup_environment(seed=2023, bootstrap_replicate_count=500)
>>> res = bootstrap_ci(get_variable("Data.Major.Minerals.Magnesium"))
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from inferkit.config import Config
from inferkit.environment import get_environment, make_rng, validate_positive_int
from inferkit.inference.descriptive import _as_sample


Statistic = Callable[[np.ndarray], float]


def bootstrap_ci(
    values: Any,
    statistic: Statistic = np.mean,
    n_resamples: int | None = None,
    confidence_level: float | None = None,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> dict[str, float | int]:
    """Compute a percentile bootstrap CI for ``statistic(values)``.

    Parameters
    ----------
    values:
        One-dimensional sample.
    statistic:
        Callable reducing a 1-D array to a float. Defaults to ``np.mean``.
    n_resamples:
        Number of bootstrap resamples. Defaults to the environment's replicate
        count, else Config.BOOTSTRAP_N_RESAMPLES.
    confidence_level:
        CI level (e.g., 0.95). Defaults to Config.BOOTSTRAP_CONFIDENCE_LEVEL.
    seed:
        Random seed. Defaults to the environment's seed, else
        Config.DEFAULT_SEED. Ignored when ``rng`` is given.
        Both ``n_resamples`` and ``seed`` must be positive integers; other
        values raise ``InvalidConfiguration``.
    rng:
        Explicit generator to draw from.

    Returns
    -------
    dict
        Point estimate, bootstrap mean/std, percentile CI bounds and settings.
    """

    env = get_environment()
    if n_resamples is not None:
        n = validate_positive_int("n_resamples", n_resamples)
    else:
        n = env.bootstrap_replicate_count if env is not None else Config.BOOTSTRAP_N_RESAMPLES
    cl = float(confidence_level if confidence_level is not None else Config.BOOTSTRAP_CONFIDENCE_LEVEL)

    if not (0.0 < cl < 1.0):
        raise ValueError("confidence_level must be in (0,1)")

    x = _as_sample(values, min_size=1)
    if seed is not None:
        seed = validate_positive_int("seed", seed, upper=Config.MAX_SEED)
    if rng is None:
        rng = make_rng(seed)

    idx = rng.integers(0, x.size, size=(n, x.size))
    samples_np = np.array([float(statistic(x[row])) for row in idx], dtype=float)

    alpha = 1.0 - cl
    return {
        "estimate": float(statistic(x)),
        "mean": float(np.mean(samples_np)),
        "std": float(np.std(samples_np, ddof=1)) if n > 1 else 0.0,
        "ci_lower": float(np.percentile(samples_np, 100.0 * (alpha / 2.0))),
        "ci_upper": float(np.percentile(samples_np, 100.0 * (1.0 - alpha / 2.0))),
        "n_resamples": n,
        "confidence_level": cl,
    }
