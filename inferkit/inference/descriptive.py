"""Descriptive summaries and maximum-likelihood distribution fitting.

Examples
--------
>>> from inferkit.data import get_variable
>>> from inferkit.inference import describe, fit_distribution
>>> summary = describe(get_variable("Data.Protein"))
>>> fit = fit_distribution(get_variable("Data.Fat.Total.Lipid"), family="gamma")
"""

from __future__ import annotations

from typing import Any

import numpy as np
from scipy import stats


_POSITIVE_FAMILIES = {"expon", "gamma", "lognorm"}
_PARAM_NAMES: dict[str, tuple[str, ...]] = {
    "norm": ("loc", "scale"),
    "expon": ("loc", "scale"),
    "gamma": ("shape", "loc", "scale"),
    "lognorm": ("shape", "loc", "scale"),
}
SUPPORTED_FAMILIES: tuple[str, ...] = tuple(_PARAM_NAMES)


def _as_sample(values: Any, min_size: int = 1) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError("values must be one-dimensional")
    if arr.size < min_size:
        raise ValueError(f"at least {min_size} observation(s) required, got {arr.size}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("values must be finite")
    return arr


def describe(values: Any) -> dict[str, float]:
    """Return n, mean, sample std, range, skewness and excess kurtosis.

    Skewness and kurtosis are bias-corrected and need at least 4 observations.
    Both are undefined for a constant sample and reported as NaN.
    """

    x = _as_sample(values, min_size=4)
    std = float(np.std(x, ddof=1))
    if std == 0.0:
        skewness = kurtosis = float("nan")
    else:
        skewness = float(stats.skew(x, bias=False))
        kurtosis = float(stats.kurtosis(x, fisher=True, bias=False))
    return {
        "n": int(x.size),
        "mean": float(np.mean(x)),
        "std": std,
        "min": float(np.min(x)),
        "max": float(np.max(x)),
        "skewness": skewness,
        "kurtosis": kurtosis,
    }


def fit_distribution(values: Any, family: str = "norm") -> dict[str, Any]:
    """Fit ``family`` by maximum likelihood.

    Location is fixed at 0 for the positive families (``expon``, ``gamma``,
    ``lognorm``), which require strictly positive data.

    Returns
    -------
    dict
        ``family``, ``params`` (name -> value), ``loglik`` and ``n``.
    """

    fam = family.lower()
    if fam not in _PARAM_NAMES:
        raise ValueError(f"Unsupported family: {family}. Choose from {', '.join(SUPPORTED_FAMILIES)}")
    x = _as_sample(values, min_size=2)

    dist = getattr(stats, fam)
    if fam in _POSITIVE_FAMILIES:
        if np.any(x <= 0.0):
            raise ValueError(f"{fam} requires strictly positive values")
        params = dist.fit(x, floc=0.0)
    else:
        params = dist.fit(x)

    loglik = float(np.sum(dist.logpdf(x, *params)))
    return {
        "family": fam,
        "params": {name: float(p) for name, p in zip(_PARAM_NAMES[fam], params)},
        "loglik": loglik,
        "n": int(x.size),
    }


def sampling_distribution_summary(values: Any) -> dict[str, float]:
    """Summarize a vector of precomputed sample statistics.

    The standard deviation of the draws estimates the standard error of the
    underlying statistic.
    """

    x = _as_sample(values, min_size=2)
    return {
        "n_draws": int(x.size),
        "mean": float(np.mean(x)),
        "standard_error": float(np.std(x, ddof=1)),
    }
