"""Interval estimates for means and proportions, frequentist and Bayesian."""

from __future__ import annotations

from typing import Any

import numpy as np
from scipy import stats

from inferkit.config import Config
from inferkit.inference.descriptive import _as_sample


PROPORTION_METHODS: tuple[str, ...] = ("wilson", "wilsoncc", "exact")


def _check_level(name: str, level: float) -> float:
    cl = float(level)
    if not (0.0 < cl < 1.0):
        raise ValueError(f"{name} must be in (0,1)")
    return cl


def _count_successes(labels: Any, success: str) -> tuple[int, int]:
    arr = np.asarray(labels, dtype=str)
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError("labels must be a non-empty one-dimensional sequence")
    return int(np.sum(arr == success)), int(arr.size)


def mean_ci(values: Any, confidence_level: float = Config.BOOTSTRAP_CONFIDENCE_LEVEL) -> dict[str, float]:
    """Student-t confidence interval for the population mean."""

    cl = _check_level("confidence_level", confidence_level)
    x = _as_sample(values, min_size=2)
    mean = float(np.mean(x))
    sem = float(stats.sem(x))
    if sem == 0.0:
        lower, upper = mean, mean
    else:
        lower, upper = stats.t.interval(cl, x.size - 1, loc=mean, scale=sem)
    return {
        "mean": mean,
        "sem": sem,
        "ci_lower": float(lower),
        "ci_upper": float(upper),
        "confidence_level": cl,
    }


def proportion_ci(
    labels: Any,
    success: str = Config.DEFAULT_SUCCESS_LABEL,
    confidence_level: float = Config.BOOTSTRAP_CONFIDENCE_LEVEL,
    method: str = "wilson",
) -> dict[str, Any]:
    """Binomial confidence interval for the share of ``labels == success``."""

    cl = _check_level("confidence_level", confidence_level)
    m = method.lower()
    if m not in PROPORTION_METHODS:
        raise ValueError(f"Unsupported method: {method}. Choose from {', '.join(PROPORTION_METHODS)}")
    k, n = _count_successes(labels, success)
    ci = stats.binomtest(k, n).proportion_ci(confidence_level=cl, method=m)
    return {
        "successes": k,
        "n": n,
        "proportion": k / n,
        "ci_lower": float(ci.low),
        "ci_upper": float(ci.high),
        "confidence_level": cl,
        "method": m,
    }


def beta_posterior(
    labels: Any,
    success: str = Config.DEFAULT_SUCCESS_LABEL,
    prior_alpha: float = Config.PRIOR_ALPHA,
    prior_beta: float = Config.PRIOR_BETA,
    credible_level: float = Config.BOOTSTRAP_CONFIDENCE_LEVEL,
) -> dict[str, float]:
    """Conjugate Beta-Binomial posterior for the share of ``labels == success``.

    With a Beta(a, b) prior and k successes in n trials the posterior is
    Beta(a + k, b + n - k); the credible interval is equal-tailed.
    """

    cl = _check_level("credible_level", credible_level)
    if prior_alpha <= 0.0 or prior_beta <= 0.0:
        raise ValueError("prior_alpha and prior_beta must be > 0")
    k, n = _count_successes(labels, success)
    a = float(prior_alpha) + k
    b = float(prior_beta) + (n - k)
    posterior = stats.beta(a, b)
    tail = (1.0 - cl) / 2.0
    return {
        "posterior_alpha": a,
        "posterior_beta": b,
        "posterior_mean": float(posterior.mean()),
        "ci_lower": float(posterior.ppf(tail)),
        "ci_upper": float(posterior.ppf(1.0 - tail)),
        "credible_level": cl,
    }
