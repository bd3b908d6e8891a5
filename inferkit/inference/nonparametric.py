"""Non-parametric comparison of two independent samples."""

from __future__ import annotations

from typing import Any

import numpy as np
from scipy import stats

from inferkit.inference.descriptive import _as_sample


ALTERNATIVES: tuple[str, ...] = ("two-sided", "less", "greater")


def compare_samples(a: Any, b: Any, alternative: str = "two-sided") -> dict[str, Any]:
    """Mann-Whitney U test of ``a`` against ``b``.

    Also reports both medians, which is what the test is usually read against
    in the course material.
    """

    if alternative not in ALTERNATIVES:
        raise ValueError(f"alternative must be one of {', '.join(ALTERNATIVES)}")
    x = _as_sample(a)
    y = _as_sample(b)
    res = stats.mannwhitneyu(x, y, alternative=alternative)
    return {
        "statistic": float(res.statistic),
        "p_value": float(res.pvalue),
        "median_a": float(np.median(x)),
        "median_b": float(np.median(y)),
        "n_a": int(x.size),
        "n_b": int(y.size),
        "alternative": alternative,
    }
