import json

import numpy as np
import pytest

from inferkit import environment
from inferkit.data import get_variable
from inferkit.environment import setup_environment
from inferkit.errors import InvalidConfiguration
from inferkit.inference.bootstrap import bootstrap_ci


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch):
    monkeypatch.setattr(environment, "_CURRENT", None)


@pytest.fixture
def magnesium() -> np.ndarray:
    return get_variable("Data.Major.Minerals.Magnesium")


def test_bootstrap_basic(magnesium: np.ndarray):
    """Basic sanity: returns expected keys and reasonable ranges."""

    res = bootstrap_ci(magnesium, n_resamples=200, confidence_level=0.95, seed=123)
    for key in ["estimate", "mean", "std", "ci_lower", "ci_upper", "n_resamples", "confidence_level"]:
        assert key in res
    assert res["estimate"] == pytest.approx(float(np.mean(magnesium)))
    assert magnesium.min() <= res["ci_lower"] <= res["ci_upper"] <= magnesium.max()
    assert res["n_resamples"] == 200


def test_bootstrap_ci_contains_estimate(magnesium: np.ndarray):
    res = bootstrap_ci(magnesium, n_resamples=500, seed=1)
    assert res["ci_lower"] <= res["estimate"] <= res["ci_upper"]


def test_bootstrap_reproducibility(magnesium: np.ndarray):
    """Same seed -> identical results."""

    r1 = bootstrap_ci(magnesium, n_resamples=100, seed=42)
    r2 = bootstrap_ci(magnesium, n_resamples=100, seed=42)
    assert json.dumps(r1, sort_keys=True) == json.dumps(r2, sort_keys=True)


def test_bootstrap_different_seeds(magnesium: np.ndarray):
    r1 = bootstrap_ci(magnesium, n_resamples=100, seed=7)
    r2 = bootstrap_ci(magnesium, n_resamples=100, seed=8)
    assert r1 != r2


def test_bootstrap_uses_environment_settings(magnesium: np.ndarray):
    setup_environment(seed=2023, bootstrap_replicate_count=150)
    r_env = bootstrap_ci(magnesium)
    r_explicit = bootstrap_ci(magnesium, n_resamples=150, seed=2023)
    assert r_env["n_resamples"] == 150
    assert r_env == r_explicit


def test_bootstrap_defaults_without_environment(magnesium: np.ndarray):
    res = bootstrap_ci(magnesium)
    assert res["n_resamples"] == 1000
    assert res == bootstrap_ci(magnesium, n_resamples=1000, seed=2023)


def test_bootstrap_explicit_rng(magnesium: np.ndarray):
    r1 = bootstrap_ci(magnesium, n_resamples=50, rng=np.random.default_rng(5))
    r2 = bootstrap_ci(magnesium, n_resamples=50, seed=5)
    assert r1 == r2


def test_bootstrap_custom_statistic(magnesium: np.ndarray):
    res = bootstrap_ci(magnesium, statistic=np.median, n_resamples=100, seed=3)
    assert res["estimate"] == pytest.approx(float(np.median(magnesium)))


def test_bootstrap_confidence_levels(magnesium: np.ndarray):
    """CI width should increase with higher confidence level."""

    r90 = bootstrap_ci(magnesium, n_resamples=300, confidence_level=0.90, seed=11)
    r95 = bootstrap_ci(magnesium, n_resamples=300, confidence_level=0.95, seed=11)
    r99 = bootstrap_ci(magnesium, n_resamples=300, confidence_level=0.99, seed=11)
    w90 = r90["ci_upper"] - r90["ci_lower"]
    w95 = r95["ci_upper"] - r95["ci_lower"]
    w99 = r99["ci_upper"] - r99["ci_lower"]
    assert w90 <= w95 <= w99


def test_bootstrap_invalid_arguments(magnesium: np.ndarray):
    with pytest.raises(ValueError):
        bootstrap_ci(magnesium, confidence_level=1.0)
    with pytest.raises(ValueError):
        bootstrap_ci(magnesium, n_resamples=0)
    with pytest.raises(ValueError):
        bootstrap_ci([], n_resamples=10)


@pytest.mark.parametrize("n_resamples", [2.5, 2.9, True, -3])
def test_bootstrap_rejects_non_integer_resamples(magnesium: np.ndarray, n_resamples):
    with pytest.raises(InvalidConfiguration) as excinfo:
        bootstrap_ci(magnesium, n_resamples=n_resamples, seed=1)
    assert excinfo.value.field == "n_resamples"


@pytest.mark.parametrize("seed", [1.5, 1.7, True, 0, 2**32])
def test_bootstrap_rejects_invalid_seed(magnesium: np.ndarray, seed):
    with pytest.raises(InvalidConfiguration) as excinfo:
        bootstrap_ci(magnesium, n_resamples=10, seed=seed)
    assert excinfo.value.field == "seed"


def test_bootstrap_accepts_numpy_integer_settings(magnesium: np.ndarray):
    res = bootstrap_ci(magnesium, n_resamples=np.int64(20), seed=np.int64(4))
    assert res == bootstrap_ci(magnesium, n_resamples=20, seed=4)
