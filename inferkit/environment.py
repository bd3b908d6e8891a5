"""Session setup: reproducible seeding and bootstrap settings.

:func:`setup_environment` seeds Python's ``random`` module and numpy's global
generator, and returns the applied :class:`EnvironmentConfig` so later analysis
code can read the bootstrap replicate count. Code that should not depend on
process-global state can take an explicit generator from :func:`make_rng`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
import logging
import random

import numpy as np

from inferkit.config import Config
from inferkit.errors import InvalidConfiguration


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvironmentConfig:
    """Settings applied by :func:`setup_environment`."""

    seed: int
    bootstrap_replicate_count: int

    def rng(self) -> np.random.Generator:
        """Return a fresh generator seeded with ``self.seed``."""

        return np.random.default_rng(self.seed)


_CURRENT: Optional[EnvironmentConfig] = None


def validate_positive_int(field: str, value: Any, upper: int | None = None) -> int:
    """Return ``value`` as an int or raise ``InvalidConfiguration``."""

    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfiguration(field, value, "must be an integer")
    if value <= 0:
        raise InvalidConfiguration(field, value, "must be > 0")
    if upper is not None and value > upper:
        raise InvalidConfiguration(field, value, f"must be <= {upper}")
    return int(value)


def setup_environment(
    seed: int = Config.DEFAULT_SEED,
    bootstrap_replicate_count: int = Config.BOOTSTRAP_N_RESAMPLES,
) -> EnvironmentConfig:
    """Seed the process-wide PRNGs and record the bootstrap replicate count.

    Parameters
    ----------
    seed:
        Seed for ``random`` and ``numpy.random`` (default: 2023).
    bootstrap_replicate_count:
        Number of resamples later bootstrap procedures should draw
        (default: 1000).

    Returns
    -------
    EnvironmentConfig
        The applied settings, also available through :func:`get_environment`.

    Raises
    ------
    InvalidConfiguration
        If either value is not a positive integer, or the seed exceeds
        ``Config.MAX_SEED``.
    """

    global _CURRENT
    seed_value = validate_positive_int("seed", seed, upper=Config.MAX_SEED)
    count = validate_positive_int("bootstrap_replicate_count", bootstrap_replicate_count)

    random.seed(seed_value)
    np.random.seed(seed_value)

    _CURRENT = EnvironmentConfig(seed=seed_value, bootstrap_replicate_count=count)
    _LOGGER.debug("Environment configured: seed=%d, bootstrap_replicate_count=%d", seed_value, count)
    return _CURRENT


def get_environment() -> Optional[EnvironmentConfig]:
    """Return the last applied configuration, or ``None`` before setup."""

    return _CURRENT


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return an explicit ``numpy.random.Generator``.

    Without ``seed``, uses the current environment's seed, falling back to
    ``Config.DEFAULT_SEED``. An explicit ``seed`` is validated like the one
    passed to :func:`setup_environment`.
    """

    if seed is None:
        seed = _CURRENT.seed if _CURRENT is not None else Config.DEFAULT_SEED
    else:
        seed = validate_positive_int("seed", seed, upper=Config.MAX_SEED)
    return np.random.default_rng(seed)
