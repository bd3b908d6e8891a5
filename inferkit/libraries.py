"""Statistics capability registry and loader.

The course relies on a fixed set of statistical capabilities (skewness and
kurtosis, distribution fitting, confidence intervals, proportion intervals,
non-parametric tests, estimation, bootstrap, Bayesian estimation). Each one is
declared here as an immutable :class:`LibrarySpec` naming the module that
provides it and the attributes the course code relies on.

:func:`load_libraries` resolves the whole registry once per process and raises
:class:`~inferkit.errors.DependencyUnavailable` as soon as an entry cannot be
resolved.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Callable, Optional
import importlib
import logging

from inferkit.errors import DependencyUnavailable


_LOGGER = logging.getLogger(__name__)

Resolver = Callable[[str], ModuleType]


@dataclass(frozen=True)
class LibrarySpec:
    """Immutable capability specification.

    Fields
    ------
    capability:
        Canonical capability identifier (e.g., "bootstrap").
    module:
        Dotted import path of the module providing the capability.
    attributes:
        Names that must exist on the resolved module.
    description:
        Short human-readable description, including the R library the course
        originally used for it.
    """

    capability: str
    module: str
    attributes: tuple[str, ...]
    description: str


LIBRARY_REGISTRY: dict[str, LibrarySpec] = {
    "skewness_kurtosis": LibrarySpec(
        capability="skewness_kurtosis",
        module="scipy.stats",
        attributes=("skew", "kurtosis"),
        description="Skewness and kurtosis (e1071)",
    ),
    "distribution_fitting": LibrarySpec(
        capability="distribution_fitting",
        module="scipy.stats",
        attributes=("norm", "gamma", "lognorm", "expon"),
        description="Maximum-likelihood distribution fitting (MASS::fitdistr)",
    ),
    "descriptive_inference": LibrarySpec(
        capability="descriptive_inference",
        module="scipy.stats",
        attributes=("describe", "sem", "t", "ttest_1samp", "ttest_ind"),
        description="Descriptive statistics, confidence intervals and tests (DescTools)",
    ),
    "proportion_ci": LibrarySpec(
        capability="proportion_ci",
        module="scipy.stats",
        attributes=("binomtest",),
        description="Confidence intervals for proportions (PropCIs)",
    ),
    "nonparametric": LibrarySpec(
        capability="nonparametric",
        module="scipy.stats",
        attributes=("mannwhitneyu", "wilcoxon", "kruskal"),
        description="Non-parametric tests (rcompanion)",
    ),
    "point_interval_estimation": LibrarySpec(
        capability="point_interval_estimation",
        module="scipy.optimize",
        attributes=("minimize",),
        description="Point and interval estimation by likelihood optimization (EstimationTools)",
    ),
    "bootstrap": LibrarySpec(
        capability="bootstrap",
        module="numpy.random",
        attributes=("default_rng",),
        description="Resampling generators for bootstrap procedures (boot)",
    ),
    "bayesian": LibrarySpec(
        capability="bayesian",
        module="scipy.stats",
        attributes=("beta", "binom"),
        description="Conjugate Bayesian estimation (BayesFactor)",
    ),
}


_LOADED: dict[str, ModuleType] = {}


def get_library_spec(capability: str) -> LibrarySpec:
    """Return the ``LibrarySpec`` for ``capability`` or raise ``ValueError``."""

    if capability not in LIBRARY_REGISTRY:
        raise ValueError(f"Unknown capability: {capability}")
    return LIBRARY_REGISTRY[capability]


def list_capabilities() -> list[str]:
    """List all registered capability names in declaration order."""

    return list(LIBRARY_REGISTRY.keys())


def _resolve(spec: LibrarySpec, resolver: Resolver) -> ModuleType:
    try:
        module = resolver(spec.module)
    except ImportError as e:
        _LOGGER.warning("Capability %s unavailable: %s", spec.capability, e)
        raise DependencyUnavailable(spec.capability, spec.module, str(e)) from e

    missing = [name for name in spec.attributes if not hasattr(module, name)]
    if missing:
        _LOGGER.warning("Capability %s missing attributes: %s", spec.capability, ", ".join(missing))
        raise DependencyUnavailable(
            spec.capability, spec.module, f"missing attributes: {', '.join(missing)}"
        )
    return module


def load_libraries(resolver: Optional[Resolver] = None) -> dict[str, ModuleType]:
    """Resolve every registered capability and cache the result.

    Parameters
    ----------
    resolver:
        Callable mapping a dotted module path to a module. Defaults to
        ``importlib.import_module``; tests may pass a stub.

    Returns
    -------
    dict
        Mapping capability -> resolved module (a copy of the process cache).

    Raises
    ------
    DependencyUnavailable
        If any capability cannot be imported or lacks a required attribute.
    """

    resolve = resolver if resolver is not None else importlib.import_module
    for capability, spec in LIBRARY_REGISTRY.items():
        if capability in _LOADED:
            continue
        _LOADED[capability] = _resolve(spec, resolve)
        _LOGGER.debug("Loaded capability %s from %s", capability, spec.module)
    return dict(_LOADED)


def loaded_libraries() -> dict[str, ModuleType]:
    """Return the capabilities resolved so far in this process."""

    return dict(_LOADED)


def reset_libraries() -> None:
    """Forget every resolved capability (mainly for tests)."""

    _LOADED.clear()
