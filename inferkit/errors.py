"""Exception types raised by inferkit."""

from __future__ import annotations

from typing import Any


class InferkitError(Exception):
    """Base class for inferkit errors."""


class DependencyUnavailable(InferkitError, ImportError):
    """A required statistics capability could not be imported.

    Raised by :func:`inferkit.libraries.load_libraries`; fatal and never retried.
    """

    def __init__(self, capability: str, module: str, reason: str) -> None:
        self.capability = capability
        self.module = module
        self.reason = reason
        super().__init__(f"Capability '{capability}' unavailable (module {module!r}): {reason}")


class InvalidConfiguration(InferkitError, ValueError):
    """An environment setting was rejected instead of coerced."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}={value!r}: {reason}")
