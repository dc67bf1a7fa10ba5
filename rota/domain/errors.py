"""Domain-level error types shared by viewmodels and views.

Errors here describe configuration mistakes in the transform model. They are
raised eagerly, at construction time, so a misconfigured slider never reaches
the screen.
"""

from __future__ import annotations


class RotaError(Exception):
    """Base class for domain errors."""


class RangeConfigError(RotaError, ValueError):
    """Raised when a value interval is malformed (minimum above maximum)."""

    def __init__(self, minimum: float, maximum: float, message: str = "") -> None:
        super().__init__(message or f"Invalid range [{minimum}, {maximum}]: minimum exceeds maximum.")
        self.minimum = minimum
        self.maximum = maximum


class UnknownFieldError(RotaError, ValueError):
    """Raised when a field name is not part of the transform record."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Unknown transform field '{field_name}'.")
        self.field_name = field_name


__all__ = ["RangeConfigError", "RotaError", "UnknownFieldError"]
