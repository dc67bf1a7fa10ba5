"""Transform record, card selection and value intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Dict, Tuple

from .errors import RangeConfigError, UnknownFieldError


@dataclass(frozen=True)
class Transformations:
    """Rotation, scale and offset of one card.

    Instances are immutable; edits produce a new record via :meth:`with_field`.
    """

    x_axis_rotation: float = 0.0
    y_axis_rotation: float = 0.0
    z_axis_rotation: float = 0.0
    x_scale: float = 1.0
    y_scale: float = 1.0
    x_offset: float = 0.0
    y_offset: float = 0.0

    def with_field(self, name: str, value: float) -> "Transformations":
        """Return a copy with ``name`` replaced by ``value``."""
        if name not in _IDENTITY:
            raise UnknownFieldError(name)
        return replace(self, **{name: float(value)})

    def value_of(self, name: str) -> float:
        if name not in _IDENTITY:
            raise UnknownFieldError(name)
        return getattr(self, name)

    def is_identity(self) -> bool:
        return all(getattr(self, name) == default for name, default in _IDENTITY.items())

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in TRANSFORM_FIELDS}


_IDENTITY: Dict[str, float] = {f.name: f.default for f in fields(Transformations)}

# Slider order: rotations, scales, offsets.
TRANSFORM_FIELDS: Tuple[str, ...] = (
    "x_axis_rotation",
    "y_axis_rotation",
    "z_axis_rotation",
    "x_scale",
    "y_scale",
    "x_offset",
    "y_offset",
)

ROTATION_FIELDS: Tuple[str, ...] = TRANSFORM_FIELDS[:3]
SCALE_FIELDS: Tuple[str, ...] = TRANSFORM_FIELDS[3:5]
OFFSET_FIELDS: Tuple[str, ...] = TRANSFORM_FIELDS[5:]


def identity_value(name: str) -> float:
    """Return the "no adjustment" value of a field (0 or 1 for scales)."""
    try:
        return _IDENTITY[name]
    except KeyError:
        raise UnknownFieldError(name) from None


class Selection(Enum):
    """Which card currently receives slider edits."""

    BLUE = "blue"
    BLACK = "black"


@dataclass(frozen=True)
class ValueRange:
    """Closed interval ``[minimum, maximum]`` used to bound a slider."""

    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.minimum) and math.isfinite(self.maximum)):
            raise RangeConfigError(
                self.minimum, self.maximum, "Range bounds must be finite numbers."
            )
        if self.minimum > self.maximum:
            raise RangeConfigError(self.minimum, self.maximum)

    def clamp(self, value: float) -> float:
        return min(self.maximum, max(self.minimum, float(value)))

    def __str__(self) -> str:
        return f"[{self.minimum:g}, {self.maximum:g}]"


__all__ = [
    "OFFSET_FIELDS",
    "ROTATION_FIELDS",
    "SCALE_FIELDS",
    "Selection",
    "TRANSFORM_FIELDS",
    "Transformations",
    "ValueRange",
    "identity_value",
]
