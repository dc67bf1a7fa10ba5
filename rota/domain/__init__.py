"""Domain package exports for transform records and animation helpers."""

from .animation import (
    AnimationPolicy,
    ColorAnimator,
    FieldAnimator,
    SpringSpec,
    TweenSpec,
)
from .errors import RangeConfigError, RotaError, UnknownFieldError
from .formatting import format_value, round_to
from .transformations import (
    TRANSFORM_FIELDS,
    Selection,
    Transformations,
    ValueRange,
    identity_value,
)

__all__ = [
    "AnimationPolicy",
    "ColorAnimator",
    "FieldAnimator",
    "RangeConfigError",
    "RotaError",
    "Selection",
    "SpringSpec",
    "TRANSFORM_FIELDS",
    "Transformations",
    "TweenSpec",
    "UnknownFieldError",
    "ValueRange",
    "format_value",
    "identity_value",
    "round_to",
]
