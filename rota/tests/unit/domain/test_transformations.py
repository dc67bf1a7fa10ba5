from __future__ import annotations

import dataclasses
import math

import pytest

from rota.domain.errors import RangeConfigError, UnknownFieldError
from rota.domain.transformations import (
    TRANSFORM_FIELDS,
    Selection,
    Transformations,
    ValueRange,
    identity_value,
)


def test_default_record_is_identity() -> None:
    record = Transformations()

    assert record.is_identity()
    assert record.as_dict() == {
        "x_axis_rotation": 0.0,
        "y_axis_rotation": 0.0,
        "z_axis_rotation": 0.0,
        "x_scale": 1.0,
        "y_scale": 1.0,
        "x_offset": 0.0,
        "y_offset": 0.0,
    }


def test_with_field_returns_copy_and_leaves_original() -> None:
    original = Transformations()

    updated = original.with_field("z_axis_rotation", 90)

    assert updated.z_axis_rotation == 90.0
    assert original.z_axis_rotation == 0.0
    assert not updated.is_identity()


def test_record_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Transformations().x_scale = 2.0  # type: ignore[misc]


def test_unknown_field_raises() -> None:
    with pytest.raises(UnknownFieldError):
        Transformations().with_field("w_axis_rotation", 1.0)
    with pytest.raises(UnknownFieldError):
        identity_value("alpha")


@pytest.mark.parametrize("name", TRANSFORM_FIELDS)
def test_identity_value_matches_default_record(name: str) -> None:
    assert identity_value(name) == getattr(Transformations(), name)


def test_selection_has_two_variants() -> None:
    assert set(Selection) == {Selection.BLUE, Selection.BLACK}


def test_value_range_clamps_to_nearest_bound() -> None:
    bounds = ValueRange(-200.0, 200.0)

    assert bounds.clamp(-250) == -200.0
    assert bounds.clamp(999) == 200.0
    assert bounds.clamp(12.5) == 12.5


def test_value_range_rejects_inverted_bounds() -> None:
    with pytest.raises(RangeConfigError) as excinfo:
        ValueRange(5.0, 1.0)

    assert excinfo.value.minimum == 5.0
    assert isinstance(excinfo.value, ValueError)


def test_value_range_rejects_non_finite_bounds() -> None:
    with pytest.raises(RangeConfigError):
        ValueRange(-math.inf, 0.0)


def test_degenerate_range_is_allowed() -> None:
    assert ValueRange(1.0, 1.0).clamp(3.0) == 1.0
