from __future__ import annotations

import pytest

from rota.domain.formatting import format_value, round_to


def test_round_to_uses_half_up() -> None:
    assert round_to(0.125, 2) == 0.13
    assert round_to(1.005, 2) == 1.01
    assert round_to(2.675, 2) == 2.68


def test_round_to_ties_away_from_zero_for_negatives() -> None:
    assert round_to(-0.125, 2) == -0.13


def test_round_to_rejects_negative_digits() -> None:
    with pytest.raises(ValueError):
        round_to(1.0, -1)


def test_format_value_pads_fraction_digits() -> None:
    assert format_value(1.5) == "1.50"
    assert format_value(300) == "300.00"
    assert format_value(1.005) == "1.01"


def test_format_value_has_no_negative_zero() -> None:
    assert format_value(-0.001) == "0.00"
