from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_to(value: float, digits: int) -> float:
    """Round ``value`` half-up to ``digits`` fraction digits.

    Rounding works on the shortest decimal repr of the float, so ``1.005``
    rounds to ``1.01`` even though its binary value is slightly below it.
    Ties go away from zero: ``round_to(-0.125, 2) == -0.13``.
    """
    if digits < 0:
        raise ValueError("digits must be non-negative.")
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def format_value(value: float, digits: int = 2) -> str:
    rounded = round_to(value, digits)
    if rounded == 0:
        rounded = 0.0  # no "-0.00"
    return f"{rounded:.{digits}f}"


__all__ = ["format_value", "round_to"]
