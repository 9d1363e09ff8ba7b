"""Rounding of decimals to whole numbers."""

from __future__ import annotations

from .value import Decimal96


def _split(value: Decimal96) -> tuple[int, int]:
    """The whole part and the fractional remainder of the magnitude."""
    return divmod(value.mantissa, 10**value.scale)


def truncate(value: Decimal96) -> Decimal96:
    """Drop the fractional digits, keeping the sign (zero included)."""
    if value.scale == 0:
        return value
    whole, _ = _split(value)
    return Decimal96(whole, 0, value.negative)


def floor(value: Decimal96) -> Decimal96:
    """Round towards negative infinity."""
    if value.scale == 0:
        return value
    whole, fraction = _split(value)
    if value.negative and fraction:
        whole += 1
    return Decimal96(whole, 0, value.negative)


def round_half_away(value: Decimal96) -> Decimal96:
    """Round to the nearest whole number, halves away from zero.

    Only the first fractional digit decides the direction.
    """
    if value.scale == 0:
        return value
    whole, fraction = _split(value)
    first_digit = fraction * 10 // 10**value.scale
    if first_digit >= 5:
        whole += 1
    return Decimal96(whole, 0, value.negative)