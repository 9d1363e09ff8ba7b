"""Value comparisons of decimals, independent of scale and of the sign of zero."""

from __future__ import annotations

from .value import MAX_SCALE, Decimal96


def _scaled(value: Decimal96) -> int:
    """The value as a signed integer at the largest scale."""
    magnitude = value.mantissa * 10 ** (MAX_SCALE - value.scale)
    return -magnitude if value.negative else magnitude


def is_equal(a: Decimal96, b: Decimal96) -> bool:
    """True if both hold the same value; +0 and -0 are equal."""
    return _scaled(a) == _scaled(b)


def is_not_equal(a: Decimal96, b: Decimal96) -> bool:
    """True if the values differ."""
    return not is_equal(a, b)


def is_greater(a: Decimal96, b: Decimal96) -> bool:
    """True if ``a`` is strictly greater than ``b``."""
    return _scaled(a) > _scaled(b)


def is_greater_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True if ``a`` is greater than or equal to ``b``."""
    return is_equal(a, b) or is_greater(a, b)


def is_less(a: Decimal96, b: Decimal96) -> bool:
    """True if ``a`` is strictly less than ``b``."""
    return not is_greater_or_equal(a, b)


def is_less_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True if ``a`` is less than or equal to ``b``."""
    return is_equal(a, b) or is_less(a, b)