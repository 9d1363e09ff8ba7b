"""Addition, subtraction, multiplication and division of 96-bit decimals."""

from __future__ import annotations

from .value import (
    MAX_MANTISSA,
    MAX_SCALE,
    Decimal96,
    DivisionByZeroError,
    TooLargeError,
    TooSmallError,
)

_MAX_FRACTION_DIGITS = 45


def _overflow(negative: bool) -> Exception:
    if negative:
        return TooSmallError("result is too small to be represented")
    return TooLargeError("result is too large to be represented")


def _divide_half_even(numerator: int, denominator: int) -> int:
    """Integer quotient rounded half to even."""
    quotient, remainder = divmod(numerator, denominator)
    twice = remainder * 2
    if twice > denominator or (twice == denominator and quotient % 2):
        quotient += 1
    return quotient


def _round_to_fit(mantissa: int, scale: int) -> tuple[int, int]:
    """Drop digits with banker's rounding until the mantissa fits and the scale is at most 28.

    The returned scale is negative when the value cannot be represented.
    """
    drop = max(0, scale - MAX_SCALE)
    while True:
        rounded = _divide_half_even(mantissa, 10**drop)
        if rounded <= MAX_MANTISSA:
            return rounded, scale - drop
        drop += 1


def _finish(magnitude: int, scale: int, negative: bool) -> Decimal96:
    mantissa, scale = _round_to_fit(magnitude, scale)
    if scale < 0:
        raise _overflow(negative)
    return Decimal96(mantissa, scale, negative)


def _signed_at(value: Decimal96, scale: int) -> int:
    magnitude = value.mantissa * 10 ** (scale - value.scale)
    return -magnitude if value.negative else magnitude


def _combine(a: Decimal96, b: Decimal96, b_negative: bool, zero_negative: bool) -> Decimal96:
    scale = max(a.scale, b.scale)
    right = b.mantissa * 10 ** (scale - b.scale)
    total = _signed_at(a, scale) + (-right if b_negative else right)
    negative = zero_negative if total == 0 else total < 0
    return _finish(abs(total), scale, negative)


def add(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a + b``; a zero sum of opposite signs is positive."""
    zero_negative = a.negative if a.negative == b.negative else False
    return _combine(a, b, b.negative, zero_negative)


def sub(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a - b``; a zero difference keeps the sign of ``a``."""
    return _combine(a, b, not b.negative, a.negative)


def mul(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a * b``."""
    negative = a.negative != b.negative
    return _finish(a.mantissa * b.mantissa, a.scale + b.scale, negative)


def div(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a / b`` with trailing zeros removed from the fraction."""
    if b.mantissa == 0:
        raise DivisionByZeroError("division by zero")
    negative = a.negative != b.negative
    scale = a.scale - b.scale
    quotient, remainder = divmod(a.mantissa, b.mantissa)

    for _ in range(_MAX_FRACTION_DIGITS):
        remainder *= 10
        if remainder == 0 or remainder > MAX_MANTISSA:
            break
        shifted = quotient * 10
        if shifted > MAX_MANTISSA:
            digit = remainder // b.mantissa
            odd = quotient % 2 == 1
            if (digit >= 6 or (odd and digit == 5)) and quotient < MAX_MANTISSA:
                quotient += 1
            break
        scale += 1
        digit, remainder = divmod(remainder, b.mantissa)
        quotient = shifted + digit

    mantissa, scale = _round_to_fit(quotient, scale)
    while scale > 0 and mantissa % 10 == 0:
        mantissa //= 10
        scale -= 1
    while scale < 0:
        mantissa *= 10
        if mantissa > MAX_MANTISSA:
            raise _overflow(negative)
        scale += 1
    return Decimal96(mantissa, scale, negative)