"""Conversions between decimals and Python ints and single-precision floats."""

from __future__ import annotations

import math
import struct

from .value import MANTISSA_BITS, MAX_MANTISSA, MAX_SCALE, ConversionError, Decimal96

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_SIGNIFICANT_DIGITS = 6


def _to_single(number: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", number))[0]


_FLOAT_MAX = _to_single(79228157791897854723898736640.0)
_FLOAT_MIN = _to_single(1e-28)


def from_int(value: int) -> Decimal96:
    """Convert a 32-bit signed integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not _INT_MIN <= value <= _INT_MAX:
        raise ConversionError(f"{value} is outside the 32-bit integer range")
    return Decimal96(abs(value), 0, value < 0)


def to_int(value: Decimal96) -> int:
    """Convert to a 32-bit signed integer, dropping the fractional digits."""
    whole = value.mantissa // 10**value.scale
    limit = -_INT_MIN if value.negative else _INT_MAX
    if whole > limit:
        raise ConversionError(f"{value} does not fit in a 32-bit integer")
    return -whole if value.negative else whole


def _divide_half_even(numerator: int, denominator: int) -> int:
    quotient, remainder = divmod(numerator, denominator)
    twice = remainder * 2
    if twice > denominator or (twice == denominator and quotient % 2):
        quotient += 1
    return quotient


def from_float(value: float) -> Decimal96:
    """Convert a float, kept to seven significant digits of single precision."""
    if math.isnan(value) or math.isinf(value):
        raise ConversionError(f"{value} is not a finite number")
    try:
        single = _to_single(value)
    except OverflowError as exc:
        raise ConversionError(f"{value} is too large to convert") from exc
    if single != 0 and abs(single) < _FLOAT_MIN:
        raise ConversionError(f"{value} is too small to convert")
    if abs(single) > _FLOAT_MAX:
        raise ConversionError(f"{value} is too large to convert")

    negative = math.copysign(1.0, single) < 0
    if single == 0:
        return Decimal96(0, 0, negative)

    digits_text, exponent_text = f"{abs(single):.{_SIGNIFICANT_DIGITS}E}".split("E")
    digits = int(digits_text.replace(".", ""))
    scale = _SIGNIFICANT_DIGITS - int(exponent_text)
    if scale < 0:
        digits *= 10**-scale
        scale = 0
    elif scale > MAX_SCALE:
        digits = _divide_half_even(digits, 10 ** (scale - MAX_SCALE))
        scale = MAX_SCALE
    while scale > 0 and digits % 10 == 0:
        digits //= 10
        scale -= 1
    if digits > MAX_MANTISSA:
        raise ConversionError(f"{value} is too large to convert")
    return Decimal96(digits, scale, negative)


def to_float(value: Decimal96) -> float:
    """Convert to a float rounded to single precision."""
    total = 0.0
    for bit in range(MANTISSA_BITS):
        if (value.mantissa >> bit) & 1:
            total += 2.0**bit
    for _ in range(value.scale):
        total /= 10
    single = _to_single(total)
    return -single if value.negative else single