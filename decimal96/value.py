"""The 96-bit decimal value type and the errors raised by its operations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

MAX_SCALE = 28
MANTISSA_BITS = 96
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1

_WORD_MASK = 0xFFFFFFFF
_SIGN_FLAG = 1 << 31
_SCALE_SHIFT = 16
_SCALE_MASK = 0xFF


class DecimalError(ArithmeticError):
    """Base class for every error raised by decimal operations."""


class InvalidScaleError(DecimalError, ValueError):
    """The power of ten is outside the range 0..28."""


class TooLargeError(DecimalError, OverflowError):
    """The result is too large to be represented."""


class TooSmallError(DecimalError, OverflowError):
    """The result is too small (a too large negative number) to be represented."""


class DivisionByZeroError(DecimalError, ZeroDivisionError):
    """Division by zero."""


class ConversionError(DecimalError, ValueError):
    """A value cannot be converted to or from a decimal."""


@dataclass(frozen=True)
class Decimal96:
    """A decimal number: a 96-bit unsigned mantissa, a power of ten and a sign.

    The value is ``(-1 if negative else 1) * mantissa / 10 ** scale``.
    Equality of instances is structural: ``0.0`` and ``0.00`` differ here;
    use the functions in :mod:`decimal96.compare` to compare values.
    """

    mantissa: int = 0
    scale: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.mantissa <= MAX_MANTISSA:
            raise ValueError(f"mantissa {self.mantissa} does not fit in 96 bits")
        if not 0 <= self.scale <= MAX_SCALE:
            raise InvalidScaleError(f"scale {self.scale} is outside 0..{MAX_SCALE}")

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> Decimal96:
        """Build a value from the four 32-bit words: low, middle, high, flags."""
        words = [word & _WORD_MASK for word in bits]
        if len(words) != 4:
            raise ValueError(f"expected 4 words, got {len(words)}")
        low, mid, high, flags = words
        return cls(
            mantissa=low | (mid << 32) | (high << 64),
            scale=(flags >> _SCALE_SHIFT) & _SCALE_MASK,
            negative=bool(flags & _SIGN_FLAG),
        )

    def to_bits(self) -> tuple[int, int, int, int]:
        """Return the four 32-bit words: low, middle, high, flags."""
        flags = (self.scale << _SCALE_SHIFT) | (_SIGN_FLAG if self.negative else 0)
        return (
            self.mantissa & _WORD_MASK,
            (self.mantissa >> 32) & _WORD_MASK,
            (self.mantissa >> 64) & _WORD_MASK,
            flags,
        )

    def is_zero(self) -> bool:
        """True for zero of either sign and any scale."""
        return self.mantissa == 0

    def negate(self) -> Decimal96:
        """Return the value with its sign flipped, zero included."""
        return replace(self, negative=not self.negative)

    def __neg__(self) -> Decimal96:
        return self.negate()

    def __str__(self) -> str:
        digits = str(self.mantissa).rjust(self.scale + 1, "0")
        if self.scale:
            digits = f"{digits[:-self.scale]}.{digits[-self.scale:]}"
        sign = "-" if self.negative and self.mantissa else ""
        return sign + digits