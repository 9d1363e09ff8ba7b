# decimal96

`decimal96` provides `Decimal96`, a signed decimal number. It is made of a
96-bit unsigned integer coefficient (the mantissa) and a power-of-ten scale
from 0 to 28. It holds values up to ±79228162514264337593543950335 and down
to 1e-28. Results of arithmetic are exact while they fit. When they do not
fit, digits are dropped with banker's rounding: a tie goes to the even digit.

## Installing

```
pip install decimal96
```

To run the test suite:

```
pip install "decimal96[test]"
pytest
```

## The value type

`Decimal96` is a frozen dataclass with three fields:

- `mantissa`: an int from 0 to 2**96 - 1.
- `scale`: an int from 0 to 28.
- `negative`: a bool.

Its value is `±mantissa / 10**scale`.

A mantissa out of range raises `ValueError`. A scale out of range raises
`InvalidScaleError`.

Values can also be read from and written to four 32-bit words, in this
layout:

- words 0 to 2 hold the mantissa, least significant word first;
- bits 16 to 23 of word 3 hold the scale;
- bit 31 of word 3 holds the sign.

```python
from decimal96.value import Decimal96

x = Decimal96.from_bits([0x19, 0, 0, 0x00010000])   # 2.5
x.to_bits()            # (25, 0, 0, 65536)
x.negate().to_bits()   # (25, 0, 0, 2147549184)
str(-x)                # '-2.5'
x.is_zero()            # False
```

`from_bits` masks each word to 32 bits. It raises `ValueError` unless it is
given exactly four words. It raises `InvalidScaleError` when the scale field
is above 28.

The `==` operator compares instances field by field, so `0.0` and `0.00` are
not `==`. Use the functions in `decimal96.compare` to compare by value.
`str()` writes the digits with the scale's number of decimals. It does not
write a minus sign on zero.

## Arithmetic

```python
from decimal96.arithmetic import add, sub, mul, div

a = Decimal96.from_bits([0x183, 0, 0, 0x00020000])    # 3.87
b = Decimal96.from_bits([0x4DA6, 0, 0, 0x00020000])   # 198.78
str(add(a, b))   # '202.65'
str(sub(a, b))   # '-194.91'
str(mul(a, b))   # '769.2786'
div(a, b)
```

- `add` and `sub` work at the larger of the two scales.
- When `add` gets two operands of opposite sign that sum to zero, the zero
  is positive.
- When `sub` gives zero, the zero keeps the sign of its first operand.
- `div` computes up to 45 further digits, rounds the quotient, and then
  removes trailing zeros from the fraction.

A result too large to represent raises `TooLargeError`. A negative result
too large in magnitude raises `TooSmallError`. Dividing by zero raises
`DivisionByZeroError`.

## Comparison

```python
from decimal96.compare import (
    is_equal, is_not_equal, is_greater, is_greater_or_equal,
    is_less, is_less_or_equal,
)
```

Each function takes two `Decimal96` values and returns a bool. Values are
compared by what they are worth, whatever their scale, so `1.0` equals
`1.00`. `+0` equals `-0`.

## Rounding

```python
from decimal96.rounding import truncate, floor, round_half_away
```

- `truncate` drops the fractional digits and keeps the sign, including on
  zero.
- `floor` rounds toward negative infinity.
- `round_half_away` rounds to the nearest whole number, with halves going
  away from zero. Only the first fractional digit decides the direction.

A value with scale 0 is returned unchanged.

## Conversions

```python
from decimal96.convert import from_int, to_int, from_float, to_float

from_int(-2147483648)
to_int(x)        # 2, fractional digits dropped
from_float(1.5)  # kept to seven significant digits of single precision
to_float(x)      # 2.5, rounded to single precision
```

`from_int` raises `TypeError` for anything that is not an int. A bool counts
as not an int.

`ConversionError` is raised when:

- an int is outside the 32-bit signed range, for `from_int` or `to_int`;
- a float is NaN or infinite;
- a float's magnitude is non-zero but below 1e-28;
- a float's magnitude is beyond the decimal range.

`to_float` does not raise.

## Errors

Every error above except `ValueError` and `TypeError` derives from
`DecimalError`, which is itself an `ArithmeticError`. The error classes are:

- `InvalidScaleError`
- `TooLargeError`
- `TooSmallError`
- `DivisionByZeroError`
- `ConversionError`

They live in `decimal96.value`. Each also derives from the matching built-in
exception: `ValueError`, `OverflowError` or `ZeroDivisionError`.

## What it does not do

`decimal96` is a library only and has no command-line tool. It does not
parse decimals from strings. It does not provide binary arithmetic or
comparison operators on `Decimal96`. Unary minus is the one operator it
supports. Use the module functions for everything else.