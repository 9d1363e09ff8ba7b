"""A 96-bit decimal number type with arithmetic, comparison, rounding and conversions."""

__version__ = "0.1.0"
__all__ = ["value", "compare", "arithmetic", "rounding", "convert"]