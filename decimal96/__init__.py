"""A 96-bit scaled decimal number type with arithmetic, comparison, conversion and rounding."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "comparison", "converters", "core", "rounding"]