"""
Core math modules

Точная арифметика и конверсия дробей между системами счисления.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Input limits
    MAX_DECIMAL_EXPONENT,
    # Exact parsing
    is_valid_float,
    to_decimal,
    to_exact_fraction,
    # Validation
    validate_half_open,
    # Reconstruction
    digits_to_fraction,
)

# Radix conversion
from src.core.math.radix import (
    DEFAULT_MAX_DIGITS,
    MIN_BASE,
    ConversionError,
    ConversionResult,
    FractionalInput,
    InvalidBase,
    InvalidInput,
    PrecisionLimitReached,
    convert,
    convert_detailed,
    digits_to_value,
    parse_fractional_value,
    validate_base,
)

__all__ = [
    # Numerical Safeguards — Input limits
    "MAX_DECIMAL_EXPONENT",
    # Numerical Safeguards — Exact parsing
    "is_valid_float",
    "to_decimal",
    "to_exact_fraction",
    # Numerical Safeguards — Validation
    "validate_half_open",
    # Numerical Safeguards — Reconstruction
    "digits_to_fraction",
    # Radix — Constants
    "DEFAULT_MAX_DIGITS",
    "MIN_BASE",
    # Radix — Exceptions
    "ConversionError",
    "InvalidBase",
    "InvalidInput",
    "PrecisionLimitReached",
    # Radix — Types
    "ConversionResult",
    "FractionalInput",
    # Radix — Functions
    "convert",
    "convert_detailed",
    "digits_to_value",
    "parse_fractional_value",
    "validate_base",
]
