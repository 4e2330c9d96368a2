"""
Core math modules

BigInteger: знаковое целое произвольной точности и конверсия оснований.
"""

# Representation (limbs)
from src.core.math.limbs import (
    INT64_MAX,
    INT64_MIN,
    INTERNAL_BASE,
    compare_magnitudes,
    limbs_from_int,
    multiply_limbs_by_short,
    shift_limbs,
    trim_limbs,
)

# Errors
from src.core.math.errors import (
    BigIntegerError,
    DivisionByZeroError,
    EmptyTokenError,
    InvalidBaseError,
    InvalidDigitCharacterError,
    NarrowingOverflowError,
)

# Arithmetic Engine + Comparator
from src.core.math.big_integer import (
    BigInteger,
    guess_quotient_limb,
    multiply_by_short,
)

# Base Converter
from src.core.math.base_conversion import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    base_prefix,
    char_to_digit,
    digit_to_char,
    parse_big_integer,
    render_big_integer,
    validate_base,
)

__all__ = [
    # Limbs: Constants
    "INTERNAL_BASE",
    "INT64_MIN",
    "INT64_MAX",
    # Limbs: Functions
    "compare_magnitudes",
    "limbs_from_int",
    "multiply_limbs_by_short",
    "shift_limbs",
    "trim_limbs",
    # Errors
    "BigIntegerError",
    "DivisionByZeroError",
    "EmptyTokenError",
    "InvalidBaseError",
    "InvalidDigitCharacterError",
    "NarrowingOverflowError",
    # BigInteger
    "BigInteger",
    "guess_quotient_limb",
    "multiply_by_short",
    # Base Converter: Constants
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    # Base Converter: Functions
    "base_prefix",
    "char_to_digit",
    "digit_to_char",
    "parse_big_integer",
    "render_big_integer",
    "validate_base",
]
