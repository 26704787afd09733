"""
Core math modules

Примитивы над десятичными магнитудами и исключения числовой башни.
"""

# Digit primitives
from src.core.math.digits import (
    DIGIT_BASE,
    ZERO_DIGITS,
    add_magnitudes,
    compare_magnitudes,
    digits_from_text,
    digits_to_text,
    divmod_magnitudes,
    is_zero,
    multiply_magnitudes,
    normalize,
    shift_magnitude,
    subtract_magnitudes,
)

# Errors
from src.core.math.errors import (
    KIND_COMPLEX,
    KIND_FRACTION,
    KIND_INTEGER,
    ContractViolation,
    DivisionByZeroViolation,
    ParseError,
)

__all__ = [
    # Digits — constants
    "DIGIT_BASE",
    "ZERO_DIGITS",
    # Digits — operations
    "normalize",
    "is_zero",
    "compare_magnitudes",
    "add_magnitudes",
    "subtract_magnitudes",
    "multiply_magnitudes",
    "shift_magnitude",
    "divmod_magnitudes",
    "digits_from_text",
    "digits_to_text",
    # Errors
    "KIND_INTEGER",
    "KIND_FRACTION",
    "KIND_COMPLEX",
    "ParseError",
    "ContractViolation",
    "DivisionByZeroViolation",
]
