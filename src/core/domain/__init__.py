"""
Domain models and value objects.

Immutable значения числовой башни: Integer, Fraction, Complex.
"""

from src.core.domain.complex_number import Complex
from src.core.domain.fraction import Fraction, gcd
from src.core.domain.integer import INTEGER_LITERAL_PATTERN, Integer, Ordering
from src.core.domain.outcome import (
    ParseOutcome,
    try_parse_complex,
    try_parse_fraction,
    try_parse_integer,
)

__all__ = [
    # Integer Engine
    "INTEGER_LITERAL_PATTERN",
    "Integer",
    "Ordering",
    # Fraction Engine
    "Fraction",
    "gcd",
    # Complex Engine
    "Complex",
    # Result channel
    "ParseOutcome",
    "try_parse_integer",
    "try_parse_fraction",
    "try_parse_complex",
]
