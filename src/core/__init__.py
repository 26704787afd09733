"""
Core numeric tower: arbitrary-precision integers, exact fractions, complex numbers.

Слои зависят только от нижележащих:
    math.digits  ←  domain.integer  ←  domain.fraction  ←  domain.complex_number
"""
