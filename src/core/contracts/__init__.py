"""
Contract Validation Module

JSON Schema контракты для сериализованных значений и codec поверх них.
"""

from .codec import (
    decode_complex,
    decode_fraction,
    decode_integer,
    encode_complex,
    encode_fraction,
    encode_integer,
)
from .validators import (
    SCHEMA_DIR,
    ComplexContractValidator,
    ContractValidator,
    FractionContractValidator,
    IntegerContractValidator,
    SchemaLoader,
    validate_complex_contract,
    validate_fraction_contract,
    validate_integer_contract,
)

__all__ = [
    # Classes
    "SCHEMA_DIR",
    "SchemaLoader",
    "ContractValidator",
    "IntegerContractValidator",
    "FractionContractValidator",
    "ComplexContractValidator",
    # Functions
    "validate_integer_contract",
    "validate_fraction_contract",
    "validate_complex_contract",
    # Codec
    "encode_integer",
    "encode_fraction",
    "encode_complex",
    "decode_integer",
    "decode_fraction",
    "decode_complex",
]
