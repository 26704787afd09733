"""
Contract Codec — сериализация значений в контрактные dict и обратно

encode_* всегда выдаёт канонический и валидный по схеме dict.
decode_* сначала проверяет схему (jsonschema.ValidationError), затем
конструирует значение через движки; дробь при этом сокращается
({"numerator": "12", "denominator": "34"} → 6/17).

JSON Schema pattern допускает завершающий перевод строки ("12\\n"),
грамматика литерала — нет: такие данные отклоняются ParseError.
"""

from typing import Any, Dict

from src.core.contracts.validators import (
    validate_complex_contract,
    validate_fraction_contract,
    validate_integer_contract,
)
from src.core.domain.complex_number import Complex
from src.core.domain.fraction import Fraction
from src.core.domain.integer import Integer


# =============================================================================
# ENCODE
# =============================================================================


def encode_integer(value: Integer) -> Dict[str, Any]:
    return {"value": value.to_text()}


def encode_fraction(value: Fraction) -> Dict[str, Any]:
    """Знак дроби переносится на числитель"""
    return {
        "numerator": value.signed_numerator().to_text(),
        "denominator": value.denominator.to_text(),
    }


def encode_complex(value: Complex) -> Dict[str, Any]:
    return {
        "real": encode_fraction(value.real),
        "imaginary": encode_fraction(value.imaginary),
    }


# =============================================================================
# DECODE
# =============================================================================


def decode_integer(data: Dict[str, Any]) -> Integer:
    """
    Raises:
        ValidationError: Если data не соответствует integer.json
    """
    validate_integer_contract(data)
    return Integer.parse(data["value"])


def decode_fraction(data: Dict[str, Any]) -> Fraction:
    """
    Raises:
        ValidationError: Если data не соответствует fraction.json
    """
    validate_fraction_contract(data)
    return Fraction.parse(data["numerator"], data["denominator"])


def decode_complex(data: Dict[str, Any]) -> Complex:
    """
    Raises:
        ValidationError: Если data не соответствует complex.json
    """
    validate_complex_contract(data)
    real = data["real"]
    imaginary = data["imaginary"]
    return Complex.parse(
        real["numerator"],
        real["denominator"],
        imaginary["numerator"],
        imaginary["denominator"],
    )
