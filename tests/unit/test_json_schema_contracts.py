"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений pattern (литералы)
- Codec: encode → валидный контракт, decode → каноническое значение
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import (
    SCHEMA_DIR,
    ComplexContractValidator,
    FractionContractValidator,
    IntegerContractValidator,
    SchemaLoader,
    decode_complex,
    decode_fraction,
    decode_integer,
    encode_complex,
    encode_fraction,
    encode_integer,
    validate_complex_contract,
    validate_fraction_contract,
    validate_integer_contract,
)
from src.core.domain import Complex, Fraction, Integer
from src.core.math.errors import ParseError


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_fraction() -> dict:
    """Валидная дробь для тестирования."""
    return {"numerator": "-6", "denominator": "17"}


@pytest.fixture
def valid_complex(valid_fraction: dict) -> dict:
    """Валидное комплексное число для тестирования."""
    return {"real": valid_fraction, "imaginary": {"numerator": "1", "denominator": "2"}}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("name", ["integer", "fraction", "complex"])
    def test_schemas_load_and_are_valid(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["type"] == "object"
        assert (SCHEMA_DIR / f"{name}.json").exists()

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("integer") is loader.load_schema("integer")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("quaternion")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_validator_uses_given_loader(self, tmp_path) -> None:
        schema = {"type": "object", "required": ["value"]}
        (tmp_path / "integer.json").write_text(json.dumps(schema), encoding="utf-8")
        validator = IntegerContractValidator(SchemaLoader(tmp_path))
        assert validator.schema == schema
        assert validator.is_valid({"value": "007"})
        assert not IntegerContractValidator().is_valid({"value": "007"})

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VALIDATORS
# =============================================================================


class TestIntegerContract:
    """Тесты integer контракта"""

    @pytest.mark.parametrize("value", ["0", "12", "-12"])
    def test_valid(self, value: str) -> None:
        validate_integer_contract({"value": value})

    @pytest.mark.parametrize("value", ["012", "-0", "", "1a", "+1"])
    def test_invalid_literal(self, value: str) -> None:
        with pytest.raises(ValidationError):
            validate_integer_contract({"value": value})

    def test_wrong_type(self) -> None:
        assert not IntegerContractValidator().is_valid({"value": 12})

    def test_missing_and_extra_fields(self) -> None:
        validator = IntegerContractValidator()
        assert not validator.is_valid({})
        assert not validator.is_valid({"value": "1", "sign": "+"})


class TestFractionContract:
    """Тесты fraction контракта"""

    def test_valid(self, valid_fraction: dict) -> None:
        validate_fraction_contract(valid_fraction)

    @pytest.mark.parametrize("denominator", ["0", "-3", "03"])
    def test_denominator_must_be_positive_literal(self, denominator: str) -> None:
        with pytest.raises(ValidationError):
            validate_fraction_contract({"numerator": "1", "denominator": denominator})

    def test_errors_collected(self) -> None:
        errors = list(
            FractionContractValidator().iter_errors({"numerator": "x", "denominator": "0"})
        )
        assert len(errors) == 2


class TestComplexContract:
    """Тесты complex контракта"""

    def test_valid(self, valid_complex: dict) -> None:
        validate_complex_contract(valid_complex)

    def test_nested_fraction_checked(self, valid_complex: dict) -> None:
        valid_complex["imaginary"] = {"numerator": "1", "denominator": "0"}
        assert not ComplexContractValidator().is_valid(valid_complex)

    def test_missing_part(self, valid_fraction: dict) -> None:
        with pytest.raises(ValidationError):
            validate_complex_contract({"real": valid_fraction})


# =============================================================================
# CODEC
# =============================================================================


class TestCodec:
    """Тесты encode/decode"""

    def test_integer(self) -> None:
        n = Integer.parse("-120")
        data = encode_integer(n)
        assert data == {"value": "-120"}
        validate_integer_contract(data)
        assert decode_integer(data) == n

    def test_fraction_sign_on_numerator(self) -> None:
        f = Fraction.parse("3", "-9")
        data = encode_fraction(f)
        assert data == {"numerator": "-1", "denominator": "3"}
        validate_fraction_contract(data)

    def test_fraction_decode_reduces(self) -> None:
        f = decode_fraction({"numerator": "12", "denominator": "34"})
        assert f.to_text() == "6/17"

    def test_complex(self) -> None:
        c = Complex.parse("12", "34", "-1", "2")
        data = encode_complex(c)
        validate_complex_contract(data)
        assert data["imaginary"] == {"numerator": "-1", "denominator": "2"}
        assert decode_complex(json.loads(json.dumps(data))) == c

    def test_decode_rejects_schema_violation(self) -> None:
        with pytest.raises(ValidationError):
            decode_integer({"value": "007"})

    def test_decode_rejects_trailing_newline(self) -> None:
        with pytest.raises(ParseError):
            decode_integer({"value": "12\n"})


# =============================================================================
# PYDANTIC SERIALIZATION
# =============================================================================


class TestPydanticSerialization:
    """Pydantic JSON сериализация моделей"""

    def test_model_json_round_trip(self) -> None:
        c = Complex.parse("-1", "2", "-3", "3")
        restored = Complex.model_validate_json(c.model_dump_json())
        assert restored == c
        assert restored.to_text() == "-1/2-i"

    def test_model_validate_enforces_invariants(self) -> None:
        with pytest.raises(PydanticValidationError):
            Integer.model_validate({"negative": False, "digits": [0, 1, 0]})
