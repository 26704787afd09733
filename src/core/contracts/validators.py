"""
Contracts — JSON Schema форма сериализованных значений (Draft 2020-12)

- integer.json   {"value": "-12"}
- fraction.json  {"numerator": "-6", "denominator": "17"}   знак на числителе
- complex.json   {"real": <fraction>, "imaginary": <fraction>}
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение схем из каталога с meta-validation и кэшем по имени."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не проходит Draft 2020-12 meta-schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка dict по схеме `schema_name` (задаётся в подклассе)."""

    schema_name: str = ""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises ValidationError на первом нарушении"""
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class IntegerContractValidator(ContractValidator):
    schema_name = "integer"


class FractionContractValidator(ContractValidator):
    schema_name = "fraction"


class ComplexContractValidator(ContractValidator):
    schema_name = "complex"


_INTEGER_CONTRACT = IntegerContractValidator()
_FRACTION_CONTRACT = FractionContractValidator()
_COMPLEX_CONTRACT = ComplexContractValidator()


def validate_integer_contract(data: Dict[str, Any]) -> None:
    _INTEGER_CONTRACT.validate(data)


def validate_fraction_contract(data: Dict[str, Any]) -> None:
    _FRACTION_CONTRACT.validate(data)


def validate_complex_contract(data: Dict[str, Any]) -> None:
    _COMPLEX_CONTRACT.validate(data)
