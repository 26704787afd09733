"""
Тесты для ParseOutcome — канал результата без исключений
"""

import logging

import pytest

from src.core.domain import (
    Complex,
    Fraction,
    Integer,
    ParseOutcome,
    try_parse_complex,
    try_parse_fraction,
    try_parse_integer,
)
from src.core.math.errors import DivisionByZeroViolation, ParseError


class TestTryParse:
    """Тесты try_parse_*"""

    def test_integer_success(self) -> None:
        outcome = try_parse_integer("-12")
        assert outcome.ok
        assert outcome.message == ""
        assert outcome.unwrap() == Integer.parse("-12")

    def test_integer_failure(self) -> None:
        outcome = try_parse_integer("012")
        assert not outcome.ok
        assert outcome.value is None
        assert outcome.message == "Error: 012 is an invalid integer"
        with pytest.raises(ParseError):
            outcome.unwrap()

    def test_fraction(self) -> None:
        assert try_parse_fraction("12", "34").unwrap() == Fraction.parse("6", "17")
        failed = try_parse_fraction("1", "0")
        assert not failed.ok
        assert failed.message == "Error: 1/0 is an invalid fraction"

    def test_complex(self) -> None:
        outcome = try_parse_complex("-1", "2", "-3", "3")
        assert isinstance(outcome, ParseOutcome)
        assert outcome.unwrap().to_text() == "-1/2-i"
        assert not try_parse_complex("1", "0", "1", "1").ok

    def test_type_error_still_raised(self) -> None:
        with pytest.raises(TypeError):
            try_parse_integer(None)  # type: ignore[arg-type]

    def test_contract_violations_are_not_outcomes(self) -> None:
        value = try_parse_complex("1", "1", "0", "1").unwrap()
        with pytest.raises(DivisionByZeroViolation):
            value / Complex.zero()


class TestDiagnostics:
    """Диагностика невалидных литералов уходит в logging (DEBUG)"""

    def test_invalid_integer_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.integer"):
            try_parse_integer("1a")
        assert any("1a is an invalid integer" in r.getMessage() for r in caplog.records)

    def test_invalid_fraction_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.fraction"):
            try_parse_fraction("1", "0")
        records = [r for r in caplog.records if "invalid fraction" in r.getMessage()]
        assert records
        assert records[0].extra_info == {"literal": "1/0"}

    def test_success_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src"):
            try_parse_complex("12", "34", "1", "2")
        assert caplog.records == []

    def test_message_formatted_lazily(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.integer"):
            try_parse_integer("-0")
        record = caplog.records[0]
        assert record.msg == "%s is an invalid integer"
        assert record.args == ("-0",)
        assert record.getMessage() == "-0 is an invalid integer"
