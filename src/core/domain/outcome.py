"""
ParseOutcome — результат конструирования без исключений

Канал success-or-error для внешнего кода (REPL, разборщик литералов):
try_parse_* никогда не бросают ParseError, а возвращают ParseOutcome.
Вызывающий код сам решает, показывать ли outcome.message.

Нарушения контракта (ContractViolation) и TypeError по-прежнему пробрасываются.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, cast

from src.core.domain.complex_number import Complex
from src.core.domain.fraction import Fraction
from src.core.domain.integer import Integer
from src.core.math.errors import ParseError

T = TypeVar("T")


@dataclass(frozen=True)
class ParseOutcome(Generic[T]):
    """Результат разбора литерала."""

    value: Optional[T]
    error: Optional[ParseError]

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Диагностика для пользователя ("" при успехе)"""
        return "" if self.error is None else str(self.error)

    def unwrap(self) -> T:
        """
        Значение при успехе.

        Raises:
            ParseError: Исходная ошибка разбора
        """
        if self.error is not None:
            raise self.error
        return cast(T, self.value)


def _attempt(factory: Callable[..., T], *literals: str) -> ParseOutcome[T]:
    try:
        return ParseOutcome(value=factory(*literals), error=None)
    except ParseError as e:
        return ParseOutcome(value=None, error=e)


def try_parse_integer(text: str) -> ParseOutcome[Integer]:
    """Integer.parse через канал результата"""
    return _attempt(Integer.parse, text)


def try_parse_fraction(numerator: str, denominator: str) -> ParseOutcome[Fraction]:
    """Fraction.parse через канал результата"""
    return _attempt(Fraction.parse, numerator, denominator)


def try_parse_complex(
    real_numerator: str,
    real_denominator: str,
    imaginary_numerator: str,
    imaginary_denominator: str,
) -> ParseOutcome[Complex]:
    """Complex.parse через канал результата"""
    return _attempt(
        Complex.parse,
        real_numerator,
        real_denominator,
        imaginary_numerator,
        imaginary_denominator,
    )
