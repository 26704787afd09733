"""
Numeric Errors — исключения числовой башни

Два класса ошибок:
- ParseError: невалидный литерал на этапе конструирования (recoverable).
  Вызывающий код получает ошибку и решает, показывать ли диагностику.
- ContractViolation: нарушение внутреннего precondition (fatal).
  Например, деление на ноль после успешного конструирования значений.
  Внутри библиотеки такие исключения никогда не перехватываются.
"""

from typing import Final


# =============================================================================
# ВИДЫ ЛИТЕРАЛОВ
# =============================================================================

KIND_INTEGER: Final[str] = "integer"
KIND_FRACTION: Final[str] = "fraction"
KIND_COMPLEX: Final[str] = "complex"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseError(ValueError):
    """
    Невалидный литерал при конструировании значения.

    Attributes:
        literal: Исходный текст (для fraction: "n/d", для complex: все 4 поля)
        kind: Вид значения ("integer", "fraction", "complex")
    """

    def __init__(self, literal: str, kind: str = KIND_INTEGER):
        self.literal = literal
        self.kind = kind
        super().__init__(f"Error: {literal} is an invalid {kind}")


class ContractViolation(Exception):
    """
    Нарушение внутреннего контракта арифметики.

    Это ошибка программиста, а не данных: корректный вызывающий код
    никогда не должен её получать.
    """

    pass


class DivisionByZeroViolation(ContractViolation):
    """
    Деление на ноль: quotient/remainder с нулевым делителем,
    деление на нулевую дробь или на нулевое комплексное число.
    """

    pass
