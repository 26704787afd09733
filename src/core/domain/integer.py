"""
Integer — целое произвольной точности

Immutable Pydantic модель: знак + десятичные цифры (little-endian).
Все операции возвращают новый экземпляр; операнды не изменяются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits не пустой, каждая цифра в 0..9
2. Нет старших нулей, кроме единственной цифры 0
3. Ноль никогда не отрицательный
4. Литерал: -?[1-9][0-9]*|0 (без ведущих нулей, без "-0", без "+")
"""

import re
from enum import Enum
from typing import Final, Pattern, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

from src.core.logging_config import get_logger
from src.core.math import digits as mag
from src.core.math.errors import KIND_INTEGER, DivisionByZeroViolation, ParseError

logger = get_logger(__name__)


# =============================================================================
# ГРАММАТИКА ЛИТЕРАЛА
# =============================================================================

# ASCII-цифры only ([0-9], не \d: \d принимает Unicode-цифры)
INTEGER_LITERAL_PATTERN: Final[Pattern[str]] = re.compile(r"-?[1-9][0-9]*|0")


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат сравнения двух значений"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# INTEGER MODEL
# =============================================================================


class Integer(BaseModel):
    """
    Целое число произвольной точности.

    Immutable модель (frozen=True). Создаётся через Integer.parse(text),
    Integer.from_digits(...) или как результат арифметики.
    """

    negative: bool = Field(False, description="True только для n < 0")
    digits: Tuple[int, ...] = Field(
        ..., min_length=1, description="Десятичные цифры, младший разряд первым"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_canonical_digits(cls, v: Tuple[int, ...], info) -> Tuple[int, ...]:
        """Проверка цифр, отсутствия старших нулей и знака нуля"""
        for d in v:
            if d < 0 or d >= mag.DIGIT_BASE:
                raise ValueError(f"digit {d} out of range 0..{mag.DIGIT_BASE - 1}")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError(f"digits {v} have a most-significant zero")
        if mag.is_zero(v) and info.data.get("negative"):
            raise ValueError("zero cannot be negative")
        return v

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Integer":
        """
        Конструирование из десятичного литерала.

        Args:
            text: Литерал вида -?[1-9][0-9]*|0

        Returns:
            Integer

        Raises:
            ParseError: Если литерал невалиден ("012", "-0", "", "1a", "-")
            TypeError: Если text не строка

        Examples:
            >>> str(Integer.parse("-12"))
            '-12'
        """
        if not isinstance(text, str):
            raise TypeError(f"Integer literal must be str, got {type(text).__name__}")

        if INTEGER_LITERAL_PATTERN.fullmatch(text) is None:
            logger.debug("%s is an invalid integer", text, extra={"literal": text})
            raise ParseError(text, KIND_INTEGER)

        negative = text.startswith("-")
        body = text[1:] if negative else text
        return cls(negative=negative, digits=tuple(mag.digits_from_text(body)))

    @classmethod
    def from_digits(cls, digits: Sequence[int], negative: bool = False) -> "Integer":
        """
        Конструирование из магнитуды с нормализацией.

        Старшие нули удаляются, знак нуля приводится к неотрицательному.
        """
        normalized = mag.normalize(digits)
        return cls(
            negative=negative and not mag.is_zero(normalized),
            digits=tuple(normalized),
        )

    @classmethod
    def zero(cls) -> "Integer":
        return cls(digits=mag.ZERO_DIGITS)

    @classmethod
    def one(cls) -> "Integer":
        return cls(digits=(1,))

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return mag.is_zero(self.digits)

    def is_negative(self) -> bool:
        return self.negative

    def is_one(self) -> bool:
        return not self.negative and self.digits == (1,)

    def sign(self) -> int:
        """
        Знак числа.

        Returns:
            -1 если n < 0, 0 если n == 0, 1 если n > 0
        """
        if self.is_zero():
            return 0
        return -1 if self.negative else 1

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "Integer") -> Ordering:
        """
        Сравнение: сначала по знаку, затем по магнитуде.

        Returns:
            Ordering.GREATER / EQUAL / LESS
        """
        if self.negative != other.negative:
            return Ordering.LESS if self.negative else Ordering.GREATER

        cmp = mag.compare_magnitudes(self.digits, other.digits)
        # Для отрицательных большая магнитуда означает меньшее число
        if self.negative:
            cmp = -cmp
        return Ordering(cmp)

    def __lt__(self, other: "Integer") -> bool:
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: "Integer") -> bool:
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: "Integer") -> bool:
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: "Integer") -> bool:
        return self.compare(other) is not Ordering.LESS

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "Integer":
        return Integer.from_digits(self.digits, negative=not self.negative)

    def abs(self) -> "Integer":
        return Integer(digits=self.digits)

    def add(self, other: "Integer") -> "Integer":
        """
        self + other.

        Одинаковые знаки: сумма магнитуд со знаком операндов.
        Разные знаки: большая магнитуда минус меньшая, знак операнда
        с большей магнитудой.
        """
        if self.negative == other.negative:
            return Integer.from_digits(
                mag.add_magnitudes(self.digits, other.digits), negative=self.negative
            )

        cmp = mag.compare_magnitudes(self.digits, other.digits)
        if cmp == 0:
            return Integer.zero()
        if cmp > 0:
            return Integer.from_digits(
                mag.subtract_magnitudes(self.digits, other.digits), negative=self.negative
            )
        return Integer.from_digits(
            mag.subtract_magnitudes(other.digits, self.digits), negative=other.negative
        )

    def sub(self, other: "Integer") -> "Integer":
        """self - other (сложение с противоположным)"""
        return self.add(other.negate())

    def mult(self, other: "Integer") -> "Integer":
        """
        self * other умножением столбиком.

        Отрицательный результат iff ровно один операнд отрицателен
        и ни один не равен нулю (ноль нормализуется в from_digits).
        """
        return Integer.from_digits(
            mag.multiply_magnitudes(self.digits, other.digits),
            negative=self.negative != other.negative,
        )

    def quotient_remainder(self, other: "Integer") -> Tuple["Integer", "Integer"]:
        """
        Деление в столбик: (частное, остаток).

        Частное округляется к нулю (знак по правилу умножения),
        остаток имеет знак делимого:
            self == other * quotient + remainder, |remainder| < |other|

        Raises:
            DivisionByZeroViolation: Если other == 0

        Examples:
            >>> q, r = Integer.parse("-7").quotient_remainder(Integer.parse("2"))
            >>> (str(q), str(r))
            ('-3', '-1')
        """
        if other.is_zero():
            raise DivisionByZeroViolation(f"Division by zero: {self.to_text()} / 0")

        q_digits, r_digits = mag.divmod_magnitudes(self.digits, other.digits)
        quotient = Integer.from_digits(q_digits, negative=self.negative != other.negative)
        remainder = Integer.from_digits(r_digits, negative=self.negative)
        return quotient, remainder

    def quotient(self, other: "Integer") -> "Integer":
        """Частное self / other (к нулю)"""
        return self.quotient_remainder(other)[0]

    def remainder(self, other: "Integer") -> "Integer":
        """Остаток self / other (знак делимого)"""
        return self.quotient_remainder(other)[1]

    def __neg__(self) -> "Integer":
        return self.negate()

    def __abs__(self) -> "Integer":
        return self.abs()

    def __add__(self, other: "Integer") -> "Integer":
        return self.add(other)

    def __sub__(self, other: "Integer") -> "Integer":
        return self.sub(other)

    def __mul__(self, other: "Integer") -> "Integer":
        return self.mult(other)

    # -------------------------------------------------------------------------
    # Текст
    # -------------------------------------------------------------------------

    def to_text(self) -> str:
        """Знак (если n < 0) и цифры, старший разряд первым"""
        text = mag.digits_to_text(self.digits)
        return f"-{text}" if self.negative else text

    def __str__(self) -> str:
        return self.to_text()

    def __int__(self) -> int:
        # Схема Горнера: str -> int ограничен sys.get_int_max_str_digits()
        value = 0
        for digit in reversed(self.digits):
            value = value * mag.DIGIT_BASE + digit
        return -value if self.negative else value
