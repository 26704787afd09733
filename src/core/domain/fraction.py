"""
Fraction — точная рациональная дробь

Immutable Pydantic модель: знак + пара неотрицательных Integer
(числитель, знаменатель), всегда в сокращённом виде.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. numerator и denominator неотрицательны (знак хранится отдельно)
3. gcd(numerator, denominator) == 1 (model_validator; reduce сокращает)
4. Ноль канонический: negative=False, 0/1
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.integer import Integer, Ordering
from src.core.logging_config import get_logger
from src.core.math.errors import KIND_FRACTION, DivisionByZeroViolation, ParseError

logger = get_logger(__name__)


# =============================================================================
# GCD (алгоритм Евклида)
# =============================================================================


def gcd(a: Integer, b: Integer) -> Integer:
    """
    Наибольший общий делитель |a| и |b|.

    Итеративный Евклид: gcd(small, big) = gcd(big mod small, small),
    останов когда остаток равен нулю.

    Args:
        a: Integer (знак игнорируется)
        b: Integer (знак игнорируется)

    Returns:
        Неотрицательный gcd; gcd(0, b) = |b|, gcd(0, 0) = 0

    Examples:
        >>> str(gcd(Integer.parse("12"), Integer.parse("-34")))
        '2'
    """
    small, big = a.abs(), b.abs()
    if small > big:
        small, big = big, small

    while not small.is_zero():
        big, small = small, big.remainder(small)

    return big


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Рациональная дробь произвольной точности.

    Immutable модель (frozen=True). Публичные фабрики (parse, reduce,
    from_integer) всегда возвращают сокращённую дробь.
    """

    negative: bool = Field(False, description="True только для дробей < 0")
    numerator: Integer = Field(..., description="|числитель|")
    denominator: Integer = Field(..., description="Знаменатель (> 0)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("numerator")
    @classmethod
    def validate_numerator(cls, v: Integer, info) -> Integer:
        """Числитель хранится как магнитуда; ноль не может быть отрицательным"""
        if v.is_negative():
            raise ValueError(f"numerator must be non-negative, got {v}")
        if v.is_zero() and info.data.get("negative"):
            raise ValueError("zero fraction cannot be negative")
        return v

    @field_validator("denominator")
    @classmethod
    def validate_denominator(cls, v: Integer, info) -> Integer:
        """Знаменатель строго положительный; у нуля знаменатель 1"""
        if v.sign() <= 0:
            raise ValueError(f"denominator must be positive, got {v}")
        numerator = info.data.get("numerator")
        if numerator is not None and numerator.is_zero() and not v.is_one():
            raise ValueError(f"zero fraction must have denominator 1, got {v}")
        return v

    @model_validator(mode="after")
    def validate_coprime(self) -> "Fraction":
        """gcd(numerator, denominator) == 1 для внешнего ввода (конструктор, JSON)"""
        if not self.is_zero() and not gcd(self.numerator, self.denominator).is_one():
            raise ValueError(
                f"fraction {self.numerator}/{self.denominator} is not in lowest terms"
            )
        return self

    @classmethod
    def _trusted(cls, negative: bool, numerator: Integer, denominator: Integer) -> "Fraction":
        """Сборка уже сокращённой дроби без повторного gcd в validators"""
        return cls.model_construct(
            negative=negative, numerator=numerator, denominator=denominator
        )

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def reduce(cls, numerator: Integer, denominator: Integer) -> "Fraction":
        """
        Сокращение пары numerator/denominator.

        Знак = XOR знаков; нулевой числитель даёт канонический ноль;
        равные магнитуды дают 1/1; иначе обе магнитуды делятся на gcd.

        Raises:
            DivisionByZeroViolation: Если denominator == 0
        """
        if denominator.is_zero():
            raise DivisionByZeroViolation(f"Fraction with zero denominator: {numerator}/0")

        if numerator.is_zero():
            return cls.zero()

        negative = numerator.is_negative() != denominator.is_negative()
        n_abs = numerator.abs()
        d_abs = denominator.abs()

        if n_abs == d_abs:
            return cls._trusted(negative, Integer.one(), Integer.one())

        divisor = gcd(n_abs, d_abs)
        return cls._trusted(negative, n_abs.quotient(divisor), d_abs.quotient(divisor))

    @classmethod
    def parse(cls, numerator: str, denominator: str) -> "Fraction":
        """
        Конструирование из двух целочисленных литералов.

        Raises:
            ParseError: Если литерал невалиден или знаменатель равен нулю

        Examples:
            >>> str(Fraction.parse("12", "34"))
            '6/17'
        """
        literal = f"{numerator}/{denominator}"
        try:
            n = Integer.parse(numerator)
            d = Integer.parse(denominator)
        except ParseError as e:
            logger.debug("%s is an invalid fraction", literal, extra={"literal": literal})
            raise ParseError(literal, KIND_FRACTION) from e

        if d.is_zero():
            logger.debug("%s is an invalid fraction", literal, extra={"literal": literal})
            raise ParseError(literal, KIND_FRACTION)

        return cls.reduce(n, d)

    @classmethod
    def from_integer(cls, value: Integer) -> "Fraction":
        return cls(negative=value.is_negative(), numerator=value.abs(), denominator=Integer.one())

    @classmethod
    def zero(cls) -> "Fraction":
        return cls(numerator=Integer.zero(), denominator=Integer.one())

    @classmethod
    def one(cls) -> "Fraction":
        return cls(numerator=Integer.one(), denominator=Integer.one())

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator.is_zero()

    def is_one(self) -> bool:
        return not self.negative and self.numerator.is_one() and self.denominator.is_one()

    def is_negative(self) -> bool:
        return self.negative

    def is_fraction(self) -> bool:
        """True если знаменатель != 1 (используется при форматировании)"""
        return not self.denominator.is_one()

    def is_integer(self) -> bool:
        return self.denominator.is_one()

    def is_canonical(self) -> bool:
        """Проверка gcd(numerator, denominator) == 1 (или канонический ноль)"""
        if self.is_zero():
            return not self.negative and self.denominator.is_one()
        return gcd(self.numerator, self.denominator).is_one()

    def signed_numerator(self) -> Integer:
        """Числитель со знаком дроби"""
        return self.numerator.negate() if self.negative else self.numerator

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "Fraction") -> Ordering:
        """Знак разности self - other"""
        diff = self.sub(other)
        if diff.is_zero():
            return Ordering.EQUAL
        return Ordering.LESS if diff.negative else Ordering.GREATER

    def __lt__(self, other: "Fraction") -> bool:
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: "Fraction") -> bool:
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: "Fraction") -> bool:
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: "Fraction") -> bool:
        return self.compare(other) is not Ordering.LESS

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "Fraction":
        if self.is_zero():
            return self
        return Fraction._trusted(not self.negative, self.numerator, self.denominator)

    def abs(self) -> "Fraction":
        return Fraction._trusted(False, self.numerator, self.denominator)

    def reciprocal(self) -> "Fraction":
        """
        1 / self: перестановка числителя и знаменателя, знак сохраняется.

        Raises:
            DivisionByZeroViolation: Если self == 0
        """
        if self.is_zero():
            raise DivisionByZeroViolation("Reciprocal of zero fraction")
        return Fraction._trusted(self.negative, self.denominator, self.numerator)

    def _common_numerators(self, other: "Fraction") -> Tuple[Integer, Integer, Integer]:
        """
        Приведение к общему знаменателю без произведения знаменателей.

        Returns:
            (числитель self, числитель other, общий знаменатель), числители со знаком
        """
        if self.denominator == other.denominator:
            return self.signed_numerator(), other.signed_numerator(), self.denominator

        # lcm = den_a * (den_b / gcd): промежуточные значения меньше den_a * den_b
        divisor = gcd(self.denominator, other.denominator)
        self_scale = other.denominator.quotient(divisor)
        other_scale = self.denominator.quotient(divisor)
        return (
            self.signed_numerator().mult(self_scale),
            other.signed_numerator().mult(other_scale),
            self.denominator.mult(self_scale),
        )

    def add(self, other: "Fraction") -> "Fraction":
        """self + other с последующим сокращением"""
        a, b, common = self._common_numerators(other)
        return Fraction.reduce(a.add(b), common)

    def sub(self, other: "Fraction") -> "Fraction":
        """self - other (сложение с противоположным)"""
        return self.add(other.negate())

    def mult(self, other: "Fraction") -> "Fraction":
        """
        self * other: числители и знаменатели перемножаются независимо.

        Отрицательный результат iff ровно один операнд отрицателен
        и ни один числитель не равен нулю.
        """
        numerator = self.numerator.mult(other.numerator)
        if self.negative != other.negative:
            numerator = numerator.negate()
        return Fraction.reduce(numerator, self.denominator.mult(other.denominator))

    def div(self, other: "Fraction") -> "Fraction":
        """
        self / other = self * (1 / other).

        Raises:
            DivisionByZeroViolation: Если other == 0
        """
        if other.is_zero():
            raise DivisionByZeroViolation(f"Division by zero fraction: {self.to_text()} / 0")
        return self.mult(other.reciprocal())

    def __neg__(self) -> "Fraction":
        return self.negate()

    def __abs__(self) -> "Fraction":
        return self.abs()

    def __add__(self, other: "Fraction") -> "Fraction":
        return self.add(other)

    def __sub__(self, other: "Fraction") -> "Fraction":
        return self.sub(other)

    def __mul__(self, other: "Fraction") -> "Fraction":
        return self.mult(other)

    def __truediv__(self, other: "Fraction") -> "Fraction":
        return self.div(other)

    # -------------------------------------------------------------------------
    # Текст
    # -------------------------------------------------------------------------

    def to_text(self) -> str:
        """
        "N" если знаменатель 1, иначе "N/D"; с ведущим "-" для отрицательных.
        """
        text = self.numerator.to_text()
        if self.is_fraction():
            text = f"{text}/{self.denominator.to_text()}"
        return f"-{text}" if self.negative else text

    def __str__(self) -> str:
        return self.to_text()
