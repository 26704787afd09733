"""
Complex — комплексное число с рациональными компонентами

Immutable Pydantic модель: упорядоченная пара Fraction (real, imaginary).
Арифметика сводится к операциям над дробями; деление через сопряжённое.

Текстовый формат (to_text):
    0, 12, -1/2                 (только вещественная часть)
    i, -3i, (2/3)i              (только мнимая часть)
    2+3i, -1/2-(3/4)i, 6/17+(1/2)i
"""

from typing import List

from pydantic import BaseModel, Field

from src.core.domain.fraction import Fraction
from src.core.logging_config import get_logger
from src.core.math.errors import KIND_COMPLEX, DivisionByZeroViolation, ParseError

logger = get_logger(__name__)


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число real + imaginary * i.

    Immutable модель (frozen=True). Каждая компонента в каноническом виде Fraction.
    """

    real: Fraction = Field(..., description="Вещественная часть")
    imaginary: Fraction = Field(..., description="Мнимая часть (коэффициент при i)")

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def parse(
        cls,
        real_numerator: str,
        real_denominator: str,
        imaginary_numerator: str,
        imaginary_denominator: str,
    ) -> "Complex":
        """
        Конструирование из четырёх целочисленных литералов.

        Литералы уже выделены внешним разборщиком комплексной записи.
        Обе дроби разбираются всегда, чтобы диагностика покрывала обе ошибки.

        Raises:
            ParseError: Если хотя бы одна из дробей невалидна

        Examples:
            >>> str(Complex.parse("12", "34", "1", "2"))
            '6/17+(1/2)i'
        """
        errors: List[ParseError] = []
        parts: List[Fraction] = []
        for numerator, denominator in (
            (real_numerator, real_denominator),
            (imaginary_numerator, imaginary_denominator),
        ):
            try:
                parts.append(Fraction.parse(numerator, denominator))
            except ParseError as e:
                errors.append(e)

        if errors:
            literal = (
                f"{real_numerator}/{real_denominator} "
                f"{imaginary_numerator}/{imaginary_denominator}"
            )
            logger.debug(
                "%s is an invalid complex",
                literal,
                extra={"literal": literal, "failed_parts": len(errors)},
            )
            raise ParseError(literal, KIND_COMPLEX) from errors[0]

        real, imaginary = parts
        return cls(real=real, imaginary=imaginary)

    @classmethod
    def from_fraction(cls, real: Fraction) -> "Complex":
        return cls(real=real, imaginary=Fraction.zero())

    @classmethod
    def zero(cls) -> "Complex":
        return cls(real=Fraction.zero(), imaginary=Fraction.zero())

    @classmethod
    def one(cls) -> "Complex":
        return cls(real=Fraction.one(), imaginary=Fraction.zero())

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """Обе компоненты равны нулю"""
        return self.real.is_zero() and self.imaginary.is_zero()

    def is_one(self) -> bool:
        """Мнимая часть ноль, вещественная ровно 1"""
        return self.imaginary.is_zero() and self.real.is_one()

    def is_real(self) -> bool:
        return self.imaginary.is_zero()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def conjugate(self) -> "Complex":
        """(real, -imaginary)"""
        return Complex(real=self.real, imaginary=self.imaginary.negate())

    def negate(self) -> "Complex":
        return Complex(real=self.real.negate(), imaginary=self.imaginary.negate())

    def add(self, other: "Complex") -> "Complex":
        return Complex(
            real=self.real.add(other.real),
            imaginary=self.imaginary.add(other.imaginary),
        )

    def sub(self, other: "Complex") -> "Complex":
        return Complex(
            real=self.real.sub(other.real),
            imaginary=self.imaginary.sub(other.imaginary),
        )

    def mult(self, other: "Complex") -> "Complex":
        """
        (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        """
        real = self.real.mult(other.real).sub(self.imaginary.mult(other.imaginary))
        imaginary = self.real.mult(other.imaginary).add(self.imaginary.mult(other.real))
        return Complex(real=real, imaginary=imaginary)

    def div(self, other: "Complex") -> "Complex":
        """
        self / other через сопряжённое.

        scale = (other * conj(other)).real = |other|^2 > 0 для other != 0;
        мнимая часть other * conj(other) всегда ноль и отбрасывается.
        Результат = (self * conj(other)) / scale покомпонентно.

        Raises:
            DivisionByZeroViolation: Если other == 0
        """
        if other.is_zero():
            raise DivisionByZeroViolation(f"Division by zero complex: {self.to_text()} / 0")

        conj = other.conjugate()
        scale = other.mult(conj).real
        product = self.mult(conj)
        return Complex(real=product.real.div(scale), imaginary=product.imaginary.div(scale))

    def __neg__(self) -> "Complex":
        return self.negate()

    def __add__(self, other: "Complex") -> "Complex":
        return self.add(other)

    def __sub__(self, other: "Complex") -> "Complex":
        return self.sub(other)

    def __mul__(self, other: "Complex") -> "Complex":
        return self.mult(other)

    def __truediv__(self, other: "Complex") -> "Complex":
        return self.div(other)

    # -------------------------------------------------------------------------
    # Текст
    # -------------------------------------------------------------------------

    def to_text(self) -> str:
        """
        Каноническая запись.

        - Обе части ноль → "0"
        - Вещественная часть печатается, если не ноль
        - Мнимая часть (если не ноль): "+" при ненулевой вещественной и
          положительной мнимой, "-" при отрицательной мнимой;
          дробный коэффициент в скобках, коэффициент 1 опускается, затем "i"
        """
        if self.imaginary.is_zero():
            return self.real.to_text()

        text = "" if self.real.is_zero() else self.real.to_text()

        if self.imaginary.is_negative():
            text += "-"
        elif text:
            text += "+"

        magnitude = self.imaginary.abs()
        if magnitude.is_fraction():
            text += f"({magnitude.to_text()})"
        elif not magnitude.is_one():
            text += magnitude.to_text()

        return f"{text}i"

    def __str__(self) -> str:
        return self.to_text()
