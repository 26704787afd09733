"""
Digits — арифметика над десятичными магнитудами

Магнитуда — последовательность десятичных цифр в порядке little-endian
(младший разряд первым). Знак здесь не хранится: знаковая логика живёт
в Integer, этот модуль работает только с |n|.

Алгоритмы намеренно школьные:
- сложение/вычитание с переносом: O(n + m)
- умножение столбиком (multiply-accumulate): O(n * m)
- деление в столбик повторным вычитанием сдвинутого делителя: O(n * m * BASE)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат каждой функции нормализован: нет старших нулей, минимум одна цифра
2. Входные последовательности никогда не модифицируются
3. Ноль представлен как [0]
"""

from typing import Final, List, Sequence, Tuple

from src.core.math.errors import ContractViolation, DivisionByZeroViolation

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Основание системы счисления (одна цифра на позицию)
DIGIT_BASE: Final[int] = 10

# Магнитуда нуля
ZERO_DIGITS: Final[Tuple[int, ...]] = (0,)

Digits = List[int]


# =============================================================================
# НОРМАЛИЗАЦИЯ И СРАВНЕНИЕ
# =============================================================================


def normalize(digits: Sequence[int]) -> Digits:
    """
    Удаление старших нулей.

    Args:
        digits: Цифры little-endian (может быть пустой)

    Returns:
        Новый список без старших нулей; пустой вход → [0]

    Examples:
        >>> normalize([3, 2, 0, 0])
        [3, 2]
        >>> normalize([0, 0])
        [0]
    """
    length = len(digits)
    while length > 1 and digits[length - 1] == 0:
        length -= 1
    if length == 0:
        return [0]
    return list(digits[:length])


def is_zero(digits: Sequence[int]) -> bool:
    """Магнитуда равна нулю (ожидается нормализованный вход)."""
    return len(digits) == 1 and digits[0] == 0


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение |a| и |b|.

    Сначала по количеству цифр, затем по цифрам от старшего разряда.

    Returns:
        1 если |a| > |b|, 0 если равны, -1 если |a| < |b|
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1

    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    |a| + |b| с переносом.

    Returns:
        Нормализованная сумма
    """
    result: Digits = []
    carry = 0
    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE

    if carry:
        result.append(carry)

    return normalize(result)


def subtract_magnitudes(big: Sequence[int], small: Sequence[int]) -> Digits:
    """
    |big| - |small| с заёмом.

    Args:
        big: Уменьшаемое, |big| >= |small|
        small: Вычитаемое

    Returns:
        Нормализованная разность

    Raises:
        ContractViolation: Если |big| < |small|
    """
    if compare_magnitudes(big, small) < 0:
        raise ContractViolation("subtract_magnitudes requires |big| >= |small|")

    result: Digits = []
    borrow = 0
    for i in range(len(big)):
        diff = big[i] - borrow
        if i < len(small):
            diff -= small[i]
        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return normalize(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    |a| * |b| умножением столбиком.

    Для каждой цифры a[i] проходим по b, накапливая произведение
    в позиции i + j с переносом. Длина результата не превышает len(a) + len(b).

    Returns:
        Нормализованное произведение
    """
    if is_zero(a) or is_zero(b):
        return [0]

    result = [0] * (len(a) + len(b))
    for i, a_digit in enumerate(a):
        carry = 0
        for j, b_digit in enumerate(b):
            acc = a_digit * b_digit + result[i + j] + carry
            result[i + j] = acc % DIGIT_BASE
            carry = acc // DIGIT_BASE
        # Позиция i + len(b) ещё не затронута предыдущими строками
        result[i + len(b)] = carry

    return normalize(result)


def shift_magnitude(digits: Sequence[int], places: int) -> Digits:
    """
    |digits| * BASE^places (дописывание нулей в младшие разряды).

    Raises:
        ValueError: Если places < 0
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    if is_zero(digits):
        return [0]
    return [0] * places + list(digits)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divmod_magnitudes(
    dividend: Sequence[int], divisor: Sequence[int]
) -> Tuple[Digits, Digits]:
    """
    Деление в столбик повторным вычитанием.

    Для каждой позиции от старшей к младшей делитель сдвигается на
    BASE^position и вычитается из текущего остатка, пока не превысит его.
    Количество вычитаний — цифра частного в этой позиции (всегда < BASE).

    Args:
        dividend: |делимое|
        divisor: |делитель|, не ноль

    Returns:
        (частное, остаток), оба нормализованы, остаток < делителя

    Raises:
        DivisionByZeroViolation: Если делитель равен нулю

    Examples:
        >>> divmod_magnitudes([0, 3], [2])  # 30 / 2
        ([5, 1], [0])
    """
    if is_zero(divisor):
        raise DivisionByZeroViolation("Division by zero: divisor magnitude is 0")

    if compare_magnitudes(dividend, divisor) < 0:
        return [0], normalize(dividend)

    remainder = normalize(dividend)
    quotient_msd_first: Digits = []

    for position in range(len(remainder) - len(divisor), -1, -1):
        shifted = shift_magnitude(divisor, position)
        count = 0
        while compare_magnitudes(remainder, shifted) >= 0:
            remainder = subtract_magnitudes(remainder, shifted)
            count += 1
        quotient_msd_first.append(count)

    quotient_msd_first.reverse()
    return normalize(quotient_msd_first), remainder


# =============================================================================
# ТЕКСТ
# =============================================================================


def digits_from_text(text: str) -> Digits:
    """
    Цифры little-endian из строки десятичных цифр (старший разряд первым).

    Предполагается, что text уже прошёл проверку грамматики.
    """
    return normalize([ord(ch) - ord("0") for ch in reversed(text)])


def digits_to_text(digits: Sequence[int]) -> str:
    """Строка цифр, старший разряд первым."""
    return "".join(chr(ord("0") + d) for d in reversed(digits))
