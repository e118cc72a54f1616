"""
Radix — Конверсия дробей [0, 1) в произвольную систему счисления

Модуль переводит десятичную дробь из полуинтервала [0, 1) в последовательность
дробных цифр в целевом основании (2, 8, 16, 60, ...):
- Повторное умножение остатка на основание с выделением целой части
- Точная рациональная арифметика (Fraction) вместо float
- Ограничение длины разложения (precision cap) для бесконечных дробей
- Типизированные ошибки для невалидного входа и основания

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра удовлетворяет 0 <= digit < base
2. Нулевой остаток → разложение точное: Σ d_i · base^-i == value
3. Усечённое разложение отличается от value меньше чем на base^-len(digits)
4. Длина разложения <= max_digits
5. value == 0 → [0] для любого основания

АЛГОРИТМ:
    remainder = value
    repeat:
        product = remainder * base
        digit = floor(product)
        remainder = product - digit
    until remainder == 0 or len(digits) == max_digits
"""

from decimal import Decimal
from fractions import Fraction
from typing import Final, Iterable, NamedTuple

from src.core.math.numerical_safeguards import (
    digits_to_fraction,
    to_exact_fraction,
    validate_half_open,
)

# =============================================================================
# ПАРАМЕТРЫ КОНВЕРСИИ
# =============================================================================

# Максимальное число дробных цифр по умолчанию (precision cap)
# Разложение длиннее усекается, см. ConversionResult.truncated
DEFAULT_MAX_DIGITS: Final[int] = 8

# Минимально допустимое основание
MIN_BASE: Final[int] = 2

FractionalInput = str | int | float | Decimal | Fraction


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionError(ValueError):
    """Базовая ошибка конверсии."""


class InvalidInput(ConversionError):
    """
    Значение вне [0, 1) или не является десятичным числом.

    Атрибут raw хранит исходное значение для отчёта.
    """

    def __init__(self, raw: object, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid input {raw!r}: {reason}")


class InvalidBase(ConversionError):
    """Основание меньше MIN_BASE или не целое число."""

    def __init__(self, base: object):
        self.base = base
        super().__init__(f"Invalid base {base!r}: base must be an integer >= {MIN_BASE}")


class PrecisionLimitReached(ConversionError):
    """
    Разложение усечено по max_digits до получения нулевого остатка.

    Информационное событие: convert() возвращает усечённые цифры.
    Поднимается только из convert_detailed(..., strict=True).
    """

    def __init__(self, digits: list[int], max_digits: int):
        self.digits = digits
        self.max_digits = max_digits
        super().__init__(
            f"Expansion truncated after {max_digits} digits "
            f"(value has no finite representation within the precision cap)"
        )


# =============================================================================
# RESULT TYPES
# =============================================================================


class ConversionResult(NamedTuple):
    """
    Результат конверсии.

    Attributes:
        digits: Дробные цифры, старшая первой
        truncated: True если сработал precision cap
    """

    digits: list[int]
    truncated: bool


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_base(base: object) -> int:
    """
    Проверка основания системы счисления.

    Args:
        base: Основание (int >= 2)

    Returns:
        base

    Raises:
        InvalidBase: Если base не int (bool не допускается) или base < 2
    """
    if isinstance(base, bool) or not isinstance(base, int) or base < MIN_BASE:
        raise InvalidBase(base)
    return base


def parse_fractional_value(value: FractionalInput) -> Fraction:
    """
    Разбор и проверка дробного значения.

    Args:
        value: Десятичное значение в [0, 1)

    Returns:
        Точная дробь

    Raises:
        InvalidInput: Если значение не число, NaN/Inf или вне [0, 1)

    Examples:
        >>> parse_fractional_value("0.75")
        Fraction(3, 4)
        >>> parse_fractional_value(1.0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidInput: ...
    """
    try:
        exact = to_exact_fraction(value)
        validate_half_open(exact, "value", Fraction(0), Fraction(1))
    except ValueError as e:
        raise InvalidInput(value, str(e)) from None
    return exact


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def convert_detailed(
    value: FractionalInput,
    base: int,
    max_digits: int = DEFAULT_MAX_DIGITS,
    strict: bool = False,
) -> ConversionResult:
    """
    Конверсия дроби с признаком усечения.

    Args:
        value: Десятичное значение в [0, 1)
        base: Целевое основание (>= 2)
        max_digits: Максимум дробных цифр (precision cap, >= 1)
        strict: Поднимать PrecisionLimitReached вместо возврата усечённых цифр

    Returns:
        ConversionResult(digits, truncated)

    Raises:
        InvalidBase: Если base < 2
        InvalidInput: Если value вне [0, 1)
        PrecisionLimitReached: Если strict=True и разложение усечено
        ValueError: Если max_digits < 1
    """
    validate_base(base)
    if max_digits < 1:
        raise ValueError(f"max_digits must be >= 1, got {max_digits}")
    remainder = parse_fractional_value(value)

    digits: list[int] = []
    while len(digits) < max_digits:
        product = remainder * base
        digit = product.numerator // product.denominator
        digits.append(digit)
        remainder = product - digit

        if remainder == 0:
            return ConversionResult(digits, False)

    if strict:
        raise PrecisionLimitReached(digits, max_digits)
    return ConversionResult(digits, True)


def convert(
    value: FractionalInput,
    base: int,
    max_digits: int = DEFAULT_MAX_DIGITS,
) -> list[int]:
    """
    Конверсия десятичной дроби [0, 1) в цифры целевого основания.

    Длинные и бесконечные разложения усекаются до max_digits цифр.

    Examples:
        >>> convert(0.5, 2)
        [1]
        >>> convert(0.25, 2)
        [0, 1]
        >>> convert("0.8", 16)
        [12, 12, 12, 12, 12, 12, 12, 12]
        >>> convert(0, 60)
        [0]
    """
    return convert_detailed(value, base, max_digits).digits


def digits_to_value(digits: Iterable[int], base: int) -> Fraction:
    """
    Обратное преобразование: цифры base → точное значение.

    Raises:
        InvalidBase: Если base < 2
        ValueError: Если какая-либо цифра вне [0, base)
    """
    validate_base(base)
    digits = list(digits)
    for digit in digits:
        if not 0 <= digit < base:
            raise ValueError(f"digit {digit} out of range for base {base}")
    return digits_to_fraction(digits, base)
