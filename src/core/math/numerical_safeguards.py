"""
Numerical Safeguards — Exact Arithmetic Primitives

Модуль обеспечивает точную арифметику для конверсии дробей между системами счисления:
- Точный разбор десятичных значений в Fraction (без бинарного шума float)
- NaN/Inf детекция для входных значений
- Ограничение порядка десятичной записи (защита от 10**huge)
- Проверка принадлежности полуинтервалу [low, high)
- Восстановление значения из последовательности цифр (Σ d_i · base^-i)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Десятичный вход всегда превращается в точную рациональную дробь
2. float читается через repr (то, что ввёл пользователь), а не через бинарное представление
3. NaN/Inf никогда не проходят дальше разбора
4. Десятичное отображение Fraction усекается, а не округляется вверх: x < 1 → to_decimal(x) < 1
5. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from fractions import Fraction
from typing import Final, Iterable

# =============================================================================
# ОГРАНИЧЕНИЯ ВХОДА
# =============================================================================

# Максимальный модуль десятичного порядка (1e-1000 допустимо, 1e-1001 нет)
# Fraction(Decimal("1e-999999999")) строит 10**999999999 и фактически зависает
MAX_DECIMAL_EXPONENT: Final[int] = 1000


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ТОЧНЫЙ РАЗБОР
# =============================================================================


def to_exact_fraction(value: str | int | float | Decimal | Fraction) -> Fraction:
    """
    Преобразование десятичного значения в точную рациональную дробь.

    float разбирается через repr(value): 0.1 → Fraction(1, 10), а не
    Fraction(3602879701896397, 36028797018963968).

    Args:
        value: Значение (str, int, float, Decimal или Fraction)

    Returns:
        Точная дробь

    Raises:
        ValueError: Если значение не число, NaN/Inf, bool или его порядок
            превышает MAX_DECIMAL_EXPONENT

    Examples:
        >>> to_exact_fraction("0.25")
        Fraction(1, 4)
        >>> to_exact_fraction(0.1)
        Fraction(1, 10)
        >>> to_exact_fraction(Decimal("0.5"))
        Fraction(1, 2)
    """
    if isinstance(value, bool):
        raise ValueError(f"bool is not a decimal value: {value!r}")

    if isinstance(value, Fraction):
        return value

    if isinstance(value, int):
        return Fraction(value)

    if isinstance(value, float):
        if not is_valid_float(value):
            raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")
        return Fraction(repr(value))

    if isinstance(value, str):
        try:
            value = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"not a valid decimal number: {value!r}") from None

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"value must be finite (not NaN/Inf), got {value}")
        exponent = value.as_tuple().exponent
        if abs(exponent) > MAX_DECIMAL_EXPONENT:
            raise ValueError(
                f"decimal exponent {exponent} exceeds the supported limit "
                f"of ±{MAX_DECIMAL_EXPONENT}"
            )
        return Fraction(value)

    raise ValueError(f"unsupported value type: {type(value).__name__}")


def to_decimal(value: str | int | float | Decimal | Fraction) -> Decimal:
    """
    Десятичное представление входного значения для отображения.

    Fraction с конечным десятичным разложением в пределах точности контекста
    переводится точно, иначе усекается (ROUND_DOWN): значение меньше 1
    никогда не округляется до 1.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, Fraction):
        with localcontext() as ctx:
            ctx.rounding = ROUND_DOWN
            return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(str(value).strip())


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_half_open(value: Fraction, name: str, low: Fraction, high: Fraction) -> None:
    """
    Валидация, что значение в полуинтервале [low, high).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        low: Нижняя граница (включительно)
        high: Верхняя граница (исключительно)

    Raises:
        ValueError: Если value вне [low, high)
    """
    if value < low:
        raise ValueError(f"{name} must be >= {low}, got {value}")

    if value >= high:
        raise ValueError(f"{name} must be < {high}, got {value}")


# =============================================================================
# ВОССТАНОВЛЕНИЕ
# =============================================================================


def digits_to_fraction(digits: Iterable[int], base: int) -> Fraction:
    """
    Восстановление значения из дробных цифр: Σ d_i · base^-i.

    Args:
        digits: Цифры после точки, старшая первой
        base: Основание системы счисления

    Returns:
        Точное значение как Fraction

    Examples:
        >>> digits_to_fraction([0, 1], 2)
        Fraction(1, 4)
        >>> digits_to_fraction([30], 60)
        Fraction(1, 2)
    """
    total = Fraction(0)
    scale = Fraction(1)
    for digit in digits:
        scale /= base
        total += digit * scale
    return total
