"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Точный разбор десятичных значений в Fraction
2. NaN/Inf детекцию
3. Проверку полуинтервала
4. Восстановление значения из цифр
5. Усечение десятичного отображения и лимит порядка
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from src.core.math.numerical_safeguards import (
    MAX_DECIMAL_EXPONENT,
    digits_to_fraction,
    is_valid_float,
    to_decimal,
    to_exact_fraction,
    validate_half_open,
)

# =============================================================================
# ТЕСТЫ ТОЧНОГО РАЗБОРА
# =============================================================================


class TestToExactFraction:
    """Тесты для to_exact_fraction"""

    def test_decimal_string(self) -> None:
        """Десятичная строка переводится точно"""
        assert to_exact_fraction("0.25") == Fraction(1, 4)
        assert to_exact_fraction("0.1") == Fraction(1, 10)
        assert to_exact_fraction("1e-3") == Fraction(1, 1000)

    def test_float_uses_repr(self) -> None:
        """float читается через repr, без бинарного шума"""
        assert to_exact_fraction(0.1) == Fraction(1, 10)
        assert to_exact_fraction(0.7) == Fraction(7, 10)
        assert to_exact_fraction(0.1) != Fraction(0.1)

    def test_other_types(self) -> None:
        """int, Decimal и Fraction поддерживаются"""
        assert to_exact_fraction(0) == Fraction(0)
        assert to_exact_fraction(Decimal("0.5")) == Fraction(1, 2)
        assert to_exact_fraction(Fraction(2, 3)) == Fraction(2, 3)

    def test_invalid_text_rejected(self) -> None:
        """Нечисловой текст отвергается"""
        with pytest.raises(ValueError, match="not a valid decimal"):
            to_exact_fraction("zero point five")

    def test_nan_inf_rejected(self) -> None:
        """NaN/Inf отвергаются для float, Decimal и строк"""
        with pytest.raises(ValueError, match="NaN/Inf"):
            to_exact_fraction(float("nan"))
        with pytest.raises(ValueError, match="NaN/Inf"):
            to_exact_fraction(float("-inf"))
        with pytest.raises(ValueError, match="NaN/Inf"):
            to_exact_fraction(Decimal("Infinity"))
        with pytest.raises(ValueError, match="NaN/Inf"):
            to_exact_fraction("nan")

    def test_bool_and_unknown_types_rejected(self) -> None:
        """bool и прочие типы не являются десятичными значениями"""
        with pytest.raises(ValueError, match="bool"):
            to_exact_fraction(False)
        with pytest.raises(ValueError, match="unsupported"):
            to_exact_fraction([0.5])


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_preserves_typed_text(self) -> None:
        assert to_decimal("0.250") == Decimal("0.250")
        assert to_decimal(0.1) == Decimal("0.1")

    def test_fraction(self) -> None:
        assert to_decimal(Fraction(1, 8)) == Decimal("0.125")

    def test_fraction_truncated_not_rounded_up(self) -> None:
        """Значение чуть меньше 1 не округляется до 1"""
        result = to_decimal(Fraction(10**30 - 1, 10**30))
        assert result < 1
        assert str(result) == "0." + "9" * 28

    def test_repeating_fraction_truncated(self) -> None:
        assert to_decimal(Fraction(2, 3)) == Decimal("0." + "6" * 28)


class TestExponentLimit:
    """Тесты лимита десятичного порядка"""

    def test_limit_boundary_accepted(self) -> None:
        assert to_exact_fraction(f"1e-{MAX_DECIMAL_EXPONENT}") == Fraction(1, 10**MAX_DECIMAL_EXPONENT)

    @pytest.mark.parametrize("text", ["1e-999999999", "1e999999999", f"1e-{MAX_DECIMAL_EXPONENT + 1}"])
    def test_huge_exponent_rejected(self, text) -> None:
        with pytest.raises(ValueError, match="exceeds the supported limit"):
            to_exact_fraction(text)

    def test_decimal_instance_checked(self) -> None:
        with pytest.raises(ValueError, match="exceeds the supported limit"):
            to_exact_fraction(Decimal("5E-999999999"))


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateHalfOpen:
    """Тесты для validate_half_open"""

    def test_inside_range(self) -> None:
        validate_half_open(Fraction(0), "x", Fraction(0), Fraction(1))
        validate_half_open(Fraction(999, 1000), "x", Fraction(0), Fraction(1))

    def test_upper_bound_excluded(self) -> None:
        with pytest.raises(ValueError, match="x must be < 1"):
            validate_half_open(Fraction(1), "x", Fraction(0), Fraction(1))

    def test_below_lower_bound(self) -> None:
        with pytest.raises(ValueError, match="x must be >= 0"):
            validate_half_open(Fraction(-1, 10), "x", Fraction(0), Fraction(1))


# =============================================================================
# ТЕСТЫ ВОССТАНОВЛЕНИЯ
# =============================================================================


class TestDigitsToFraction:
    """Тесты для digits_to_fraction"""

    def test_reconstruction(self) -> None:
        assert digits_to_fraction([1], 2) == Fraction(1, 2)
        assert digits_to_fraction([0, 1], 2) == Fraction(1, 4)
        assert digits_to_fraction([12], 16) == Fraction(3, 4)
        assert digits_to_fraction([], 10) == Fraction(0)


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_is_valid_float(self) -> None:
        assert is_valid_float(0.5)
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
