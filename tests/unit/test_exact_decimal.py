"""
Тесты для Exact Decimal: точная арифметика поверх decimal.Decimal

Проверяет:
1. Конверсию входов (int, float, str, Decimal) без float-артефактов
2. Точность сложения и умножения
3. Деление с одним округлением (включая sticky guard-цифру)
4. Каноническое строковое представление
"""

import decimal
from decimal import Decimal

import pytest

from src.core.math.arithmetic_config import ArithmeticConfig
from src.core.math.exact_decimal import (
    canonical_str,
    divide,
    exact_add,
    exact_multiply,
    to_decimal,
)

# =============================================================================
# ТЕСТЫ КОНВЕРСИИ
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_decimal_returned_as_is(self) -> None:
        """Decimal возвращается тем же объектом"""
        value = Decimal("1.25")
        assert to_decimal(value) is value

    def test_int_exact(self) -> None:
        """int конвертируется точно, включая большие значения"""
        assert to_decimal(42) == Decimal(42)
        assert to_decimal(10**30) == Decimal("1E+30")
        assert to_decimal(-7) == Decimal(-7)

    def test_float_uses_shortest_repr(self) -> None:
        """float конвертируется через repr, а не через двоичное разложение"""
        assert to_decimal(0.1) == Decimal("0.1")
        assert str(to_decimal(10.1)) == "10.1"
        assert to_decimal(-0.6) == Decimal("-0.6")

    def test_numeric_strings(self) -> None:
        """Целые, дробные, экспоненциальные и высокоточные строки"""
        assert to_decimal("4") == Decimal(4)
        assert to_decimal("1.5") == Decimal("1.5")
        assert to_decimal("1e+18") == Decimal(10**18)
        assert str(to_decimal("1.0000000000000001")) == "1.0000000000000001"

    def test_surrounding_whitespace_ignored(self) -> None:
        """Пробелы по краям строки отбрасываются"""
        assert to_decimal("  5 ") == Decimal(5)

    def test_invalid_strings_raise(self) -> None:
        """Пустые, нечисловые строки и разделители '_' отвергаются"""
        with pytest.raises(decimal.InvalidOperation):
            to_decimal("")
        with pytest.raises(decimal.InvalidOperation):
            to_decimal("abc")
        with pytest.raises(decimal.InvalidOperation):
            to_decimal("1_000")

    def test_nan_string_not_raised(self) -> None:
        """'NaN' парсится в NaN (отсев выполняет валидатор)"""
        assert to_decimal("NaN").is_nan()
        assert to_decimal("Infinity").is_infinite()

    def test_unsupported_types(self) -> None:
        """bool, None и контейнеры не поддерживаются"""
        with pytest.raises(TypeError):
            to_decimal(True)
        with pytest.raises(TypeError):
            to_decimal(None)
        with pytest.raises(TypeError):
            to_decimal([1])

    def test_independent_of_global_context(self) -> None:
        """Глобальная точность не обрезает входные цифры"""
        with decimal.localcontext() as ctx:
            ctx.prec = 5
            assert str(to_decimal("1.0000000000000001")) == "1.0000000000000001"


# =============================================================================
# ТЕСТЫ ТОЧНЫХ ОПЕРАЦИЙ
# =============================================================================


class TestExactOperations:
    """Тесты exact_add / exact_multiply"""

    def test_add_keeps_all_digits(self) -> None:
        """Сложение не теряет точность"""
        result = exact_add(Decimal("1e+18"), Decimal("1e-18"))
        assert result == Decimal("1000000000000000000.000000000000000001")

    def test_multiply_keeps_all_digits(self) -> None:
        """Произведение с 49 значащими цифрами не округляется"""
        result = exact_multiply(
            exact_multiply(Decimal("1.0000000000000001"), Decimal("2.0000000000000002")),
            Decimal("3.0000000000000003"),
        )
        assert result == Decimal("6.000000000000001800000000000000180000000000000006")

    def test_independent_of_global_context(self) -> None:
        """Глобальная точность не влияет на результат"""
        with decimal.localcontext() as ctx:
            ctx.prec = 3
            assert exact_add(Decimal("1.2345"), Decimal("1")) == Decimal("2.2345")
            assert exact_multiply(Decimal("1.111"), Decimal("3")) == Decimal("3.333")


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestDivide:
    """Тесты divide: одно округление до decimal_places знаков"""

    def test_exact_quotient(self) -> None:
        """Конечное частное возвращается без хвостовых нулей"""
        assert str(divide(Decimal("7.5"), Decimal(3))) == "2.5"
        assert str(divide(Decimal("6.0000000000000006"), Decimal(3))) == "2.0000000000000002"

    def test_default_twenty_places_half_up(self) -> None:
        """По умолчанию 20 дробных знаков, ROUND_HALF_UP"""
        assert divide(Decimal(1), Decimal(3)) == Decimal("0.33333333333333333333")
        assert divide(Decimal(2), Decimal(3)) == Decimal("0.66666666666666666667")

    def test_negative_quotient(self) -> None:
        """Знак сохраняется"""
        assert divide(Decimal(-3), Decimal(5)) == Decimal("-0.6")
        assert divide(Decimal(-2), Decimal(3)) == Decimal("-0.66666666666666666667")

    def test_large_integer_quotient(self) -> None:
        """Целая часть не переводится в экспоненциальную запись"""
        result = divide(Decimal("6e+18"), Decimal(3))
        assert result == Decimal("2e+18")
        assert str(result) == "2000000000000000000"

    def test_custom_rounding_tie(self) -> None:
        """Точная середина округляется по заданному режиму"""
        half_even = ArithmeticConfig(decimal_places=2, rounding=decimal.ROUND_HALF_EVEN)
        half_up = ArithmeticConfig(decimal_places=2, rounding=decimal.ROUND_HALF_UP)
        assert divide(Decimal("0.25"), Decimal(2), half_even) == Decimal("0.12")
        assert divide(Decimal("0.25"), Decimal(2), half_up) == Decimal("0.13")

    def test_sticky_guard_digit(self) -> None:
        """Чуть больше середины не считается ничьей (нет двойного округления)"""
        half_even = ArithmeticConfig(decimal_places=2, rounding=decimal.ROUND_HALF_EVEN)
        assert divide(Decimal("1.0000001"), Decimal(8), half_even) == Decimal("0.13")

        down = ArithmeticConfig(decimal_places=2, rounding=decimal.ROUND_DOWN)
        up = ArithmeticConfig(decimal_places=2, rounding=decimal.ROUND_UP)
        assert divide(Decimal("1.0000001"), Decimal(1000), down) == Decimal("0")
        assert divide(Decimal("1.0000001"), Decimal(1000), up) == Decimal("0.01")

    def test_negative_zero_folded(self) -> None:
        """Отрицательный ноль после округления не возвращается"""
        config = ArithmeticConfig(decimal_places=2)
        result = divide(Decimal(-1), Decimal(1000), config)
        assert result == 0
        assert str(result) == "0"
        assert not result.is_signed()

    def test_zero_places(self) -> None:
        """decimal_places=0 даёт целочисленный результат"""
        config = ArithmeticConfig(decimal_places=0)
        assert divide(Decimal(7), Decimal(2), config) == Decimal(4)

    def test_division_by_zero(self) -> None:
        """Деление на ноль запрещено"""
        with pytest.raises(ZeroDivisionError):
            divide(Decimal(1), Decimal(0))


# =============================================================================
# ТЕСТЫ КАНОНИЧЕСКОЙ СТРОКИ
# =============================================================================


class TestCanonicalStr:
    """Тесты canonical_str"""

    def test_trailing_zeros_removed(self) -> None:
        assert canonical_str(Decimal("1.50")) == "1.5"
        assert canonical_str(Decimal("3.000")) == "3"

    def test_equal_values_share_string(self) -> None:
        """Численно равные значения дают одинаковую строку"""
        assert canonical_str(Decimal("6e+18")) == canonical_str(Decimal(6 * 10**18))
        assert canonical_str(Decimal("100")) == canonical_str(Decimal("1.00E+2"))

    def test_high_precision_distinct(self) -> None:
        """Высокоточные значения не сливаются"""
        assert canonical_str(Decimal("1.0000000000000001")) == "1.0000000000000001"
        assert canonical_str(Decimal("1.0000000000000001")) != canonical_str(Decimal(1))

    def test_zero(self) -> None:
        """Ноль любого знака и масштаба даёт '0'"""
        assert canonical_str(Decimal("0.00")) == "0"
        assert canonical_str(Decimal("-0")) == "0"
