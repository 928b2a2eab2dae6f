"""
Exact Decimal: Точная десятичная арифметика поверх decimal.Decimal

Модуль адаптирует decimal.Decimal для коллекций произвольной точности:
- Конверсия входов (int, float, str, Decimal) без float-артефактов
- Точное сложение и умножение (никогда не округляются)
- Деление с фиксированным числом дробных знаков и одним округлением
- Каноническое строковое представление для сравнения по строке

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сложение и умножение не теряют ни одной значащей цифры
2. Частное округляется ровно один раз (от точной дроби)
3. Результат не зависит от глобального decimal-контекста вызывающего кода
4. Отрицательный ноль в результатах не появляется
"""

import decimal
from decimal import Decimal
from fractions import Fraction
from typing import Final, Union

from src.core.math.arithmetic_config import (
    DEFAULT_ARITHMETIC_CONFIG,
    ArithmeticConfig,
)

# Допустимые формы входного значения
NumberLike = Union[int, float, str, Decimal]

# =============================================================================
# КОНТЕКСТЫ
# =============================================================================

# Контекст точных вычислений: любое округление -> decimal.Inexact
_EXACT_CONTEXT: Final[decimal.Context] = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[
        decimal.InvalidOperation,
        decimal.DivisionByZero,
        decimal.Overflow,
        decimal.Inexact,
    ],
)

# Контекст для финального квантования частного (округление ожидаемо)
_ROUNDING_CONTEXT: Final[decimal.Context] = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[decimal.InvalidOperation, decimal.Overflow],
)

_ONE: Final[Decimal] = Decimal(1)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_decimal(raw: NumberLike) -> Decimal:
    """
    Конверсия входного значения в Decimal.

    - Decimal возвращается без изменений
    - int конвертируется точно
    - float конвертируется через кратчайшее представление repr(),
      а не через двоичное разложение (0.1 -> Decimal('0.1'))
    - str парсится строго: пробелы по краям отбрасываются,
      разделители '_' не допускаются

    Args:
        raw: Входное значение

    Returns:
        Decimal (может быть NaN/Infinity, если таков вход)

    Raises:
        decimal.InvalidOperation: Если строка не является числом
        decimal.Overflow, decimal.Inexact: Если экспонента строки вне диапазона
        TypeError: Если тип входа не поддерживается (включая bool)

    Examples:
        >>> to_decimal(10.1)
        Decimal('10.1')
        >>> to_decimal(" 1e+18 ")
        Decimal('1E+18')
    """
    if isinstance(raw, Decimal):
        return raw

    # bool является подклассом int, но числом здесь не считается
    if isinstance(raw, bool):
        raise TypeError(f"Unsupported input type: {type(raw).__name__}")

    if isinstance(raw, int):
        return Decimal(raw)

    if isinstance(raw, float):
        return Decimal(repr(raw))

    if isinstance(raw, str):
        return _EXACT_CONTEXT.create_decimal(raw.strip())

    raise TypeError(f"Unsupported input type: {type(raw).__name__}")


def canonical_str(value: Decimal) -> str:
    """
    Каноническое строковое представление Decimal.

    Хвостовые нули удаляются, отрицательный ноль сворачивается в "0".
    Для конечных значений: canonical_str(a) == canonical_str(b) <=> a == b.

    Examples:
        >>> canonical_str(Decimal("1.50"))
        '1.5'
        >>> canonical_str(Decimal("6000000000000000000"))
        '6E+18'
        >>> canonical_str(Decimal("-0.00"))
        '0'
    """
    if value.is_zero():
        return "0"
    return str(value.normalize(_EXACT_CONTEXT))


# =============================================================================
# ТОЧНЫЕ ОПЕРАЦИИ
# =============================================================================


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    """Сложение без округления."""
    return _EXACT_CONTEXT.add(a, b)


def exact_multiply(a: Decimal, b: Decimal) -> Decimal:
    """Умножение без округления."""
    return _EXACT_CONTEXT.multiply(a, b)


def _strip_fraction_zeros(value: Decimal) -> Decimal:
    """Удаление хвостовых нулей дробной части (целая часть не трогается)."""
    if value.as_tuple().exponent >= 0:
        return value

    reduced = value.normalize(_EXACT_CONTEXT)
    if reduced.as_tuple().exponent > 0:
        reduced = reduced.quantize(_ONE, context=_EXACT_CONTEXT)
    return reduced


def divide(
    numerator: Decimal,
    denominator: Decimal,
    config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG,
) -> Decimal:
    """
    Деление с округлением до config.decimal_places дробных знаков.

    Алгоритм:
        1. Точное частное как Fraction
        2. Усечение до (decimal_places + 1) знаков; если остаток ненулевой,
           guard-цифра 0 или 5 сдвигается на 1 (sticky bit), чтобы
           последующее квантование видело "больше половины" / "не ноль"
        3. Одно квантование до decimal_places знаков режимом config.rounding

    Args:
        numerator: Делимое (конечное)
        denominator: Делитель (конечный, ненулевой)
        config: Настройки деления

    Returns:
        Частное без хвостовых нулей дробной части

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> divide(Decimal("6.0000000000000006"), Decimal(3))
        Decimal('2.0000000000000002')
        >>> divide(Decimal(2), Decimal(3))
        Decimal('0.66666666666666666667')
    """
    if denominator.is_zero():
        raise ZeroDivisionError(f"Division by zero: {numerator} / {denominator}")

    ratio = Fraction(numerator) / Fraction(denominator)

    guard_places = config.decimal_places + 1
    scaled = abs(ratio) * 10**guard_places
    digits, remainder = divmod(scaled.numerator, scaled.denominator)
    if remainder and digits % 10 in (0, 5):
        digits += 1

    guarded = Decimal(digits).scaleb(-guard_places, _EXACT_CONTEXT)
    if ratio < 0:
        guarded = guarded.copy_negate()

    quotient = guarded.quantize(
        _ONE.scaleb(-config.decimal_places),
        rounding=config.rounding,
        context=_ROUNDING_CONTEXT,
    )

    # Отрицательный ноль после округления
    if quotient.is_zero():
        quotient = quotient.copy_abs()

    return _strip_fraction_zeros(quotient)
