"""
Decimal Input Validators

Модуль для проверки входных значений перед конверсией в Decimal.

Допустимые формы входа:
- int (кроме bool)
- float
- str (числовая строка: целые, дробные, экспоненциальная запись)
- decimal.Decimal

Невалидны: NaN и бесконечности в любой форме, пустые и нечисловые строки,
любые другие типы. Валидация никогда не бросает исключений.
"""

import decimal
from typing import Any

from src.core.math.exact_decimal import to_decimal


# =============================================================================
# VALIDATOR
# =============================================================================


class DecimalValidator:
    """
    Валидатор входных значений для DecimalCollection.

    Предикат без побочных эффектов: результат только через bool.
    """

    @staticmethod
    def is_valid(raw: Any) -> bool:
        """
        Проверка, что raw конвертируется в конечный Decimal.

        Args:
            raw: Проверяемое значение любой формы

        Returns:
            True если to_decimal(raw) успешен и результат конечен

        Examples:
            >>> DecimalValidator.is_valid("1.0000000000000001")
            True
            >>> DecimalValidator.is_valid("")
            False
            >>> DecimalValidator.is_valid("abc")
            False
            >>> DecimalValidator.is_valid(float("nan"))
            False
        """
        try:
            value = to_decimal(raw)
        except (decimal.DecimalException, ValueError, TypeError):
            return False
        return value.is_finite()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def is_valid_decimal_input(raw: Any) -> bool:
    """
    Проверка входного значения.

    Args:
        raw: Проверяемое значение

    Returns:
        True если значение может быть сохранено в DecimalCollection
    """
    return DecimalValidator.is_valid(raw)
