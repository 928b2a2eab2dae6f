"""
Contract Validation Module

Модуль для валидации входных значений DecimalCollection.
"""

from .validators import DecimalValidator, is_valid_decimal_input

__all__ = [
    # Classes
    "DecimalValidator",
    # Functions
    "is_valid_decimal_input",
]
