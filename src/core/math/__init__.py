"""
Core math modules

Точная десятичная арифметика и настройки деления.
"""

# Arithmetic Config
from src.core.math.arithmetic_config import (
    DEFAULT_ARITHMETIC_CONFIG,
    DIVISION_DECIMAL_PLACES_DEFAULT,
    DIVISION_ROUNDING_DEFAULT,
    ROUNDING_MODES,
    ArithmeticConfig,
)

# Exact Decimal
from src.core.math.exact_decimal import (
    NumberLike,
    canonical_str,
    divide,
    exact_add,
    exact_multiply,
    to_decimal,
)

__all__ = [
    # Arithmetic Config: Constants
    "DEFAULT_ARITHMETIC_CONFIG",
    "DIVISION_DECIMAL_PLACES_DEFAULT",
    "DIVISION_ROUNDING_DEFAULT",
    "ROUNDING_MODES",
    # Arithmetic Config: Types
    "ArithmeticConfig",
    # Exact Decimal: Types
    "NumberLike",
    # Exact Decimal: Functions
    "canonical_str",
    "divide",
    "exact_add",
    "exact_multiply",
    "to_decimal",
]
