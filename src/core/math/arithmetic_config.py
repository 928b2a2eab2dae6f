"""
ArithmeticConfig: Настройки точной десятичной арифметики

Сложение и умножение всегда выполняются точно (без округления).
Конфигурация влияет только на деление (mean, median):
- decimal_places: количество знаков после запятой в частном
- rounding: режим округления из модуля decimal

Immutable Pydantic модель: изменение настроек требует нового экземпляра.
"""

import decimal
from typing import Final

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# DEFAULTS
# =============================================================================

# Количество дробных знаков в результате деления
DIVISION_DECIMAL_PLACES_DEFAULT: Final[int] = 20

# Режим округления при делении (half away from zero)
DIVISION_ROUNDING_DEFAULT: Final[str] = decimal.ROUND_HALF_UP

# Допустимые режимы округления
ROUNDING_MODES: Final[frozenset[str]] = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)


# =============================================================================
# CONFIG MODEL
# =============================================================================


class ArithmeticConfig(BaseModel):
    """
    Настройки деления для DecimalCollection.

    Examples:
        >>> ArithmeticConfig().decimal_places
        20
        >>> ArithmeticConfig(decimal_places=2, rounding="ROUND_HALF_EVEN").rounding
        'ROUND_HALF_EVEN'
    """

    decimal_places: int = Field(
        DIVISION_DECIMAL_PLACES_DEFAULT,
        ge=0,
        le=1000,
        description="Дробные знаки в частном",
    )
    rounding: str = Field(
        DIVISION_ROUNDING_DEFAULT,
        description="Режим округления (константа модуля decimal)",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("rounding")
    @classmethod
    def validate_rounding(cls, v: str) -> str:
        """Режим округления должен быть одной из констант decimal.ROUND_*."""
        if v not in ROUNDING_MODES:
            raise ValueError(
                f"rounding must be one of {sorted(ROUNDING_MODES)}, got {v!r}"
            )
        return v


# Глобальный экземпляр с настройками по умолчанию
DEFAULT_ARITHMETIC_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()
