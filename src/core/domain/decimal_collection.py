"""
DecimalCollection: Упорядоченная коллекция чисел произвольной точности

Изменяемая последовательность Decimal с агрегатами и фильтрами:
- Мутации: add, remove
- Агрегаты: sum, product, mean, median, min, max, cumulative_sum
- Запросы: includes, unique, is_greater_than / is_less_than (+ or_equal_to)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. В items попадают только валидные, конечные Decimal (DecimalValidator)
2. Порядок вставки сохраняется, дубликаты допускаются
3. Запросы и агрегаты не изменяют items и возвращают новые значения/списки
4. Агрегаты без определённого результата на пустой коллекции
   бросают EmptyCollectionError; sum() пустой коллекции = 0

Коллекция не потокобезопасна: один владелец на экземпляр.
"""

import logging
from decimal import Decimal
from functools import reduce
from itertools import accumulate
from typing import Any, Callable, Iterator, List, Optional

from src.core.contracts.validators import DecimalValidator
from src.core.math.arithmetic_config import (
    DEFAULT_ARITHMETIC_CONFIG,
    ArithmeticConfig,
)
from src.core.math.exact_decimal import (
    NumberLike,
    canonical_str,
    divide,
    exact_add,
    exact_multiply,
    to_decimal,
)

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)
_TWO = Decimal(2)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyCollectionError(ValueError):
    """
    Агрегат не определён для пустой коллекции.

    Бросается min, max, product, mean, median.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Array is empty, cannot determine {operation}")


# =============================================================================
# DECIMAL COLLECTION
# =============================================================================


class DecimalCollection:
    """
    Коллекция Decimal значений с точной арифметикой.

    Examples:
        >>> arr = DecimalCollection(1, "2.5", Decimal("3"), "abc")
        >>> [str(v) for v in arr.items]
        ['1', '2.5', '3']
        >>> arr.sum()
        Decimal('6.5')
    """

    def __init__(self, *raws: NumberLike, config: Optional[ArithmeticConfig] = None):
        self._config = config if config is not None else DEFAULT_ARITHMETIC_CONFIG
        self._items: List[Decimal] = []
        for raw in raws:
            self.add(raw)

    def __repr__(self) -> str:
        values = ", ".join(str(v) for v in self._items)
        return f"DecimalCollection([{values}])"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self._items)

    @property
    def items(self) -> List[Decimal]:
        """Живой список значений (последующие мутации видны вызывающему)."""
        return self._items

    @property
    def config(self) -> ArithmeticConfig:
        return self._config

    # ---------- helpers ----------

    def _convert_query(self, raw: Any, operation: str) -> Optional[Decimal]:
        """Конверсия аргумента запроса; None если аргумент невалиден."""
        if not DecimalValidator.is_valid(raw):
            logger.debug("%s: invalid argument %r ignored", operation, raw)
            return None
        return to_decimal(raw)

    def _require_items(self, operation: str) -> None:
        if not self._items:
            raise EmptyCollectionError(operation)

    def _filter(
        self, raw: Any, predicate: Callable[[Decimal, Decimal], bool], operation: str
    ) -> List[Decimal]:
        threshold = self._convert_query(raw, operation)
        if threshold is None:
            return []
        return [item for item in self._items if predicate(item, threshold)]

    # ---------- mutations ----------

    def add(self, raw: NumberLike) -> bool:
        """
        Добавление значения в конец коллекции.

        Args:
            raw: int, float, числовая строка или Decimal

        Returns:
            True если значение добавлено, False если невалидно (items не меняется)
        """
        if not DecimalValidator.is_valid(raw):
            logger.debug("Rejected invalid input %r", raw)
            return False
        self._items.append(to_decimal(raw))
        return True

    def remove(self, raw: NumberLike) -> bool:
        """
        Удаление первого элемента, численно равного raw.

        Сравнение по значению Decimal, не по строке: Decimal("2") == Decimal("2.0").

        Returns:
            True если элемент найден и удалён, иначе False
        """
        target = self._convert_query(raw, "remove")
        if target is None:
            return False

        for index, item in enumerate(self._items):
            if item == target:
                del self._items[index]
                return True
        return False

    # ---------- aggregates ----------

    def sum(self) -> Decimal:
        """
        Точная сумма; 0 для пустой коллекции.

        Свёртка без нулевого seed: Decimal(0) выравнивал бы экспоненту
        и раскрывал значения вида 1E+200000000 в полный коэффициент.
        """
        if not self._items:
            return _ZERO
        return reduce(exact_add, self._items)

    def product(self) -> Decimal:
        """
        Точное произведение (без округления).

        Raises:
            EmptyCollectionError: Если коллекция пуста
        """
        self._require_items("product")
        return reduce(exact_multiply, self._items)

    def mean(self) -> Decimal:
        """
        Среднее: sum() / len, деление по настройкам ArithmeticConfig.

        Raises:
            EmptyCollectionError: Если коллекция пуста
        """
        self._require_items("average")
        return divide(self.sum(), Decimal(len(self._items)), self._config)

    def median(self) -> Decimal:
        """
        Медиана по отсортированной копии.

        Нечётная длина: средний элемент.
        Чётная длина: (нижний_средний + верхний_средний) / 2.

        Raises:
            EmptyCollectionError: Если коллекция пуста
        """
        self._require_items("median")

        ordered = sorted(self._items)
        middle = len(ordered) // 2
        if len(ordered) % 2 == 1:
            return ordered[middle]

        return divide(
            exact_add(ordered[middle - 1], ordered[middle]), _TWO, self._config
        )

    def min(self) -> Decimal:
        """
        Наименьший элемент (при равенстве возвращается первый встреченный).

        Raises:
            EmptyCollectionError: Если коллекция пуста
        """
        self._require_items("minimum")
        result = self._items[0]
        for item in self._items[1:]:
            if item < result:
                result = item
        return result

    def max(self) -> Decimal:
        """
        Наибольший элемент (при равенстве возвращается первый встреченный).

        Raises:
            EmptyCollectionError: Если коллекция пуста
        """
        self._require_items("maximum")
        result = self._items[0]
        for item in self._items[1:]:
            if item > result:
                result = item
        return result

    def cumulative_sum(self) -> List[Decimal]:
        """Нарастающий итог: позиция i содержит сумму элементов 0..i."""
        return list(accumulate(self._items, exact_add))

    # ---------- queries ----------

    def includes(self, raw: NumberLike) -> bool:
        """
        Проверка наличия значения по каноническому строковому представлению.

        Returns:
            True если canonical_str(raw) совпадает с canonical_str элемента
        """
        target = self._convert_query(raw, "includes")
        if target is None:
            return False

        key = canonical_str(target)
        return any(canonical_str(item) == key for item in self._items)

    def unique(self) -> List[Decimal]:
        """Первые вхождения (по canonical_str) в порядке появления."""
        seen = set()
        result: List[Decimal] = []
        for item in self._items:
            key = canonical_str(item)
            if key not in seen:
                seen.add(key)
                result.append(item)
        return result

    def is_greater_than(self, raw: NumberLike) -> List[Decimal]:
        """Элементы строго больше raw, в исходном порядке."""
        return self._filter(raw, lambda item, t: item > t, "is_greater_than")

    def is_greater_than_or_equal_to(self, raw: NumberLike) -> List[Decimal]:
        """Элементы >= raw, в исходном порядке."""
        return self._filter(
            raw, lambda item, t: item >= t, "is_greater_than_or_equal_to"
        )

    def is_less_than(self, raw: NumberLike) -> List[Decimal]:
        """Элементы строго меньше raw, в исходном порядке."""
        return self._filter(raw, lambda item, t: item < t, "is_less_than")

    def is_less_than_or_equal_to(self, raw: NumberLike) -> List[Decimal]:
        """Элементы <= raw, в исходном порядке."""
        return self._filter(raw, lambda item, t: item <= t, "is_less_than_or_equal_to")
