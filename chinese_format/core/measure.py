"""
Measure — значение + единица измерения

Рендеринг по умолчанию:
    logograms = value().logograms + unit().logograms
    omissible = value().omissible  (omissible единицы игнорируется)

Например, "零米" omissible (значение ноль), хотя "米" сам по себе не omissible.

Формы (единственная точка вариации конкретных мер):
1. UnitMeasure: одна единица, произвольный тип значения
2. CountMeasure: одна единица, значение — Count (+ конструктор of(int))
3. MultiRegisterMeasure: формальная / неформальная единица по флагу formal
4. NoCopyMeasure: как UnitMeasure, но value() возвращает копию значения

Единицы задаются атрибутами класса:
    class Meter(CountMeasure):
        UNIT = "米"

    class Day(MultiRegisterMeasure):
        FORMAL_UNIT = VariantPair("号", "號")
        INFORMAL_UNIT = "日"
"""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.conversion import to_chinese
from chinese_format.core.numbers import Count


# =============================================================================
# CONTRACT
# =============================================================================


class Measure(ABC):
    """Контракт меры: value() и unit(), оба конвертируемы в Chinese."""

    @abstractmethod
    def value(self) -> Any:
        ...

    @abstractmethod
    def unit(self) -> Any:
        ...

    def to_chinese(self, variant: Variant) -> Chinese:
        value_chinese = to_chinese(self.value(), variant)
        unit_chinese = to_chinese(self.unit(), variant)

        return Chinese(
            logograms=value_chinese.logograms + unit_chinese.logograms,
            omissible=value_chinese.omissible,
        )


# =============================================================================
# SHAPES
# =============================================================================


@dataclass(frozen=True, order=True)
class UnitMeasure(Measure):
    """Мера с единственной фиксированной единицей."""

    quantity: Any

    UNIT: ClassVar[Any] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Проверка диапазона; переопределяется в подклассах."""

    def value(self) -> Any:
        return self.quantity

    def unit(self) -> Any:
        return self.UNIT


@dataclass(frozen=True, order=True)
class CountMeasure(UnitMeasure):
    """Мера количества: значение всегда Count (2 → 两)."""

    quantity: Count

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, Count):
            # Hour24(2) рендерится как Hour24(Count(2)): 两点, не 二点
            object.__setattr__(self, "quantity", Count(self.quantity))
        super().__post_init__()

    @classmethod
    def of(cls, value: int) -> "CountMeasure":
        return cls(Count(value))

    def __int__(self) -> int:
        return self.quantity.value


@dataclass(frozen=True, order=True)
class MultiRegisterMeasure(Measure):
    """Мера с формальной и неформальной единицей (元 / 块)."""

    quantity: Any
    formal: bool

    FORMAL_UNIT: ClassVar[Any] = None
    INFORMAL_UNIT: ClassVar[Any] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Проверка диапазона; переопределяется в подклассах."""

    def value(self) -> Any:
        return self.quantity

    def unit(self) -> Any:
        return self.FORMAL_UNIT if self.formal else self.INFORMAL_UNIT


@dataclass(frozen=True, order=True)
class NoCopyMeasure(UnitMeasure):
    """
    Мера над значением, которое нельзя разделять между владельцами.

    value() возвращает копию; quantity — ссылка на собственное значение.
    """

    def value(self) -> Any:
        return copy.copy(self.quantity)
