"""
Часы: 24-часовой и 12-часовой циферблат

Оба рендерятся как количество + 点/點 (2 → 两点).
"""

from typing import Final

from chinese_format.core.conversion import VariantPair
from chinese_format.core.errors import HourOutOfRange
from chinese_format.core.measure import CountMeasure
from chinese_format.core.numbers import Count

HOUR_UNIT: Final[VariantPair] = VariantPair("点", "點")

HOURS_PER_DAY: Final[int] = 24
HOURS_PER_HALF_DAY: Final[int] = 12


class Hour24(CountMeasure):
    """
    Час 0-23.

    Raises:
        HourOutOfRange: Если значение > 23
    """

    UNIT = HOUR_UNIT

    def validate(self) -> None:
        if int(self.quantity) >= HOURS_PER_DAY:
            raise HourOutOfRange(int(self.quantity))


class Hour12(CountMeasure):
    """
    Час 1-12.

    Raises:
        HourOutOfRange: Если значение вне 1-12
    """

    UNIT = HOUR_UNIT

    def validate(self) -> None:
        if not 1 <= int(self.quantity) <= HOURS_PER_HALF_DAY:
            raise HourOutOfRange(int(self.quantity))

    @classmethod
    def from_hour24(cls, hour24: Hour24) -> "Hour12":
        """0 → 12, 1-12 без изменений, 13-23 → минус 12."""
        value = int(hour24)

        if value == 0:
            return cls.of(HOURS_PER_HALF_DAY)
        if value <= HOURS_PER_HALF_DAY:
            return cls.of(value)
        return cls.of(value - HOURS_PER_HALF_DAY)

    def next(self) -> "Hour12":
        """Следующий час по кругу: 12 → 1."""
        value = int(self)
        return type(self)(Count(1 if value == HOURS_PER_HALF_DAY else value + 1))
