"""
Минуты и секунды
"""

from typing import Final

from chinese_format.core.errors import MinuteOutOfRange, SecondOutOfRange
from chinese_format.core.measure import UnitMeasure

MINUTES_PER_HOUR: Final[int] = 60
SECONDS_PER_MINUTE: Final[int] = 60


class Minute(UnitMeasure):
    """
    Минута 0-59. Ноль omissible (零分 исчезает рядом с часом).

    Raises:
        MinuteOutOfRange: Если значение вне 0-59
    """

    UNIT = "分"

    def validate(self) -> None:
        if not 0 <= self.quantity < MINUTES_PER_HOUR:
            raise MinuteOutOfRange(self.quantity)

    def __int__(self) -> int:
        return self.quantity

    def complement(self) -> "Minute":
        """
        Минут до следующего часа (60 - m).

        Raises:
            MinuteOutOfRange: Для нулевой минуты (дополнение 60)
        """
        return type(self)(MINUTES_PER_HOUR - self.quantity)


class Second(UnitMeasure):
    """
    Секунда 0-59.

    Raises:
        SecondOutOfRange: Если значение вне 0-59
    """

    UNIT = "秒"

    def validate(self) -> None:
        if not 0 <= self.quantity < SECONDS_PER_MINUTE:
            raise SecondOutOfRange(self.quantity)

    def __int__(self) -> int:
        return self.quantity
