"""
Компоненты даты: год, месяц, день

- Year: цифры читаются поразрядно (1998 → 一九九八年)
- Month: 1-12 + 月
- Day: 1-31, формальный 号/號 или неформальный 日
"""

from typing import Final

from chinese_format.core.conversion import VariantPair
from chinese_format.core.digits import DigitSequence
from chinese_format.core.errors import DayOutOfRange, MonthOutOfRange
from chinese_format.core.measure import MultiRegisterMeasure, NoCopyMeasure, UnitMeasure

MONTHS_PER_YEAR: Final[int] = 12
MAX_DAY_OF_MONTH: Final[int] = 31


class Year(NoCopyMeasure):
    """
    Год как последовательность цифр.

    Examples:
        >>> Year.from_int(2014).to_chinese(Variant.SIMPLIFIED)
        Chinese(logograms='二零一四年', omissible=False)
    """

    UNIT = "年"

    @classmethod
    def from_int(cls, value: int) -> "Year":
        return cls(DigitSequence.from_int(value))

    def __int__(self) -> int:
        return int(self.quantity)

    def is_leap(self) -> bool:
        """Високосный год по григорианскому правилу (400 / 100 / 4)."""
        value = int(self)
        return value % 4 == 0 and (value % 100 != 0 or value % 400 == 0)


class Month(UnitMeasure):
    """
    Месяц 1-12.

    Raises:
        MonthOutOfRange: Если значение вне 1-12
    """

    UNIT = "月"

    def validate(self) -> None:
        if not 1 <= self.quantity <= MONTHS_PER_YEAR:
            raise MonthOutOfRange(self.quantity)

    def __int__(self) -> int:
        return self.quantity


class Day(MultiRegisterMeasure):
    """
    День месяца 1-31.

    Согласованность с месяцем проверяет DateBuilder.

    Raises:
        DayOutOfRange: Если значение вне 1-31
    """

    FORMAL_UNIT = VariantPair("号", "號")
    INFORMAL_UNIT = "日"

    def validate(self) -> None:
        if not 1 <= self.quantity <= MAX_DAY_OF_MONTH:
            raise DayOutOfRange(self.quantity)

    @classmethod
    def formal_day(cls, ordinal: int) -> "Day":
        return cls(ordinal, True)

    @classmethod
    def informal_day(cls, ordinal: int) -> "Day":
        return cls(ordinal, False)

    def __int__(self) -> int:
        return self.quantity
