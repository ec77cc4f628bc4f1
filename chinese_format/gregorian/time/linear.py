"""
LinearTime — время "по циферблату": [часть суток] час [минуты] [секунды]

Examples:
    19:24 с частью суток → 傍晚七点二十四分
    19:24 без части суток → 十九点二十四分
    08:00 → 八点 (нулевые минуты исчезают)
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.placeholders import EmptyPlaceholder
from chinese_format.core.vector import chinese_vec
from chinese_format.gregorian.time.clock import Minute, Second
from chinese_format.gregorian.time.day_part import DayPart
from chinese_format.gregorian.time.hour import Hour12, Hour24


@total_ordering
@dataclass(frozen=True)
class LinearTime:
    """
    Время суток.

    При day_part=True час переводится в 12-часовой формат
    и предваряется частью суток.

    Упорядочивание по (day_part, час, минута, секунда);
    отсутствующие секунды предшествуют присутствующим.
    """

    day_part: bool
    hour: Hour24
    minute: Minute
    second: Optional[Second] = None

    def _sort_key(self) -> tuple:
        # Без секунд раньше, чем с любыми секундами
        return (self.day_part, self.hour, self.minute, self.second is not None, self.second)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LinearTime):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    @classmethod
    def of(
        cls,
        hour: int,
        minute: int,
        second: Optional[int] = None,
        day_part: bool = False,
    ) -> "LinearTime":
        """
        Создание из чисел.

        Raises:
            HourOutOfRange / MinuteOutOfRange / SecondOutOfRange
        """
        return cls(
            day_part=day_part,
            hour=Hour24.of(hour),
            minute=Minute(minute),
            second=Second(second) if second is not None else None,
        )

    def to_chinese(self, variant: Variant) -> Chinese:
        if self.day_part:
            day_part = DayPart.from_hour24(self.hour)
            hour = Hour12.from_hour24(self.hour)
        else:
            day_part = None
            hour = self.hour

        return chinese_vec(
            variant,
            EmptyPlaceholder(day_part),
            hour,
            EmptyPlaceholder(self.minute),
            EmptyPlaceholder(self.second),
        ).collect()
