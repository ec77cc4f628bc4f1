"""
DayPart — часть суток, определяемая по 24-часовому часу
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.gregorian.time.hour import Hour24


class DayPart(str, Enum):
    """Часть суток; значение — логограммы (одинаковы в обоих вариантах)."""

    EARLY_MORNING = "早上"
    MORNING = "上午"
    MIDDAY = "中午"
    AFTERNOON = "下午"
    EARLY_EVENING = "傍晚"
    EVENING = "晚上"
    MIDNIGHT = "午夜"
    LATE_NIGHT = "深夜"

    @classmethod
    def from_hour24(cls, hour: Hour24) -> "DayPart":
        return DAY_PART_BY_HOUR[int(hour)]

    def to_chinese(self, variant: Variant) -> Chinese:
        return Chinese(logograms=self.value, omissible=False)


# Read-only таблица: час 0-23 → часть суток
DAY_PART_BY_HOUR: Final[Mapping[int, DayPart]] = MappingProxyType(
    {
        0: DayPart.MIDNIGHT,
        1: DayPart.MIDNIGHT,
        2: DayPart.LATE_NIGHT,
        3: DayPart.LATE_NIGHT,
        4: DayPart.LATE_NIGHT,
        5: DayPart.EARLY_MORNING,
        6: DayPart.EARLY_MORNING,
        7: DayPart.EARLY_MORNING,
        8: DayPart.MORNING,
        9: DayPart.MORNING,
        10: DayPart.MORNING,
        11: DayPart.MIDDAY,
        12: DayPart.MIDDAY,
        13: DayPart.MIDDAY,
        14: DayPart.AFTERNOON,
        15: DayPart.AFTERNOON,
        16: DayPart.AFTERNOON,
        17: DayPart.EARLY_EVENING,
        18: DayPart.EARLY_EVENING,
        19: DayPart.EARLY_EVENING,
        20: DayPart.EVENING,
        21: DayPart.EVENING,
        22: DayPart.EVENING,
        23: DayPart.MIDNIGHT,
    }
)
