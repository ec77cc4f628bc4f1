"""
Дни недели

Китайские дни недели нумеруются: 星期一 (понедельник) ... 星期六 (суббота).
Воскресенье — исключение: 星期天 / 礼拜天, но 周日.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.conversion import VariantPair, to_chinese
from chinese_format.core.errors import WeekDayOutOfRange
from chinese_format.core.vector import chinese_vec


class WeekDay(IntEnum):
    """День недели; порядковый номер совпадает с китайской записью (кроме воскресенья)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "WeekDay":
        """
        Raises:
            WeekDayOutOfRange: Если ordinal вне 0-6
        """
        try:
            return cls(ordinal)
        except ValueError:
            raise WeekDayOutOfRange(ordinal) from None


class WeekFormat(str, Enum):
    """Слово для "недели" перед номером дня."""

    XINGQI = "xingqi"  # 星期
    ZHOU = "zhou"  # 周
    LIBAI = "libai"  # 礼拜 / 禮拜

    def to_chinese(self, variant: Variant) -> Chinese:
        if self is WeekFormat.XINGQI:
            return to_chinese("星期", variant)
        if self is WeekFormat.ZHOU:
            return to_chinese("周", variant)
        return VariantPair("礼拜", "禮拜").to_chinese(variant)


@dataclass(frozen=True, order=True)
class StyledWeekDay:
    """
    День недели вместе с форматом записи.

    Examples:
        >>> StyledWeekDay(WeekFormat.LIBAI, WeekDay.SATURDAY).to_chinese(Variant.TRADITIONAL)
        Chinese(logograms='禮拜六', omissible=False)
    """

    week_format: WeekFormat
    week_day: WeekDay

    def _ordinal_logogram(self, variant: Variant) -> str:
        if self.week_day is WeekDay.SUNDAY:
            return "日" if self.week_format is WeekFormat.ZHOU else "天"
        return to_chinese(int(self.week_day), variant).logograms

    def to_chinese(self, variant: Variant) -> Chinese:
        return chinese_vec(variant, self.week_format, self._ordinal_logogram(variant)).collect()
