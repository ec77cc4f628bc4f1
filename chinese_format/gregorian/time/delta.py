"""
DeltaTime — время относительно часа (12-часовой циферблат)

    :00 → 六点钟
    :01-:29 → 六点过五分 (кроме :15 и :30)
    :15 → 六点刻
    :30 → 六点半
    :45 → 六点三刻
    :31-:59 → 七点差二十九分 (следующий час минус дополнение)
"""

from dataclasses import dataclass
from typing import Final

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.conversion import VariantPair
from chinese_format.core.vector import chinese_vec
from chinese_format.gregorian.time.clock import Minute
from chinese_format.gregorian.time.hour import Hour12

ZHONG: Final[VariantPair] = VariantPair("钟", "鐘")
GUO: Final[VariantPair] = VariantPair("过", "過")
KE: Final[str] = "刻"
BAN: Final[str] = "半"
CHA: Final[str] = "差"

QUARTER: Final[int] = 15
HALF: Final[int] = 30
THREE_QUARTERS: Final[int] = 45


@dataclass(frozen=True, order=True)
class DeltaTime:
    """Час (1-12) и минуты, прочитанные относительно ближайшего часа."""

    hour: Hour12
    minute: Minute

    @classmethod
    def of(cls, hour: int, minute: int) -> "DeltaTime":
        """
        Raises:
            HourOutOfRange / MinuteOutOfRange
        """
        return cls(hour=Hour12.of(hour), minute=Minute(minute))

    def to_chinese(self, variant: Variant) -> Chinese:
        minute = int(self.minute)

        if minute == 0:
            return chinese_vec(variant, self.hour, ZHONG).collect()

        if minute == QUARTER:
            return chinese_vec(variant, self.hour, KE).collect()

        if minute == HALF:
            return chinese_vec(variant, self.hour, BAN).collect()

        if minute < HALF:
            return chinese_vec(variant, self.hour, GUO, self.minute).collect()

        if minute == THREE_QUARTERS:
            return chinese_vec(variant, self.hour, 3, KE).collect()

        return chinese_vec(variant, self.hour.next(), CHA, self.minute.complement()).collect()
