"""
Gregorian time of day.
"""

from chinese_format.gregorian.time.clock import Minute, Second
from chinese_format.gregorian.time.day_part import DAY_PART_BY_HOUR, DayPart
from chinese_format.gregorian.time.delta import DeltaTime
from chinese_format.gregorian.time.hour import HOUR_UNIT, Hour12, Hour24
from chinese_format.gregorian.time.linear import LinearTime

__all__ = [
    "DAY_PART_BY_HOUR",
    "DayPart",
    "DeltaTime",
    "HOUR_UNIT",
    "Hour12",
    "Hour24",
    "LinearTime",
    "Minute",
    "Second",
]
