"""
Gregorian dates.
"""

from chinese_format.gregorian.date.builder import Date, DateBuilder
from chinese_format.gregorian.date.components import Day, Month, Year
from chinese_format.gregorian.date.pattern import DatePattern, pattern_flags, validate_pattern
from chinese_format.gregorian.date.week import StyledWeekDay, WeekDay, WeekFormat

__all__ = [
    "Date",
    "DateBuilder",
    "DatePattern",
    "Day",
    "Month",
    "StyledWeekDay",
    "WeekDay",
    "WeekFormat",
    "Year",
    "pattern_flags",
    "validate_pattern",
]
