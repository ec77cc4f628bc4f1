"""
Gregorian calendar: dates and time of day.
"""

from chinese_format.gregorian.date import (
    Date,
    DateBuilder,
    DatePattern,
    Day,
    Month,
    StyledWeekDay,
    WeekDay,
    WeekFormat,
    Year,
)
from chinese_format.gregorian.time import (
    DayPart,
    DeltaTime,
    Hour12,
    Hour24,
    LinearTime,
    Minute,
    Second,
)

__all__ = [
    # Date
    "Date",
    "DateBuilder",
    "DatePattern",
    "Day",
    "Month",
    "StyledWeekDay",
    "WeekDay",
    "WeekFormat",
    "Year",
    # Time
    "DayPart",
    "DeltaTime",
    "Hour12",
    "Hour24",
    "LinearTime",
    "Minute",
    "Second",
]
