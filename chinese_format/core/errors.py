"""
Ошибки валидации chinese_format

Все ошибки возникают только при конструировании значений (try_new / build()).
Рендеринг уже сконструированного значения никогда не падает.

Иерархия:
    ChineseFormatError(ValueError)
    ├── ZeroDenominator
    ├── DimesOutOfRange / CentsOutOfRange
    ├── MonthOutOfRange / DayOutOfRange / WeekDayOutOfRange
    ├── HourOutOfRange / MinuteOutOfRange / SecondOutOfRange
    ├── InvalidDatePattern
    └── InvalidDate
"""

from typing import Optional


class ChineseFormatError(ValueError):
    """Базовая ошибка валидации входных данных."""


# =============================================================================
# NUMERIC
# =============================================================================


class ZeroDenominator(ChineseFormatError):
    """Дробь с нулевым знаменателем."""

    def __init__(self) -> None:
        super().__init__("Zero passed as denominator")


# =============================================================================
# RANGE ERRORS
# =============================================================================


class _OutOfRange(ChineseFormatError):
    """Значение компонента вне допустимого диапазона."""

    LABEL = "Value"

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"{self.LABEL} out of range: {value}")


class DimesOutOfRange(_OutOfRange):
    LABEL = "Dimes"


class CentsOutOfRange(_OutOfRange):
    LABEL = "Cents"


class MonthOutOfRange(_OutOfRange):
    LABEL = "Month"


class DayOutOfRange(_OutOfRange):
    LABEL = "Day"


class WeekDayOutOfRange(_OutOfRange):
    LABEL = "Week day"


class HourOutOfRange(_OutOfRange):
    LABEL = "Hour"


class MinuteOutOfRange(_OutOfRange):
    LABEL = "Minute"


class SecondOutOfRange(_OutOfRange):
    LABEL = "Second"


# =============================================================================
# DATE ERRORS
# =============================================================================


class InvalidDatePattern(ChineseFormatError):
    """
    Недопустимая комбинация компонентов даты.

    Args:
        pattern: Флаги присутствующих компонентов, например "dw"
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid date pattern: {pattern}")


class InvalidDate(ChineseFormatError):
    """
    Компоненты в допустимых диапазонах, но дата не существует (31 апреля).

    Year включается в сообщение только если задан:
    "Invalid date: 1986-2-31" / "Invalid date: 2-31"
    """

    def __init__(self, year: Optional[int], month: int, day: int) -> None:
        self.year = year
        self.month = month
        self.day = day

        if year is None:
            message = f"Invalid date: {month}-{day}"
        else:
            message = f"Invalid date: {year}-{month}-{day}"

        super().__init__(message)
