"""
DatePattern — допустимые комбинации компонентов даты

Комбинация кодируется флагами в фиксированном порядке: y (год), m (месяц),
d (день), w (день недели). Например, год + день → "yd" (недопустимо).
"""

from enum import Enum

from chinese_format.core.errors import InvalidDatePattern


class DatePattern(str, Enum):
    """Допустимые комбинации; значение — строка флагов."""

    YEAR = "y"
    MONTH = "m"
    DAY = "d"
    WEEK_DAY = "w"
    YEAR_MONTH = "ym"
    YEAR_MONTH_DAY = "ymd"
    MONTH_DAY = "md"
    MONTH_DAY_WEEK_DAY = "mdw"
    DAY_WEEK_DAY = "dw"
    YEAR_MONTH_DAY_WEEK_DAY = "ymdw"

    @property
    def has_year(self) -> bool:
        return "y" in self.value

    @property
    def has_month(self) -> bool:
        return "m" in self.value

    @property
    def has_day(self) -> bool:
        return "d" in self.value

    @property
    def has_week_day(self) -> bool:
        return "w" in self.value


def pattern_flags(year: bool, month: bool, day: bool, week_day: bool) -> str:
    """Строка флагов присутствующих компонентов ("" если нет ни одного)."""
    return "".join(
        flag
        for flag, present in (("y", year), ("m", month), ("d", day), ("w", week_day))
        if present
    )


def validate_pattern(year: bool, month: bool, day: bool, week_day: bool) -> DatePattern:
    """
    Проверка комбинации компонентов.

    Returns:
        Соответствующий DatePattern

    Raises:
        InvalidDatePattern: Если комбинация не входит в допустимый набор
    """
    flags = pattern_flags(year, month, day, week_day)

    try:
        return DatePattern(flags)
    except ValueError:
        raise InvalidDatePattern(flags) from None
