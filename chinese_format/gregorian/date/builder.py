"""
DateBuilder / Date — григорианская дата из необязательных компонентов

Порядок проверок в build() (первая ошибка побеждает):
1. Комбинация компонентов (InvalidDatePattern)
2. Диапазон месяца (MonthOutOfRange)
3. Диапазон дня (DayOutOfRange)
4. Существование даты (InvalidDate): 30-дневные месяцы, 28/29 февраля

День недели на согласованность с датой не проверяется.
"""

import logging
from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Final, Optional

from pydantic import BaseModel, Field

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.errors import InvalidDate
from chinese_format.core.placeholders import EmptyPlaceholder
from chinese_format.core.vector import chinese_vec
from chinese_format.gregorian.date.components import Day, Month, Year
from chinese_format.gregorian.date.pattern import validate_pattern
from chinese_format.gregorian.date.week import StyledWeekDay, WeekDay, WeekFormat

if TYPE_CHECKING:
    from chinese_format.config import FormatConfig

logger = logging.getLogger(__name__)

THIRTY_DAY_MONTHS: Final[frozenset[int]] = frozenset({4, 6, 9, 11})
FEBRUARY: Final[int] = 2


# =============================================================================
# DATE
# =============================================================================


@total_ordering
@dataclass(frozen=True)
class Date:
    """
    Провалидированная дата. Создаётся через DateBuilder.

    Упорядочивание по (год, месяц, день, день недели); год сравнивается
    как число, отсутствующий компонент предшествует присутствующему.

    Examples:
        >>> (
        ...     DateBuilder()
        ...     .with_year(1998)
        ...     .with_month(6)
        ...     .with_day(13)
        ...     .with_week_day(WeekDay.SATURDAY)
        ...     .with_week_format(WeekFormat.LIBAI)
        ...     .with_formal(False)
        ...     .build()
        ...     .to_chinese(Variant.SIMPLIFIED)
        ... )
        Chinese(logograms='一九九八年六月十三日礼拜六', omissible=False)
    """

    year: Optional[Year] = None
    month: Optional[Month] = None
    day: Optional[Day] = None
    week_day: Optional[StyledWeekDay] = None

    def _sort_key(self) -> tuple:
        year = int(self.year) if self.year is not None else None
        # Отсутствующий компонент меньше любого присутствующего
        return tuple(
            (component is not None, component)
            for component in (year, self.month, self.day, self.week_day)
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def to_chinese(self, variant: Variant) -> Chinese:
        return (
            chinese_vec(
                variant,
                EmptyPlaceholder(self.year),
                EmptyPlaceholder(self.month),
                EmptyPlaceholder(self.day),
                EmptyPlaceholder(self.week_day),
            )
            .trim_end()
            .collect()
        )


# =============================================================================
# BUILDER
# =============================================================================


class DateBuilder(BaseModel):
    """
    Immutable fluent builder даты.

    По умолчанию: формальный регистр дня (号), формат недели 星期.
    """

    year: Optional[int] = Field(None, ge=0, strict=True, description="Год")
    month: Optional[int] = Field(None, ge=0, strict=True, description="Месяц, допустимо 1-12")
    day: Optional[int] = Field(None, ge=0, strict=True, description="День, допустимо 1-31")
    week_day: Optional[WeekDay] = Field(None, description="День недели")
    formal: bool = Field(True, description="Формальный регистр дня (号 вместо 日)")
    week_format: WeekFormat = Field(WeekFormat.XINGQI, description="Слово для недели")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_config(cls, config: "FormatConfig") -> "DateBuilder":
        """Builder с регистром и форматом недели из конфигурации."""
        return cls(formal=config.formal_dates, week_format=config.week_format)

    def _with(self, **changes: Any) -> "DateBuilder":
        return type(self).model_validate({**self.model_dump(), **changes})

    def with_year(self, year: int) -> "DateBuilder":
        return self._with(year=year)

    def with_month(self, month: int) -> "DateBuilder":
        return self._with(month=month)

    def with_day(self, day: int) -> "DateBuilder":
        return self._with(day=day)

    def with_week_day(self, week_day: WeekDay) -> "DateBuilder":
        return self._with(week_day=week_day)

    def with_formal(self, formal: bool) -> "DateBuilder":
        return self._with(formal=formal)

    def with_week_format(self, week_format: WeekFormat) -> "DateBuilder":
        return self._with(week_format=week_format)

    def _validate_consistency(self, year: Optional[Year]) -> None:
        if self.month is None or self.day is None:
            return

        # Без года 29 февраля допускается
        is_leap_year = year.is_leap() if year is not None else True

        if self.month in THIRTY_DAY_MONTHS:
            max_day = 30
        elif self.month == FEBRUARY:
            max_day = 29 if is_leap_year else 28
        else:
            max_day = 31

        if self.day > max_day:
            raise InvalidDate(self.year, self.month, self.day)

    def build(self) -> Date:
        """
        Валидация и создание даты.

        Returns:
            Date

        Raises:
            InvalidDatePattern: Недопустимая комбинация компонентов
            MonthOutOfRange: Месяц вне 1-12
            DayOutOfRange: День вне 1-31
            InvalidDate: Дата не существует
        """
        pattern = validate_pattern(
            year=self.year is not None,
            month=self.month is not None,
            day=self.day is not None,
            week_day=self.week_day is not None,
        )

        year = Year.from_int(self.year) if self.year is not None else None
        month = Month(self.month) if self.month is not None else None
        day = Day(self.day, self.formal) if self.day is not None else None

        self._validate_consistency(year)

        week_day = (
            StyledWeekDay(self.week_format, self.week_day) if self.week_day is not None else None
        )

        logger.debug("Built date: pattern=%s formal=%s", pattern.value, self.formal)

        return Date(year=year, month=month, day=day, week_day=week_day)
