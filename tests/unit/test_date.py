"""
Тесты для григорианских дат

Проверяет:
1. Компоненты даты (год, месяц, день, день недели)
2. Допустимые комбинации компонентов
3. Порядок проверок в build()
4. Рендеринг дат в обоих вариантах письменности
"""

import pytest
from pydantic import ValidationError

from chinese_format.core import (
    Chinese,
    DayOutOfRange,
    InvalidDate,
    InvalidDatePattern,
    MonthOutOfRange,
    Variant,
    WeekDayOutOfRange,
)
from chinese_format.gregorian.date import (
    DateBuilder,
    DatePattern,
    Day,
    Month,
    StyledWeekDay,
    WeekDay,
    WeekFormat,
    Year,
    validate_pattern,
)


# =============================================================================
# COMPONENT TESTS
# =============================================================================


class TestDateComponents:
    """Тесты для Year, Month, Day"""

    def test_year_digit_by_digit(self) -> None:
        """Год читается поразрядно"""
        assert Year.from_int(2014).to_chinese(Variant.SIMPLIFIED) == Chinese("二零一四年", False)

    @pytest.mark.parametrize(
        "year, is_leap",
        [(1996, True), (2000, True), (1900, False), (2023, False), (2024, True)],
    )
    def test_leap_year(self, year: int, is_leap: bool) -> None:
        """Григорианское правило високосного года"""
        assert Year.from_int(year).is_leap() is is_leap

    def test_month(self) -> None:
        """Месяц 1-12"""
        assert Month(12).to_chinese(Variant.SIMPLIFIED) == Chinese("十二月", False)
        with pytest.raises(MonthOutOfRange, match="Month out of range: 90"):
            Month(90)
        with pytest.raises(MonthOutOfRange):
            Month(0)

    def test_day_registers(self) -> None:
        """号 / 號 формально, 日 неформально"""
        assert Day(29, True).to_chinese(Variant.SIMPLIFIED) == "二十九号"
        assert Day(29, True).to_chinese(Variant.TRADITIONAL) == "二十九號"
        assert Day.informal_day(29).to_chinese(Variant.TRADITIONAL) == "二十九日"
        assert Day.formal_day(3) == Day(3, True)

    def test_day_range(self) -> None:
        """День 1-31"""
        with pytest.raises(DayOutOfRange, match="Day out of range: 90"):
            Day(90, True)
        with pytest.raises(DayOutOfRange):
            Day(0, False)


class TestWeekDay:
    """Тесты для дней недели"""

    def test_from_ordinal(self) -> None:
        """Воскресенье = 0 ... суббота = 6"""
        assert WeekDay.from_ordinal(0) is WeekDay.SUNDAY
        assert WeekDay.from_ordinal(6) is WeekDay.SATURDAY

    def test_from_ordinal_out_of_range(self) -> None:
        """Номер > 6 отклоняется"""
        with pytest.raises(WeekDayOutOfRange, match="Week day out of range: 7"):
            WeekDay.from_ordinal(7)

    @pytest.mark.parametrize(
        "week_format, expected",
        [
            (WeekFormat.XINGQI, "星期天"),
            (WeekFormat.LIBAI, "礼拜天"),
            (WeekFormat.ZHOU, "周日"),
        ],
    )
    def test_sunday(self, week_format: WeekFormat, expected: str) -> None:
        """Воскресенье: 天, но 日 для 周"""
        styled = StyledWeekDay(week_format, WeekDay.SUNDAY)
        assert styled.to_chinese(Variant.SIMPLIFIED) == Chinese(expected, False)

    def test_numbered_days(self) -> None:
        """Остальные дни — по номеру"""
        assert StyledWeekDay(WeekFormat.XINGQI, WeekDay.TUESDAY).to_chinese(
            Variant.SIMPLIFIED
        ) == "星期二"
        assert StyledWeekDay(WeekFormat.LIBAI, WeekDay.SATURDAY).to_chinese(
            Variant.TRADITIONAL
        ) == "禮拜六"


# =============================================================================
# PATTERN TESTS
# =============================================================================


class TestDatePattern:
    """Тесты для допустимых комбинаций"""

    @pytest.mark.parametrize("flags", ["y", "m", "d", "w", "ym", "ymd", "md", "mdw", "dw", "ymdw"])
    def test_valid_patterns(self, flags: str) -> None:
        """Все допустимые комбинации"""
        pattern = validate_pattern("y" in flags, "m" in flags, "d" in flags, "w" in flags)
        assert pattern.value == flags

    @pytest.mark.parametrize("flags", ["", "yd", "yw", "mw", "ydw", "ymw"])
    def test_invalid_patterns(self, flags: str) -> None:
        """Недопустимые комбинации"""
        with pytest.raises(InvalidDatePattern) as exc_info:
            validate_pattern("y" in flags, "m" in flags, "d" in flags, "w" in flags)
        assert exc_info.value.pattern == flags

    def test_component_flags(self) -> None:
        """has_* свойства"""
        pattern = DatePattern.MONTH_DAY_WEEK_DAY
        assert not pattern.has_year
        assert pattern.has_month
        assert pattern.has_day
        assert pattern.has_week_day


# =============================================================================
# DATE BUILDER TESTS
# =============================================================================


class TestDateBuilder:
    """Тесты для DateBuilder и Date"""

    def test_full_date(self) -> None:
        """Полная дата, неформальный регистр, 礼拜"""
        date = (
            DateBuilder()
            .with_year(1998)
            .with_month(6)
            .with_day(13)
            .with_week_day(WeekDay.SATURDAY)
            .with_week_format(WeekFormat.LIBAI)
            .with_formal(False)
            .build()
        )
        assert date.to_chinese(Variant.SIMPLIFIED) == Chinese("一九九八年六月十三日礼拜六", False)
        assert date.to_chinese(Variant.TRADITIONAL) == Chinese("一九九八年六月十三日禮拜六", False)

    def test_single_components(self) -> None:
        """Отдельные компоненты"""
        assert DateBuilder().with_year(1998).build().to_chinese(Variant.SIMPLIFIED) == "一九九八年"
        assert DateBuilder().with_month(4).build().to_chinese(Variant.SIMPLIFIED) == "四月"
        single_day = DateBuilder().with_day(29).build()
        assert single_day.to_chinese(Variant.SIMPLIFIED) == "二十九号"
        assert single_day.to_chinese(Variant.TRADITIONAL) == "二十九號"
        single_week_day = (
            DateBuilder().with_week_day(WeekDay.SUNDAY).with_week_format(WeekFormat.ZHOU).build()
        )
        assert single_week_day.to_chinese(Variant.SIMPLIFIED) == "周日"

    def test_patterns(self) -> None:
        """Комбинации компонентов"""
        year_month = DateBuilder().with_year(1996).with_month(2).build()
        assert year_month.to_chinese(Variant.SIMPLIFIED) == "一九九六年二月"

        year_month_day = (
            DateBuilder().with_year(2014).with_month(12).with_day(25).with_formal(False).build()
        )
        assert year_month_day.to_chinese(Variant.SIMPLIFIED) == "二零一四年十二月二十五日"

        month_day_week_day = (
            DateBuilder()
            .with_month(10)
            .with_day(17)
            .with_formal(False)
            .with_week_day(WeekDay.MONDAY)
            .build()
        )
        assert month_day_week_day.to_chinese(Variant.SIMPLIFIED) == "十月十七日星期一"

        day_week_day = (
            DateBuilder()
            .with_day(16)
            .with_formal(False)
            .with_week_format(WeekFormat.ZHOU)
            .with_week_day(WeekDay.TUESDAY)
            .build()
        )
        assert day_week_day.to_chinese(Variant.SIMPLIFIED) == "十六日周二"

    def test_empty_builder_invalid(self) -> None:
        """Дата без компонентов недопустима"""
        with pytest.raises(InvalidDatePattern):
            DateBuilder().build()

    def test_invalid_pattern(self) -> None:
        """Год + день без месяца"""
        with pytest.raises(InvalidDatePattern, match="Invalid date pattern: yd"):
            DateBuilder().with_year(2023).with_day(9).build()

    def test_pattern_checked_before_ranges(self) -> None:
        """Проверка комбинации раньше диапазонов"""
        with pytest.raises(InvalidDatePattern):
            DateBuilder().with_year(2023).with_day(90).build()

    def test_month_checked_before_day(self) -> None:
        """Месяц проверяется раньше дня"""
        with pytest.raises(MonthOutOfRange, match="Month out of range: 67"):
            DateBuilder().with_year(2023).with_month(67).with_day(90).build()

    def test_day_out_of_range(self) -> None:
        """День вне 1-31"""
        with pytest.raises(DayOutOfRange, match="Day out of range: 90"):
            DateBuilder().with_year(2023).with_month(2).with_day(90).build()

    def test_thirty_day_month(self) -> None:
        """31 апреля не существует"""
        with pytest.raises(InvalidDate, match="Invalid date: 4-31") as exc_info:
            DateBuilder().with_month(4).with_day(31).build()
        assert exc_info.value.year is None
        assert exc_info.value.month == 4
        assert exc_info.value.day == 31

    def test_february_non_leap(self) -> None:
        """29 февраля невисокосного года"""
        with pytest.raises(InvalidDate, match="Invalid date: 2023-2-29"):
            DateBuilder().with_year(2023).with_month(2).with_day(29).build()

    def test_february_leap(self) -> None:
        """29 февраля високосного года"""
        date = DateBuilder().with_year(2024).with_month(2).with_day(29).build()
        assert date.to_chinese(Variant.SIMPLIFIED) == "二零二四年二月二十九号"

    def test_february_without_year(self) -> None:
        """Без года 29 февраля допускается, 30 — нет"""
        DateBuilder().with_month(2).with_day(29).build()
        with pytest.raises(InvalidDate, match="Invalid date: 2-30"):
            DateBuilder().with_month(2).with_day(30).build()

    def test_week_day_not_checked(self) -> None:
        """Согласованность дня недели не проверяется"""
        builder = DateBuilder().with_month(5).with_day(13)
        builder.with_week_day(WeekDay.TUESDAY).build()
        builder.with_week_day(WeekDay.SATURDAY).build()

    def test_defaults(self) -> None:
        """По умолчанию: формальный регистр, 星期"""
        builder = DateBuilder()
        assert builder.formal is True
        assert builder.week_format == WeekFormat.XINGQI

    def test_non_integer_month_rejected(self) -> None:
        """Типовые ошибки полей отклоняются pydantic"""
        with pytest.raises(ValidationError):
            DateBuilder().with_month("June")  # type: ignore
        with pytest.raises(ValidationError):
            DateBuilder().with_year(-5)

    def test_ordering(self) -> None:
        """Даты упорядочены по году (как числу), месяцу, дню"""
        earlier = DateBuilder().with_year(999).with_month(6).build()
        later = DateBuilder().with_year(2024).with_month(1).build()
        assert earlier < later
        assert DateBuilder().with_month(3).build() < DateBuilder().with_month(11).build()
        assert sorted([later, earlier]) == [earlier, later]

    def test_ordering_missing_component_first(self) -> None:
        """Отсутствующий компонент предшествует присутствующему"""
        month_only = DateBuilder().with_month(5).build()
        with_year = DateBuilder().with_year(1998).with_month(5).build()
        assert month_only < with_year
        assert not with_year < month_only
        assert month_only <= DateBuilder().with_month(5).build()
