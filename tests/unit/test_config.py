"""
Тесты для конфигурации: FormatConfig, DEFAULT_CONFIG, render()
"""

import pytest
from pydantic import ValidationError

from chinese_format import DEFAULT_CONFIG, Chinese, FormatConfig, Variant, render
from chinese_format.currency import CurrencyStyle, RenminbiCurrencyBuilder
from chinese_format.gregorian.date import DateBuilder, WeekDay, WeekFormat


class TestFormatConfig:
    """Тесты для FormatConfig"""

    def test_defaults(self) -> None:
        """Значения по умолчанию"""
        assert DEFAULT_CONFIG.variant == Variant.SIMPLIFIED
        assert DEFAULT_CONFIG.currency_style == CurrencyStyle.EVERYDAY_FORMAL
        assert DEFAULT_CONFIG.week_format == WeekFormat.XINGQI
        assert DEFAULT_CONFIG.formal_dates is True

    def test_immutable(self) -> None:
        """Конфигурация immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.variant = Variant.TRADITIONAL  # type: ignore

    def test_from_values(self) -> None:
        """Значения перечислений принимаются строками"""
        config = FormatConfig(variant="traditional", currency_style="financial")
        assert config.variant is Variant.TRADITIONAL
        assert config.currency_style is CurrencyStyle.FINANCIAL

    def test_invalid_variant(self) -> None:
        """Неизвестный вариант письменности"""
        with pytest.raises(ValidationError):
            FormatConfig(variant="cantonese")


class TestRender:
    """Тесты для render()"""

    def test_default_config(self) -> None:
        """По умолчанию — упрощённые иероглифы"""
        assert render(-58) == Chinese("负五十八", False)

    def test_custom_variant(self) -> None:
        """Вариант из конфигурации"""
        config = FormatConfig(variant=Variant.TRADITIONAL)
        assert render(-58, config) == Chinese("負五十八", False)

    def test_unsupported_value(self) -> None:
        """Неподдерживаемый тип"""
        with pytest.raises(TypeError):
            render(object())


class TestBuildersFromConfig:
    """Тесты для from_config()"""

    def test_currency_style(self) -> None:
        """Стиль суммы из конфигурации"""
        config = FormatConfig(currency_style=CurrencyStyle.FINANCIAL)
        currency = RenminbiCurrencyBuilder.from_config(config).with_yuan(7).build()
        assert render(currency, config) == "柒元整"

    def test_date_settings(self) -> None:
        """Регистр дня и формат недели из конфигурации"""
        config = FormatConfig(formal_dates=False, week_format=WeekFormat.ZHOU)
        date = (
            DateBuilder.from_config(config).with_day(16).with_week_day(WeekDay.TUESDAY).build()
        )
        assert render(date, config) == "十六日周二"
