"""
FormatConfig — библиотечные значения по умолчанию

DEFAULT_CONFIG — read-only экземпляр для всего процесса.
Builders принимают конфигурацию через from_config(), произвольное
значение рендерится через render(value, config).
"""

import logging
from typing import Any, Final, Optional

from pydantic import BaseModel, Field

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.conversion import to_chinese
from chinese_format.currency.style import CurrencyStyle
from chinese_format.gregorian.date.week import WeekFormat

logger = logging.getLogger(__name__)


class FormatConfig(BaseModel):
    """
    Настройки рендеринга.

    Immutable модель (frozen=True).
    """

    variant: Variant = Field(Variant.SIMPLIFIED, description="Вариант письменности")
    currency_style: CurrencyStyle = Field(
        CurrencyStyle.EVERYDAY_FORMAL, description="Стиль денежных сумм"
    )
    week_format: WeekFormat = Field(WeekFormat.XINGQI, description="Слово для недели в датах")
    formal_dates: bool = Field(True, description="Формальный регистр дня (号 вместо 日)")

    model_config = {"frozen": True}  # Immutable


DEFAULT_CONFIG: Final[FormatConfig] = FormatConfig()


def render(value: Any, config: Optional[FormatConfig] = None) -> Chinese:
    """
    Конверсия значения с вариантом письменности из конфигурации.

    Args:
        value: Любое значение, поддерживаемое to_chinese()
        config: Конфигурация (по умолчанию DEFAULT_CONFIG)

    Returns:
        Chinese

    Raises:
        TypeError: Если тип значения не поддерживает конверсию
    """
    effective_config = config if config is not None else DEFAULT_CONFIG
    logger.debug("Rendering %s with variant=%s", type(value).__name__, effective_config.variant.value)
    return to_chinese(value, effective_config.variant)
