"""
CurrencyStyle — стиль записи денежных сумм
"""

from enum import Enum


class CurrencyStyle(str, Enum):
    """
    Стиль записи суммы.

    - EVERYDAY_FORMAL: 元 / 角 / 分, стандартные цифры
    - EVERYDAY_INFORMAL: 块 / 毛 / 分, стандартные цифры
    - FINANCIAL: anti-fraud цифры (壹, 贰, ...) и завершающий 整
    """

    EVERYDAY_FORMAL = "everyday_formal"
    EVERYDAY_INFORMAL = "everyday_informal"
    FINANCIAL = "financial"

    @property
    def is_financial(self) -> bool:
        return self is CurrencyStyle.FINANCIAL

    @property
    def is_formal(self) -> bool:
        """Формальный регистр единиц (元 / 角); financial всегда формальный."""
        return self is not CurrencyStyle.EVERYDAY_INFORMAL
