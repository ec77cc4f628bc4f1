"""
Renminbi — денежные суммы в юанях

Сумма = 元 (yuan) + 角 (dimes, 0-9) + 分 (cents, 0-9).

Правила рендеринга:
1. Нулевые компоненты исчезают (EmptyPlaceholder)
2. В неформальном регистре нулевые 毛 заменяются на 零: 七块零八分
3. Ведущие и хвостовые omissible компоненты обрезаются
4. Полностью нулевая сумма → рендеринг юаней (零元 / 零块)
5. Financial стиль: anti-fraud цифры + завершающий 整

Examples:
    9.38 (formal)     → 九元三角八分
    7.45 (informal)   → 七块四毛五分
    2.61 (financial)  → 贰元陆角壹分整
    0.40 (financial)  → 肆角整
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from pydantic import BaseModel, Field

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.errors import CentsOutOfRange, DimesOutOfRange
from chinese_format.core.measure import MultiRegisterMeasure, UnitMeasure
from chinese_format.core.numbers import Count, Financial
from chinese_format.core.placeholders import EmptyPlaceholder, LingPlaceholder
from chinese_format.core.vector import chinese_vec
from chinese_format.currency.style import CurrencyStyle

if TYPE_CHECKING:
    from chinese_format.config import FormatConfig

logger = logging.getLogger(__name__)

FINANCIAL_TERMINATOR: Final[str] = "整"

# Максимум для 角 и 分 включительно
SUBUNIT_MAX: Final[int] = 9


# =============================================================================
# UNIT MEASURES
# =============================================================================


class EverydayYuan(MultiRegisterMeasure):
    FORMAL_UNIT = "元"
    INFORMAL_UNIT = "块"


class FinancialYuan(UnitMeasure):
    UNIT = "元"


class EverydayDime(MultiRegisterMeasure):
    FORMAL_UNIT = "角"
    INFORMAL_UNIT = "毛"


class FinancialDime(UnitMeasure):
    UNIT = "角"


class EverydayCent(UnitMeasure):
    UNIT = "分"


class FinancialCent(UnitMeasure):
    UNIT = "分"


# =============================================================================
# COMPONENTS
# =============================================================================


@dataclass(frozen=True, order=True)
class Yuan:
    """Целая часть суммы; единица и цифры зависят от стиля."""

    value: int
    style: CurrencyStyle

    def __int__(self) -> int:
        return self.value

    def to_chinese(self, variant: Variant) -> Chinese:
        if self.style.is_financial:
            return FinancialYuan(Financial(self.value)).to_chinese(variant)
        return EverydayYuan(Count(self.value), self.style.is_formal).to_chinese(variant)


@dataclass(frozen=True, order=True)
class Dime:
    """
    Десятые доли юаня (角 / 毛).

    Raises:
        DimesOutOfRange: Если value > 9
    """

    value: int
    style: CurrencyStyle

    def __post_init__(self) -> None:
        if not 0 <= self.value <= SUBUNIT_MAX:
            raise DimesOutOfRange(self.value)

    def __int__(self) -> int:
        return self.value

    def to_chinese(self, variant: Variant) -> Chinese:
        if self.style.is_financial:
            return FinancialDime(Financial(self.value)).to_chinese(variant)
        return EverydayDime(Count(self.value), self.style.is_formal).to_chinese(variant)


@dataclass(frozen=True, order=True)
class Cent:
    """
    Сотые доли юаня (分, одинаково в обоих регистрах).

    Raises:
        CentsOutOfRange: Если value > 9
    """

    value: int
    style: CurrencyStyle

    def __post_init__(self) -> None:
        if not 0 <= self.value <= SUBUNIT_MAX:
            raise CentsOutOfRange(self.value)

    def __int__(self) -> int:
        return self.value

    def to_chinese(self, variant: Variant) -> Chinese:
        if self.style.is_financial:
            return FinancialCent(Financial(self.value)).to_chinese(variant)
        return EverydayCent(Count(self.value)).to_chinese(variant)


# =============================================================================
# CURRENCY
# =============================================================================


@dataclass(frozen=True, order=True)
class RenminbiCurrency:
    """
    Провалидированная сумма в юанях. Создаётся через RenminbiCurrencyBuilder.
    """

    yuan: Yuan
    dimes: Dime
    cents: Cent
    style: CurrencyStyle

    def to_chinese(self, variant: Variant) -> Chinese:
        if self.style is CurrencyStyle.EVERYDAY_INFORMAL:
            dimes = LingPlaceholder(self.dimes)
        else:
            dimes = EmptyPlaceholder(self.dimes)

        components = (
            chinese_vec(
                variant,
                EmptyPlaceholder(self.yuan),
                dimes,
                EmptyPlaceholder(self.cents),
            )
            .trim_start()
            .trim_end()
            .collect()
        )

        # Нулевая сумма: все компоненты omissible
        if components.omissible:
            components = self.yuan.to_chinese(variant)

        if self.style.is_financial:
            return chinese_vec(variant, components.logograms, FINANCIAL_TERMINATOR).collect()

        return components


# =============================================================================
# BUILDER
# =============================================================================


class RenminbiCurrencyBuilder(BaseModel):
    """
    Immutable fluent builder суммы.

    Каждый with_* возвращает новый builder; типовые ошибки полей
    (отрицательные значения, неизвестный стиль) отклоняются pydantic,
    диапазоны 角 / 分 проверяются в build().

    Examples:
        >>> (
        ...     RenminbiCurrencyBuilder()
        ...     .with_yuan(7)
        ...     .with_dimes(4)
        ...     .with_cents(5)
        ...     .with_style(CurrencyStyle.EVERYDAY_INFORMAL)
        ...     .build()
        ...     .to_chinese(Variant.SIMPLIFIED)
        ... )
        Chinese(logograms='七块四毛五分', omissible=False)
    """

    yuan: int = Field(0, ge=0, strict=True, description="Целые юани")
    dimes: int = Field(0, ge=0, strict=True, description="角, допустимо 0-9")
    cents: int = Field(0, ge=0, strict=True, description="分, допустимо 0-9")
    style: CurrencyStyle = Field(CurrencyStyle.EVERYDAY_FORMAL, description="Стиль записи")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_config(cls, config: "FormatConfig") -> "RenminbiCurrencyBuilder":
        """Builder со стилем из конфигурации."""
        return cls(style=config.currency_style)

    def _with(self, **changes: Any) -> "RenminbiCurrencyBuilder":
        return type(self).model_validate({**self.model_dump(), **changes})

    def with_yuan(self, yuan: int) -> "RenminbiCurrencyBuilder":
        return self._with(yuan=yuan)

    def with_dimes(self, dimes: int) -> "RenminbiCurrencyBuilder":
        return self._with(dimes=dimes)

    def with_cents(self, cents: int) -> "RenminbiCurrencyBuilder":
        return self._with(cents=cents)

    def with_style(self, style: CurrencyStyle) -> "RenminbiCurrencyBuilder":
        return self._with(style=style)

    def build(self) -> RenminbiCurrency:
        """
        Валидация диапазонов и создание суммы.

        Returns:
            RenminbiCurrency

        Raises:
            DimesOutOfRange: Если dimes > 9
            CentsOutOfRange: Если cents > 9
        """
        currency = RenminbiCurrency(
            yuan=Yuan(self.yuan, self.style),
            dimes=Dime(self.dimes, self.style),
            cents=Cent(self.cents, self.style),
            style=self.style,
        )

        logger.debug(
            "Built renminbi amount: yuan=%d dimes=%d cents=%d style=%s",
            self.yuan,
            self.dimes,
            self.cents,
            self.style.value,
        )

        return currency
