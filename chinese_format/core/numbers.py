"""
Numbers — числовые обёртки с особыми правилами рендеринга

- Count: количество (неотрицательное), 2 → 两/兩 вместо 二
- Financial: anti-fraud набор цифр для финансовых сумм (壹, 贰, 叁, ...)
- Sign: только класс знака (отрицательный / ноль / положительный)
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Final

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.conversion import VariantPair, to_chinese
from chinese_format.core.numerals import NumeralCase, integer_to_chinese

LIANG: Final[VariantPair] = VariantPair("两", "兩")

MINUS: Final[VariantPair] = VariantPair("负", "負")


def _validate_non_negative(type_name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{type_name} cannot be negative: {value}")


# =============================================================================
# COUNT
# =============================================================================


@dataclass(frozen=True, order=True)
class Count:
    """
    Количество предметов.

    Нерегулярное правило: 2 читается как 两 (兩), а не 二.

    Examples:
        >>> Count(2).to_chinese(Variant.SIMPLIFIED)
        Chinese(logograms='两', omissible=False)
        >>> Count(0).to_chinese(Variant.SIMPLIFIED)
        Chinese(logograms='零', omissible=True)
    """

    value: int

    def __post_init__(self) -> None:
        _validate_non_negative("Count", self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Count):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def to_chinese(self, variant: Variant) -> Chinese:
        if self.value == 2:
            return LIANG.to_chinese(variant)
        return to_chinese(self.value, variant)


# =============================================================================
# FINANCIAL
# =============================================================================


@dataclass(frozen=True, order=True)
class Financial:
    """
    Неотрицательное число для финансовых документов.

    Использует anti-fraud набор цифр: 7 → 柒, 2 → 贰 (貳).
    """

    value: int

    def __post_init__(self) -> None:
        _validate_non_negative("Financial", self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Financial):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def to_chinese(self, variant: Variant) -> Chinese:
        return Chinese(
            logograms=integer_to_chinese(self.value, variant, NumeralCase.UPPER),
            omissible=self.value == 0,
        )


# =============================================================================
# SIGN
# =============================================================================


@total_ordering
class Sign:
    """
    Знак числа.

    Идентичность определяется только классом знака (-1 / 0 / 1):
    Sign(-9) == Sign(-3), Sign(7) == Sign(13), но Sign(0) != Sign(13).
    Порядок классов: отрицательный < ноль < положительный.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    @property
    def signum(self) -> int:
        return (self._value > 0) - (self._value < 0)

    @property
    def is_negative(self) -> bool:
        return self._value < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.signum == other.signum

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.signum < other.signum

    def __hash__(self) -> int:
        return hash(self.signum)

    def __repr__(self) -> str:
        return f"Sign({self._value})"

    def to_chinese(self, variant: Variant) -> Chinese:
        if self.is_negative:
            return MINUS.to_chinese(variant)
        return to_chinese("", variant)
