"""
Fraction — дробь в китайской записи

Знаменатель читается первым: 3/8 → 八分之三 ("из восьми частей три").
Знак числителя выносится вперёд: -11/3 → 负三分之十一.
"""

from dataclasses import dataclass

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.errors import ZeroDenominator
from chinese_format.core.numbers import Sign
from chinese_format.core.vector import chinese_vec

FRACTION_SEPARATOR = "分之"


@dataclass(frozen=True, order=True)
class Fraction:
    """
    Дробь numerator / denominator.

    Порядок полей (denominator, numerator) совпадает с порядком чтения,
    он же определяет упорядочивание.

    Examples:
        >>> Fraction.try_new(8, 3).to_chinese(Variant.SIMPLIFIED)
        Chinese(logograms='八分之三', omissible=False)
    """

    denominator: int
    numerator: int

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ZeroDenominator()
        if self.denominator < 0:
            raise ValueError(f"Denominator cannot be negative: {self.denominator}")

    @classmethod
    def try_new(cls, denominator: int, numerator: int) -> "Fraction":
        """
        Создание дроби.

        Raises:
            ZeroDenominator: Если denominator == 0
        """
        return cls(denominator=denominator, numerator=numerator)

    def to_chinese(self, variant: Variant) -> Chinese:
        if self.numerator == 0:
            return Chinese(logograms="零", omissible=True)

        return chinese_vec(
            variant,
            Sign(self.numerator),
            self.denominator,
            FRACTION_SEPARATOR,
            abs(self.numerator),
        ).collect()
