"""
Decimal — десятичная дробь: знак + целая часть + цифры после запятой

Дробная часть читается поразрядно: 35.28039 → 三十五点二八零三九.
Знак выносится вперёд и сохраняется для нулевой целой части: -0.5 → 负零点五.
"""

from dataclasses import dataclass, field
from typing import Final

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.conversion import VariantPair
from chinese_format.core.digits import DigitSequence
from chinese_format.core.numbers import Sign
from chinese_format.core.vector import chinese_vec

DECIMAL_POINT: Final[VariantPair] = VariantPair("点", "點")


@dataclass(frozen=True, order=True)
class Decimal:
    """
    Десятичное число.

    Пустая дробная часть → рендерится только целая часть (без 点).
    Дробная часть "0" не пустая: 7.0 → 七点零.

    negative нужен только для записи вида -0.x, где целая часть
    не несёт знака; при отрицательной integer выставляется автоматически.
    """

    integer: int
    fractional: DigitSequence = field(default_factory=DigitSequence)
    negative: bool = False

    def __post_init__(self) -> None:
        if self.integer < 0:
            object.__setattr__(self, "negative", True)

    @classmethod
    def parse(cls, text: str) -> "Decimal":
        """
        Разбор десятичной записи "35.28039" / "-7.25" / "-0.5" / "12".

        Raises:
            ValueError: Если запись не является десятичным числом
        """
        integer_text, _, fractional_text = text.partition(".")
        if integer_text in ("", "-", "+"):
            raise ValueError(f"Invalid decimal: {text!r}")

        return cls(
            integer=int(integer_text),
            fractional=DigitSequence.parse(fractional_text),
            negative=integer_text.startswith("-"),
        )

    @property
    def is_negative(self) -> bool:
        return self.negative

    def to_chinese(self, variant: Variant) -> Chinese:
        sign = Sign(-1 if self.is_negative else 0)
        integer = abs(self.integer)

        if self.fractional.is_empty():
            return chinese_vec(variant, sign, integer).collect()

        return chinese_vec(variant, sign, integer, DECIMAL_POINT, self.fractional).collect()
