"""
Placeholders — замена omissible значений фиксированным текстом

Если обёрнутое значение omissible, его логограммы заменяются на REPLACEMENT,
но флаг omissible=True сохраняется (чтобы ChineseVec мог его обрезать).

- LingPlaceholder: замена на 零 (в числовых контекстах)
- EmptyPlaceholder: замена на "" (компонент просто исчезает)
"""

from typing import Any, ClassVar

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.conversion import to_chinese


class Placeholder:
    """Базовый placeholder; подклассы задают только REPLACEMENT."""

    REPLACEMENT: ClassVar[str] = ""

    __slots__ = ("wrapped",)

    def __init__(self, wrapped: Any) -> None:
        self.wrapped = wrapped

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wrapped!r})"

    def to_chinese(self, variant: Variant) -> Chinese:
        wrapped_chinese = to_chinese(self.wrapped, variant)

        if not wrapped_chinese.omissible:
            return wrapped_chinese

        return Chinese(logograms=self.REPLACEMENT, omissible=True)


class LingPlaceholder(Placeholder):
    """Omissible значение → 零"""

    REPLACEMENT: ClassVar[str] = "零"


class EmptyPlaceholder(Placeholder):
    """Omissible значение → пустая строка"""

    REPLACEMENT: ClassVar[str] = ""
