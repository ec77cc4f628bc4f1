"""
Conversion — единая точка входа to_chinese(value, variant)

Поддерживаемые типы:
- str: логограммы без изменений, omissible = (text == "")
- int: числовая запись (стандартный набор), omissible = (value == 0)
- None: ("", omissible=True) — аналог отсутствующего значения
- ToChinese: делегирование value.to_chinese(variant)

VariantPair — выбор литерала по варианту письменности
(первый элемент для SIMPLIFIED, второй для TRADITIONAL).
"""

from dataclasses import dataclass
from typing import Any

from chinese_format.core.chinese import Chinese, ToChinese, Variant
from chinese_format.core.numerals import NumeralCase, integer_to_chinese


# =============================================================================
# DISPATCHER
# =============================================================================


def to_chinese(value: Any, variant: Variant) -> Chinese:
    """
    Конверсия произвольного значения в Chinese.

    Объекты ToChinese проверяются первыми: str-перечисления (WeekFormat, DayPart)
    рендерятся своим to_chinese, а не как строка.

    Args:
        value: str, int, None или объект, реализующий ToChinese
        variant: Вариант письменности

    Returns:
        Chinese

    Raises:
        TypeError: Если тип значения не поддерживает конверсию
    """
    if isinstance(value, ToChinese):
        return value.to_chinese(variant)

    if value is None:
        return Chinese(logograms="", omissible=True)

    if isinstance(value, str):
        return Chinese(logograms=value, omissible=value == "")

    # bool является подклассом int, но не числом
    if isinstance(value, int) and not isinstance(value, bool):
        return Chinese(
            logograms=integer_to_chinese(value, variant, NumeralCase.LOWER),
            omissible=value == 0,
        )

    raise TypeError(f"Cannot convert {type(value).__name__} to Chinese: {value!r}")


# =============================================================================
# VARIANT PAIR
# =============================================================================


@dataclass(frozen=True)
class VariantPair:
    """
    Пара литералов, выбираемых по варианту письменности.

    Результат выбранного элемента (включая omissible) возвращается без изменений.

    Examples:
        >>> VariantPair("两", "兩").to_chinese(Variant.TRADITIONAL)
        Chinese(logograms='兩', omissible=False)
    """

    simplified: Any
    traditional: Any

    def to_chinese(self, variant: Variant) -> Chinese:
        if variant == Variant.SIMPLIFIED:
            return to_chinese(self.simplified, variant)
        return to_chinese(self.traditional, variant)
