"""
Numerals — разложение целого числа в китайскую числовую запись

Метод группировки: ten-thousand (по 4 разряда):
    万 = 10^4, 亿 = 10^8, 兆 = 10^12, 京 = 10^16, ... 载 = 10^44

Два набора символов:
- LOWER: стандартные цифры (一二三 ... 十百千)
- UPPER: anti-fraud цифры для финансовых сумм (壹贰叁 ... 拾佰仟)

Правила:
1. Серия нулей внутри числа сворачивается в один 零
2. Группа < 1000 после ненулевой старшей группы начинается с 零
3. Только LOWER: ведущее 一十 сокращается до 十 (17 → 十七)
4. Отрицательные числа получают префикс 负/負
"""

import logging
from enum import Enum
from typing import Final

from chinese_format.core.chinese import Variant

logger = logging.getLogger(__name__)


# =============================================================================
# ТАБЛИЦЫ СИМВОЛОВ
# =============================================================================


class NumeralCase(str, Enum):
    """Набор цифр: стандартный или anti-fraud (大写)"""

    LOWER = "lower"
    UPPER = "upper"


ZERO: Final[str] = "零"

# Цифры 0..9 по (case, variant)
DIGITS: Final[dict[tuple[NumeralCase, Variant], str]] = {
    (NumeralCase.LOWER, Variant.SIMPLIFIED): "零一二三四五六七八九",
    (NumeralCase.LOWER, Variant.TRADITIONAL): "零一二三四五六七八九",
    (NumeralCase.UPPER, Variant.SIMPLIFIED): "零壹贰叁肆伍陆柒捌玖",
    (NumeralCase.UPPER, Variant.TRADITIONAL): "零壹貳參肆伍陸柒捌玖",
}

# Разряды внутри группы: 10^1, 10^2, 10^3
SMALL_UNITS: Final[dict[NumeralCase, str]] = {
    NumeralCase.LOWER: "十百千",
    NumeralCase.UPPER: "拾佰仟",
}

# Единицы групп: 10^4, 10^8, ..., 10^44
GROUP_UNITS: Final[dict[Variant, tuple[str, ...]]] = {
    Variant.SIMPLIFIED: ("万", "亿", "兆", "京", "垓", "秭", "穰", "沟", "涧", "正", "载"),
    Variant.TRADITIONAL: ("萬", "億", "兆", "京", "垓", "秭", "穰", "溝", "澗", "正", "載"),
}

NEGATIVE: Final[dict[Variant, str]] = {
    Variant.SIMPLIFIED: "负",
    Variant.TRADITIONAL: "負",
}

GROUP_SIZE: Final[int] = 4
GROUP_BASE: Final[int] = 10**GROUP_SIZE

# Верхняя граница (исключительно) представимых модулей
MAX_MAGNITUDE: Final[int] = GROUP_BASE ** (len(GROUP_UNITS[Variant.SIMPLIFIED]) + 1)


# =============================================================================
# РАЗЛОЖЕНИЕ
# =============================================================================


def _split_groups(magnitude: int) -> list[int]:
    """Группы по 4 разряда, начиная с младшей."""
    groups = []
    while magnitude > 0:
        magnitude, group = divmod(magnitude, GROUP_BASE)
        groups.append(group)
    return groups


def _group_to_chinese(group: int, digits: str, small_units: str) -> str:
    """
    Группа 1..9999 без единицы группы.

    Нули внутри группы сворачиваются в один 零, хвостовые нули опускаются.
    """
    result = []
    pending_zero = False

    for power in range(GROUP_SIZE - 1, -1, -1):
        digit = (group // 10**power) % 10

        if digit == 0:
            if result:
                pending_zero = True
            continue

        if pending_zero:
            result.append(digits[0])
            pending_zero = False

        result.append(digits[digit])
        if power > 0:
            result.append(small_units[power - 1])

    return "".join(result)


def integer_to_chinese(
    value: int,
    variant: Variant,
    case: NumeralCase = NumeralCase.LOWER,
) -> str:
    """
    Конверсия целого числа в китайскую числовую запись.

    Args:
        value: Целое число (может быть отрицательным)
        variant: Упрощённые/традиционные иероглифы
        case: Стандартный или anti-fraud набор цифр

    Returns:
        Числовая запись

    Raises:
        ValueError: Если |value| >= 10^48 (за пределами таблицы единиц)

    Examples:
        >>> integer_to_chinese(3017, Variant.SIMPLIFIED)
        '三千零一十七'
        >>> integer_to_chinese(10008, Variant.SIMPLIFIED)
        '一万零八'
        >>> integer_to_chinese(-58, Variant.TRADITIONAL)
        '負五十八'
        >>> integer_to_chinese(7, Variant.SIMPLIFIED, NumeralCase.UPPER)
        '柒'
    """
    magnitude = abs(value)

    if magnitude >= MAX_MAGNITUDE:
        raise ValueError(f"Integer magnitude out of numeral range: {value}")

    if magnitude == 0:
        return ZERO

    digits = DIGITS[(case, variant)]
    small_units = SMALL_UNITS[case]
    group_units = GROUP_UNITS[variant]

    groups = _split_groups(magnitude)

    parts = []
    zero_pending = False

    for index in range(len(groups) - 1, -1, -1):
        group = groups[index]

        if group == 0:
            # Пропуск пустой группы, если за ней ещё что-то будет
            zero_pending = bool(parts)
            continue

        if parts and (zero_pending or group < GROUP_BASE // 10):
            parts.append(ZERO)
        zero_pending = False

        parts.append(_group_to_chinese(group, digits, small_units))
        if index > 0:
            parts.append(group_units[index - 1])

    text = "".join(parts)

    if case == NumeralCase.LOWER and text.startswith(digits[1] + small_units[0]):
        text = text[1:]

    if value < 0:
        text = NEGATIVE[variant] + text

    logger.debug("Numeral expansion: %d -> %s", value, text)
    return text
