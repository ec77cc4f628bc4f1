"""
Chinese — базовое значение, производимое всеми конверсиями

Каждая конверсия возвращает пару (logograms, omissible):
- logograms: строка иероглифов
- omissible: флаг "может быть опущено / заменено placeholder'ом"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. omissible — независимый флаг, НЕ выводится из logograms == ""
   (например, "零" может быть omissible)
2. Значение immutable: комбинирование всегда создаёт новый экземпляр
3. Сравнение со строкой учитывает только logograms
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


# =============================================================================
# ENUMS
# =============================================================================


class Variant(str, Enum):
    """Вариант письменности: упрощённые или традиционные иероглифы"""

    SIMPLIFIED = "simplified"
    TRADITIONAL = "traditional"


# =============================================================================
# CHINESE VALUE
# =============================================================================


@dataclass(frozen=True, order=True)
class Chinese:
    """
    Результат конверсии в китайский текст.

    Equality:
    - Chinese == Chinese: по (logograms, omissible)
    - Chinese == str: только по logograms (omissible игнорируется)

    Хеш берётся только от logograms, поэтому Chinese и равная ему
    строка взаимозаменяемы как ключи dict и элементы set.

    Examples:
        >>> Chinese("苹果", False) == "苹果"
        True
        >>> Chinese("零", True) == Chinese("零", False)
        False
    """

    logograms: str
    omissible: bool

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Chinese):
            return (self.logograms, self.omissible) == (other.logograms, other.omissible)
        if isinstance(other, str):
            return self.logograms == other
        return NotImplemented

    def __hash__(self) -> int:
        # Согласован с обоими видами равенства, включая Chinese == str
        return hash(self.logograms)

    def __str__(self) -> str:
        return self.logograms


# =============================================================================
# TO CHINESE CONTRACT
# =============================================================================


@runtime_checkable
class ToChinese(Protocol):
    """
    Контракт конверсии в Chinese.

    Конверсия инфаллибельна: все невалидные состояния отклоняются
    при конструировании доменных значений, не при рендеринге.
    """

    def to_chinese(self, variant: Variant) -> Chinese:
        ...
