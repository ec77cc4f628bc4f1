"""
ChineseVec — упорядоченная последовательность Chinese значений

Операции:
- trim_start / trim_end: удаление omissible префикса / суффикса
- collect: конкатенация логограмм; omissible = все элементы omissible
  (для пустой последовательности — True)

Рендеринг элементов выполняется eagerly при конструировании:
trim работает с конкретными флагами, а не с отложенными вычислениями.
"""

from typing import Any, Iterable, Iterator

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.conversion import to_chinese


class ChineseVec:
    """
    Immutable последовательность уже отрендеренных Chinese.

    Examples:
        >>> vec = chinese_vec(Variant.SIMPLIFIED, 8, "", "好", "", 0)
        >>> vec.trim_end().collect()
        Chinese(logograms='八好', omissible=False)
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Chinese] = ()) -> None:
        self._items: tuple[Chinese, ...] = tuple(items)

    @classmethod
    def from_values(cls, variant: Variant, values: Iterable[Any]) -> "ChineseVec":
        """
        Eager конверсия разнородных значений с одним вариантом письменности.

        Args:
            variant: Вариант письменности для всех элементов
            values: Значения, поддерживаемые to_chinese()

        Returns:
            ChineseVec в исходном порядке
        """
        return cls(to_chinese(value, variant) for value in values)

    def trim_start(self) -> "ChineseVec":
        """Новый вектор без ведущих omissible элементов."""
        index = 0
        while index < len(self._items) and self._items[index].omissible:
            index += 1
        return ChineseVec(self._items[index:])

    def trim_end(self) -> "ChineseVec":
        """Новый вектор без хвостовых omissible элементов."""
        end = len(self._items)
        while end > 0 and self._items[end - 1].omissible:
            end -= 1
        return ChineseVec(self._items[:end])

    def collect(self) -> Chinese:
        """Свёртка в одно Chinese значение."""
        return Chinese(
            logograms="".join(item.logograms for item in self._items),
            omissible=all(item.omissible for item in self._items),
        )

    def to_chinese(self, variant: Variant) -> Chinese:
        # Элементы уже отрендерены со своим вариантом
        return self.collect()

    def to_list(self) -> list[Chinese]:
        return list(self._items)

    def __iter__(self) -> Iterator[Chinese]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChineseVec):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ChineseVec({list(self._items)!r})"


def chinese_vec(variant: Variant, *values: Any) -> ChineseVec:
    """Сокращение для ChineseVec.from_values(variant, values)."""
    return ChineseVec.from_values(variant, values)
