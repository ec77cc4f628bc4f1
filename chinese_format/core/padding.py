"""
LeftPadder — выравнивание логограмм слева до минимальной ширины
"""

from dataclasses import dataclass
from typing import Any

from chinese_format.core.chinese import Chinese, Variant
from chinese_format.core.conversion import to_chinese


@dataclass(frozen=True)
class LeftPadder:
    """
    Дополняет логограммы источника слева одной логограммой до min_width символов.

    Ширина считается в символах, а не в байтах.
    Omissible флаг источника сохраняется.

    Examples:
        >>> LeftPadder("零", 3, 7).to_chinese(Variant.SIMPLIFIED)
        Chinese(logograms='零零七', omissible=False)
    """

    logogram: str
    min_width: int
    source: Any

    def __post_init__(self) -> None:
        if len(self.logogram) != 1:
            raise ValueError(f"Padding must be a single logogram: {self.logogram!r}")
        if self.min_width < 0:
            raise ValueError(f"min_width cannot be negative: {self.min_width}")

    def to_chinese(self, variant: Variant) -> Chinese:
        source_chinese = to_chinese(self.source, variant)
        missing = self.min_width - len(source_chinese.logograms)

        if missing <= 0:
            return source_chinese

        return Chinese(
            logograms=self.logogram * missing + source_chinese.logograms,
            omissible=source_chinese.omissible,
        )
