"""
DigitSequence — последовательность десятичных цифр

Используется там, где число читается поразрядно:
дробная часть Decimal, год (1998 → 一九九八).
"""

from dataclasses import dataclass
from typing import Final, Iterator

from chinese_format.core.chinese import Chinese, Variant

CHINESE_DIGITS: Final[str] = "零一二三四五六七八九"


@dataclass(frozen=True, order=True)
class DigitSequence:
    """
    Immutable последовательность цифр 0..9.

    Упорядочивание — лексикографическое по цифрам.
    Omissible только пустая последовательность ("0" → 零, не omissible).

    Examples:
        >>> DigitSequence.parse("2014").to_chinese(Variant.SIMPLIFIED)
        Chinese(logograms='二零一四', omissible=False)
        >>> DigitSequence().to_chinese(Variant.SIMPLIFIED)
        Chinese(logograms='', omissible=True)
    """

    digits: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for digit in self.digits:
            if not 0 <= digit <= 9:
                raise ValueError(f"Not a decimal digit: {digit}")

    @classmethod
    def parse(cls, text: str) -> "DigitSequence":
        """
        Разбор строки цифр.

        Raises:
            ValueError: Если строка содержит нецифровые символы
        """
        if not text.isascii() or not (text.isdigit() or text == ""):
            raise ValueError(f"Invalid digit sequence: {text!r}")
        return cls(tuple(int(char) for char in text))

    @classmethod
    def from_int(cls, value: int) -> "DigitSequence":
        """
        Цифры неотрицательного числа (0 → (0,)).

        Raises:
            ValueError: Если value < 0
        """
        if value < 0:
            raise ValueError(f"Digit sequence cannot be negative: {value}")
        return cls.parse(str(value))

    def __int__(self) -> int:
        return int("".join(str(digit) for digit in self.digits) or "0")

    def __iter__(self) -> Iterator[int]:
        return iter(self.digits)

    def __len__(self) -> int:
        return len(self.digits)

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self.digits)

    def is_empty(self) -> bool:
        return not self.digits

    def to_chinese(self, variant: Variant) -> Chinese:
        logograms = "".join(CHINESE_DIGITS[digit] for digit in self.digits)
        return Chinese(logograms=logograms, omissible=logograms == "")
