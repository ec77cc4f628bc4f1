"""
Core model: Chinese value, conversion contract, numerals, placeholders,
measures and ChineseVec.
"""

from chinese_format.core.chinese import Chinese, ToChinese, Variant
from chinese_format.core.conversion import VariantPair, to_chinese
from chinese_format.core.digits import DigitSequence
from chinese_format.core.errors import (
    CentsOutOfRange,
    ChineseFormatError,
    DayOutOfRange,
    DimesOutOfRange,
    HourOutOfRange,
    InvalidDate,
    InvalidDatePattern,
    MinuteOutOfRange,
    MonthOutOfRange,
    SecondOutOfRange,
    WeekDayOutOfRange,
    ZeroDenominator,
)
from chinese_format.core.measure import (
    CountMeasure,
    Measure,
    MultiRegisterMeasure,
    NoCopyMeasure,
    UnitMeasure,
)
from chinese_format.core.numbers import Count, Financial, Sign
from chinese_format.core.numerals import NumeralCase, integer_to_chinese
from chinese_format.core.padding import LeftPadder
from chinese_format.core.placeholders import (
    EmptyPlaceholder,
    LingPlaceholder,
    Placeholder,
)
from chinese_format.core.vector import ChineseVec, chinese_vec

__all__ = [
    # Chinese value
    "Chinese",
    "ToChinese",
    "Variant",
    "VariantPair",
    "to_chinese",
    # Numbers
    "Count",
    "DigitSequence",
    "Financial",
    "NumeralCase",
    "Sign",
    "integer_to_chinese",
    # Composition
    "ChineseVec",
    "EmptyPlaceholder",
    "LeftPadder",
    "LingPlaceholder",
    "Placeholder",
    "chinese_vec",
    # Measures
    "CountMeasure",
    "Measure",
    "MultiRegisterMeasure",
    "NoCopyMeasure",
    "UnitMeasure",
    # Errors
    "CentsOutOfRange",
    "ChineseFormatError",
    "DayOutOfRange",
    "DimesOutOfRange",
    "HourOutOfRange",
    "InvalidDate",
    "InvalidDatePattern",
    "MinuteOutOfRange",
    "MonthOutOfRange",
    "SecondOutOfRange",
    "WeekDayOutOfRange",
    "ZeroDenominator",
]
