"""
chinese_format — conversion of values to Chinese text (Simplified / Traditional).

Examples:
    >>> from chinese_format import Variant, to_chinese
    >>> to_chinese(305, Variant.SIMPLIFIED)
    Chinese(logograms='三百零五', omissible=False)
"""

from chinese_format.config import DEFAULT_CONFIG, FormatConfig, render
from chinese_format.core import (
    CentsOutOfRange,
    Chinese,
    ChineseFormatError,
    ChineseVec,
    Count,
    CountMeasure,
    DayOutOfRange,
    DigitSequence,
    DimesOutOfRange,
    EmptyPlaceholder,
    Financial,
    HourOutOfRange,
    InvalidDate,
    InvalidDatePattern,
    LeftPadder,
    LingPlaceholder,
    Measure,
    MinuteOutOfRange,
    MonthOutOfRange,
    MultiRegisterMeasure,
    NoCopyMeasure,
    NumeralCase,
    Placeholder,
    SecondOutOfRange,
    Sign,
    ToChinese,
    UnitMeasure,
    Variant,
    VariantPair,
    WeekDayOutOfRange,
    ZeroDenominator,
    chinese_vec,
    integer_to_chinese,
    to_chinese,
)
from chinese_format.numeric import Decimal, Fraction

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "FormatConfig",
    "render",
    # Core
    "Chinese",
    "ChineseVec",
    "Count",
    "CountMeasure",
    "DigitSequence",
    "EmptyPlaceholder",
    "Financial",
    "LeftPadder",
    "LingPlaceholder",
    "Measure",
    "MultiRegisterMeasure",
    "NoCopyMeasure",
    "NumeralCase",
    "Placeholder",
    "Sign",
    "ToChinese",
    "UnitMeasure",
    "Variant",
    "VariantPair",
    "chinese_vec",
    "integer_to_chinese",
    "to_chinese",
    # Numeric
    "Decimal",
    "Fraction",
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
