"""
Fractions and decimals.
"""

from chinese_format.numeric.decimal import DECIMAL_POINT, Decimal
from chinese_format.numeric.fraction import FRACTION_SEPARATOR, Fraction

__all__ = [
    "DECIMAL_POINT",
    "Decimal",
    "FRACTION_SEPARATOR",
    "Fraction",
]
