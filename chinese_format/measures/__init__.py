"""
Length and weight measures.
"""

from chinese_format.measures.length import (
    Centimeter,
    Decimeter,
    HalfKilometer,
    Kilometer,
    Meter,
    Millimeter,
)
from chinese_format.measures.weight import HalfKilogram, Kilogram

__all__ = [
    "Centimeter",
    "Decimeter",
    "HalfKilogram",
    "HalfKilometer",
    "Kilogram",
    "Kilometer",
    "Meter",
    "Millimeter",
]
