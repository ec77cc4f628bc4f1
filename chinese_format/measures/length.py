"""
Единицы длины (счётные меры)

里 — "половина километра" (500 м), традиционная китайская единица.
"""

from chinese_format.core.conversion import VariantPair
from chinese_format.core.measure import CountMeasure


class Kilometer(CountMeasure):
    UNIT = "公里"


class HalfKilometer(CountMeasure):
    UNIT = "里"


class Meter(CountMeasure):
    UNIT = "米"


class Decimeter(CountMeasure):
    UNIT = "分米"


class Centimeter(CountMeasure):
    UNIT = VariantPair("厘米", "釐米")


class Millimeter(CountMeasure):
    UNIT = "毫米"
