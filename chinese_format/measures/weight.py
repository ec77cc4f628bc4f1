"""
Единицы веса (счётные меры)
"""

from chinese_format.core.measure import CountMeasure


class HalfKilogram(CountMeasure):
    """斤 — 500 г"""

    UNIT = "斤"


class Kilogram(CountMeasure):
    UNIT = "公斤"
