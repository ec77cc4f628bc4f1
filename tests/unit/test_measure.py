"""
Тесты для мер: UnitMeasure, CountMeasure, MultiRegisterMeasure, NoCopyMeasure,
а также единиц длины и веса
"""

import dataclasses

import pytest

from chinese_format.core import (
    Chinese,
    Count,
    CountMeasure,
    DigitSequence,
    MultiRegisterMeasure,
    NoCopyMeasure,
    UnitMeasure,
    Variant,
    VariantPair,
)
from chinese_format.measures import (
    Centimeter,
    Decimeter,
    HalfKilogram,
    HalfKilometer,
    Kilogram,
    Kilometer,
    Meter,
    Millimeter,
)


class Apple(UnitMeasure):
    UNIT = "苹果"


class Unitless(UnitMeasure):
    UNIT = ""


class Cup(CountMeasure):
    UNIT = VariantPair("杯", "盃")


class Money(MultiRegisterMeasure):
    FORMAL_UNIT = "元"
    INFORMAL_UNIT = "块"


class Code(NoCopyMeasure):
    UNIT = "号码"


# =============================================================================
# MEASURE SHAPES TESTS
# =============================================================================


class TestUnitMeasure:
    """Тесты для UnitMeasure"""

    def test_value_then_unit(self) -> None:
        """Значение, затем единица"""
        assert Apple(3).to_chinese(Variant.SIMPLIFIED) == Chinese("三苹果", False)

    def test_omissible_from_value(self) -> None:
        """Omissible определяется значением, не единицей"""
        assert Apple(0).to_chinese(Variant.SIMPLIFIED) == Chinese("零苹果", True)
        assert Unitless(3).to_chinese(Variant.SIMPLIFIED) == Chinese("三", False)

    def test_accessors(self) -> None:
        """value() и unit()"""
        apple = Apple(4)
        assert apple.value() == 4
        assert apple.unit() == "苹果"

    def test_immutable(self) -> None:
        """Меры immutable"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Apple(3).quantity = 4  # type: ignore


class TestCountMeasure:
    """Тесты для CountMeasure"""

    def test_two_is_liang(self) -> None:
        """Count внутри меры: 2 → 两"""
        assert Cup.of(2).to_chinese(Variant.SIMPLIFIED) == Chinese("两杯", False)
        assert Cup.of(2).to_chinese(Variant.TRADITIONAL) == Chinese("兩盃", False)

    def test_of_wraps_count(self) -> None:
        """of(int) эквивалентно конструированию с Count"""
        assert Cup.of(5) == Cup(Count(5))
        assert int(Cup.of(5)) == 5

    def test_plain_int_becomes_count(self) -> None:
        """Мера из int хранит Count и читает 2 как 两"""
        assert Kilometer(2).quantity == Count(2)
        assert isinstance(Kilometer(2).quantity, Count)
        assert Kilometer(2) == Kilometer.of(2)
        assert Kilometer(2).to_chinese(Variant.SIMPLIFIED) == Chinese("两公里", False)

    def test_negative_int_rejected(self) -> None:
        """Отрицательное количество отклоняется Count"""
        with pytest.raises(ValueError, match="Count cannot be negative"):
            Meter(-1)

    def test_equality_depends_on_class(self) -> None:
        """Разные меры с одинаковым значением не равны"""
        assert Meter.of(2) != Kilometer.of(2)
        assert Meter.of(2) == Meter.of(2)
        assert hash(Meter.of(2)) == hash(Meter.of(2))

    def test_ordering(self) -> None:
        """Упорядочивание по значению"""
        assert Meter.of(1) < Meter.of(3)


class TestMultiRegisterMeasure:
    """Тесты для MultiRegisterMeasure"""

    def test_formal_unit(self) -> None:
        """formal=True → формальная единица"""
        assert Money(5, True).to_chinese(Variant.SIMPLIFIED) == Chinese("五元", False)

    def test_informal_unit(self) -> None:
        """formal=False → неформальная единица"""
        assert Money(5, False).to_chinese(Variant.SIMPLIFIED) == Chinese("五块", False)

    def test_register_part_of_identity(self) -> None:
        """Регистр участвует в равенстве"""
        assert Money(5, True) != Money(5, False)


class TestNoCopyMeasure:
    """Тесты для NoCopyMeasure"""

    def test_value_is_copy(self) -> None:
        """value() возвращает копию, равную исходному значению"""
        code = Code(DigitSequence.parse("110"))
        assert code.value() == code.quantity
        assert code.value() is not code.quantity

    def test_renders_digits(self) -> None:
        """Рендеринг через копию значения"""
        code = Code(DigitSequence.parse("110"))
        assert code.to_chinese(Variant.SIMPLIFIED) == Chinese("一一零号码", False)


# =============================================================================
# LENGTH / WEIGHT TESTS
# =============================================================================


class TestLengthAndWeight:
    """Тесты для единиц длины и веса"""

    @pytest.mark.parametrize(
        "measure, simplified, traditional",
        [
            (Kilometer.of(2), "两公里", "兩公里"),
            (HalfKilometer.of(3), "三里", "三里"),
            (Meter.of(10), "十米", "十米"),
            (Decimeter.of(4), "四分米", "四分米"),
            (Centimeter.of(5), "五厘米", "五釐米"),
            (Millimeter.of(7), "七毫米", "七毫米"),
            (HalfKilogram.of(2), "两斤", "兩斤"),
            (Kilogram.of(25), "二十五公斤", "二十五公斤"),
        ],
    )
    def test_units(self, measure: CountMeasure, simplified: str, traditional: str) -> None:
        """Единицы в обоих вариантах письменности"""
        assert measure.to_chinese(Variant.SIMPLIFIED) == Chinese(simplified, False)
        assert measure.to_chinese(Variant.TRADITIONAL) == Chinese(traditional, False)

    def test_zero_omissible(self) -> None:
        """Нулевая мера omissible"""
        assert Kilogram.of(0).to_chinese(Variant.SIMPLIFIED) == Chinese("零公斤", True)
