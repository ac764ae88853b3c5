"""
Тесты для модуля Numeric Bounds

Проверяет:
1. Диапазоны SIGNED_INT / UNSIGNED_INT для всех ширин каталога
2. Точные Decimal границы MONEY
3. Наибольший модуль BINARY_FLOAT / DECIMAL_FLOAT
4. Число значащих цифр (significant_digits)
5. Отказ для чужих семейств
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from src.core.catalog import DEFAULT_CATALOG
from src.core.domain import Family, TypeDescriptor
from src.core.math.numeric_bounds import (
    FloatMagnitude,
    IntegerBounds,
    MoneyBounds,
    binary_float_max_magnitude,
    bounds_for,
    decimal_float_max_magnitude,
    integer_bounds,
    money_bounds,
    significant_digits,
)


def descriptor(name: str) -> TypeDescriptor:
    return DEFAULT_CATALOG.require(name)


# =============================================================================
# ТЕСТЫ INTEGER
# =============================================================================


class TestIntegerBounds:
    """Тесты для integer_bounds"""

    @pytest.mark.parametrize(
        "name, min_value, max_value",
        [
            ("SNibble", -8, 7),
            ("SByte", -128, 127),
            ("Short", -32768, 32767),
            ("MediumInt", -8388608, 8388607),
            ("Int", -2147483648, 2147483647),
            ("Long", -9223372036854775808, 9223372036854775807),
            ("Nibble", 0, 15),
            ("Byte", 0, 255),
            ("UShort", 0, 65535),
            ("UMediumInt", 0, 16777215),
            ("UInt", 0, 4294967295),
            ("ULong", 0, 18446744073709551615),
        ],
    )
    def test_known_ranges(self, name: str, min_value: int, max_value: int) -> None:
        assert integer_bounds(descriptor(name)) == IntegerBounds(min_value=min_value, max_value=max_value)

    def test_128_bit_ranges(self) -> None:
        """128-битные границы без fixed-width арифметики"""
        assert integer_bounds(descriptor("Int128")).max_value == 170141183460469231731687303715884105727
        assert integer_bounds(descriptor("Int128")).min_value == -170141183460469231731687303715884105728
        assert integer_bounds(descriptor("UInt128")).max_value == 340282366920938463463374607431768211455

    @pytest.mark.parametrize("family", [Family.SIGNED_INT, Family.UNSIGNED_INT])
    def test_formula_for_every_width(self, family: Family) -> None:
        for entry in DEFAULT_CATALOG.descriptors(family):
            bounds = integer_bounds(entry)
            if family == Family.SIGNED_INT:
                assert bounds.max_value == 2 ** (entry.bits - 1) - 1
                assert bounds.min_value == -(2 ** (entry.bits - 1))
            else:
                assert bounds.max_value == 2**entry.bits - 1
                assert bounds.min_value == 0

    def test_non_integer_raises(self) -> None:
        with pytest.raises(ValueError, match="not an integer type"):
            integer_bounds(descriptor("Money"))


# =============================================================================
# ТЕСТЫ MONEY
# =============================================================================


class TestMoneyBounds:
    """Тесты для money_bounds"""

    def test_money_64(self) -> None:
        bounds = money_bounds(descriptor("Money"))

        assert bounds.max_value == Decimal("922337203685477.5807")
        assert bounds.min_value == Decimal("-922337203685477.5808")
        assert bounds.scale == 4

    def test_small_money(self) -> None:
        bounds = money_bounds(descriptor("SmallMoney"))

        assert bounds.max_value == Decimal("214748.3647")
        assert bounds.min_value == Decimal("-214748.3648")

    def test_big_money_keeps_all_digits(self) -> None:
        """(2^127 - 1) × 10^-6 без потери младших цифр"""
        bounds = money_bounds(descriptor("BigMoney"))

        assert bounds.max_value == Decimal("170141183460469231731687303715884.105727")
        assert bounds.min_value == Decimal("-170141183460469231731687303715884.105728")

    def test_increment(self) -> None:
        assert money_bounds(descriptor("Money")).increment == Decimal("0.0001")
        assert money_bounds(descriptor("BigMoney")).increment == Decimal("0.000001")

    def test_zero_scale(self) -> None:
        """scale=0: MONEY совпадает с SIGNED_INT той же ширины"""
        whole = TypeDescriptor(name="WholeMoney", family=Family.MONEY, bits=8, scale=0)
        bounds = money_bounds(whole)

        assert bounds.max_value == Decimal(127)
        assert bounds.min_value == Decimal(-128)
        assert bounds.increment == Decimal(1)

    def test_non_money_raises(self) -> None:
        with pytest.raises(ValueError, match="not a money type"):
            money_bounds(descriptor("Long"))


# =============================================================================
# ТЕСТЫ FLOATS
# =============================================================================


class TestBinaryFloatMagnitude:
    """max = 2^(2^e - 1) × (2 - 2^-m)"""

    @pytest.mark.parametrize(
        "name, high, low",
        [
            ("ShortFloat", 16, 4),
            ("Half", 32, 21),
            ("Single", 256, 232),
            ("Double", 2048, 1995),
            ("Quadruple", 32768, 32655),
        ],
    )
    def test_exact_max(self, name: str, high: int, low: int) -> None:
        """max = 2^high - 2^low; степени передаются вместо самих чисел (id теста строится через str)"""
        magnitude = binary_float_max_magnitude(descriptor(name))

        assert magnitude.exact == 2**high - 2**low
        assert magnitude.exact.denominator == 1

    def test_scientific_form_matches_exact(self) -> None:
        magnitude = binary_float_max_magnitude(descriptor("ShortFloat"))

        assert magnitude.magnitude.exponent10 == 4
        assert magnitude.magnitude.mantissa == Fraction(6552, 1000)

    def test_fractional_max_for_tiny_exponent(self) -> None:
        """При малой экспоненте граница может быть дробной"""
        tiny = TypeDescriptor(name="TinyFloat", family=Family.BINARY_FLOAT, bits=8, exponent_bits=2)
        # 2^3 × (2 - 2^-5)
        assert binary_float_max_magnitude(tiny).exact == Fraction(63, 4)

    def test_non_float_raises(self) -> None:
        with pytest.raises(ValueError, match="not a binary float type"):
            binary_float_max_magnitude(descriptor("Decimal64"))


class TestDecimalFloatMagnitude:
    """max = 10^(10^emax - 1) × (2 - 10^-(digits+1))"""

    @pytest.mark.parametrize(
        "name, digits, emax",
        [("Decimal32", 7, 96), ("Decimal64", 16, 384), ("Decimal128", 34, 6144)],
    )
    def test_scientific_form(self, name: str, digits: int, emax: int) -> None:
        magnitude = decimal_float_max_magnitude(descriptor(name))

        assert magnitude.exact is None
        assert magnitude.magnitude.mantissa == 2 - Fraction(1, 10 ** (digits + 1))
        assert magnitude.magnitude.exponent10 == 10**emax - 1

    def test_non_decimal_float_raises(self) -> None:
        with pytest.raises(ValueError, match="not a decimal float type"):
            decimal_float_max_magnitude(descriptor("Double"))


# =============================================================================
# ТЕСТЫ DISPATCH И ТОЧНОСТИ
# =============================================================================


class TestBoundsFor:
    """bounds_for по семействам"""

    def test_result_types(self) -> None:
        assert isinstance(bounds_for(descriptor("Int")), IntegerBounds)
        assert isinstance(bounds_for(descriptor("Money")), MoneyBounds)
        assert isinstance(bounds_for(descriptor("Double")), FloatMagnitude)
        assert isinstance(bounds_for(descriptor("Decimal32")), FloatMagnitude)

    @pytest.mark.parametrize("name", ["Char", "Char32", "WChar"])
    def test_character_types_have_no_bounds(self, name: str) -> None:
        with pytest.raises(ValueError, match="has no numeric bounds"):
            bounds_for(descriptor(name))

    def test_bounds_are_recomputed(self) -> None:
        """Границы не кэшируются, но равны между вызовами"""
        assert bounds_for(descriptor("Long")) == bounds_for(descriptor("Long"))


class TestSignificantDigits:
    """Тесты для significant_digits"""

    @pytest.mark.parametrize(
        "name, digits",
        [
            ("SByte", 3),
            ("Byte", 3),
            ("Long", 19),
            ("ULong", 20),
            ("Int128", 39),
            ("UInt128", 39),
            ("SmallMoney", 10),
            ("Money", 19),
            ("BigMoney", 39),
            ("ShortFloat", 3),
            ("Single", 7),
            ("Double", 15),
            ("Quadruple", 34),
            ("Decimal32", 7),
            ("Decimal64", 16),
            ("Decimal128", 34),
        ],
    )
    def test_digits(self, name: str, digits: int) -> None:
        assert significant_digits(descriptor(name)) == digits

    def test_character_types_raise(self) -> None:
        with pytest.raises(ValueError, match="no numeric precision"):
            significant_digits(descriptor("Char16"))
