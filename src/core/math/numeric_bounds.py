"""
Numeric Bounds — Границы представимых значений

Чистые функции, вычисляющие для дескриптора:
- [min, max] для SIGNED_INT / UNSIGNED_INT (int, точная степень двойки)
- [min, max] для MONEY (Decimal, масштаб 10^-scale без двоичного округления)
- max_magnitude для BINARY_FLOAT / DECIMAL_FLOAT (научная нотация)

ФОРМУЛЫ:
    SIGNED_INT:    max = 2^(bits-1) - 1,  min = -max - 1
    UNSIGNED_INT:  max = 2^bits - 1,      min = 0
    MONEY:         [min, max] SIGNED_INT той же ширины × 10^-scale
    BINARY_FLOAT:  max = 2^(2^exponent_bits - 1) × (2 - 2^-significand_bits)
    DECIMAL_FLOAT: max = 10^(10^max_decimal_exponent - 1) × (2 - 10^-(digits+1))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакой fixed-width арифметики (даже промежуточной)
2. Границы не кэшируются: вычисляются при каждом вызове
3. DECIMAL_FLOAT граница не материализуется (порядок 10^6144 цифр)
"""

from dataclasses import dataclass
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal
from fractions import Fraction
from typing import Final, Optional, Union

from src.core.domain.type_descriptor import Family, TypeDescriptor
from src.core.math.exact_numbers import ScientificMagnitude, digit_count

# Контекст без округления для масштабирования MONEY границ
_EXACT_CONTEXT: Final[Context] = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


# =============================================================================
# RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class IntegerBounds:
    """Включительный диапазон целочисленного типа."""

    min_value: int
    max_value: int


@dataclass(frozen=True)
class MoneyBounds:
    """Включительный диапазон MONEY типа (точные Decimal)."""

    min_value: Decimal
    max_value: Decimal
    scale: int

    @property
    def increment(self) -> Decimal:
        """Наименьший шаг значения: 10^-scale."""
        return Decimal(1).scaleb(-self.scale, _EXACT_CONTEXT)


@dataclass(frozen=True)
class FloatMagnitude:
    """
    Наибольший конечный модуль float типа.

    magnitude: величина в научной нотации (точная)
    exact: та же величина как Fraction, если её можно материализовать
           (для DECIMAL_FLOAT всегда None)
    """

    magnitude: ScientificMagnitude
    exact: Optional[Fraction]


Bounds = Union[IntegerBounds, MoneyBounds, FloatMagnitude]


# =============================================================================
# INTEGER
# =============================================================================


def integer_bounds(descriptor: TypeDescriptor) -> IntegerBounds:
    """
    Диапазон SIGNED_INT / UNSIGNED_INT.

    Args:
        descriptor: Дескриптор целочисленного типа

    Returns:
        IntegerBounds(min, max)

    Raises:
        ValueError: Если семейство не целочисленное

    Examples:
        >>> integer_bounds(SByte)
        IntegerBounds(min_value=-128, max_value=127)
        >>> integer_bounds(Byte)
        IntegerBounds(min_value=0, max_value=255)
    """
    if descriptor.family == Family.SIGNED_INT:
        max_value = 2 ** (descriptor.bits - 1) - 1
        return IntegerBounds(min_value=-max_value - 1, max_value=max_value)

    if descriptor.family == Family.UNSIGNED_INT:
        return IntegerBounds(min_value=0, max_value=2**descriptor.bits - 1)

    raise ValueError(f"{descriptor.name} ({descriptor.family.value}) is not an integer type")


# =============================================================================
# MONEY
# =============================================================================


def money_bounds(descriptor: TypeDescriptor) -> MoneyBounds:
    """
    Диапазон MONEY: signed n-bit диапазон, масштабированный на 10^-scale.

    Масштабирование выполняется в Decimal с неограниченной точностью,
    поэтому (2^127 - 1) × 10^-6 не теряет младших цифр.

    Examples:
        >>> money_bounds(Money).max_value
        Decimal('922337203685477.5807')
    """
    if descriptor.family != Family.MONEY:
        raise ValueError(f"{descriptor.name} ({descriptor.family.value}) is not a money type")

    max_raw = 2 ** (descriptor.bits - 1) - 1
    min_raw = -max_raw - 1

    return MoneyBounds(
        min_value=Decimal(min_raw).scaleb(-descriptor.scale, _EXACT_CONTEXT),
        max_value=Decimal(max_raw).scaleb(-descriptor.scale, _EXACT_CONTEXT),
        scale=descriptor.scale,
    )


# =============================================================================
# FLOATS
# =============================================================================


def binary_float_max_magnitude(descriptor: TypeDescriptor) -> FloatMagnitude:
    """
    Наибольший конечный модуль BINARY_FLOAT.

    max = 2^(2^exponent_bits - 1) × (2 - 2^-significand_bits)

    Вычисляется точно как Fraction (для (128, 15) это ~10^9864).
    """
    if descriptor.family != Family.BINARY_FLOAT:
        raise ValueError(f"{descriptor.name} ({descriptor.family.value}) is not a binary float type")

    significand_bits = descriptor.significand_bits
    exponent = 2**descriptor.exponent_bits - 1

    exact = Fraction(2) ** exponent * (2 - Fraction(1, 2**significand_bits))

    return FloatMagnitude(magnitude=ScientificMagnitude.of(exact), exact=exact)


def decimal_float_max_magnitude(descriptor: TypeDescriptor) -> FloatMagnitude:
    """
    Наибольший конечный модуль DECIMAL_FLOAT.

    max = 10^(10^max_decimal_exponent - 1) × (2 - 10^-(digits+1))

    Коэффициент (2 - 10^-(digits+1)) уже лежит в [1, 10), поэтому он и есть
    мантисса, а 10^max_decimal_exponent - 1 — десятичный порядок.
    """
    if descriptor.family != Family.DECIMAL_FLOAT:
        raise ValueError(f"{descriptor.name} ({descriptor.family.value}) is not a decimal float type")

    mantissa = 2 - Fraction(1, 10 ** (descriptor.digits + 1))
    exponent10 = 10**descriptor.max_decimal_exponent - 1

    return FloatMagnitude(
        magnitude=ScientificMagnitude(mantissa=mantissa, exponent10=exponent10),
        exact=None,
    )


# =============================================================================
# DISPATCH
# =============================================================================


def bounds_for(descriptor: TypeDescriptor) -> Bounds:
    """
    Границы для любого числового дескриптора.

    Raises:
        ValueError: Для CHAR / WIDE_CHAR (числовых границ нет)
    """
    family = descriptor.family

    if family in (Family.SIGNED_INT, Family.UNSIGNED_INT):
        return integer_bounds(descriptor)
    elif family == Family.MONEY:
        return money_bounds(descriptor)
    elif family == Family.BINARY_FLOAT:
        return binary_float_max_magnitude(descriptor)
    elif family == Family.DECIMAL_FLOAT:
        return decimal_float_max_magnitude(descriptor)

    raise ValueError(f"{descriptor.name} ({family.value}) has no numeric bounds")


def significant_digits(descriptor: TypeDescriptor) -> int:
    """
    Число значащих десятичных цифр, нужное для точного представления диапазона.

    - Integer / MONEY: число цифр наибольшей по модулю границы
    - BINARY_FLOAT: floor((significand_bits + 1) × log10(2))
    - DECIMAL_FLOAT: digits

    Examples:
        >>> significant_digits(Long)
        19
        >>> significant_digits(Quadruple)
        34
    """
    family = descriptor.family

    if family in (Family.SIGNED_INT, Family.UNSIGNED_INT):
        bounds = integer_bounds(descriptor)
        return digit_count(max(abs(bounds.min_value), bounds.max_value))
    elif family == Family.MONEY:
        return digit_count(2 ** (descriptor.bits - 1))
    elif family == Family.BINARY_FLOAT:
        return digit_count(2 ** (descriptor.significand_bits + 1)) - 1
    elif family == Family.DECIMAL_FLOAT:
        return descriptor.digits

    raise ValueError(f"{descriptor.name} ({family.value}) has no numeric precision")
