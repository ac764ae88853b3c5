"""
Exact Numbers — Классификация входа и точные сравнения

Модуль приводит произвольный вход к одному из видов чисел и даёт
точные (без округления) сравнения по модулю:
- Native путь: float и int в пределах |n| <= 2^53 (точно представимы в double)
- Arbitrary-precision путь: большие int, decimal.Decimal, fractions.Fraction
- Строковые литералы разбираются через Decimal (литерал точен по построению)

Сравнения модулей выполняются в научной нотации (mantissa ∈ [1, 10),
exponent10), поэтому границы вида 10^(10^96) не материализуются, а
Decimal('1E+999999999') не разворачивается в гигантский int.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакое сравнение не проходит через двоичный float
2. Native и arbitrary-precision представления одного значения сравниваются одинаково
3. bool не считается числом
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from fractions import Fraction
from typing import Any, Final, Optional, Union

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Целые до 2^53 точно представимы в IEEE-754 double
NATIVE_INT_LIMIT: Final[int] = 2**53

_INTEGER_LITERAL: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")

_LOG10_2: Final[float] = math.log10(2)

ExactValue = Union[int, float, Decimal, Fraction]


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


class NumberKind(str, Enum):
    """Вид входного числа"""

    NATIVE_INT = "native_int"
    NATIVE_FLOAT = "native_float"
    BIG_INT = "big_int"
    BIG_DECIMAL = "big_decimal"
    RATIONAL = "rational"


NATIVE_KINDS: Final[frozenset[NumberKind]] = frozenset(
    {NumberKind.NATIVE_INT, NumberKind.NATIVE_FLOAT}
)


@dataclass(frozen=True)
class ParsedNumber:
    """Разобранный числовой вход."""

    value: ExactValue
    kind: NumberKind

    # True если значение получено из строкового литерала (точность не ограничена)
    from_literal: bool = False

    @property
    def is_native(self) -> bool:
        return self.kind in NATIVE_KINDS

    @property
    def is_nan(self) -> bool:
        if isinstance(self.value, float):
            return math.isnan(self.value)
        if isinstance(self.value, Decimal):
            return self.value.is_nan()
        return False

    @property
    def is_infinite(self) -> bool:
        if isinstance(self.value, float):
            return math.isinf(self.value)
        if isinstance(self.value, Decimal):
            return self.value.is_infinite()
        return False

    @property
    def is_finite(self) -> bool:
        return not (self.is_nan or self.is_infinite)

    @property
    def is_negative(self) -> bool:
        """Знак (для NaN — знаковый бит Decimal, для float всегда False)."""
        if isinstance(self.value, Decimal):
            return self.value.is_signed() and not self.value.is_zero()
        if isinstance(self.value, float) and math.isnan(self.value):
            return False
        return self.value < 0


def parse_literal(text: str, native_int_limit: int = NATIVE_INT_LIMIT) -> Optional[ParsedNumber]:
    """
    Разбор строкового числового литерала.

    Поддерживаются целые и десятичные литералы, экспоненциальная запись,
    а также NaN / Inf / Infinity (без учёта регистра).

    Args:
        text: Строка
        native_int_limit: Порог native целых

    Returns:
        ParsedNumber или None, если строка не является числом

    Examples:
        >>> parse_literal("127").kind
        <NumberKind.NATIVE_INT: 'native_int'>
        >>> parse_literal("0.5").value
        Decimal('0.5')
        >>> parse_literal("ABCInt") is None
        True
    """
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return None

    try:
        number = Decimal(stripped)
    except InvalidOperation:
        return None

    if number.is_snan():
        number = Decimal("NaN")

    if (
        number.is_finite()
        and _INTEGER_LITERAL.fullmatch(stripped)
        and number.copy_abs() <= native_int_limit
    ):
        return ParsedNumber(value=int(number), kind=NumberKind.NATIVE_INT, from_literal=True)

    return ParsedNumber(value=number, kind=NumberKind.BIG_DECIMAL, from_literal=True)


def classify(value: Any, native_int_limit: int = NATIVE_INT_LIMIT) -> Optional[ParsedNumber]:
    """
    Классификация входа по виду числа.

    Args:
        value: Произвольный вход
        native_int_limit: Порог, выше которого int считается arbitrary-precision

    Returns:
        ParsedNumber или None для нечисловых значений (включая bool и None)

    Examples:
        >>> classify(127).kind
        <NumberKind.NATIVE_INT: 'native_int'>
        >>> classify(2**64).kind
        <NumberKind.BIG_INT: 'big_int'>
        >>> classify(True) is None
        True
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, int):
        kind = NumberKind.NATIVE_INT if abs(value) <= native_int_limit else NumberKind.BIG_INT
        return ParsedNumber(value=value, kind=kind)

    if isinstance(value, float):
        return ParsedNumber(value=value, kind=NumberKind.NATIVE_FLOAT)

    if isinstance(value, Decimal):
        return ParsedNumber(value=value, kind=NumberKind.BIG_DECIMAL)

    if isinstance(value, Fraction):
        return ParsedNumber(value=value, kind=NumberKind.RATIONAL)

    if isinstance(value, str):
        return parse_literal(value, native_int_limit)

    return None


# =============================================================================
# ЦЕЛОЧИСЛЕННОСТЬ
# =============================================================================


def is_integral(value: ExactValue) -> bool:
    """
    Проверка, что конечное значение не имеет дробной части.

    Args:
        value: Конечное число

    Returns:
        True если дробная часть равна нулю
    """
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, Decimal):
        if value.as_tuple().exponent >= 0:
            return True
        return value == value.to_integral_value()
    return value.denominator == 1


def to_int(value: ExactValue) -> int:
    """Точное преобразование целочисленного значения в int."""
    if isinstance(value, Fraction):
        return value.numerator
    return int(value)


# =============================================================================
# НАУЧНАЯ НОТАЦИЯ
# =============================================================================


def decimal_exponent(value: ExactValue) -> int:
    """
    Десятичный порядок ненулевого конечного значения: floor(log10(|value|)).

    Для Decimal вычисляется без арифметики (adjusted()).

    Raises:
        ValueError: Для нуля

    Examples:
        >>> decimal_exponent(999)
        2
        >>> decimal_exponent(Decimal("0.001"))
        -3
    """
    if value == 0:
        raise ValueError("decimal exponent of zero is undefined")

    if isinstance(value, Decimal):
        return value.adjusted()

    if isinstance(value, int):
        return _int_exponent(abs(value))

    magnitude = abs(Fraction(value))
    # Оценка по порядкам числителя и знаменателя ошибается не более чем на 1
    exponent = _int_exponent(magnitude.numerator) - _int_exponent(magnitude.denominator)
    if _power_of_ten(exponent) > magnitude:
        exponent -= 1
    elif _power_of_ten(exponent + 1) <= magnitude:
        exponent += 1
    return exponent


def digit_count(value: int) -> int:
    """
    Число десятичных цифр в |value| (для нуля — 1).

    Не использует str(), поэтому работает за пределами лимита
    int_max_str_digits.

    Examples:
        >>> digit_count(2**63 - 1)
        19
    """
    if value == 0:
        return 1
    return _int_exponent(abs(value)) + 1


def decimal_mantissa(value: ExactValue) -> Fraction:
    """
    Мантисса |value| / 10^decimal_exponent(value) в диапазоне [1, 10).

    Для Decimal вычисляется по цифрам коэффициента без масштабирования.
    """
    if isinstance(value, Decimal):
        digits = value.as_tuple().digits
        coefficient = int(Decimal((0, digits, 0)))
        return Fraction(coefficient, 10 ** (len(digits) - 1))

    exponent = decimal_exponent(value)
    return abs(Fraction(value)) / _power_of_ten(exponent)


def _int_exponent(value: int) -> int:
    # floor(log10(value)) для value > 0; оценка через bit_length, затем коррекция на 1
    exponent = int((value.bit_length() - 1) * _LOG10_2)
    if 10**exponent > value:
        exponent -= 1
    elif 10 ** (exponent + 1) <= value:
        exponent += 1
    return exponent


def _power_of_ten(exponent: int) -> Fraction:
    if exponent >= 0:
        return Fraction(10**exponent)
    return Fraction(1, 10 ** (-exponent))


@dataclass(frozen=True)
class ScientificMagnitude:
    """
    Неотрицательная величина в научной нотации: mantissa * 10^exponent10.

    mantissa ∈ [1, 10) для ненулевой величины; ноль хранится как
    mantissa == 0 (exponent10 игнорируется).
    """

    mantissa: Fraction
    exponent10: int

    @classmethod
    def of(cls, value: ExactValue) -> "ScientificMagnitude":
        """Модуль конечного значения в научной нотации."""
        if value == 0:
            return cls(mantissa=Fraction(0), exponent10=0)
        return cls(mantissa=decimal_mantissa(value), exponent10=decimal_exponent(value))

    @property
    def is_zero(self) -> bool:
        return self.mantissa == 0

    def compare(self, other: "ScientificMagnitude") -> int:
        """
        Точное сравнение двух величин.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        if self.is_zero or other.is_zero:
            return (not self.is_zero) - (not other.is_zero)

        if self.exponent10 != other.exponent10:
            return 1 if self.exponent10 > other.exponent10 else -1

        if self.mantissa == other.mantissa:
            return 0
        return 1 if self.mantissa > other.mantissa else -1


def compare_magnitude(value: ExactValue, bound: ScientificMagnitude) -> int:
    """
    Точное сравнение |value| с неотрицательной границей.

    Returns:
        -1 если |value| < bound, 0 если равны, +1 если |value| > bound
    """
    return ScientificMagnitude.of(value).compare(bound)


def compare_exact(value: ExactValue, bound: ExactValue) -> int:
    """
    Точное сравнение двух конечных значений со знаком.

    Сначала сравниваются знаки, затем модули в научной нотации, поэтому
    Decimal с огромной экспонентой не разворачивается в int.

    Returns:
        -1 если value < bound, 0 если равны, +1 если value > bound

    Examples:
        >>> compare_exact(Decimal("1E+999999999"), 2**127)
        1
        >>> compare_exact(-129, -128)
        -1
    """
    value_sign = (value > 0) - (value < 0)
    bound_sign = (bound > 0) - (bound < 0)

    if value_sign != bound_sign:
        return 1 if value_sign > bound_sign else -1

    if value_sign == 0:
        return 0

    magnitude_order = ScientificMagnitude.of(value).compare(ScientificMagnitude.of(bound))
    return magnitude_order * value_sign
