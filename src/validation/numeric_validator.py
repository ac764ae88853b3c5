"""Numeric Validator — проверка числа против числового типа

Порядок проверок (для всех числовых семейств):
1. Вход должен быть числом (иначе NOT_A_NUMBER)
2. NaN/±Inf по политике семейства:
   * SIGNED_INT / UNSIGNED_INT → NOT_FINITE
   * MONEY → NOT_FINITE (или принять при money_allows_non_finite)
   * BINARY_FLOAT / DECIMAL_FLOAT → принять без проверки диапазона
3. Arbitrary-precision вход → Accuracy Checker (иначе INSUFFICIENT_ACCURACY)
4. Вид числа:
   * Integer семейства: дробная часть → FRACTIONAL_VALUE_REJECTED
   * DECIMAL_FLOAT: большой int → WRONG_NUMERIC_KIND
5. Диапазон (включительный) → OUT_OF_RANGE

Два пути сравнения:
- Fast path: native int/float сравниваются встроенными операторами Python
  (сравнения int/float/Decimal/Fraction в Python точные)
- Slow path: arbitrary-precision вход сравнивается в научной нотации
  (compare_exact / compare_magnitude), без материализации огромных чисел

Оба пути дают одинаковый результат на одном и том же точном значении.
"""

from decimal import Context, Decimal
from fractions import Fraction
from typing import Any, Optional

import structlog

from src.core.domain.outcome import ErrorKind, ValidationOutcome
from src.core.domain.type_descriptor import INTEGER_FAMILIES, Family, TypeDescriptor
from src.core.math.accuracy import configured_accuracy, required_accuracy, sufficient_accuracy
from src.core.math.exact_numbers import (
    NumberKind,
    ParsedNumber,
    classify,
    compare_exact,
    compare_magnitude,
    decimal_exponent,
    digit_count,
    is_integral,
    to_int,
)
from src.core.math.numeric_bounds import (
    FloatMagnitude,
    binary_float_max_magnitude,
    decimal_float_max_magnitude,
    integer_bounds,
    money_bounds,
    significant_digits,
)
from src.validation.config import ValidatorConfig

logger = structlog.get_logger(__name__)


class NumericValidator:
    """Проверка значений для SIGNED_INT, UNSIGNED_INT, MONEY, BINARY_FLOAT, DECIMAL_FLOAT.

    Stateless: один экземпляр можно разделять между потоками.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or ValidatorConfig()

    def validate(self, descriptor: TypeDescriptor, value: Any) -> ValidationOutcome:
        """Проверка значения против числового типа.

        Args:
            descriptor: Дескриптор числового типа
            value: int, float, Decimal, Fraction или строковый литерал

        Returns:
            ValidationOutcome (accepted + normalized_value либо reason)

        Raises:
            ValueError: Если descriptor не числовой (CHAR / WIDE_CHAR)
        """
        if not descriptor.is_numeric():
            raise ValueError(
                f"{descriptor.name} ({descriptor.family.value}) is not a numeric type"
            )

        parsed = classify(value, self.config.native_int_limit)
        if parsed is None:
            return self._reject(descriptor, ErrorKind.NOT_A_NUMBER, f"Not a number: {_format_value(value)}")

        family = descriptor.family

        if family in INTEGER_FAMILIES:
            return self._validate_integer(descriptor, parsed)
        elif family == Family.MONEY:
            return self._validate_money(descriptor, parsed)
        elif family == Family.BINARY_FLOAT:
            return self._validate_float(descriptor, parsed, binary_float_max_magnitude(descriptor))
        elif family == Family.DECIMAL_FLOAT:
            return self._validate_float(descriptor, parsed, decimal_float_max_magnitude(descriptor))

        raise ValueError(f"Unsupported numeric family: {family.value}")

    # -------------------------------------------------------------------------
    # FAMILIES
    # -------------------------------------------------------------------------

    def _validate_integer(self, descriptor: TypeDescriptor, parsed: ParsedNumber) -> ValidationOutcome:
        if not parsed.is_finite:
            return self._reject(
                descriptor, ErrorKind.NOT_FINITE, f"Integer type cannot hold {_format_value(parsed.value)}"
            )

        accuracy_outcome = self._check_accuracy(descriptor, parsed)
        if accuracy_outcome is not None:
            return accuracy_outcome

        if not is_integral(parsed.value):
            return self._reject(
                descriptor,
                ErrorKind.FRACTIONAL_VALUE_REJECTED,
                f"Integer type cannot hold fractional value {_format_value(parsed.value)}",
            )

        bounds = integer_bounds(descriptor)

        if descriptor.family == Family.UNSIGNED_INT and parsed.is_negative:
            return self._reject(
                descriptor,
                ErrorKind.OUT_OF_RANGE,
                f"Unsigned type cannot hold negative value {_format_value(parsed.value)}",
            )

        if not self._within(parsed, bounds.min_value, bounds.max_value):
            return self._reject(
                descriptor,
                ErrorKind.OUT_OF_RANGE,
                f"{_format_value(parsed.value)} outside [{bounds.min_value}, {bounds.max_value}]",
            )

        return ValidationOutcome.accept(descriptor.name, to_int(parsed.value))

    def _validate_money(self, descriptor: TypeDescriptor, parsed: ParsedNumber) -> ValidationOutcome:
        if not parsed.is_finite:
            if self.config.money_allows_non_finite:
                return ValidationOutcome.accept(
                    descriptor.name,
                    self._to_decimal(descriptor, parsed),
                    details="PASS: non-finite money accepted by configuration",
                )
            return self._reject(
                descriptor, ErrorKind.NOT_FINITE, f"Money type cannot hold {_format_value(parsed.value)}"
            )

        accuracy_outcome = self._check_accuracy(descriptor, parsed)
        if accuracy_outcome is not None:
            return accuracy_outcome

        if parsed.kind == NumberKind.NATIVE_FLOAT:
            # Диапазон проверяется на том же Decimal, в который float нормализуется
            parsed = ParsedNumber(
                value=self._to_decimal(descriptor, parsed),
                kind=NumberKind.BIG_DECIMAL,
                from_literal=True,
            )

        bounds = money_bounds(descriptor)

        if not self._within(parsed, bounds.min_value, bounds.max_value):
            return self._reject(
                descriptor,
                ErrorKind.OUT_OF_RANGE,
                f"{_format_value(parsed.value)} outside [{bounds.min_value}, {bounds.max_value}]",
            )

        return ValidationOutcome.accept(descriptor.name, self._to_decimal(descriptor, parsed))

    def _validate_float(
        self,
        descriptor: TypeDescriptor,
        parsed: ParsedNumber,
        max_magnitude: FloatMagnitude,
    ) -> ValidationOutcome:
        # Float семейства моделируют IEEE семантику: NaN и ±Inf всегда представимы
        if not parsed.is_finite:
            return ValidationOutcome.accept(
                descriptor.name, parsed.value, details="PASS: non-finite float value"
            )

        if descriptor.family == Family.DECIMAL_FLOAT and parsed.kind == NumberKind.BIG_INT:
            return self._reject(
                descriptor,
                ErrorKind.WRONG_NUMERIC_KIND,
                "Decimal float type requires a decimal or float value, got arbitrary-precision int",
            )

        accuracy_outcome = self._check_accuracy(descriptor, parsed)
        if accuracy_outcome is not None:
            return accuracy_outcome

        if parsed.is_native and max_magnitude.exact is not None:
            within = abs(parsed.value) <= max_magnitude.exact
        else:
            within = compare_magnitude(parsed.value, max_magnitude.magnitude) <= 0

        if not within:
            return self._reject(
                descriptor,
                ErrorKind.OUT_OF_RANGE,
                f"|{_format_value(parsed.value)}| exceeds max magnitude of {descriptor.name}",
            )

        return ValidationOutcome.accept(descriptor.name, self._to_float_value(parsed))

    # -------------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------------

    def _check_accuracy(
        self, descriptor: TypeDescriptor, parsed: ParsedNumber
    ) -> Optional[ValidationOutcome]:
        if parsed.is_native:
            return None

        if sufficient_accuracy(descriptor, parsed, self.config.decimal_accuracy):
            return None

        return self._reject(
            descriptor,
            ErrorKind.INSUFFICIENT_ACCURACY,
            f"Decimal accuracy {configured_accuracy(self.config.decimal_accuracy)} "
            f"< {required_accuracy(descriptor)} digits required by {descriptor.name}",
        )

    @staticmethod
    def _within(parsed: ParsedNumber, low: Any, high: Any) -> bool:
        if parsed.is_native:
            return low <= parsed.value <= high
        return compare_exact(parsed.value, low) >= 0 and compare_exact(parsed.value, high) <= 0

    @staticmethod
    def _to_decimal(descriptor: TypeDescriptor, parsed: ParsedNumber) -> Decimal:
        value = parsed.value
        if isinstance(value, Decimal):
            return value
        if isinstance(value, float):
            # Кратчайшее repr, а не двоичное разложение float
            return Decimal(repr(value))
        if isinstance(value, Fraction):
            if value.denominator == 1:
                return Decimal(value.numerator)
            context = Context(prec=significant_digits(descriptor) + descriptor.scale + 1)
            return context.divide(Decimal(value.numerator), Decimal(value.denominator))
        return Decimal(value)

    @staticmethod
    def _to_float_value(parsed: ParsedNumber) -> Any:
        if parsed.kind == NumberKind.NATIVE_INT:
            return float(parsed.value)
        if parsed.kind == NumberKind.BIG_INT:
            return Decimal(parsed.value)
        return parsed.value

    def _reject(self, descriptor: TypeDescriptor, reason: ErrorKind, details: str) -> ValidationOutcome:
        logger.debug(
            "validation.rejected",
            type_name=descriptor.name,
            reason=reason.value,
            details=details,
        )
        return ValidationOutcome.reject(descriptor.name, reason, details)


# Порог, выше которого repr() целого становится нечитаемым (и упирается в int_max_str_digits)
_MAX_REPR_BITS = 256


def _format_value(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool) and value.bit_length() > _MAX_REPR_BITS:
        sign = "-" if value < 0 else ""
        return f"{sign}<{digit_count(value)}-digit int>"
    if isinstance(value, Fraction) and (
        value.numerator.bit_length() > _MAX_REPR_BITS or value.denominator.bit_length() > _MAX_REPR_BITS
    ):
        return f"<Fraction ~1e{decimal_exponent(value)}>"
    return repr(value)
