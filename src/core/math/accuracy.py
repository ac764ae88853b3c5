"""
Accuracy — Проверка достаточной точности arbitrary-precision входа

Decimal значение живёт в контексте с фиксированной точностью (prec).
Если точность меньше числа значащих цифр диапазона типа, значение
рядом с границей могло быть округлено внутрь диапазона (или наружу)
ещё до валидации. В этом случае валидация должна отказать явно
(INSUFFICIENT_ACCURACY), а не выдать ложное принятие.

Native значения, Python int, Fraction и строковые литералы точны
по построению и проверку проходят всегда.
"""

from decimal import Decimal, getcontext
from typing import Optional

import structlog

from src.core.domain.type_descriptor import TypeDescriptor
from src.core.math.exact_numbers import NumberKind, ParsedNumber
from src.core.math.numeric_bounds import significant_digits

logger = structlog.get_logger(__name__)


def required_accuracy(descriptor: TypeDescriptor) -> int:
    """
    Минимальная точность (значащих цифр) для значений данного типа.

    Examples:
        >>> required_accuracy(Int128)
        39
        >>> required_accuracy(Decimal64)
        16
    """
    return significant_digits(descriptor)


def configured_accuracy(accuracy: Optional[int] = None) -> int:
    """
    Действующая точность Decimal: явная или из текущего (thread-local) контекста.
    """
    if accuracy is not None:
        if accuracy <= 0:
            raise ValueError(f"accuracy must be positive, got {accuracy}")
        return accuracy
    return getcontext().prec


def sufficient_accuracy(
    descriptor: TypeDescriptor,
    value: ParsedNumber,
    accuracy: Optional[int] = None,
) -> bool:
    """
    Проверка, что точность входа позволяет доверять сравнению с границами.

    Args:
        descriptor: Дескриптор числового типа
        value: Разобранный вход
        accuracy: Явная точность Decimal (default: prec текущего контекста)

    Returns:
        True если вход точен по построению или его точность >= required_accuracy
    """
    if value.kind != NumberKind.BIG_DECIMAL or value.from_literal:
        return True

    if not isinstance(value.value, Decimal) or not value.value.is_finite():
        return True

    available = configured_accuracy(accuracy)
    required = required_accuracy(descriptor)

    if available < required:
        logger.debug(
            "accuracy.insufficient",
            type_name=descriptor.name,
            available=available,
            required=required,
        )
        return False

    return True
