"""
ValidationOutcome — Результат проверки значения против типа

Таксономия ошибок (ErrorKind) и immutable результат валидации.

Валидация НИКОГДА не бросает исключения для невалидного значения:
отказ возвращается как ValidationOutcome(accepted=False, reason=...).
Исключения зарезервированы для ошибок конфигурации (неизвестное имя типа,
битый каталог) и для явного запроса raise_for_reason().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Причина отказа в валидации"""

    NOT_A_NUMBER = "not_a_number"
    NOT_FINITE = "not_finite"
    OUT_OF_RANGE = "out_of_range"
    FRACTIONAL_VALUE_REJECTED = "fractional_value_rejected"
    INSUFFICIENT_ACCURACY = "insufficient_accuracy"
    WRONG_SHAPE = "wrong_shape"
    UNKNOWN_TYPE = "unknown_type"
    WRONG_NUMERIC_KIND = "wrong_numeric_kind"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TypeConstraintError(ValueError):
    """
    Значение не удовлетворяет ограничению типа.

    Бросается только по явному запросу (raise_for_reason / dispatch.check).
    Исходный ValidationOutcome доступен через атрибут outcome.
    """

    def __init__(self, outcome: "ValidationOutcome"):
        self.outcome = outcome
        super().__init__(
            f"{outcome.type_name}: {outcome.reason.value if outcome.reason else 'rejected'}"
            f" ({outcome.details})"
        )


class UnknownTypeError(KeyError):
    """Имя типа отсутствует в каталоге (ошибка конфигурации, не валидации)."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(type_name)

    def __str__(self) -> str:
        return f"Unknown type name: {self.type_name!r}"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ValidationOutcome:
    """Результат одной проверки значения."""

    accepted: bool
    reason: Optional[ErrorKind]

    # Значение, приведённое к каноническому представлению семейства
    # (None при отказе)
    normalized_value: Any

    # Диагностика
    type_name: str
    details: str

    @classmethod
    def accept(cls, type_name: str, normalized_value: Any, details: str = "PASS") -> "ValidationOutcome":
        """Успешная проверка."""
        return cls(
            accepted=True,
            reason=None,
            normalized_value=normalized_value,
            type_name=type_name,
            details=details,
        )

    @classmethod
    def reject(cls, type_name: str, reason: ErrorKind, details: str) -> "ValidationOutcome":
        """Отказ с указанием причины."""
        return cls(
            accepted=False,
            reason=reason,
            normalized_value=None,
            type_name=type_name,
            details=details,
        )

    def __bool__(self) -> bool:
        return self.accepted

    def raise_for_reason(self) -> "ValidationOutcome":
        """
        Бросить TypeConstraintError, если значение отвергнуто.

        Returns:
            self (для цепочек) если значение принято

        Raises:
            TypeConstraintError: Если accepted == False
        """
        if not self.accepted:
            raise TypeConstraintError(self)
        return self
