"""Конфигурация валидаторов."""

from dataclasses import dataclass
from typing import Optional

from src.core.math.exact_numbers import NATIVE_INT_LIMIT


@dataclass(frozen=True)
class ValidatorConfig:
    """Конфигурация NumericValidator.

    money_allows_non_finite:
        MONEY — десятичный fixed-point тип, NaN/Inf в нём непредставимы.
        По умолчанию NaN/±Inf для MONEY отвергаются (NOT_FINITE).
        True включает float-семантику (принимать NaN/±Inf).
    decimal_accuracy:
        Точность Decimal входов (значащих цифр). None — prec текущего
        decimal контекста на момент вызова.
    native_int_limit:
        |n| <= native_int_limit считается native int (fast path),
        больше — arbitrary-precision int (slow path).
    """

    money_allows_non_finite: bool = False
    decimal_accuracy: Optional[int] = None
    native_int_limit: int = NATIVE_INT_LIMIT

    def __post_init__(self):
        if self.decimal_accuracy is not None and self.decimal_accuracy <= 0:
            raise ValueError(f"decimal_accuracy must be positive, got {self.decimal_accuracy}")
        if self.native_int_limit <= 0:
            raise ValueError(f"native_int_limit must be positive, got {self.native_int_limit}")
