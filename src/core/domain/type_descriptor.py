"""
TypeDescriptor — Дескриптор C-подобного типа

Immutable Pydantic модель, описывающая именованный тип данных:
- Семейство (Family): signed/unsigned integer, money, binary float,
  decimal float, char, wide char
- Параметры, специфичные для семейства (bits, exponent_bits, digits,
  max_decimal_exponent, scale, byte_width)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый дескриптор принадлежит ровно одному семейству
2. Семейство определяет, какие параметры обязательны; остальные должны быть None
3. Дескрипторы неизменяемы (frozen=True) и создаются один раз из каталога
"""

from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class Family(str, Enum):
    """Семейство типа"""

    SIGNED_INT = "SIGNED_INT"
    UNSIGNED_INT = "UNSIGNED_INT"
    MONEY = "MONEY"
    BINARY_FLOAT = "BINARY_FLOAT"
    DECIMAL_FLOAT = "DECIMAL_FLOAT"
    CHAR = "CHAR"
    WIDE_CHAR = "WIDE_CHAR"


INTEGER_FAMILIES: Final[frozenset[Family]] = frozenset(
    {Family.SIGNED_INT, Family.UNSIGNED_INT}
)
FLOAT_FAMILIES: Final[frozenset[Family]] = frozenset(
    {Family.BINARY_FLOAT, Family.DECIMAL_FLOAT}
)
NUMERIC_FAMILIES: Final[frozenset[Family]] = INTEGER_FAMILIES | FLOAT_FAMILIES | {Family.MONEY}
CHAR_FAMILIES: Final[frozenset[Family]] = frozenset({Family.CHAR, Family.WIDE_CHAR})

# Диапазон ширины для integer/money/binary float
MIN_FIXED_BITS: Final[int] = 4
MAX_FIXED_BITS: Final[int] = 128

# Максимальная длина UTF-8 последовательности для одного code point
MAX_UTF8_BYTES: Final[int] = 4


# Параметры, которые обязательны для каждого семейства.
# Все прочие параметры (кроме bits) должны оставаться None.
_REQUIRED_PARAMETERS: Final[dict[Family, tuple[str, ...]]] = {
    Family.SIGNED_INT: ("bits",),
    Family.UNSIGNED_INT: ("bits",),
    Family.MONEY: ("bits", "scale"),
    Family.BINARY_FLOAT: ("bits", "exponent_bits"),
    Family.DECIMAL_FLOAT: ("digits", "max_decimal_exponent"),
    Family.CHAR: ("byte_width",),
    Family.WIDE_CHAR: (),
}

_FAMILY_PARAMETERS: Final[tuple[str, ...]] = (
    "exponent_bits",
    "digits",
    "max_decimal_exponent",
    "scale",
    "byte_width",
)


# =============================================================================
# TYPE DESCRIPTOR
# =============================================================================


class TypeDescriptor(BaseModel):
    """
    Дескриптор именованного типа.

    Immutable модель (frozen=True). Один экземпляр на каноническое имя;
    aliases перечисляют альтернативные написания того же типа.

    Параметры по семействам:
    - SIGNED_INT / UNSIGNED_INT: bits
    - MONEY: bits, scale (число неявных дробных десятичных знаков)
    - BINARY_FLOAT: bits, exponent_bits (significand_bits выводится)
    - DECIMAL_FLOAT: digits, max_decimal_exponent (bits опционален)
    - CHAR: byte_width (bits опционален, 8 * byte_width)
    - WIDE_CHAR: без параметров
    """

    name: str = Field(..., min_length=1, description="Каноническое имя типа")
    family: Family = Field(..., description="Семейство типа")
    bits: Optional[int] = Field(None, gt=0, description="Полная ширина представления (бит)")
    exponent_bits: Optional[int] = Field(None, gt=0, description="Ширина поля экспоненты (BINARY_FLOAT)")
    digits: Optional[int] = Field(None, gt=0, description="Число значащих десятичных цифр (DECIMAL_FLOAT)")
    max_decimal_exponent: Optional[int] = Field(
        None, gt=0, description="Потолок десятичной экспоненты (DECIMAL_FLOAT)"
    )
    scale: Optional[int] = Field(None, ge=0, description="Число дробных десятичных знаков (MONEY)")
    byte_width: Optional[int] = Field(
        None, ge=1, le=MAX_UTF8_BYTES, description="Максимальная длина UTF-8 (CHAR)"
    )
    aliases: tuple[str, ...] = Field(default=(), description="Альтернативные имена типа")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_family_parameters(self) -> "TypeDescriptor":
        """
        Проверка, что заданы ровно параметры своего семейства.

        - Обязательные параметры семейства не None
        - Чужие параметры семейства равны None
        - Для fixed-width семейств bits в [4, 128]
        - Для BINARY_FLOAT остаётся хотя бы 1 бит мантиссы
        """
        required = _REQUIRED_PARAMETERS[self.family]

        for parameter in required:
            if getattr(self, parameter) is None:
                raise ValueError(f"{self.family.value} type {self.name!r} requires {parameter}")

        for parameter in _FAMILY_PARAMETERS:
            if parameter not in required and getattr(self, parameter) is not None:
                raise ValueError(
                    f"{parameter} is not meaningful for {self.family.value} type {self.name!r}"
                )

        if "bits" in required and not MIN_FIXED_BITS <= self.bits <= MAX_FIXED_BITS:
            raise ValueError(
                f"bits for {self.family.value} must be in [{MIN_FIXED_BITS}, {MAX_FIXED_BITS}], "
                f"got {self.bits}"
            )

        if self.family == Family.BINARY_FLOAT and self.exponent_bits >= self.bits - 1:
            raise ValueError(
                f"exponent_bits {self.exponent_bits} leaves no significand in {self.bits}-bit float"
            )

        if self.family == Family.CHAR and self.bits is not None and self.bits != 8 * self.byte_width:
            raise ValueError(f"Char bits {self.bits} must equal 8 * byte_width {self.byte_width}")

        if self.name in self.aliases:
            raise ValueError(f"Alias list of {self.name!r} repeats the canonical name")

        return self

    @property
    def significand_bits(self) -> int:
        """
        Ширина мантиссы (без неявного бита) для BINARY_FLOAT.

        significand_bits = bits - exponent_bits - 1

        Raises:
            ValueError: Если семейство не BINARY_FLOAT
        """
        if self.family != Family.BINARY_FLOAT:
            raise ValueError(f"{self.name} is not a binary float type")
        return self.bits - self.exponent_bits - 1

    @property
    def names(self) -> tuple[str, ...]:
        """Каноническое имя и все aliases."""
        return (self.name, *self.aliases)

    def is_numeric(self) -> bool:
        """True для integer/money/float семейств."""
        return self.family in NUMERIC_FAMILIES

    def is_character(self) -> bool:
        """True для CHAR/WIDE_CHAR."""
        return self.family in CHAR_FAMILIES
