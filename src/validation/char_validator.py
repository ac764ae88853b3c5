"""Character Validator — проверка одиночного символа против CHAR / WIDE_CHAR

Символ классифицируется по длине UTF-8 кодировки своего code point:
- 1 байт:  U+0000 .. U+007F
- 2 байта: U+0080 .. U+07FF
- 3 байта: U+0800 .. U+FFFF
- 4 байта: U+10000 .. U+10FFFF

CHAR(byte_width=w) принимает символ с длиной UTF-8 <= w.
WIDE_CHAR принимает любой одиночный символ.
Вход не из ровно одного code point отвергается как WRONG_SHAPE
независимо от byte_width.
"""

from typing import Any, Final

import structlog

from src.core.domain.outcome import ErrorKind, ValidationOutcome
from src.core.domain.type_descriptor import Family, TypeDescriptor

logger = structlog.get_logger(__name__)

UTF8_ONE_BYTE_MAX: Final[int] = 0x7F
UTF8_TWO_BYTE_MAX: Final[int] = 0x7FF
UTF8_THREE_BYTE_MAX: Final[int] = 0xFFFF
UNICODE_MAX: Final[int] = 0x10FFFF


def utf8_length(char: str) -> int:
    """
    Длина UTF-8 кодировки одного code point (в байтах).

    Вычисляется по диапазону code point, без encode(), поэтому одиночные
    суррогаты (U+D800..U+DFFF) классифицируются как 3 байта.

    Raises:
        ValueError: Если char не ровно один code point

    Examples:
        >>> utf8_length("A")
        1
        >>> utf8_length("\\u00a2")
        2
        >>> utf8_length("\\u20ac")
        3
        >>> utf8_length("\\U0001F600")
        4
    """
    if len(char) != 1:
        raise ValueError(f"Expected exactly one code point, got {len(char)}")

    code_point = ord(char)

    if code_point <= UTF8_ONE_BYTE_MAX:
        return 1
    elif code_point <= UTF8_TWO_BYTE_MAX:
        return 2
    elif code_point <= UTF8_THREE_BYTE_MAX:
        return 3
    return 4


class CharValidator:
    """Проверка значений для CHAR и WIDE_CHAR."""

    def validate(self, descriptor: TypeDescriptor, value: Any) -> ValidationOutcome:
        """Проверка символа против символьного типа.

        Args:
            descriptor: Дескриптор CHAR или WIDE_CHAR
            value: Ожидается str из ровно одного code point

        Returns:
            ValidationOutcome; normalized_value — сам символ

        Raises:
            ValueError: Если descriptor не символьный
        """
        if not descriptor.is_character():
            raise ValueError(
                f"{descriptor.name} ({descriptor.family.value}) is not a character type"
            )

        if not isinstance(value, str) or len(value) != 1:
            return self._reject(
                descriptor,
                ErrorKind.WRONG_SHAPE,
                f"Expected a single character, got {type(value).__name__} "
                f"of length {len(value) if isinstance(value, str) else 'n/a'}",
            )

        if descriptor.family == Family.WIDE_CHAR:
            return ValidationOutcome.accept(descriptor.name, value)

        width = utf8_length(value)
        if width > descriptor.byte_width:
            return self._reject(
                descriptor,
                ErrorKind.OUT_OF_RANGE,
                f"U+{ord(value):04X} needs {width} UTF-8 bytes, "
                f"{descriptor.name} allows {descriptor.byte_width}",
            )

        return ValidationOutcome.accept(descriptor.name, value)

    def _reject(self, descriptor: TypeDescriptor, reason: ErrorKind, details: str) -> ValidationOutcome:
        logger.debug(
            "validation.rejected",
            type_name=descriptor.name,
            reason=reason.value,
            details=details,
        )
        return ValidationOutcome.reject(descriptor.name, reason, details)
