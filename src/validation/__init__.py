"""Validation — проверка значений против типов каталога.

Внешний интерфейс движка:
- resolve: имя типа → дескриптор
- validate_numeric / validate_char: проверка против дескриптора
- validate / check / is_valid: проверка по имени типа
"""

from src.core.catalog.type_catalog import export_bundle
from src.validation.char_validator import CharValidator, utf8_length
from src.validation.config import ValidatorConfig
from src.validation.dispatch import check, is_valid, resolve, validate, validate_char, validate_numeric
from src.validation.numeric_validator import NumericValidator

__all__ = [
    "CharValidator",
    "NumericValidator",
    "ValidatorConfig",
    "check",
    "export_bundle",
    "is_valid",
    "resolve",
    "utf8_length",
    "validate",
    "validate_char",
    "validate_numeric",
]
