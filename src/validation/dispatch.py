"""Lookup/Dispatch — внешний интерфейс движка

Точка входа для слоя, привязывающего типы к полям объектов:
- resolve(type_name) → TypeDescriptor | None
- validate_numeric(descriptor, value) → ValidationOutcome
- validate_char(descriptor, value) → ValidationOutcome
- validate(type_name, value) → ValidationOutcome (resolve + маршрутизация по семейству)
- check(type_name, value) → нормализованное значение или TypeConstraintError
- is_valid(type_name, value) → bool

Маршрутизация — явная проверка Family, без поиска обработчика по имени.
"""

from typing import Any, Optional

from src.core.catalog.type_catalog import DEFAULT_CATALOG, TypeCatalog
from src.core.domain.outcome import ErrorKind, UnknownTypeError, ValidationOutcome
from src.core.domain.type_descriptor import TypeDescriptor
from src.validation.char_validator import CharValidator
from src.validation.config import ValidatorConfig
from src.validation.numeric_validator import NumericValidator

# Stateless валидаторы по умолчанию
_NUMERIC_VALIDATOR = NumericValidator()
_CHAR_VALIDATOR = CharValidator()


def _numeric_validator(config: Optional[ValidatorConfig]) -> NumericValidator:
    if config is None:
        return _NUMERIC_VALIDATOR
    return NumericValidator(config)


def resolve(type_name: str, catalog: Optional[TypeCatalog] = None) -> Optional[TypeDescriptor]:
    """Дескриптор по имени или alias (None для неизвестного имени)."""
    return (catalog if catalog is not None else DEFAULT_CATALOG).resolve(type_name)


def validate_numeric(
    descriptor: TypeDescriptor,
    value: Any,
    config: Optional[ValidatorConfig] = None,
) -> ValidationOutcome:
    """Проверка значения против числового дескриптора."""
    return _numeric_validator(config).validate(descriptor, value)


def validate_char(descriptor: TypeDescriptor, value: Any) -> ValidationOutcome:
    """Проверка символа против CHAR / WIDE_CHAR дескриптора."""
    return _CHAR_VALIDATOR.validate(descriptor, value)


def validate(
    type_name: str,
    value: Any,
    catalog: Optional[TypeCatalog] = None,
    config: Optional[ValidatorConfig] = None,
) -> ValidationOutcome:
    """
    Проверка значения против типа, заданного именем.

    Args:
        type_name: Каноническое имя или alias
        value: Проверяемое значение
        catalog: Каталог (default: DEFAULT_CATALOG)
        config: Конфигурация числового валидатора

    Returns:
        ValidationOutcome; для неизвестного имени — отказ с UNKNOWN_TYPE
    """
    descriptor = resolve(type_name, catalog)
    if descriptor is None:
        return ValidationOutcome.reject(
            str(type_name), ErrorKind.UNKNOWN_TYPE, f"Unknown type name: {type_name!r}"
        )

    if descriptor.is_character():
        return validate_char(descriptor, value)
    elif descriptor.is_numeric():
        return validate_numeric(descriptor, value, config)

    raise ValueError(f"Unsupported family: {descriptor.family.value}")


def check(
    type_name: str,
    value: Any,
    catalog: Optional[TypeCatalog] = None,
    config: Optional[ValidatorConfig] = None,
) -> Any:
    """
    Проверка при присваивании: вернуть нормализованное значение или бросить.

    Returns:
        normalized_value принятого значения

    Raises:
        UnknownTypeError: Если имя типа не найдено (ошибка конфигурации)
        TypeConstraintError: Если значение отвергнуто
    """
    descriptor = resolve(type_name, catalog)
    if descriptor is None:
        raise UnknownTypeError(type_name)

    outcome = validate(descriptor.name, value, catalog, config)
    return outcome.raise_for_reason().normalized_value


def is_valid(
    type_name: str,
    value: Any,
    catalog: Optional[TypeCatalog] = None,
    config: Optional[ValidatorConfig] = None,
) -> bool:
    """True если значение принято типом (неизвестный тип — False)."""
    return validate(type_name, value, catalog, config).accepted
