"""
Contract Validation Module

Модуль для валидации JSON контрактов: данные каталога типов
проверяются по JSON Schema до разбора в дескрипторы.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TypeCatalogValidator,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TypeCatalogValidator",
]
