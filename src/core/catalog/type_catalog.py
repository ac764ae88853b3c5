"""
TypeCatalog — Каталог именованных типов

Статическая таблица canonical name / alias → TypeDescriptor.

Загрузка (один раз при импорте):
1. type_catalog.json читается из пакета
2. Данные проверяются JSON Schema контрактом (jsonschema)
3. Каждая запись разбирается в TypeDescriptor (pydantic, инварианты семейств)
4. Имена и aliases сводятся в read-only mapping; коллизии — CatalogError

После загрузки каталог неизменяем и может разделяться между потоками
без блокировок.

Export bundles:
- Семейные: all, integers, money, floats, chars (канонические имена)
- Экосистемные (из данных): c, stdint, csharp, sql
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Final, Iterable, Iterator, Mapping, Optional, Sequence

import structlog
from pydantic import ValidationError

from src.core.contracts.validators import TypeCatalogValidator
from src.core.domain.outcome import UnknownTypeError
from src.core.domain.type_descriptor import (
    CHAR_FAMILIES,
    FLOAT_FAMILIES,
    INTEGER_FAMILIES,
    Family,
    TypeDescriptor,
)

logger = structlog.get_logger(__name__)

CATALOG_PATH: Final[Path] = Path(__file__).parent / "type_catalog.json"

# Семейные bundles вычисляются из каталога, а не хранятся в данных
_FAMILY_BUNDLES: Final[dict[str, frozenset[Family]]] = {
    "all": frozenset(Family),
    "integers": INTEGER_FAMILIES,
    "money": frozenset({Family.MONEY}),
    "floats": FLOAT_FAMILIES,
    "chars": CHAR_FAMILIES,
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CatalogError(ValueError):
    """Данные каталога нарушают контракт или содержат коллизии имён."""

    pass


# =============================================================================
# CATALOG
# =============================================================================


class TypeCatalog:
    """
    Неизменяемый каталог дескрипторов.

    Поиск по имени точный и регистрозависимый: 'Int' и 'int' — разные имена.
    """

    def __init__(
        self,
        descriptors: Iterable[TypeDescriptor],
        bundles: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        """
        Args:
            descriptors: Дескрипторы (по одному на каноническое имя)
            bundles: Экосистемные export bundles (tag → имена типов)

        Raises:
            CatalogError: При дублировании имён/aliases или неразрешимом имени в bundle
        """
        self._descriptors: tuple[TypeDescriptor, ...] = tuple(descriptors)

        by_name: Dict[str, TypeDescriptor] = {}
        for descriptor in self._descriptors:
            for name in descriptor.names:
                if name in by_name:
                    raise CatalogError(
                        f"Type name {name!r} of {descriptor.name} already maps to {by_name[name].name}"
                    )
                by_name[name] = descriptor
        self._by_name: Mapping[str, TypeDescriptor] = MappingProxyType(by_name)

        all_bundles: Dict[str, tuple[str, ...]] = {
            tag: tuple(d.name for d in self._descriptors if d.family in families)
            for tag, families in _FAMILY_BUNDLES.items()
        }
        for tag, names in (bundles or {}).items():
            if tag in all_bundles:
                raise CatalogError(f"Bundle tag {tag!r} is reserved for a family bundle")
            unresolved = [name for name in names if name not in by_name]
            if unresolved:
                raise CatalogError(f"Bundle {tag!r} lists unknown type names: {unresolved}")
            all_bundles[tag] = tuple(names)
        self._bundles: Mapping[str, tuple[str, ...]] = MappingProxyType(all_bundles)

    # -------------------------------------------------------------------------
    # CONSTRUCTION
    # -------------------------------------------------------------------------

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "TypeCatalog":
        """
        Построение каталога из данных формата type_catalog.json.

        Raises:
            CatalogError: Если данные не проходят JSON Schema или инварианты дескрипторов
        """
        schema_errors = list(TypeCatalogValidator().iter_errors(data))
        if schema_errors:
            problems = "; ".join(f"{error.json_path}: {error.message}" for error in schema_errors)
            raise CatalogError(
                f"Type catalog violates schema ({len(schema_errors)} errors): {problems}"
            ) from schema_errors[0]

        descriptors = []
        for entry in data["types"]:
            try:
                descriptors.append(TypeDescriptor.model_validate(entry))
            except ValidationError as e:
                raise CatalogError(f"Invalid type entry {entry.get('name')!r}: {e}") from e

        catalog = cls(descriptors, data.get("bundles"))

        logger.debug(
            "catalog.loaded",
            types=len(catalog),
            names=len(catalog.names()),
            bundles=len(catalog.bundle_tags()),
        )
        return catalog

    @classmethod
    def from_json_file(cls, path: Path) -> "TypeCatalog":
        """Загрузка каталога из JSON файла."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_data(data)

    # -------------------------------------------------------------------------
    # LOOKUP
    # -------------------------------------------------------------------------

    def resolve(self, name: str) -> Optional[TypeDescriptor]:
        """
        Поиск дескриптора по каноническому имени или alias.

        Returns:
            TypeDescriptor или None для неизвестного имени
        """
        if not isinstance(name, str):
            return None
        return self._by_name.get(name)

    def require(self, name: str) -> TypeDescriptor:
        """
        Поиск дескриптора, обязательный вариант.

        Raises:
            UnknownTypeError: Если имя отсутствует в каталоге
        """
        descriptor = self.resolve(name)
        if descriptor is None:
            raise UnknownTypeError(name)
        return descriptor

    def descriptors(self, family: Optional[Family] = None) -> tuple[TypeDescriptor, ...]:
        """Все дескрипторы (в порядке каталога), опционально одного семейства."""
        if family is None:
            return self._descriptors
        return tuple(d for d in self._descriptors if d.family == family)

    def names(self) -> tuple[str, ...]:
        """Все имена: канонические и aliases."""
        return tuple(self._by_name)

    # -------------------------------------------------------------------------
    # BUNDLES
    # -------------------------------------------------------------------------

    def export_bundle(self, tag: str) -> tuple[str, ...]:
        """
        Имена типов из export bundle.

        Raises:
            KeyError: Если tag неизвестен
        """
        if tag not in self._bundles:
            raise KeyError(f"Unknown export bundle: {tag!r}")
        return self._bundles[tag]

    def bundle_tags(self) -> tuple[str, ...]:
        return tuple(self._bundles)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._by_name

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


# =============================================================================
# DEFAULT CATALOG
# =============================================================================


def load_default_catalog() -> TypeCatalog:
    """Каталог из type_catalog.json, поставляемого с пакетом."""
    return TypeCatalog.from_json_file(CATALOG_PATH)


# Глобальный read-only каталог (строится один раз при импорте)
DEFAULT_CATALOG: Final[TypeCatalog] = load_default_catalog()


def resolve(name: str, catalog: Optional[TypeCatalog] = None) -> Optional[TypeDescriptor]:
    """Поиск в каталоге (default: DEFAULT_CATALOG)."""
    return (catalog if catalog is not None else DEFAULT_CATALOG).resolve(name)


def require(name: str, catalog: Optional[TypeCatalog] = None) -> TypeDescriptor:
    """Обязательный поиск в каталоге (default: DEFAULT_CATALOG)."""
    return (catalog if catalog is not None else DEFAULT_CATALOG).require(name)


def export_bundle(tag: str, catalog: Optional[TypeCatalog] = None) -> tuple[str, ...]:
    """Export bundle каталога (default: DEFAULT_CATALOG)."""
    return (catalog if catalog is not None else DEFAULT_CATALOG).export_bundle(tag)
