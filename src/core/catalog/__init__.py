"""
Type catalog: canonical names, aliases and export bundles.
"""

from src.core.catalog.type_catalog import (
    CATALOG_PATH,
    DEFAULT_CATALOG,
    CatalogError,
    TypeCatalog,
    export_bundle,
    load_default_catalog,
    require,
    resolve,
)

__all__ = [
    "CATALOG_PATH",
    "DEFAULT_CATALOG",
    "CatalogError",
    "TypeCatalog",
    "export_bundle",
    "load_default_catalog",
    "require",
    "resolve",
]
