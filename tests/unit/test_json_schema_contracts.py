"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора каталога типов:
- Валидность самой схемы
- Валидация поставляемых данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (min/max/enum/pattern)
"""

import copy
import json

import pytest
from jsonschema import ValidationError

from src.core.catalog import CATALOG_PATH
from src.core.contracts import SchemaLoader, TypeCatalogValidator


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def catalog_data():
    """Поставляемый type_catalog.json."""
    with open(CATALOG_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def validator():
    return TypeCatalogValidator()


# =============================================================================
# ТЕСТЫ СХЕМЫ
# =============================================================================


class TestSchemaLoader:
    """SchemaLoader"""

    def test_loads_and_caches(self) -> None:
        loader = SchemaLoader()

        schema = loader.load_schema("type_catalog")

        assert schema["title"] == "Type Catalog"
        assert loader.load_schema("type_catalog") is schema

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestTypeCatalogContract:
    """type_catalog контракт"""

    def test_shipped_catalog_is_valid(self, validator, catalog_data) -> None:
        validator.validate(catalog_data)
        assert validator.is_valid(catalog_data)

    def test_wrong_schema_version(self, validator, catalog_data) -> None:
        data = copy.deepcopy(catalog_data)
        data["schema_version"] = "2"

        with pytest.raises(ValidationError):
            validator.validate(data)

    @pytest.mark.parametrize(
        "index, missing",
        [(0, "bits"), (14, "scale"), (17, "exponent_bits"), (25, "digits"), (28, "byte_width")],
    )
    def test_family_required_parameters(self, validator, catalog_data, index: int, missing: str) -> None:
        data = copy.deepcopy(catalog_data)
        del data["types"][index][missing]

        assert not validator.is_valid(data)

    def test_unknown_property(self, validator, catalog_data) -> None:
        data = copy.deepcopy(catalog_data)
        data["types"][0]["signed"] = True

        assert not validator.is_valid(data)

    @pytest.mark.parametrize("name", ["int", "Int-32", "", "1Byte"])
    def test_type_name_pattern(self, validator, catalog_data, name: str) -> None:
        data = copy.deepcopy(catalog_data)
        data["types"][0]["name"] = name

        assert not validator.is_valid(data)

    def test_byte_width_maximum(self, validator, catalog_data) -> None:
        data = copy.deepcopy(catalog_data)
        data["types"][28]["byte_width"] = 5

        assert not validator.is_valid(data)

    def test_bundle_tag_pattern(self, validator, catalog_data) -> None:
        data = copy.deepcopy(catalog_data)
        data["bundles"]["C"] = ["Int"]

        assert not validator.is_valid(data)

    def test_iter_errors_collects_all(self, validator, catalog_data) -> None:
        data = copy.deepcopy(catalog_data)
        data["schema_version"] = 1
        del data["types"][0]["bits"]

        assert len(list(validator.iter_errors(data))) >= 2
