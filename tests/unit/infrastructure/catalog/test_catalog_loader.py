"""
Tests for EquipmentCatalogLoader.

Covers: JSON (list and wrapped), CSV and Excel parsing, path resolution
(argument, environment variable, bundled default), error wrapping.
"""

import json

import pytest
from openpyxl import Workbook

from hvac_sizer.domain.equipment.entities.equipment import EquipmentType
from hvac_sizer.domain.shared.exceptions import (
    CatalogLoadError,
    UnsupportedCatalogFormatError,
)
from hvac_sizer.infrastructure.catalog.catalog_loader import (
    CATALOG_PATH_ENV,
    DEFAULT_CATALOG_PATH,
    EquipmentCatalogLoader,
    resolve_catalog_path,
)


# ============================================================================
# FIXTURES
# ============================================================================


FURNACE_RECORD = {
    "id": "furn-001",
    "manufacturer": "Carrier",
    "model": "59SC5A060",
    "price": 2450.0,
    "equipment_type": "furnace",
    "distribution_type": "ducted",
    "staging": "single_stage",
    "unit_location": "indoor",
    "nominal_btu": 60000,
    "heating_capacity_btu": 57000,
    "afue": 0.95,
}

CSV_HEADER = (
    "id,manufacturer,model,price,is_active,equipment_type,distribution_type,staging,"
    "unit_location,nominal_tons,nominal_btu,heating_capacity_btu,cooling_capacity_btu,"
    "latent_cooling_btu,afue,seer,hspf"
)


@pytest.fixture
def loader():
    """Fixture for EquipmentCatalogLoader instance."""
    return EquipmentCatalogLoader()


@pytest.fixture
def csv_catalog(tmp_path):
    """
    Create a CSV catalog with a furnace and an inactive AC.

    Empty cells stand for missing values.
    """
    content = "\n".join(
        [
            CSV_HEADER,
            "furn-001,Carrier,59SC5A060,2450,true,furnace,ducted,single_stage,indoor,"
            ",60000,57000,,,0.95,,",
            "ac-001,Goodman,GSX140241,2100,false,ac,ducted,single_stage,split_system,"
            "2,,,24000,6000,,14,",
        ]
    )
    file_path = tmp_path / "catalog.csv"
    file_path.write_text(content + "\n", encoding="utf-8")
    return file_path


# ============================================================================
# JSON TESTS
# ============================================================================


def test_load_json_list(loader, tmp_path):
    """Test JSON file holding a bare list of records."""
    file_path = tmp_path / "catalog.json"
    file_path.write_text(json.dumps([FURNACE_RECORD]), encoding="utf-8")

    equipment = loader.load(file_path)

    assert len(equipment) == 1
    assert equipment[0].equipment_type == EquipmentType.FURNACE
    assert equipment[0].afue == 0.95


def test_load_json_wrapped(loader, tmp_path):
    """Test JSON file holding {"equipment": [...]}."""
    file_path = tmp_path / "catalog.json"
    file_path.write_text(json.dumps({"equipment": [FURNACE_RECORD]}), encoding="utf-8")

    assert loader.load(file_path)[0].id == "furn-001"


def test_load_json_wrong_shape(loader, tmp_path):
    """Test JSON object without an equipment list."""
    file_path = tmp_path / "catalog.json"
    file_path.write_text(json.dumps({"items": []}), encoding="utf-8")

    with pytest.raises(CatalogLoadError, match="JSON catalog must be a list"):
        loader.load(file_path)


def test_load_json_malformed(loader, tmp_path):
    """Test unparseable JSON."""
    file_path = tmp_path / "catalog.json"
    file_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogLoadError, match="Cannot parse JSON catalog") as exc_info:
        loader.load(file_path)
    assert isinstance(exc_info.value.original_error, json.JSONDecodeError)


def test_invalid_record_names_row(loader, tmp_path):
    """Test that a record failing field validation reports its position."""
    bad = dict(FURNACE_RECORD, id="furn-002", afue=95)
    file_path = tmp_path / "catalog.json"
    file_path.write_text(json.dumps([FURNACE_RECORD, bad]), encoding="utf-8")

    with pytest.raises(CatalogLoadError, match="Invalid equipment record 'furn-002'") as exc_info:
        loader.load(file_path)
    assert exc_info.value.row == 2


def test_non_object_record_rejected(loader, tmp_path):
    """Test list entries that are not objects."""
    file_path = tmp_path / "catalog.json"
    file_path.write_text(json.dumps([FURNACE_RECORD, "furnace"]), encoding="utf-8")

    with pytest.raises(CatalogLoadError, match="must be an object, got str"):
        loader.load(file_path)


def test_field_rule_violations_still_load(loader, tmp_path):
    """Test that a heat pump without HSPF loads (rejected later, not here)."""
    record = {
        "id": "hp-004",
        "manufacturer": "Goodman",
        "model": "GSZ140361",
        "price": 4100,
        "equipment_type": "heat_pump",
        "distribution_type": "ducted",
        "staging": "single_stage",
        "unit_location": "split_system",
        "nominal_tons": 3,
        "heating_capacity_btu": 34000,
        "cooling_capacity_btu": 35000,
        "latent_cooling_btu": 9000,
        "seer": 14,
    }
    file_path = tmp_path / "catalog.json"
    file_path.write_text(json.dumps([record]), encoding="utf-8")

    assert loader.load(file_path)[0].hspf is None


# ============================================================================
# CSV / EXCEL TESTS
# ============================================================================


def test_load_csv_coerces_text(loader, csv_catalog):
    """Test CSV: numbers and booleans coerced, empty cells become None."""
    furnace, ac = loader.load(csv_catalog)

    assert furnace.heating_capacity_btu == 57000
    assert furnace.nominal_tons is None
    assert furnace.seer is None
    assert furnace.is_active is True
    assert ac.is_active is False
    assert ac.nominal_tons == 2.0
    assert ac.seer == 14.0


def test_load_excel(loader, tmp_path):
    """Test Excel catalog with a header row."""
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.append(list(FURNACE_RECORD))
    worksheet.append(list(FURNACE_RECORD.values()))
    file_path = tmp_path / "catalog.xlsx"
    workbook.save(file_path)

    equipment = loader.load(file_path)

    assert len(equipment) == 1
    assert equipment[0].id == "furn-001"
    assert equipment[0].heating_capacity_btu == 57000
    assert equipment[0].afue == pytest.approx(0.95)


# ============================================================================
# PATH AND FORMAT TESTS
# ============================================================================


def test_unsupported_suffix(loader, tmp_path):
    """Test that the format is checked before existence."""
    with pytest.raises(UnsupportedCatalogFormatError, match="'.xml'"):
        loader.load(tmp_path / "catalog.xml")


def test_missing_file(loader, tmp_path):
    """Test missing catalog file."""
    with pytest.raises(CatalogLoadError, match="Catalog file not found"):
        loader.load(tmp_path / "missing.json")


def test_resolve_path_prefers_argument(tmp_path, monkeypatch):
    """Test explicit path beats the environment variable."""
    monkeypatch.setenv(CATALOG_PATH_ENV, str(tmp_path / "env.json"))
    assert resolve_catalog_path(tmp_path / "arg.json") == tmp_path / "arg.json"


def test_resolve_path_from_environment(tmp_path, monkeypatch):
    """Test EQUIPMENT_CATALOG_PATH is used when no path is given."""
    monkeypatch.setenv(CATALOG_PATH_ENV, str(tmp_path / "env.json"))
    assert resolve_catalog_path() == tmp_path / "env.json"


def test_resolve_path_default(monkeypatch):
    """Test bundled catalog is the fallback."""
    monkeypatch.delenv(CATALOG_PATH_ENV, raising=False)
    assert resolve_catalog_path() == DEFAULT_CATALOG_PATH


def test_bundled_catalog_loads(loader, monkeypatch):
    """Test that the packaged sample catalog is valid input."""
    monkeypatch.delenv(CATALOG_PATH_ENV, raising=False)
    equipment = loader.load()

    assert len(equipment) == 18
    assert {item.equipment_type for item in equipment} == set(EquipmentType)
