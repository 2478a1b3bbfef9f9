"""
Tests for the equipment type validator.
Covers: normalization of stray fields, per-type required fields,
critical error construction, validation details ordering.
"""

import pytest

from hvac_sizer.domain.equipment.entities.equipment import EquipmentType
from hvac_sizer.domain.equipment.entities.typed_equipment import (
    AirConditionerEquipment,
    BoilerEquipment,
    ComboEquipment,
    FurnaceEquipment,
    HeatPumpEquipment,
)
from hvac_sizer.domain.equipment.services.type_validator import (
    FIELD_RULES,
    get_validation_details,
    is_valid_for_type,
    normalize_equipment,
    validate_equipment_type,
)
from hvac_sizer.domain.equipment.value_objects.validation import ErrorType, Severity


# ============================================================================
# HAPPY PATH TESTS
# ============================================================================


@pytest.mark.parametrize(
    "equipment_type,variant",
    [
        (EquipmentType.FURNACE, FurnaceEquipment),
        (EquipmentType.AC, AirConditionerEquipment),
        (EquipmentType.HEAT_PUMP, HeatPumpEquipment),
        (EquipmentType.BOILER, BoilerEquipment),
        (EquipmentType.FURNACE_AC_COMBO, ComboEquipment),
    ],
)
def test_valid_record_becomes_matching_variant(make_equipment, equipment_type, variant):
    """Test that each valid default record narrows to its own variant."""
    equipment = make_equipment(equipment_type)
    result = validate_equipment_type(equipment)

    assert result.is_valid
    assert result.error is None
    assert isinstance(result.typed_equipment, variant)
    assert result.typed_equipment.id == equipment.id


def test_field_rules_partition_capacity_fields():
    """Test that no field is both required and forbidden for a type."""
    for rule in FIELD_RULES.values():
        assert not set(rule.required) & set(rule.forbidden)


# ============================================================================
# NORMALIZATION TESTS
# ============================================================================


def test_normalize_clears_stray_fields(make_equipment):
    """Test that fields irrelevant to the type are set to null."""
    raw = make_equipment("furnace", seer=16.0, cooling_capacity_btu=36000)
    normalized = normalize_equipment(raw)

    assert normalized.seer is None
    assert normalized.cooling_capacity_btu is None
    assert normalized.afue == raw.afue
    assert raw.seer == 16.0


def test_normalize_is_idempotent(make_equipment):
    """Test normalize(normalize(x)) == normalize(x)."""
    raw = make_equipment("ac", afue=0.80, hspf=9.0)
    once = normalize_equipment(raw)

    assert normalize_equipment(once) == once


def test_normalize_returns_same_object_when_clean(make_equipment):
    """Test that a clean record is returned unchanged."""
    equipment = make_equipment("boiler")
    assert normalize_equipment(equipment) is equipment


def test_stray_field_does_not_fail_validation(make_equipment):
    """Test that an AC with a stray AFUE still validates after normalization."""
    result = validate_equipment_type(make_equipment("ac", afue=0.80))

    assert result.is_valid
    assert result.typed_equipment.afue is None


# ============================================================================
# FAILURE TESTS
# ============================================================================


def test_missing_required_field_produces_critical_error(make_equipment):
    """Test error fields for a heat pump without HSPF."""
    equipment = make_equipment("heat_pump", id="hp-004", hspf=None)
    result = validate_equipment_type(equipment)

    assert not result.is_valid
    assert result.typed_equipment is None
    error = result.error
    assert error.equipment_id == "hp-004"
    assert error.error_type == ErrorType.TYPE_VALIDATION
    assert error.severity == Severity.CRITICAL
    assert error.message == (
        "Equipment data does not match the 'heat_pump' schema required for heat pumps"
    )
    assert error.technical_details == "Missing required fields: hspf"


def test_multiple_missing_fields_listed_in_rule_order(make_equipment):
    """Test that missing fields are reported in required-field order."""
    equipment = make_equipment("ac", seer=None, latent_cooling_btu=None)
    result = validate_equipment_type(equipment)

    assert result.error.technical_details == (
        "Missing required fields: latent_cooling_btu, seer"
    )


def test_get_validation_details_lists_required_before_forbidden(make_equipment):
    """Test raw-record details: missing values first, then stray values."""
    equipment = make_equipment("ac", latent_cooling_btu=None, afue=0.8)
    details = get_validation_details(equipment)

    assert [detail.field for detail in details] == ["latent_cooling_btu", "afue"]
    assert details[0].expected == "number"
    assert details[0].actual == "null"
    assert details[0].issue == "Required for air conditioners"
    assert details[1].expected == "null"
    assert details[1].actual == "0.8"
    assert details[1].issue == "Must be null for air conditioners"


def test_is_valid_for_type_checks_raw_record(make_equipment):
    """Test that is_valid_for_type does not normalize first."""
    assert is_valid_for_type(make_equipment("furnace"))
    assert not is_valid_for_type(make_equipment("furnace", seer=16.0))
