"""
Pytest Configuration and Shared Fixtures

Shared fixtures used across all test suites (unit, integration).

Fixtures:
    - make_equipment: Factory for valid raw Equipment records of any type
    - make_typed: Factory for TypedEquipment variants (via the type validator)
    - make_loads: Factory for LoadInputs (sensible defaults to 80% of cooling)
    - make_preferences: Factory for UserPreferences
    - sample_catalog: Small mixed catalog covering all five types

Usage:
    Tests automatically have access to these fixtures by name:

    def test_something(make_typed, make_loads):
        furnace = make_typed("furnace", heating_capacity_btu=72000)
        loads = make_loads(heating=60000)
"""

import logging
from typing import Any, Callable, Optional

import pytest

from hvac_sizer.domain.equipment.entities.equipment import Equipment, EquipmentType
from hvac_sizer.domain.equipment.services.type_validator import validate_equipment_type
from hvac_sizer.domain.equipment.value_objects.load_inputs import LoadInputs
from hvac_sizer.domain.equipment.value_objects.user_preferences import UserPreferences

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# DEFAULT RECORDS (valid and plausible for each type)
# ============================================================================

EQUIPMENT_DEFAULTS: dict[EquipmentType, dict[str, Any]] = {
    EquipmentType.FURNACE: {
        "manufacturer": "Carrier",
        "model": "59SC5A060",
        "price": 2450.0,
        "distribution_type": "ducted",
        "staging": "single_stage",
        "unit_location": "indoor",
        "nominal_btu": 60000,
        "heating_capacity_btu": 57000,
        "afue": 0.95,
    },
    EquipmentType.AC: {
        "manufacturer": "Trane",
        "model": "4TTR6036J1",
        "price": 3350.0,
        "distribution_type": "ducted",
        "staging": "single_stage",
        "unit_location": "split_system",
        "nominal_tons": 3.0,
        "cooling_capacity_btu": 36000,
        "latent_cooling_btu": 9000,
        "seer": 16.0,
    },
    EquipmentType.HEAT_PUMP: {
        "manufacturer": "Carrier",
        "model": "25VNA036A003",
        "price": 7450.0,
        "distribution_type": "ducted",
        "staging": "two_stage",
        "unit_location": "split_system",
        "nominal_tons": 3.0,
        "heating_capacity_btu": 34000,
        "cooling_capacity_btu": 36000,
        "latent_cooling_btu": 9000,
        "seer": 18.0,
        "hspf": 10.0,
    },
    EquipmentType.BOILER: {
        "manufacturer": "Weil-McLain",
        "model": "WMB-080",
        "price": 4650.0,
        "distribution_type": "hydronic",
        "staging": "single_stage",
        "unit_location": "indoor",
        "nominal_btu": 80000,
        "heating_capacity_btu": 74000,
        "afue": 0.95,
    },
    EquipmentType.FURNACE_AC_COMBO: {
        "manufacturer": "Rheem",
        "model": "RP1636AJ1NA",
        "price": 6890.0,
        "distribution_type": "ducted",
        "staging": "two_stage",
        "unit_location": "outdoor",
        "nominal_tons": 3.0,
        "nominal_btu": 80000,
        "heating_capacity_btu": 76000,
        "cooling_capacity_btu": 36000,
        "latent_cooling_btu": 9000,
        "afue": 0.96,
        "seer": 16.0,
    },
}


# ============================================================================
# FACTORY FIXTURES
# ============================================================================


@pytest.fixture
def make_equipment() -> Callable[..., Equipment]:
    """
    Factory for raw Equipment records.

    Defaults describe a valid, plausible unit of the given type; keyword
    overrides replace (or, with None, clear) individual fields.
    """
    counter = {"n": 0}

    def _make(equipment_type: str | EquipmentType, **overrides: Any) -> Equipment:
        equipment_type = EquipmentType(equipment_type)
        counter["n"] += 1
        data = {
            "id": f"{equipment_type.value}-{counter['n']:03d}",
            "equipment_type": equipment_type,
            **EQUIPMENT_DEFAULTS[equipment_type],
        }
        data.update(overrides)
        return Equipment(**data)

    return _make


@pytest.fixture
def make_typed(make_equipment):
    """Factory for TypedEquipment variants built through the type validator."""

    def _make(equipment_type: str | EquipmentType, **overrides: Any):
        result = validate_equipment_type(make_equipment(equipment_type, **overrides))
        assert result.is_valid, result.error
        return result.typed_equipment

    return _make


@pytest.fixture
def make_loads() -> Callable[..., LoadInputs]:
    """
    Factory for LoadInputs.

    sensible defaults to 80% of cooling (SHR 0.80).
    """

    def _make(
        heating: float = 0.0,
        cooling: float = 0.0,
        sensible: Optional[float] = None,
        **kwargs: Any,
    ) -> LoadInputs:
        if sensible is None:
            sensible = cooling * 0.8
        return LoadInputs(
            total_heating_btu=heating,
            total_cooling_btu=cooling,
            sensible_cooling_btu=sensible,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_preferences() -> Callable[..., UserPreferences]:
    """Factory for UserPreferences; equipment_types default to all five."""

    def _make(equipment_types: Optional[list[str]] = None, **kwargs: Any) -> UserPreferences:
        if equipment_types is None:
            equipment_types = [t.value for t in EquipmentType]
        return UserPreferences(equipment_types=equipment_types, **kwargs)

    return _make


@pytest.fixture
def sample_catalog(make_equipment) -> list[Equipment]:
    """
    Mixed catalog: one valid unit per type, one invalid heat pump
    (missing HSPF) and one inactive furnace.
    """
    return [
        make_equipment("furnace", id="furn-001"),
        make_equipment("ac", id="ac-001"),
        make_equipment("heat_pump", id="hp-001"),
        make_equipment("boiler", id="blr-001"),
        make_equipment("furnace_ac_combo", id="combo-001"),
        make_equipment("heat_pump", id="hp-002", hspf=None),
        make_equipment("furnace", id="furn-002", is_active=False),
    ]
