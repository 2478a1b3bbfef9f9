"""
Tests for SizingConfig.
Covers: default bands, staging-dependent cooling limit, CFM per ton,
band ordering validation, overrides, serialization.
"""

import pytest

from hvac_sizer.domain.equipment.entities.equipment import Staging
from hvac_sizer.domain.equipment.sizing_config import SizingConfig


# ============================================================================
# DEFAULTS
# ============================================================================


def test_default_config_bands():
    """Test that default() carries the documented sizing bands."""
    config = SizingConfig.default()

    assert (config.furnace_min_percent, config.furnace_optimal_max) == (100, 140)
    assert config.furnace_oversized_max == 200
    assert (config.boiler_optimal_max, config.boiler_acceptable_max) == (125, 150)
    assert (config.cooling_min_percent, config.cooling_optimal_max) == (90, 110)
    assert config.heat_pump_heating_acceptable_max == 150
    assert config.btu_per_kw == 3412.0


# ============================================================================
# cooling_max_percent
# ============================================================================


@pytest.mark.parametrize(
    "staging,cooling_load,expected",
    [
        (Staging.SINGLE_STAGE, 18000, 120),
        (Staging.SINGLE_STAGE, 24000, 120),
        (Staging.SINGLE_STAGE, 24001, 115),
        (Staging.SINGLE_STAGE, 48000, 115),
        (Staging.TWO_STAGE, 18000, 125),
        (Staging.TWO_STAGE, 48000, 125),
        (Staging.VARIABLE_SPEED, 36000, 130),
    ],
)
def test_cooling_max_percent(staging, cooling_load, expected):
    """Test upper acceptable cooling limit per staging and load size."""
    assert SizingConfig.default().cooling_max_percent(staging, cooling_load) == expected


# ============================================================================
# cfm_per_ton
# ============================================================================


@pytest.mark.parametrize(
    "shr,expected",
    [
        (0.70, 350),
        (0.849, 350),
        (0.85, 400),
        (0.95, 400),
        (0.951, 450),
        (1.0, 450),
    ],
)
def test_cfm_per_ton_by_shr(shr, expected):
    """Test airflow per ton boundaries (0.85 and 0.95 belong to the 400 band)."""
    assert SizingConfig.default().cfm_per_ton(shr) == expected


# ============================================================================
# VALIDATION AND OVERRIDES
# ============================================================================


def test_for_testing_applies_overrides():
    """Test that for_testing() replaces only the given fields."""
    config = SizingConfig.for_testing(furnace_optimal_max=130)

    assert config.furnace_optimal_max == 130
    assert config.furnace_min_percent == 100


def test_unordered_band_raises():
    """Test that a band with optimal max below its minimum is rejected."""
    with pytest.raises(ValueError, match="Sizing band 'boiler' must be ordered"):
        SizingConfig.for_testing(boiler_optimal_max=90)


def test_unordered_shr_thresholds_raise():
    """Test that low SHR threshold above high threshold is rejected."""
    with pytest.raises(ValueError, match="SHR thresholds must be ordered"):
        SizingConfig.for_testing(low_shr_threshold=0.96)


def test_unordered_plausibility_range_raises():
    """Test that an AFUE range with low above high is rejected."""
    with pytest.raises(ValueError, match="Range 'afue' must be ordered"):
        SizingConfig.for_testing(afue_range=(0.98, 0.80))


def test_check_thresholds_are_configurable():
    """Test that plausibility and load-check thresholds are config fields."""
    config = SizingConfig.for_testing(seer_range=(14.0, 22.0), high_heating_load_btu=150000.0)

    assert config.seer_range == (14.0, 22.0)
    assert config.high_heating_load_btu == 150000.0
    assert config.to_dict()["hspf_range"] == (8.0, 15.0)


def test_config_is_immutable():
    """Test that config fields cannot be reassigned."""
    config = SizingConfig.default()
    with pytest.raises(AttributeError):
        config.furnace_optimal_max = 150


def test_to_dict_serializes_staging_keys():
    """Test that to_dict() uses plain staging values as keys."""
    data = SizingConfig.default().to_dict()

    assert data["cooling_max_by_staging"] == {"two_stage": 125, "variable_speed": 130}
    assert data["furnace_optimal_max"] == 140
