"""
Tests for the preference filter.
Covers: each filter in isolation, empty filters, AFUE-less equipment.
"""

import pytest

from hvac_sizer.domain.equipment.services.preference_filter import passes_filters


def test_no_preferences_pass_everything(make_typed, make_preferences):
    """Test that empty filters impose no constraint."""
    preferences = make_preferences()
    for equipment_type in ["furnace", "ac", "heat_pump", "boiler", "furnace_ac_combo"]:
        assert passes_filters(make_typed(equipment_type), preferences)


@pytest.mark.parametrize(
    "preference,value,passes",
    [
        ("brand_filter", ["Carrier", "Trane"], True),
        ("brand_filter", ["Lennox"], False),
        ("distribution_type", "ducted", True),
        ("distribution_type", "ductless", False),
        ("staging_filter", ["single_stage"], True),
        ("staging_filter", ["two_stage", "variable_speed"], False),
        ("min_afue", 0.95, True),
        ("min_afue", 0.96, False),
        ("max_price", 2450.0, True),
        ("max_price", 2000.0, False),
        ("unit_location_filter", ["indoor"], True),
        ("unit_location_filter", ["outdoor"], False),
    ],
)
def test_single_filter_on_furnace(make_typed, make_preferences, preference, value, passes):
    """Test each filter against the default furnace (Carrier, ducted, 0.95, $2450)."""
    furnace = make_typed("furnace")
    preferences = make_preferences(**{preference: value})

    assert passes_filters(furnace, preferences) is passes


def test_min_afue_ignored_for_equipment_without_afue(make_typed, make_preferences):
    """Test that AC and heat pumps are not excluded by an AFUE minimum."""
    preferences = make_preferences(min_afue=0.99)

    assert passes_filters(make_typed("ac"), preferences)
    assert passes_filters(make_typed("heat_pump"), preferences)
    assert not passes_filters(make_typed("boiler"), preferences)


def test_filters_are_and_combined(make_typed, make_preferences):
    """Test that one failing filter excludes despite others passing."""
    preferences = make_preferences(brand_filter=["Carrier"], max_price=1000.0)
    assert not passes_filters(make_typed("furnace"), preferences)
