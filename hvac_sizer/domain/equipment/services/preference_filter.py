"""
Preference Filter - Domain Service

Boolean gate applied before a unit is sized. All constraints are
AND-combined; a preference that is None or empty imposes no constraint.
"""

from hvac_sizer.domain.equipment.entities.typed_equipment import TypedEquipment
from hvac_sizer.domain.equipment.value_objects.user_preferences import UserPreferences


def passes_filters(equipment: TypedEquipment, preferences: UserPreferences) -> bool:
    """
    Check equipment against the user's filters.

    Excludes equipment when:
        - brand_filter is non-empty and the manufacturer is not in it
        - distribution_type is set and differs
        - staging_filter is non-empty and the staging is not in it
        - min_afue is set and the equipment's AFUE is below it
          (equipment without an AFUE rating is not affected)
        - max_price is set and the price is above it
        - unit_location_filter is non-empty and the location is not in it

    Returns:
        True if the equipment satisfies every preference
    """
    if preferences.brand_filter and equipment.manufacturer not in preferences.brand_filter:
        return False

    if (
        preferences.distribution_type is not None
        and equipment.distribution_type != preferences.distribution_type
    ):
        return False

    if preferences.staging_filter and equipment.staging not in preferences.staging_filter:
        return False

    if (
        preferences.min_afue is not None
        and equipment.afue is not None
        and equipment.afue < preferences.min_afue
    ):
        return False

    if preferences.max_price is not None and equipment.price > preferences.max_price:
        return False

    if (
        preferences.unit_location_filter
        and equipment.unit_location not in preferences.unit_location_filter
    ):
        return False

    return True
