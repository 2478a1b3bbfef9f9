"""
UserPreferences Value Object

Selection and filter criteria supplied with a calculation request.
Absence of a field (None or empty list) means "no constraint".
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from hvac_sizer.domain.equipment.entities.equipment import (
    DistributionType,
    EquipmentType,
    Staging,
    UnitLocation,
)


class SizingPreference(str, Enum):
    """
    Which load a heat pump is sized against in heating-dominant climates.

    Only consulted by the heat pump evaluator.
    """

    SIZE_TO_HEATING = "size_to_heating"
    SIZE_TO_COOLING = "size_to_cooling"


class UserPreferences(BaseModel):
    """
    Immutable value object with the user's equipment selection criteria.

    Attributes:
        equipment_types: Categories to evaluate (at least one)
        distribution_type: Only equipment with this distribution type
        sizing_preference: Heat pump sizing strategy (default: size to cooling)
        brand_filter: Allowed manufacturers (empty = any)
        staging_filter: Allowed staging values (empty = any)
        min_afue: Minimum AFUE as a fraction (applies to equipment with AFUE)
        max_price: Maximum price in USD
        unit_location_filter: Allowed unit locations (empty = any)

    Examples:
        >>> prefs = UserPreferences(equipment_types=[EquipmentType.FURNACE])
        >>> prefs.brand_filter
        []
    """

    equipment_types: list[EquipmentType] = Field(..., min_length=1)
    distribution_type: Optional[DistributionType] = None
    sizing_preference: Optional[SizingPreference] = None
    brand_filter: list[str] = Field(default_factory=list)
    staging_filter: list[Staging] = Field(default_factory=list)
    min_afue: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    max_price: Optional[float] = Field(default=None, ge=0.0)
    unit_location_filter: list[UnitLocation] = Field(default_factory=list)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "equipment_types": ["furnace", "heat_pump"],
                    "distribution_type": "ducted",
                    "sizing_preference": "size_to_cooling",
                    "brand_filter": ["Carrier", "Trane"],
                    "staging_filter": ["two_stage", "variable_speed"],
                    "min_afue": 0.9,
                    "max_price": 8000,
                }
            ]
        },
    }

    @property
    def sizes_heat_pumps_to_heating(self) -> bool:
        return self.sizing_preference == SizingPreference.SIZE_TO_HEATING
