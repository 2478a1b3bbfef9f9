"""
Calculation API Schemas

Request body of POST /api/recommendations/calculate.

LoadInputs and UserPreferences are the domain value objects themselves:
their field ranges and cross-field rules (sensible <= total cooling,
SHR >= 0.65, winter < summer design temperature) run during request
parsing, so violations come back as 422 before the engine is called.
"""

from pydantic import BaseModel, Field

from hvac_sizer.domain.equipment.value_objects.load_inputs import LoadInputs
from hvac_sizer.domain.equipment.value_objects.user_preferences import UserPreferences


class CalculateRecommendationsRequest(BaseModel):
    """
    Request model for a sizing calculation.

    Attributes:
        load_inputs: Design loads from the Manual J calculation
        preferences: Equipment types to consider and optional filters
    """

    load_inputs: LoadInputs = Field(description="Design heating/cooling loads")
    preferences: UserPreferences = Field(description="Equipment selection criteria")

    model_config = {
        "json_schema_extra": {
            "example": {
                "load_inputs": {
                    "total_heating_btu": 60000,
                    "total_cooling_btu": 36000,
                    "sensible_cooling_btu": 28000,
                    "elevation": 500,
                },
                "preferences": {
                    "equipment_types": ["furnace", "ac", "heat_pump"],
                    "sizing_preference": "size_to_cooling",
                    "max_price": 8000,
                },
            }
        }
    }
