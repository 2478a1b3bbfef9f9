"""
Equipment Entity.

A single catalog record as it arrives from the equipment data source.
The record is "flat": every capacity and efficiency field is nullable, and
which of them may be populated depends on equipment_type. Nothing in the
sizing engine reads this flat form directly; it is translated into a
TypedEquipment variant by the type validator first.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class EquipmentType(str, Enum):
    """
    Equipment category discriminator.

    Determines which capacity/efficiency fields are required and which
    sizing rule is applied.
    """

    FURNACE = "furnace"
    AC = "ac"
    HEAT_PUMP = "heat_pump"
    BOILER = "boiler"
    FURNACE_AC_COMBO = "furnace_ac_combo"


class DistributionType(str, Enum):
    """How conditioned air or water reaches the rooms."""

    DUCTED = "ducted"
    DUCTLESS = "ductless"
    HYDRONIC = "hydronic"


class Staging(str, Enum):
    """Compressor/burner modulation capability."""

    SINGLE_STAGE = "single_stage"
    TWO_STAGE = "two_stage"
    VARIABLE_SPEED = "variable_speed"


class UnitLocation(str, Enum):
    """Where the unit is installed."""

    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    SPLIT_SYSTEM = "split_system"


class SystemFunction(str, Enum):
    """Which loads the unit serves."""

    HEATING = "heating"
    COOLING = "cooling"
    HEATING_COOLING = "heating_cooling"


# Capacity and efficiency fields governed by the per-type field rules
CAPACITY_FIELDS: tuple[str, ...] = (
    "nominal_tons",
    "nominal_btu",
    "heating_capacity_btu",
    "cooling_capacity_btu",
    "latent_cooling_btu",
    "afue",
    "seer",
    "hspf",
)


class Equipment(BaseModel):
    """
    Catalog entry for one piece of HVAC equipment.

    Attributes:
        id: Catalog identifier (e.g., "furn-001")
        manufacturer: Brand name, matched against UserPreferences.brand_filter
        model: Manufacturer model number
        price: Equipment price in USD
        is_active: Inactive records are never evaluated
        equipment_type: Category discriminator
        distribution_type: Ducted, ductless or hydronic
        staging: Single stage, two stage or variable speed
        unit_location: Indoor, outdoor or split system
        system_function: Heating, cooling or both (informational)
        nominal_tons: Nominal cooling size in tons (cooling equipment)
        nominal_btu: Nominal input rating in BTU/hr (fuel-fired equipment)
        heating_capacity_btu: Delivered heating output in BTU/hr
        cooling_capacity_btu: Total cooling capacity in BTU/hr
        latent_cooling_btu: Latent portion of cooling capacity in BTU/hr
        afue: Annual Fuel Utilization Efficiency as a fraction (0.95 = 95%)
        seer: Seasonal Energy Efficiency Ratio
        hspf: Heating Seasonal Performance Factor
        cabinet_width/height/depth: Cabinet dimensions in inches
        image_url: Product image for presentation

    Examples:
        >>> furnace = Equipment(
        ...     id="furn-001",
        ...     manufacturer="Carrier",
        ...     model="59SC5A060",
        ...     price=2450.0,
        ...     equipment_type=EquipmentType.FURNACE,
        ...     distribution_type=DistributionType.DUCTED,
        ...     staging=Staging.SINGLE_STAGE,
        ...     unit_location=UnitLocation.INDOOR,
        ...     nominal_btu=60000,
        ...     heating_capacity_btu=57000,
        ...     afue=0.95,
        ... )
        >>> furnace.is_active
        True
    """

    id: str = Field(..., min_length=1, description="Catalog identifier")
    manufacturer: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    price: float = Field(..., ge=0.0, description="Price in USD")
    is_active: bool = Field(default=True)

    equipment_type: EquipmentType
    distribution_type: DistributionType
    staging: Staging
    unit_location: UnitLocation
    system_function: Optional[SystemFunction] = None

    # Capacity fields (BTU/hr unless noted)
    nominal_tons: Optional[float] = Field(default=None, gt=0.0)
    nominal_btu: Optional[float] = Field(default=None, gt=0.0)
    heating_capacity_btu: Optional[float] = Field(default=None, gt=0.0)
    cooling_capacity_btu: Optional[float] = Field(default=None, gt=0.0)
    latent_cooling_btu: Optional[float] = Field(default=None, ge=0.0)

    # Efficiency ratings
    afue: Optional[float] = Field(default=None, gt=0.0, le=1.0)
    seer: Optional[float] = Field(default=None, gt=0.0)
    hspf: Optional[float] = Field(default=None, gt=0.0)

    # Physical specifications (inches)
    cabinet_width: Optional[float] = Field(default=None, gt=0.0)
    cabinet_height: Optional[float] = Field(default=None, gt=0.0)
    cabinet_depth: Optional[float] = Field(default=None, gt=0.0)

    image_url: str = Field(default="")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "furn-001",
                    "manufacturer": "Carrier",
                    "model": "59SC5A060",
                    "price": 2450.0,
                    "is_active": True,
                    "equipment_type": "furnace",
                    "distribution_type": "ducted",
                    "staging": "single_stage",
                    "unit_location": "indoor",
                    "system_function": "heating",
                    "nominal_btu": 60000,
                    "heating_capacity_btu": 57000,
                    "afue": 0.95,
                    "image_url": "/images/furnace.png",
                }
            ]
        },
    }

    @property
    def display_name(self) -> str:
        """Manufacturer and model, as shown in messages."""
        return f"{self.manufacturer} {self.model}"

    def populated_fields(self) -> set[str]:
        """Names of capacity/efficiency fields that carry a value."""
        return {name for name in CAPACITY_FIELDS if getattr(self, name) is not None}
