"""
TypedEquipment - Discriminated Union of Equipment Variants

The trusted form of a catalog record. Each variant narrows the flat
Equipment record: fields required for the category are typed `float`,
fields that make no sense for it are typed `None`. Pydantic selects the
variant from `equipment_type`, so a TypedEquipment can only exist if the
record honours its category's field rules.

Variants are produced exclusively by the type validator
(services/type_validator.py) and are what sizing evaluators and
recommendation snapshots carry.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from hvac_sizer.domain.equipment.entities.equipment import (
    DistributionType,
    EquipmentType,
    Staging,
    SystemFunction,
    UnitLocation,
)


class _TypedEquipmentBase(BaseModel):
    """Fields shared by every variant (identity, commercial, classification)."""

    id: str
    manufacturer: str
    model: str
    price: float
    distribution_type: DistributionType
    staging: Staging
    unit_location: UnitLocation
    system_function: Optional[SystemFunction] = None
    cabinet_width: Optional[float] = None
    cabinet_height: Optional[float] = None
    cabinet_depth: Optional[float] = None
    image_url: str = ""

    model_config = {"frozen": True}

    @property
    def display_name(self) -> str:
        """Manufacturer and model, as shown in messages."""
        return f"{self.manufacturer} {self.model}"


class FurnaceEquipment(_TypedEquipmentBase):
    """Fuel-fired forced-air furnace (heating only)."""

    equipment_type: Literal[EquipmentType.FURNACE] = EquipmentType.FURNACE
    nominal_btu: float
    heating_capacity_btu: float
    afue: float
    nominal_tons: None = None
    cooling_capacity_btu: None = None
    latent_cooling_btu: None = None
    seer: None = None
    hspf: None = None


class AirConditionerEquipment(_TypedEquipmentBase):
    """Split or packaged air conditioner (cooling only)."""

    equipment_type: Literal[EquipmentType.AC] = EquipmentType.AC
    nominal_tons: float
    cooling_capacity_btu: float
    latent_cooling_btu: float
    seer: float
    nominal_btu: None = None
    heating_capacity_btu: None = None
    afue: None = None
    hspf: None = None


class HeatPumpEquipment(_TypedEquipmentBase):
    """Air-source heat pump (heating and cooling by compressor)."""

    equipment_type: Literal[EquipmentType.HEAT_PUMP] = EquipmentType.HEAT_PUMP
    nominal_tons: float
    heating_capacity_btu: float
    cooling_capacity_btu: float
    latent_cooling_btu: float
    seer: float
    hspf: float
    nominal_btu: None = None
    afue: None = None


class BoilerEquipment(_TypedEquipmentBase):
    """Hot-water boiler (heating only)."""

    equipment_type: Literal[EquipmentType.BOILER] = EquipmentType.BOILER
    nominal_btu: float
    heating_capacity_btu: float
    afue: float
    nominal_tons: None = None
    cooling_capacity_btu: None = None
    latent_cooling_btu: None = None
    seer: None = None
    hspf: None = None


class ComboEquipment(_TypedEquipmentBase):
    """Matched furnace + air conditioner system."""

    equipment_type: Literal[EquipmentType.FURNACE_AC_COMBO] = (
        EquipmentType.FURNACE_AC_COMBO
    )
    nominal_tons: float
    nominal_btu: float
    heating_capacity_btu: float
    cooling_capacity_btu: float
    latent_cooling_btu: float
    afue: float
    seer: float
    hspf: None = None


TypedEquipment = Annotated[
    Union[
        FurnaceEquipment,
        AirConditionerEquipment,
        HeatPumpEquipment,
        BoilerEquipment,
        ComboEquipment,
    ],
    Field(discriminator="equipment_type"),
]

TYPED_EQUIPMENT_ADAPTER: TypeAdapter = TypeAdapter(TypedEquipment)
