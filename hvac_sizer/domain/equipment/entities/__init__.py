"""
Equipment Entities.

Exports:
    - Equipment: Flat catalog record (untrusted)
    - TypedEquipment variants: Trusted, category-narrowed records
    - Classification enums
"""

from hvac_sizer.domain.equipment.entities.equipment import (
    CAPACITY_FIELDS,
    DistributionType,
    Equipment,
    EquipmentType,
    Staging,
    SystemFunction,
    UnitLocation,
)
from hvac_sizer.domain.equipment.entities.typed_equipment import (
    TYPED_EQUIPMENT_ADAPTER,
    AirConditionerEquipment,
    BoilerEquipment,
    ComboEquipment,
    FurnaceEquipment,
    HeatPumpEquipment,
    TypedEquipment,
)

__all__ = [
    "CAPACITY_FIELDS",
    "Equipment",
    "EquipmentType",
    "DistributionType",
    "Staging",
    "UnitLocation",
    "SystemFunction",
    "TypedEquipment",
    "TYPED_EQUIPMENT_ADAPTER",
    "FurnaceEquipment",
    "AirConditionerEquipment",
    "HeatPumpEquipment",
    "BoilerEquipment",
    "ComboEquipment",
]
