"""
Specification Sanity Checker - Domain Service

Flags equipment whose efficiency or capacity figures fall outside plausible
engineering ranges. Typical causes are catalog typos (AFUE entered as 95
instead of 0.95 is caught earlier by field validation; 0.59 instead of 0.95
is caught here) and unit mix-ups (input rating copied into output).

Findings are warnings, never failures: the equipment stays in the
calculation, each message is appended to its recommendation, and the whole
list is summarised as one spec_validation error in the validation summary.
"""

from typing import Optional

from hvac_sizer.domain.equipment.entities.equipment import (
    DistributionType,
    EquipmentType,
)
from hvac_sizer.domain.equipment.entities.typed_equipment import TypedEquipment
from hvac_sizer.domain.equipment.sizing_config import SizingConfig
from hvac_sizer.domain.equipment.value_objects.validation import (
    EquipmentValidationError,
    ErrorType,
    Severity,
)

_AFUE_TYPES = {
    EquipmentType.FURNACE,
    EquipmentType.BOILER,
    EquipmentType.FURNACE_AC_COMBO,
}
_SEER_TYPES = {
    EquipmentType.AC,
    EquipmentType.HEAT_PUMP,
    EquipmentType.FURNACE_AC_COMBO,
}


def check_specifications(
    equipment: TypedEquipment, config: Optional[SizingConfig] = None
) -> list[str]:
    """
    Return human-readable warnings for implausible specifications.

    Checks (per equipment type):
        - AFUE within 0.80-0.98 (furnace, boiler, combo)
        - SEER within 13-25 (ac, heat pump, combo)
        - HSPF within 8-15 (heat pump)
        - Furnace output <= 110% of nominal input
        - AC cooling capacity within 2000 BTU/hr of nominal tons x 12000
        - Heat pump heating capacity <= 1.5x cooling capacity
        - Boiler on hydronic distribution

    Args:
        equipment: Type-validated equipment
        config: Plausibility bands (default: SizingConfig.default())

    Returns:
        Warning messages, empty when everything is plausible
    """
    config = config or SizingConfig.default()
    warnings: list[str] = []
    equipment_type = equipment.equipment_type

    if equipment_type in _AFUE_TYPES:
        low, high = config.afue_range
        if not low <= equipment.afue <= high:
            warnings.append(
                f"AFUE of {equipment.afue:.1%} is outside the expected range "
                f"({low:.0%}-{high:.0%})"
            )

    if equipment_type in _SEER_TYPES:
        low, high = config.seer_range
        if not low <= equipment.seer <= high:
            warnings.append(
                f"SEER of {equipment.seer:g} is outside the expected range ({low:g}-{high:g})"
            )

    if equipment_type == EquipmentType.HEAT_PUMP:
        low, high = config.hspf_range
        if not low <= equipment.hspf <= high:
            warnings.append(
                f"HSPF of {equipment.hspf:g} is outside the expected range ({low:g}-{high:g})"
            )
        ratio = config.heat_pump_max_heating_to_cooling
        if equipment.heating_capacity_btu > equipment.cooling_capacity_btu * ratio:
            warnings.append(
                f"Heating capacity ({equipment.heating_capacity_btu:,.0f} BTU/hr) exceeds "
                f"{ratio:g}x cooling capacity "
                f"({equipment.cooling_capacity_btu:,.0f} BTU/hr)"
            )

    if equipment_type == EquipmentType.FURNACE:
        max_output = equipment.nominal_btu * config.furnace_max_output_to_input
        if equipment.heating_capacity_btu > max_output:
            warnings.append(
                f"Heating output ({equipment.heating_capacity_btu:,.0f} BTU/hr) exceeds "
                f"nominal input ({equipment.nominal_btu:,.0f} BTU/hr) by more than "
                f"{config.furnace_max_output_to_input - 1:.0%}"
            )

    if equipment_type == EquipmentType.AC:
        expected_capacity = equipment.nominal_tons * config.btu_per_ton
        tolerance = config.ac_tonnage_tolerance_btu
        if abs(equipment.cooling_capacity_btu - expected_capacity) > tolerance:
            warnings.append(
                f"Cooling capacity ({equipment.cooling_capacity_btu:,.0f} BTU/hr) does not "
                f"match nominal {equipment.nominal_tons:g} tons "
                f"({expected_capacity:,.0f} BTU/hr ± {tolerance:,.0f})"
            )

    if equipment_type == EquipmentType.BOILER:
        if equipment.distribution_type != DistributionType.HYDRONIC:
            warnings.append(
                f"Boiler listed with '{equipment.distribution_type.value}' distribution; "
                f"boilers require hydronic distribution"
            )

    return warnings


def build_spec_validation_error(
    equipment: TypedEquipment, warnings: list[str]
) -> EquipmentValidationError:
    """
    Summarise specification warnings as one validation-summary entry.

    Args:
        equipment: Equipment the warnings belong to
        warnings: Non-empty output of check_specifications()

    Returns:
        EquipmentValidationError with severity=warning and the joined messages
        as technical_details
    """
    count = len(warnings)
    return EquipmentValidationError(
        equipment_id=equipment.id,
        manufacturer=equipment.manufacturer,
        model=equipment.model,
        error_type=ErrorType.SPEC_VALIDATION,
        severity=Severity.WARNING,
        message=f"{count} specification value{'s' if count != 1 else ''} outside expected ranges",
        technical_details="; ".join(warnings),
    )
