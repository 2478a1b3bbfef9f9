"""
Sizing Evaluators - Domain Service

One sizing rule per equipment category. Each evaluator compares the unit's
deliverable capacity with the relevant design load, classifies the result
into a sizing band and collects the warnings/instructions specific to that
category.

Architecture Notes:
    - Pure functions: no shared state, every evaluator builds and returns its
      own warning/instruction lists
    - Evaluators only accept TypedEquipment variants, never the flat record
    - Returning EvaluationResult.excluded() means "does not fit" (undersized,
      far oversized, no relevant load, filtered out). It is not an error.

Business Rules:
    sizing percentage = round_half_up(deliverable capacity / load x 100)

    | Equipment            | Load    | Optimal      | Acceptable  | Oversized | Excluded       |
    |----------------------|---------|--------------|-------------|-----------|----------------|
    | Furnace              | heating | 100-140      | -           | 141-200   | <100 or >200   |
    | Boiler               | heating | 100-125      | 126-150     | >150      | <100           |
    | AC                   | cooling | 90-110       | 111-max     | >max      | <90            |
    | Heat pump (cooling)  | cooling | 90-110       | 111-max     | >max      | <90            |
    | Heat pump (heating)  | heating | 100-120      | 121-150     | >150      | <100           |
    | Combo                | both    | see evaluate_combo_system                               |

    max (cooling) = 120 single-stage on loads <= 24,000 BTU/hr, else 115;
                    125 two-stage; 130 variable-speed
"""

import logging
import math
from typing import Callable, Optional

from hvac_sizer.domain.equipment.entities.equipment import DistributionType, EquipmentType
from hvac_sizer.domain.equipment.entities.typed_equipment import (
    AirConditionerEquipment,
    BoilerEquipment,
    ComboEquipment,
    FurnaceEquipment,
    HeatPumpEquipment,
    TypedEquipment,
)
from hvac_sizer.domain.equipment.services.preference_filter import passes_filters
from hvac_sizer.domain.equipment.sizing_config import SizingConfig
from hvac_sizer.domain.equipment.value_objects.load_inputs import LoadInputs
from hvac_sizer.domain.equipment.value_objects.recommendation import (
    EquipmentRecommendation,
    EvaluationResult,
    SizingStatus,
)
from hvac_sizer.domain.equipment.value_objects.user_preferences import UserPreferences
from hvac_sizer.shared.utils.numeric import round_half_up, round_to_tenths

logger = logging.getLogger(__name__)

Evaluator = Callable[
    [TypedEquipment, LoadInputs, UserPreferences, float, float, SizingConfig],
    EvaluationResult,
]


# ============================================================================
# SHARED CALCULATIONS
# ============================================================================


def sizing_percentage(capacity_btu: float, load_btu: float) -> int:
    """
    Delivered capacity as an integer percentage of the design load.

    Examples:
        >>> sizing_percentage(72000, 60000)
        120
    """
    return round_half_up(capacity_btu / load_btu * 100)


def calculate_recommended_cfm(
    nominal_tons: Optional[float],
    cooling_capacity_btu: float,
    sensible_heat_ratio: float,
    config: SizingConfig,
) -> int:
    """
    Airflow the ductwork must carry for a cooling unit.

    tons = nominal_tons, or cooling capacity / 12000 when tons are unknown.
    CFM = ceil(tons x CFM-per-ton), where CFM-per-ton drops to 350 for humid
    loads (SHR < 0.85) and rises to 450 for dry loads (SHR > 0.95).

    Examples:
        >>> calculate_recommended_cfm(3.0, 36000, 0.80, SizingConfig.default())
        1050
    """
    tons = nominal_tons or cooling_capacity_btu / config.btu_per_ton
    return math.ceil(tons * config.cfm_per_ton(sensible_heat_ratio))


def derate_for_elevation(
    capacity_btu: float, elevation_ft: float, config: SizingConfig
) -> tuple[float, float]:
    """
    Apply altitude derating to fuel-fired heating output.

    Thinner air carries less oxygen: above 1000 ft output drops by
    3% per 1000 ft of total elevation.

    Returns:
        Tuple (derated capacity, derating percentage); percentage is 0 at or
        below the threshold

    Examples:
        >>> derate_for_elevation(80000, 5000, SizingConfig.default())
        (68000.0, 15.0)
    """
    if elevation_ft <= config.derating_threshold_ft:
        return capacity_btu, 0.0
    derating_pct = config.derating_percent_per_1000_ft * elevation_ft / 1000
    return capacity_btu * (1 - derating_pct / 100), derating_pct


def _classify_cooling(
    percentage: int, max_percent: int, config: SizingConfig
) -> Optional[SizingStatus]:
    """Cooling band: None when below the minimum (excluded)."""
    if percentage < config.cooling_min_percent:
        return None
    if percentage <= config.cooling_optimal_max:
        return SizingStatus.OPTIMAL
    if percentage <= max_percent:
        return SizingStatus.ACCEPTABLE
    return SizingStatus.OVERSIZED


def _cfm_instruction(recommended_cfm: int) -> str:
    return f"Verify existing ductwork is capable of handling at least {recommended_cfm:,} CFM"


# ============================================================================
# FURNACE
# ============================================================================


def evaluate_furnace(
    equipment: FurnaceEquipment,
    load_inputs: LoadInputs,
    preferences: UserPreferences,
    shr: float,
    latent_cooling: float,
    config: SizingConfig,
) -> EvaluationResult:
    """
    Size a furnace against the heating load.

    Deliverable output is the rated heating capacity, derated for elevation
    above 1000 ft. Optimal 100-140%, oversized up to 200% (with a warning),
    anything else excluded.
    """
    if not load_inputs.has_heating_load:
        return EvaluationResult.excluded("no heating load")

    warnings: list[str] = []
    output_btu, derating_pct = derate_for_elevation(
        equipment.heating_capacity_btu, load_inputs.site_elevation, config
    )
    if derating_pct > 0:
        warnings.append(
            f"Capacity derated {derating_pct:.1f}% for {load_inputs.site_elevation:,.0f} ft "
            f"elevation. Effective output is {output_btu:,.0f} BTU/hr."
        )

    percentage = sizing_percentage(output_btu, load_inputs.total_heating_btu)

    if percentage < config.furnace_min_percent:
        return EvaluationResult.excluded(f"undersized at {percentage}% of heating load")
    if percentage > config.furnace_oversized_max:
        return EvaluationResult.excluded(f"oversized beyond limit at {percentage}%")

    if percentage <= config.furnace_optimal_max:
        status = SizingStatus.OPTIMAL
    else:
        status = SizingStatus.OVERSIZED
        warnings.append(
            f"This furnace is {percentage}% oversized. Use only if the AC system "
            f"requires more blower power to accommodate the cooling load."
        )

    instructions = [
        "Verify ductwork can handle required airflow",
        "Check static pressure requirements for optimal performance",
    ]

    return EvaluationResult.included(
        EquipmentRecommendation(
            equipment=equipment,
            sizing_status=status,
            sizing_percentage=percentage,
            warnings=warnings,
            instructions=instructions,
        )
    )


# ============================================================================
# AIR CONDITIONER
# ============================================================================


def evaluate_air_conditioner(
    equipment: AirConditionerEquipment,
    load_inputs: LoadInputs,
    preferences: UserPreferences,
    shr: float,
    latent_cooling: float,
    config: SizingConfig,
) -> EvaluationResult:
    """
    Size an air conditioner against the cooling load.

    No elevation effect. Bands depend on staging; oversized units get a
    humidity-control warning. Recommended CFM follows the load's SHR.
    """
    if not load_inputs.has_cooling_load:
        return EvaluationResult.excluded("no cooling load")

    percentage = sizing_percentage(
        equipment.cooling_capacity_btu, load_inputs.total_cooling_btu
    )
    max_percent = config.cooling_max_percent(equipment.staging, load_inputs.total_cooling_btu)
    status = _classify_cooling(percentage, max_percent, config)
    if status is None:
        return EvaluationResult.excluded(f"undersized at {percentage}% of cooling load")

    warnings: list[str] = []
    if status == SizingStatus.OVERSIZED:
        warnings.append(
            f"This air conditioner is {percentage}% oversized and may struggle "
            f"with humidity control."
        )

    recommended_cfm = calculate_recommended_cfm(
        equipment.nominal_tons, equipment.cooling_capacity_btu, shr, config
    )
    instructions = [_cfm_instruction(recommended_cfm)]
    if shr < config.latent_concern_shr:
        instructions.append("Use OEM data to verify system has adequate latent capacity")

    return EvaluationResult.included(
        EquipmentRecommendation(
            equipment=equipment,
            sizing_status=status,
            sizing_percentage=percentage,
            warnings=warnings,
            instructions=instructions,
            recommended_cfm=recommended_cfm,
        )
    )


# ============================================================================
# HEAT PUMP
# ============================================================================


def evaluate_heat_pump(
    equipment: HeatPumpEquipment,
    load_inputs: LoadInputs,
    preferences: UserPreferences,
    shr: float,
    latent_cooling: float,
    config: SizingConfig,
) -> EvaluationResult:
    """
    Size a heat pump to either the heating or the cooling load.

    Strategy:
        1. Heating-dominant and the user sizes to heating (or there is no
           cooling load at all): heating bands 100/120/150. Moisture warning
           or turn-down instruction only for an in-band unit with a cooling
           load.
        2. Heating-dominant with a latent load (SHR < 0.95), sized to cooling:
           cooling bands; for an in-band unit any heating shortfall becomes
           backup heat (kW).
        3. Otherwise (cooling-dominant, equal, or dry climate): cooling bands.

    Every included heat pump gets a recommended CFM computed as for an AC.
    """
    heating_load = load_inputs.total_heating_btu
    cooling_load = load_inputs.total_cooling_btu
    if heating_load <= 0 and cooling_load <= 0:
        return EvaluationResult.excluded("no heating or cooling load")

    heating_dominant = heating_load > cooling_load
    warnings: list[str] = []
    instructions: list[str] = []
    backup_heat_kw: Optional[float] = None

    if heating_dominant and (preferences.sizes_heat_pumps_to_heating or cooling_load <= 0):
        percentage = sizing_percentage(equipment.heating_capacity_btu, heating_load)
        if percentage < config.heat_pump_heating_min_percent:
            return EvaluationResult.excluded(f"undersized at {percentage}% of heating load")
        if percentage <= config.heat_pump_heating_optimal_max:
            status = SizingStatus.OPTIMAL
        elif percentage <= config.heat_pump_heating_acceptable_max:
            status = SizingStatus.ACCEPTABLE
        else:
            status = SizingStatus.OVERSIZED

        if status != SizingStatus.OVERSIZED and cooling_load > 0:
            if shr < config.latent_concern_shr:
                warnings.append(
                    "A system sized for heating will be oversized for cooling and struggle "
                    "to remove moisture. Add a standalone dehumidifier and use OEM data to "
                    f"verify that the system turns down to <{config.turn_down_target_percent}% "
                    "of total cooling load."
                )
            else:
                instructions.append(
                    "Sizing the system to heating will oversize it for cooling. For optimal "
                    "comfort and to avoid wear & tear on the system, use performance data to "
                    f"verify that it turns down to <{config.turn_down_target_percent}% of "
                    "total cooling load."
                )

    elif heating_dominant and shr < config.latent_concern_shr:
        percentage = sizing_percentage(equipment.cooling_capacity_btu, cooling_load)
        max_percent = config.cooling_max_percent(equipment.staging, cooling_load)
        status = _classify_cooling(percentage, max_percent, config)
        if status is None:
            return EvaluationResult.excluded(f"undersized at {percentage}% of cooling load")

        if status != SizingStatus.OVERSIZED:
            heat_deficit = heating_load - equipment.heating_capacity_btu
            if heat_deficit > 0:
                backup_heat_kw = round_to_tenths(heat_deficit / config.btu_per_kw)
                warnings.append(
                    f"Be sure to add backup heat. {backup_heat_kw} kW of backup heat are required."
                )
            instructions.append(
                f"Use OEM data to verify the system has {latent_cooling:,.0f} BTU min "
                f"latent capacity"
            )

    else:
        percentage = sizing_percentage(equipment.cooling_capacity_btu, cooling_load)
        max_percent = config.cooling_max_percent(equipment.staging, cooling_load)
        status = _classify_cooling(percentage, max_percent, config)
        if status is None:
            return EvaluationResult.excluded(f"undersized at {percentage}% of cooling load")

    recommended_cfm = calculate_recommended_cfm(
        equipment.nominal_tons, equipment.cooling_capacity_btu, shr, config
    )
    instructions.append(_cfm_instruction(recommended_cfm))

    return EvaluationResult.included(
        EquipmentRecommendation(
            equipment=equipment,
            sizing_status=status,
            sizing_percentage=percentage,
            warnings=warnings,
            instructions=instructions,
            backup_heat_required_kw=backup_heat_kw,
            recommended_cfm=recommended_cfm,
        )
    )


# ============================================================================
# BOILER
# ============================================================================


def evaluate_boiler(
    equipment: BoilerEquipment,
    load_inputs: LoadInputs,
    preferences: UserPreferences,
    shr: float,
    latent_cooling: float,
    config: SizingConfig,
) -> EvaluationResult:
    """
    Size a boiler against the heating load.

    Catalog heating capacity is already net of AFUE. No upper exclusion:
    oversized boilers stay in the list with a short-cycling warning.
    """
    if not load_inputs.has_heating_load:
        return EvaluationResult.excluded("no heating load")

    percentage = sizing_percentage(
        equipment.heating_capacity_btu, load_inputs.total_heating_btu
    )
    if percentage < config.boiler_min_percent:
        return EvaluationResult.excluded(f"undersized at {percentage}% of heating load")

    warnings: list[str] = []
    if percentage <= config.boiler_optimal_max:
        status = SizingStatus.OPTIMAL
    elif percentage <= config.boiler_acceptable_max:
        status = SizingStatus.ACCEPTABLE
        warnings.append(
            f"This boiler is {percentage}% of the heating load. Consider if oversizing is "
            f"appropriate for pickup and recovery."
        )
    else:
        status = SizingStatus.OVERSIZED
        warnings.append(
            f"This boiler is significantly oversized at {percentage}% of load. May cause "
            f"short cycling and reduced efficiency."
        )

    instructions: list[str] = []
    if equipment.distribution_type == DistributionType.HYDRONIC:
        instructions.append("Verify zone control and pump sizing for proper flow rates")
        instructions.append("Consider boiler reset controls for optimal efficiency")

    return EvaluationResult.included(
        EquipmentRecommendation(
            equipment=equipment,
            sizing_status=status,
            sizing_percentage=percentage,
            warnings=warnings,
            instructions=instructions,
        )
    )


# ============================================================================
# FURNACE / AC COMBO
# ============================================================================


def evaluate_combo_system(
    equipment: ComboEquipment,
    load_inputs: LoadInputs,
    preferences: UserPreferences,
    shr: float,
    latent_cooling: float,
    config: SizingConfig,
) -> EvaluationResult:
    """
    Size a furnace/AC combo against both loads.

    A missing load counts as fully met (100%). Both sides must reach 100%
    or the unit is excluded.
        - oversized: heating > 140% or cooling > 130% (warning, still listed)
        - acceptable: heating > 125% or cooling > 115%
        - optimal: otherwise
    Reported percentage is the rounded average of both sides.

    Recommended CFM uses a flat 400 CFM/ton regardless of SHR, unlike the AC
    and heat pump rule.
    """
    heating_load = load_inputs.total_heating_btu
    cooling_load = load_inputs.total_cooling_btu
    if heating_load <= 0 and cooling_load <= 0:
        return EvaluationResult.excluded("no heating or cooling load")

    heating_pct = (
        sizing_percentage(equipment.heating_capacity_btu, heating_load)
        if heating_load > 0
        else 100
    )
    cooling_pct = (
        sizing_percentage(equipment.cooling_capacity_btu, cooling_load)
        if cooling_load > 0
        else 100
    )

    if heating_pct < config.combo_min_percent or cooling_pct < config.combo_min_percent:
        return EvaluationResult.excluded(
            f"undersized (heating {heating_pct}%, cooling {cooling_pct}%)"
        )

    warnings: list[str] = []
    if (
        heating_pct > config.combo_heating_acceptable_max
        or cooling_pct > config.combo_cooling_acceptable_max
    ):
        status = SizingStatus.OVERSIZED
        warnings.append(
            f"System oversized - Heating: {heating_pct}%, Cooling: {cooling_pct}%"
        )
    elif (
        heating_pct > config.combo_heating_optimal_max
        or cooling_pct > config.combo_cooling_optimal_max
    ):
        status = SizingStatus.ACCEPTABLE
    else:
        status = SizingStatus.OPTIMAL

    instructions = [
        "Verify shared ductwork is sized for both heating and cooling airflow requirements",
        "Consider zoning controls if heating and cooling loads vary significantly by area",
    ]
    recommended_cfm = round_half_up(
        equipment.cooling_capacity_btu / config.btu_per_ton * config.combo_cfm_per_ton
    )

    return EvaluationResult.included(
        EquipmentRecommendation(
            equipment=equipment,
            sizing_status=status,
            sizing_percentage=round_half_up((heating_pct + cooling_pct) / 2),
            warnings=warnings,
            instructions=instructions,
            recommended_cfm=recommended_cfm,
        )
    )


# ============================================================================
# DISPATCH
# ============================================================================

EVALUATORS: dict[EquipmentType, Evaluator] = {
    EquipmentType.FURNACE: evaluate_furnace,
    EquipmentType.AC: evaluate_air_conditioner,
    EquipmentType.HEAT_PUMP: evaluate_heat_pump,
    EquipmentType.BOILER: evaluate_boiler,
    EquipmentType.FURNACE_AC_COMBO: evaluate_combo_system,
}


def evaluate_equipment(
    equipment: TypedEquipment,
    load_inputs: LoadInputs,
    preferences: UserPreferences,
    shr: float,
    latent_cooling: float,
    config: Optional[SizingConfig] = None,
) -> EvaluationResult:
    """
    Apply the preference filter, then the category's sizing rule.

    Args:
        equipment: Type-validated equipment
        load_inputs: Design loads
        preferences: User filters and heat pump sizing preference
        shr: Sensible heat ratio of the load (precomputed once per calculation)
        latent_cooling: Latent cooling load in BTU/hr (precomputed)
        config: Sizing bands (default: SizingConfig.default())

    Returns:
        EvaluationResult: included recommendation or exclusion reason
    """
    config = config or SizingConfig.default()

    if not passes_filters(equipment, preferences):
        return EvaluationResult.excluded("filtered out by preferences")

    evaluator = EVALUATORS[equipment.equipment_type]
    return evaluator(equipment, load_inputs, preferences, shr, latent_cooling, config)
