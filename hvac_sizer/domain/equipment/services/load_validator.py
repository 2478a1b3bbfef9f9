"""
Load Input Validator - Domain Service

Sanity checks on the submitted design loads. LoadInputs already guarantees
internal consistency (ranges, sensible <= total, SHR window); the checks
here flag loads that are consistent but unusual enough to question the
Manual J inputs. Each warning describes the building, not a unit, so the
aggregator appends it to every recommendation.
"""

from typing import Optional

from hvac_sizer.domain.equipment.sizing_config import SizingConfig
from hvac_sizer.domain.equipment.value_objects.load_inputs import LoadInputs


def validate_load_inputs(
    load_inputs: LoadInputs, config: Optional[SizingConfig] = None
) -> list[str]:
    """
    Return warnings about unusual (but valid) load inputs.

    Independent checks:
        (a) heating > 200,000 and cooling > 100,000 BTU/hr at the same time
        (b) SHR below 0.70 while a cooling load is present
        (c) heating/cooling ratio above 3.0 or below 1/3.0 (both loads present)

    Args:
        load_inputs: Validated design loads
        config: Check thresholds (default: SizingConfig.default())

    Returns:
        Warning messages (possibly empty); never raises
    """
    config = config or SizingConfig.default()
    warnings: list[str] = []
    heating = load_inputs.total_heating_btu
    cooling = load_inputs.total_cooling_btu

    if heating > config.high_heating_load_btu and cooling > config.high_cooling_load_btu:
        warnings.append(
            f"Very high heating ({heating:,.0f} BTU/hr) and cooling ({cooling:,.0f} BTU/hr) "
            f"loads. Verify Manual J calculations before selecting equipment."
        )

    shr = load_inputs.sensible_heat_ratio
    if load_inputs.has_cooling_load and shr < config.low_shr_warning_threshold:
        warnings.append(
            f"Low sensible heat ratio ({shr:.2f}) indicates a high latent load "
            f"({load_inputs.latent_cooling_btu:,.0f} BTU/hr). Select equipment with "
            f"enhanced dehumidification or add a dehumidifier."
        )

    if load_inputs.has_heating_load and load_inputs.has_cooling_load:
        ratio = heating / cooling
        max_ratio = config.max_heating_cooling_ratio
        if ratio > max_ratio or ratio < 1 / max_ratio:
            warnings.append(
                f"Heating-to-cooling load ratio of {ratio:.2f} is unusual. Verify building "
                f"envelope inputs and consider separate zones or systems."
            )

    return warnings
