"""
RecommendationEngine - Domain Service

Turns a catalog, a set of design loads and the user's preferences into a
ranked list of equipment recommendations plus a validation summary.

Responsibility:
    - Select candidates (active, requested type)
    - Run type validation, specification checks and sizing per candidate
    - Attach load-level and specification warnings to each recommendation
    - Rank recommendations and count included/excluded equipment

Architecture Notes:
    - Pure domain service: no I/O, the catalog arrives as a list
    - Stateless between calls; the only dependency is SizingConfig
    - Never raises for a single bad record: data faults become
      EquipmentValidationError entries in the summary

Business Rules:
    - Type validation failure -> critical error, record skipped
    - Implausible specs -> warning error, record still evaluated
    - Undersized / filtered / no relevant load -> silently excluded
    - Ranking: status (optimal < acceptable < oversized < undersized), then
      closeness of sizing percentage to 100%; ties keep catalog order
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from hvac_sizer.domain.equipment.entities.equipment import Equipment
from hvac_sizer.domain.equipment.services.load_validator import validate_load_inputs
from hvac_sizer.domain.equipment.services.sizing_evaluators import evaluate_equipment
from hvac_sizer.domain.equipment.services.spec_checker import (
    build_spec_validation_error,
    check_specifications,
)
from hvac_sizer.domain.equipment.services.type_validator import validate_equipment_type
from hvac_sizer.domain.equipment.sizing_config import SizingConfig
from hvac_sizer.domain.equipment.value_objects.load_inputs import LoadInputs
from hvac_sizer.domain.equipment.value_objects.recommendation import (
    EquipmentRecommendation,
)
from hvac_sizer.domain.equipment.value_objects.user_preferences import UserPreferences
from hvac_sizer.domain.equipment.value_objects.validation import (
    CalculationResult,
    EquipmentValidationError,
    Severity,
    ValidationSummary,
)

logger = logging.getLogger(__name__)


@dataclass
class RecommendationEngine:
    """
    Aggregates per-equipment sizing into one CalculationResult.

    Attributes:
        config: Sizing bands and constants (default: SizingConfig.default())

    Usage Example:
        >>> engine = RecommendationEngine()
        >>> result = engine.calculate(load_inputs, preferences, catalog.get_all())
        >>> result.recommendations[0].sizing_status
        <SizingStatus.OPTIMAL: 'optimal'>
        >>> result.validation_summary.excluded_equipment
        3
    """

    config: SizingConfig = field(default_factory=SizingConfig.default)

    def calculate(
        self,
        load_inputs: LoadInputs,
        preferences: UserPreferences,
        equipment_list: Iterable[Equipment],
    ) -> CalculationResult:
        """
        Evaluate every candidate and return ranked recommendations.

        Algorithm:
            1. Check load inputs once (warnings shared by all recommendations)
            2. Compute SHR and latent load once
            3. Keep active equipment of a requested type
            4. For each candidate:
                a. Type-validate; on failure record a critical error, skip
                b. Check specifications; record a warning error if flagged
                c. Evaluate sizing (preference filter first)
                d. Append load warnings, then spec warnings
            5. Stable sort by (status rank, |percentage - 100|)
            6. Build the validation summary

        Args:
            load_inputs: Validated design loads
            preferences: Validated user preferences
            equipment_list: Catalog records (not modified)

        Returns:
            CalculationResult; empty recommendations when nothing fits
        """
        load_warnings = validate_load_inputs(load_inputs, self.config)
        shr = load_inputs.sensible_heat_ratio
        latent_cooling = load_inputs.latent_cooling_btu

        requested_types = set(preferences.equipment_types)
        candidates = [
            equipment
            for equipment in equipment_list
            if equipment.is_active and equipment.equipment_type in requested_types
        ]

        logger.info(
            f"Calculating recommendations: {len(candidates)} candidates, "
            f"heating={load_inputs.total_heating_btu:,.0f} BTU/hr, "
            f"cooling={load_inputs.total_cooling_btu:,.0f} BTU/hr, SHR={shr:.2f}"
        )

        recommendations: list[EquipmentRecommendation] = []
        errors: list[EquipmentValidationError] = []

        for equipment in candidates:
            type_result = validate_equipment_type(equipment)
            if not type_result.is_valid:
                errors.append(type_result.error)
                continue

            typed = type_result.typed_equipment
            spec_warnings = check_specifications(typed, self.config)
            if spec_warnings:
                errors.append(build_spec_validation_error(typed, spec_warnings))

            evaluation = evaluate_equipment(
                typed, load_inputs, preferences, shr, latent_cooling, self.config
            )
            if not evaluation.is_included:
                logger.debug(f"Excluded {equipment.id}: {evaluation.exclusion_reason}")
                continue

            recommendations.append(
                evaluation.recommendation.with_additional_warnings(load_warnings, spec_warnings)
            )

        recommendations.sort(key=EquipmentRecommendation.sort_key)

        summary = ValidationSummary.create(
            total_equipment=len(candidates),
            included_equipment=len(recommendations),
            errors=errors,
        )

        logger.info(
            f"Calculation complete: {summary.included_equipment} recommended, "
            f"{summary.excluded_equipment} excluded, "
            f"{len(summary.errors_by_severity(Severity.CRITICAL))} invalid records"
        )

        return CalculationResult(recommendations=recommendations, validation_summary=summary)


def calculate_equipment_recommendations(
    load_inputs: LoadInputs,
    preferences: UserPreferences,
    equipment_list: Iterable[Equipment],
    config: Optional[SizingConfig] = None,
) -> CalculationResult:
    """
    Entry point of the sizing core.

    Examples:
        >>> result = calculate_equipment_recommendations(loads, prefs, equipment)
        >>> [rec.sizing_status.value for rec in result.recommendations]
        ['optimal', 'acceptable', 'oversized']
    """
    engine = RecommendationEngine(config or SizingConfig.default())
    return engine.calculate(load_inputs, preferences, equipment_list)
