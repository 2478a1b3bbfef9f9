"""
Equipment Domain Services

Business operations over catalog records, loads and preferences.

This module exports:
    - Type validation: normalize_equipment, validate_equipment_type,
      get_validation_details, is_valid_for_type
    - Specification and load checks: check_specifications, validate_load_inputs
    - Preference filter: passes_filters
    - Sizing: evaluate_equipment and one evaluator per equipment type
    - Aggregation: RecommendationEngine, calculate_equipment_recommendations
    - Catalog audit: generate_validation_report, generate_missing_data_csv
"""

from .load_validator import validate_load_inputs
from .preference_filter import passes_filters
from .recommendation_engine import (
    RecommendationEngine,
    calculate_equipment_recommendations,
)
from .sizing_evaluators import (
    calculate_recommended_cfm,
    derate_for_elevation,
    evaluate_air_conditioner,
    evaluate_boiler,
    evaluate_combo_system,
    evaluate_equipment,
    evaluate_furnace,
    evaluate_heat_pump,
)
from .spec_checker import build_spec_validation_error, check_specifications
from .type_validator import (
    FIELD_RULES,
    TypeValidationResult,
    get_validation_details,
    is_valid_for_type,
    normalize_equipment,
    validate_equipment_type,
)
from .validation_report import generate_missing_data_csv, generate_validation_report

__all__ = [
    "FIELD_RULES",
    "TypeValidationResult",
    "normalize_equipment",
    "get_validation_details",
    "is_valid_for_type",
    "validate_equipment_type",
    "check_specifications",
    "build_spec_validation_error",
    "validate_load_inputs",
    "passes_filters",
    "calculate_recommended_cfm",
    "derate_for_elevation",
    "evaluate_furnace",
    "evaluate_air_conditioner",
    "evaluate_heat_pump",
    "evaluate_boiler",
    "evaluate_combo_system",
    "evaluate_equipment",
    "RecommendationEngine",
    "calculate_equipment_recommendations",
    "generate_validation_report",
    "generate_missing_data_csv",
]
