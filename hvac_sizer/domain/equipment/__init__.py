"""
Equipment Subdomain Module

Core business logic for HVAC equipment sizing: catalog records, design
loads, user preferences, sizing rules and validation.

This module is the main entry point for the equipment subdomain and
re-exports the public interfaces used by the Application Layer.

Exports:
    Entities:
        - Equipment, TypedEquipment and its variants, classification enums

    Value Objects:
        - LoadInputs, UserPreferences
        - EquipmentRecommendation, SizingStatus
        - ValidationSummary, EquipmentValidationError, CalculationResult

    Services:
        - RecommendationEngine, calculate_equipment_recommendations
        - generate_validation_report, generate_missing_data_csv

    Repository Interfaces:
        - EquipmentCatalogProtocol

Usage:
    >>> from hvac_sizer.domain.equipment import (
    ...     LoadInputs, UserPreferences, calculate_equipment_recommendations,
    ... )
"""

# Entities
from .entities import Equipment, EquipmentType, TypedEquipment

# Value Objects
from .value_objects import (
    CalculationResult,
    EquipmentRecommendation,
    EquipmentValidationError,
    LoadInputs,
    SizingStatus,
    UserPreferences,
    ValidationSummary,
)

# Services
from .services import (
    RecommendationEngine,
    calculate_equipment_recommendations,
    generate_missing_data_csv,
    generate_validation_report,
)

# Repository Interfaces
from .repositories import EquipmentCatalogProtocol

from . import sizing_config

__all__ = [
    # Entities
    "Equipment",
    "EquipmentType",
    "TypedEquipment",
    # Value Objects
    "LoadInputs",
    "UserPreferences",
    "EquipmentRecommendation",
    "SizingStatus",
    "EquipmentValidationError",
    "ValidationSummary",
    "CalculationResult",
    # Services
    "RecommendationEngine",
    "calculate_equipment_recommendations",
    "generate_validation_report",
    "generate_missing_data_csv",
    # Repository Interfaces
    "EquipmentCatalogProtocol",
    # Modules
    "sizing_config",
]
