"""
Equipment Value Objects.

Value Objects are immutable objects that represent domain concepts by their
value, not by their identity.

Available Value Objects:
    - LoadInputs: Design loads with derived latent load and SHR
    - UserPreferences: Selection and filter criteria
    - EquipmentRecommendation / EvaluationResult: Evaluator output
    - ValidationDetail / EquipmentValidationError / ValidationSummary
    - CalculationResult: Engine output
"""

from hvac_sizer.domain.equipment.value_objects.load_inputs import LoadInputs
from hvac_sizer.domain.equipment.value_objects.recommendation import (
    STATUS_RANK,
    EquipmentRecommendation,
    EvaluationResult,
    SizingStatus,
)
from hvac_sizer.domain.equipment.value_objects.user_preferences import (
    SizingPreference,
    UserPreferences,
)
from hvac_sizer.domain.equipment.value_objects.validation import (
    CalculationResult,
    EquipmentValidationError,
    ErrorType,
    Severity,
    ValidationDetail,
    ValidationSummary,
)

__all__ = [
    "LoadInputs",
    "UserPreferences",
    "SizingPreference",
    "SizingStatus",
    "STATUS_RANK",
    "EquipmentRecommendation",
    "EvaluationResult",
    "ValidationDetail",
    "EquipmentValidationError",
    "ErrorType",
    "Severity",
    "ValidationSummary",
    "CalculationResult",
]
