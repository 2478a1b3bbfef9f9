"""
Validation Value Objects

Structured results of equipment data validation and the per-calculation
validation summary.

Contains:
    - ValidationDetail: One field-rule violation on one record
    - EquipmentValidationError: One record that failed type or spec checks
    - ValidationSummary: Counts + errors for one calculation
    - CalculationResult: Recommendations + summary (engine output)
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from hvac_sizer.domain.equipment.value_objects.recommendation import (
    EquipmentRecommendation,
)


class ErrorType(str, Enum):
    """What kind of check rejected or flagged the record."""

    TYPE_VALIDATION = "type_validation"
    SPEC_VALIDATION = "spec_validation"
    DATA_INCONSISTENCY = "data_inconsistency"


class Severity(str, Enum):
    """
    CRITICAL: record excluded from recommendations
    WARNING: record kept but annotated
    INFO: informational only
    """

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class ValidationDetail(BaseModel):
    """
    One violation of a category's field rules.

    Attributes:
        field: Offending field name (e.g., "latent_cooling_btu")
        expected: "number" for required fields, "null" for forbidden ones
        actual: "null" or the stray value as text
        issue: Human-readable rule (e.g., "Required for air conditioners")

    Examples:
        >>> detail = ValidationDetail(
        ...     field="hspf", expected="number", actual="null",
        ...     issue="Required for heat pumps",
        ... )
        >>> detail.category
        'hspf: Required for heat pumps'
    """

    field: str
    expected: str
    actual: str
    issue: str

    model_config = {"frozen": True}

    @property
    def is_missing_value(self) -> bool:
        """True when a required field is empty (as opposed to a stray value)."""
        return self.expected != "null"

    @property
    def category(self) -> str:
        """Grouping key used by the catalog validation report."""
        return f"{self.field}: {self.issue}"


class EquipmentValidationError(BaseModel):
    """
    A catalog record that failed type validation or carries implausible specs.

    Attributes:
        equipment_id: Catalog id of the record
        manufacturer: Brand (for display)
        model: Model number (for display)
        error_type: type_validation / spec_validation / data_inconsistency
        severity: critical (excluded) / warning (kept) / info
        message: Summary sentence
        technical_details: Field-level detail (missing fields, spec warnings)
    """

    equipment_id: str
    manufacturer: str
    model: str
    error_type: ErrorType
    severity: Severity
    message: str = Field(..., min_length=1)
    technical_details: Optional[str] = None

    model_config = {"frozen": True}


class ValidationSummary(BaseModel):
    """
    Aggregate validation outcome of one calculation.

    Attributes:
        total_equipment: Active records whose type was requested
        included_equipment: Records that produced a recommendation
        excluded_equipment: total_equipment - included_equipment
        errors: Validation errors and spec warnings, in evaluation order

    Validation Rules:
        - included_equipment <= total_equipment
        - excluded_equipment == total_equipment - included_equipment
    """

    total_equipment: int = Field(..., ge=0)
    included_equipment: int = Field(..., ge=0)
    excluded_equipment: int = Field(..., ge=0)
    errors: list[EquipmentValidationError] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_counts(self) -> "ValidationSummary":
        if self.included_equipment > self.total_equipment:
            raise ValueError(
                f"included_equipment ({self.included_equipment}) cannot exceed "
                f"total_equipment ({self.total_equipment})"
            )
        if self.excluded_equipment != self.total_equipment - self.included_equipment:
            raise ValueError(
                f"excluded_equipment must equal total - included, got "
                f"{self.excluded_equipment} (total={self.total_equipment}, "
                f"included={self.included_equipment})"
            )
        return self

    @classmethod
    def create(
        cls,
        total_equipment: int,
        included_equipment: int,
        errors: list[EquipmentValidationError],
    ) -> "ValidationSummary":
        """Build a summary, deriving the excluded count."""
        return cls(
            total_equipment=total_equipment,
            included_equipment=included_equipment,
            excluded_equipment=total_equipment - included_equipment,
            errors=errors,
        )

    def errors_by_severity(self, severity: Severity) -> list[EquipmentValidationError]:
        return [error for error in self.errors if error.severity == severity]

    @property
    def has_issues(self) -> bool:
        return self.excluded_equipment > 0 or bool(self.errors)


class CalculationResult(BaseModel):
    """
    Output of one engine run.

    Attributes:
        recommendations: Sorted best-first (status rank, then closeness to 100%)
        validation_summary: Counts and validation errors
    """

    recommendations: list[EquipmentRecommendation] = Field(default_factory=list)
    validation_summary: ValidationSummary

    model_config = {"frozen": True}
