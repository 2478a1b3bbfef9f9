"""
EquipmentRecommendation Value Object

Output unit of the sizing engine: one piece of equipment that fits the
loads, with its sizing classification and the notes a contractor needs.

Responsibility:
    - Carry a TypedEquipment snapshot with sizing status and percentage
    - Carry ordered warnings and installation instructions
    - Carry derived engineering values (backup heat kW, airflow CFM)

Architecture Notes:
    - Value Object (immutable); the aggregator adds load and specification
      warnings by building a new instance via with_additional_warnings()
    - EvaluationResult models "included" vs "excluded" explicitly so that an
      undersized unit is never confused with a validation failure
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from hvac_sizer.domain.equipment.entities.typed_equipment import TypedEquipment


class SizingStatus(str, Enum):
    """
    Classification of delivered capacity against the design load.

    UNDERSIZED is never produced by an evaluator (undersized equipment is
    excluded) but stays part of the vocabulary and the sort order.
    """

    OPTIMAL = "optimal"
    ACCEPTABLE = "acceptable"
    OVERSIZED = "oversized"
    UNDERSIZED = "undersized"

    @property
    def rank(self) -> int:
        """Sort rank: optimal first, undersized last."""
        return STATUS_RANK[self]


STATUS_RANK: dict[SizingStatus, int] = {
    SizingStatus.OPTIMAL: 1,
    SizingStatus.ACCEPTABLE: 2,
    SizingStatus.OVERSIZED: 3,
    SizingStatus.UNDERSIZED: 4,
}


class EquipmentRecommendation(BaseModel):
    """
    Immutable recommendation for one piece of equipment.

    Attributes:
        equipment: Type-narrowed equipment snapshot
        sizing_status: optimal / acceptable / oversized (undersized reserved)
        sizing_percentage: Delivered capacity as % of the relevant load
            (rounded half-up to an integer)
        warnings: Ordered warning messages (equipment, load, specification)
        instructions: Ordered installation/verification instructions
        backup_heat_required_kw: Supplemental heat for heat pumps sized to
            cooling whose heating capacity falls short
        recommended_cfm: Airflow the ductwork must carry

    Examples:
        >>> rec.sizing_status
        <SizingStatus.OPTIMAL: 'optimal'>
        >>> rec.distance_from_exact_match
        20
    """

    equipment: TypedEquipment
    sizing_status: SizingStatus
    sizing_percentage: int
    warnings: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    backup_heat_required_kw: Optional[float] = Field(default=None, ge=0.0)
    recommended_cfm: Optional[int] = Field(default=None, ge=0)

    model_config = {"frozen": True}

    @property
    def distance_from_exact_match(self) -> int:
        """How far the sizing percentage is from a perfect 100% fit."""
        return abs(self.sizing_percentage - 100)

    def sort_key(self) -> tuple[int, int]:
        """Status rank first, then closeness to 100%."""
        return (self.sizing_status.rank, self.distance_from_exact_match)

    def with_additional_warnings(self, *warning_groups: list[str]) -> "EquipmentRecommendation":
        """
        Return a copy with the given warning lists appended in order.

        Args:
            *warning_groups: Lists of warnings (e.g., load warnings, spec warnings)

        Returns:
            New EquipmentRecommendation; self is left untouched
        """
        extra = [warning for group in warning_groups for warning in group]
        if not extra:
            return self
        return self.model_copy(update={"warnings": [*self.warnings, *extra]})


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of evaluating one piece of equipment.

    Exactly one of recommendation / exclusion_reason is set:
        - Included: recommendation holds the EquipmentRecommendation
        - Excluded: exclusion_reason says why (undersized, filtered, no load)

    Excluded equipment is dropped silently by the aggregator: it is not a
    validation error.

    Examples:
        >>> EvaluationResult.excluded("undersized at 80%").is_included
        False
    """

    recommendation: Optional[EquipmentRecommendation] = None
    exclusion_reason: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.recommendation is None) == (self.exclusion_reason is None):
            raise ValueError(
                "EvaluationResult needs exactly one of recommendation or exclusion_reason"
            )

    @classmethod
    def included(cls, recommendation: EquipmentRecommendation) -> "EvaluationResult":
        return cls(recommendation=recommendation)

    @classmethod
    def excluded(cls, reason: str) -> "EvaluationResult":
        return cls(exclusion_reason=reason)

    @property
    def is_included(self) -> bool:
        return self.recommendation is not None
