"""
Equipment Type Validator - Domain Service

Single translation boundary from an untrusted flat Equipment record to a
trusted TypedEquipment variant.

Business Rules:
    Every capacity/efficiency field is either REQUIRED or FORBIDDEN for a
    given equipment type (see FIELD_RULES). Validation runs in two steps:

    1. Normalization: every FORBIDDEN field is forced to null. Upstream
       catalogs routinely leave stray values in irrelevant columns (a furnace
       row with a SEER copied from a neighbouring AC row); those are
       discarded rather than rejected.
    2. Type check: the normalized copy must carry every REQUIRED field.
       Since forbidden fields are already null, a failure here always means
       missing data.

    A failed record becomes an EquipmentValidationError (type_validation,
    critical); it is never raised.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from hvac_sizer.domain.equipment.entities.equipment import Equipment, EquipmentType
from hvac_sizer.domain.equipment.entities.typed_equipment import (
    TYPED_EQUIPMENT_ADAPTER,
    TypedEquipment,
)
from hvac_sizer.domain.equipment.value_objects.validation import (
    EquipmentValidationError,
    ErrorType,
    Severity,
    ValidationDetail,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRule:
    """REQUIRED and FORBIDDEN capacity/efficiency fields for one equipment type."""

    required: tuple[str, ...]
    forbidden: tuple[str, ...]
    label: str  # plural noun used in messages ("furnaces")


FIELD_RULES: dict[EquipmentType, FieldRule] = {
    EquipmentType.FURNACE: FieldRule(
        required=("nominal_btu", "heating_capacity_btu", "afue"),
        forbidden=(
            "nominal_tons",
            "cooling_capacity_btu",
            "latent_cooling_btu",
            "seer",
            "hspf",
        ),
        label="furnaces",
    ),
    EquipmentType.AC: FieldRule(
        required=("nominal_tons", "cooling_capacity_btu", "latent_cooling_btu", "seer"),
        forbidden=("nominal_btu", "heating_capacity_btu", "afue", "hspf"),
        label="air conditioners",
    ),
    EquipmentType.HEAT_PUMP: FieldRule(
        required=(
            "nominal_tons",
            "heating_capacity_btu",
            "cooling_capacity_btu",
            "latent_cooling_btu",
            "seer",
            "hspf",
        ),
        forbidden=("nominal_btu", "afue"),
        label="heat pumps",
    ),
    EquipmentType.BOILER: FieldRule(
        required=("nominal_btu", "heating_capacity_btu", "afue"),
        forbidden=(
            "nominal_tons",
            "cooling_capacity_btu",
            "latent_cooling_btu",
            "seer",
            "hspf",
        ),
        label="boilers",
    ),
    EquipmentType.FURNACE_AC_COMBO: FieldRule(
        required=(
            "nominal_tons",
            "nominal_btu",
            "heating_capacity_btu",
            "cooling_capacity_btu",
            "latent_cooling_btu",
            "afue",
            "seer",
        ),
        forbidden=("hspf",),
        label="combo systems",
    ),
}


@dataclass(frozen=True)
class TypeValidationResult:
    """
    Outcome of validating one record.

    Exactly one of typed_equipment / error is set.
    """

    typed_equipment: Optional[TypedEquipment] = None
    error: Optional[EquipmentValidationError] = None

    @property
    def is_valid(self) -> bool:
        return self.typed_equipment is not None


def normalize_equipment(equipment: Equipment) -> Equipment:
    """
    Return a copy with every field irrelevant to the equipment type set to null.

    Idempotent: normalizing a normalized record returns an equal record.

    Args:
        equipment: Raw catalog record

    Returns:
        Normalized copy (the input is never modified)

    Examples:
        >>> raw = furnace.model_copy(update={"seer": 16.0})
        >>> normalize_equipment(raw).seer is None
        True
    """
    rule = FIELD_RULES[equipment.equipment_type]
    populated = equipment.populated_fields()
    stray = {name: None for name in rule.forbidden if name in populated}
    if not stray:
        return equipment

    logger.debug(
        f"Normalizing {equipment.id}: clearing fields irrelevant to "
        f"{equipment.equipment_type.value}: {sorted(stray)}"
    )
    return equipment.model_copy(update=stray)


def get_validation_details(equipment: Equipment) -> list[ValidationDetail]:
    """
    List every field-rule violation of a record, required fields first.

    Works on raw records (stray values reported) as well as normalized ones
    (only missing values can remain).

    Args:
        equipment: Record to inspect

    Returns:
        ValidationDetail per violation, empty when the record is valid
    """
    rule = FIELD_RULES[equipment.equipment_type]
    details: list[ValidationDetail] = []

    for name in rule.required:
        if getattr(equipment, name) is None:
            details.append(
                ValidationDetail(
                    field=name,
                    expected="number",
                    actual="null",
                    issue=f"Required for {rule.label}",
                )
            )

    for name in rule.forbidden:
        value = getattr(equipment, name)
        if value is not None:
            details.append(
                ValidationDetail(
                    field=name,
                    expected="null",
                    actual=str(value),
                    issue=f"Must be null for {rule.label}",
                )
            )

    return details


def is_valid_for_type(equipment: Equipment) -> bool:
    """True when the record honours its type's field rules as-is."""
    return not get_validation_details(equipment)


def validate_equipment_type(equipment: Equipment) -> TypeValidationResult:
    """
    Normalize a record and narrow it to its TypedEquipment variant.

    Args:
        equipment: Raw catalog record

    Returns:
        TypeValidationResult with the variant, or with a critical
        type_validation error naming the missing fields
    """
    normalized = normalize_equipment(equipment)
    details = get_validation_details(normalized)

    if details:
        missing = [detail.field for detail in details if detail.is_missing_value]
        forbidden = [detail.field for detail in details if not detail.is_missing_value]
        rule = FIELD_RULES[equipment.equipment_type]

        detail_parts = []
        if missing:
            detail_parts.append(f"Missing required fields: {', '.join(missing)}")
        if forbidden:
            detail_parts.append(f"Forbidden fields present: {', '.join(forbidden)}")

        error = EquipmentValidationError(
            equipment_id=equipment.id,
            manufacturer=equipment.manufacturer,
            model=equipment.model,
            error_type=ErrorType.TYPE_VALIDATION,
            severity=Severity.CRITICAL,
            message=(
                f"Equipment data does not match the '{equipment.equipment_type.value}' "
                f"schema required for {rule.label}"
            ),
            technical_details="; ".join(detail_parts),
        )
        logger.warning(
            f"Type validation failed for {equipment.id} ({equipment.display_name}): "
            f"{error.technical_details}"
        )
        return TypeValidationResult(error=error)

    typed = TYPED_EQUIPMENT_ADAPTER.validate_python(
        normalized.model_dump(exclude={"is_active"})
    )
    return TypeValidationResult(typed_equipment=typed)
