"""
Tests for EquipmentRecommendation, EvaluationResult and ValidationSummary.
Covers: sort key, warning appending, included/excluded invariant,
summary count arithmetic.
"""

import pytest
from pydantic import ValidationError

from hvac_sizer.domain.equipment.value_objects.recommendation import (
    EquipmentRecommendation,
    EvaluationResult,
    SizingStatus,
)
from hvac_sizer.domain.equipment.value_objects.validation import (
    EquipmentValidationError,
    ErrorType,
    Severity,
    ValidationDetail,
    ValidationSummary,
)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def furnace_recommendation(make_typed):
    """Fixture for an optimal furnace recommendation at 120%."""
    return EquipmentRecommendation(
        equipment=make_typed("furnace"),
        sizing_status=SizingStatus.OPTIMAL,
        sizing_percentage=120,
        warnings=["first"],
    )


@pytest.fixture
def critical_error():
    """Fixture for a critical type validation error."""
    return EquipmentValidationError(
        equipment_id="hp-004",
        manufacturer="Goodman",
        model="GSZ140361",
        error_type=ErrorType.TYPE_VALIDATION,
        severity=Severity.CRITICAL,
        message="Equipment data does not match the 'heat_pump' schema",
        technical_details="Missing required fields: hspf",
    )


# ============================================================================
# EquipmentRecommendation
# ============================================================================


def test_status_rank_order():
    """Test that optimal ranks first and undersized last."""
    ranks = [status.rank for status in SizingStatus]
    assert ranks == [1, 2, 3, 4]


def test_sort_key_and_distance(furnace_recommendation):
    """Test sort key combines status rank and distance from 100%."""
    assert furnace_recommendation.distance_from_exact_match == 20
    assert furnace_recommendation.sort_key() == (1, 20)


def test_sort_key_orders_by_status_before_distance(make_typed):
    """Test that an optimal unit far from 100% beats an acceptable unit near it."""
    furnace = make_typed("furnace")
    optimal = EquipmentRecommendation(
        equipment=furnace, sizing_status=SizingStatus.OPTIMAL, sizing_percentage=138
    )
    acceptable = EquipmentRecommendation(
        equipment=furnace, sizing_status=SizingStatus.ACCEPTABLE, sizing_percentage=112
    )

    ordered = sorted([acceptable, optimal], key=EquipmentRecommendation.sort_key)
    assert ordered == [optimal, acceptable]


def test_with_additional_warnings_appends_in_order(furnace_recommendation):
    """Test that warning groups are appended after existing warnings."""
    updated = furnace_recommendation.with_additional_warnings(["load"], ["spec a", "spec b"])

    assert updated.warnings == ["first", "load", "spec a", "spec b"]
    assert furnace_recommendation.warnings == ["first"]


def test_with_additional_warnings_no_extra_returns_same(furnace_recommendation):
    """Test that empty groups leave the recommendation untouched."""
    assert furnace_recommendation.with_additional_warnings([], []) is furnace_recommendation


def test_recommendation_rejects_negative_backup_heat(make_typed):
    """Test that backup heat cannot be negative."""
    with pytest.raises(ValidationError):
        EquipmentRecommendation(
            equipment=make_typed("heat_pump"),
            sizing_status=SizingStatus.OPTIMAL,
            sizing_percentage=100,
            backup_heat_required_kw=-1.0,
        )


# ============================================================================
# EvaluationResult
# ============================================================================


def test_evaluation_result_included(furnace_recommendation):
    """Test included() factory."""
    result = EvaluationResult.included(furnace_recommendation)
    assert result.is_included
    assert result.exclusion_reason is None


def test_evaluation_result_excluded():
    """Test excluded() factory."""
    result = EvaluationResult.excluded("undersized at 80% of heating load")
    assert not result.is_included
    assert result.recommendation is None


def test_evaluation_result_requires_exactly_one_outcome(furnace_recommendation):
    """Test that both or neither outcome is rejected."""
    with pytest.raises(ValueError, match="exactly one"):
        EvaluationResult()
    with pytest.raises(ValueError, match="exactly one"):
        EvaluationResult(recommendation=furnace_recommendation, exclusion_reason="x")


# ============================================================================
# ValidationDetail / ValidationSummary
# ============================================================================


def test_validation_detail_category_and_missing_flag():
    """Test category text and missing-value detection."""
    missing = ValidationDetail(
        field="hspf", expected="number", actual="null", issue="Required for heat pumps"
    )
    stray = ValidationDetail(
        field="afue", expected="null", actual="0.8", issue="Must be null for air conditioners"
    )

    assert missing.category == "hspf: Required for heat pumps"
    assert missing.is_missing_value
    assert not stray.is_missing_value


def test_summary_create_derives_excluded(critical_error):
    """Test that create() computes excluded = total - included."""
    summary = ValidationSummary.create(
        total_equipment=10, included_equipment=7, errors=[critical_error]
    )

    assert summary.excluded_equipment == 3
    assert summary.errors_by_severity(Severity.CRITICAL) == [critical_error]
    assert summary.errors_by_severity(Severity.WARNING) == []
    assert summary.has_issues


def test_summary_rejects_inconsistent_counts():
    """Test count invariants."""
    with pytest.raises(ValidationError, match="cannot exceed"):
        ValidationSummary(total_equipment=2, included_equipment=3, excluded_equipment=0)
    with pytest.raises(ValidationError, match="excluded_equipment must equal"):
        ValidationSummary(total_equipment=5, included_equipment=3, excluded_equipment=1)


def test_summary_without_issues():
    """Test has_issues is False when everything was included and valid."""
    summary = ValidationSummary.create(total_equipment=2, included_equipment=2, errors=[])
    assert not summary.has_issues
