"""
API Router for Sizing Calculations

Responsibility:
    HTTP interface for the recommendation engine.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (CalculateRecommendationsUseCase)
    - Input validation happens while parsing CalculateRecommendationsRequest
    - No business logic - pure HTTP orchestration

Contains:
    - POST /recommendations/calculate - Ranked recommendations + validation summary
"""

import logging

from fastapi import APIRouter, Depends, status

from hvac_sizer.api.dependencies import get_calculate_recommendations_use_case
from hvac_sizer.api.schemas.calculation import CalculateRecommendationsRequest
from hvac_sizer.api.schemas.common import ErrorResponse
from hvac_sizer.application.services.calculate_recommendations_use_case import (
    CalculateRecommendationsUseCase,
)
from hvac_sizer.domain.equipment.value_objects.validation import CalculationResult

logger = logging.getLogger(__name__)


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"],
    responses={
        422: {
            "model": ErrorResponse,
            "description": "Unprocessable Entity - Invalid loads or preferences",
        },
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
)


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "/calculate",
    status_code=status.HTTP_200_OK,
    response_model=CalculationResult,
    summary="Calculate equipment recommendations",
    description=(
        "Sizes every active catalog unit of the requested types against the "
        "design loads. Returns recommendations ranked optimal > acceptable > "
        "oversized (closest to 100% first) and a validation summary listing "
        "catalog records that were rejected or flagged."
    ),
)
def calculate_recommendations(
    request: CalculateRecommendationsRequest,
    use_case: CalculateRecommendationsUseCase = Depends(get_calculate_recommendations_use_case),
) -> CalculationResult:
    """
    Run one sizing calculation.

    Args:
        request: Validated loads and preferences
        use_case: Injected CalculateRecommendationsUseCase

    Returns:
        CalculationResult with recommendations and validation_summary

    Examples:
        >>> curl -X POST http://localhost:8000/api/recommendations/calculate \\
        ...   -H "Content-Type: application/json" \\
        ...   -d '{"load_inputs": {...}, "preferences": {"equipment_types": ["ac"]}}'
    """
    return use_case.execute(request.load_inputs, request.preferences)
