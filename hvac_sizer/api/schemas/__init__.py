"""
API Schemas Package

Contains shared Pydantic models for API Layer.
"""

from hvac_sizer.api.schemas.calculation import CalculateRecommendationsRequest
from hvac_sizer.api.schemas.common import ErrorResponse

__all__ = ["ErrorResponse", "CalculateRecommendationsRequest"]
