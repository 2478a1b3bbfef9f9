"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response model for all API errors.

    Provides consistent error structure across all endpoints.

    Attributes:
        code: Machine-readable error code (e.g., "EQUIPMENT_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional error details (validation errors, debug info)
    """

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional error context"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "code": "EQUIPMENT_NOT_FOUND",
                "message": "EquipmentNotFoundError: Equipment 'furn-999' not found in catalog",
                "details": {"equipment_id": "furn-999"},
            }
        }
    }
