"""
API Router for the Equipment Catalog

Responsibility:
    Read-only HTTP interface to the catalog and its data-quality reports.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Catalog lookups use the injected catalog directly (KISS, no handler)
    - Reports go through GetValidationReportQueryHandler
    - Report routes are declared before /{equipment_id} so they are not
      captured as ids

Contains:
    - GET /equipment - Active equipment
    - GET /equipment/validation-report - Text audit of the whole catalog
    - GET /equipment/missing-data - CSV of missing required values
    - GET /equipment/{equipment_id} - One record (404 if unknown)
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse, Response

from hvac_sizer.api.dependencies import (
    get_equipment_catalog,
    get_validation_report_query_handler,
)
from hvac_sizer.api.schemas.common import ErrorResponse
from hvac_sizer.application.queries.get_validation_report import (
    GetValidationReportQuery,
    GetValidationReportQueryHandler,
    ReportFormat,
)
from hvac_sizer.domain.equipment.entities.equipment import Equipment
from hvac_sizer.domain.equipment.repositories.equipment_catalog import (
    EquipmentCatalogProtocol,
)

logger = logging.getLogger(__name__)


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/equipment",
    tags=["equipment"],
    responses={
        500: {"model": ErrorResponse, "description": "Internal Server Error - Catalog unavailable"},
    },
)


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[Equipment],
    summary="List active equipment",
)
def list_equipment(
    catalog: EquipmentCatalogProtocol = Depends(get_equipment_catalog),
) -> list[Equipment]:
    """Return every active catalog record in catalog order."""
    return catalog.get_active()


@router.get(
    "/validation-report",
    status_code=status.HTTP_200_OK,
    response_class=PlainTextResponse,
    summary="Catalog validation report",
    description=(
        "Audits every catalog record (active or not) against the per-type "
        "field rules: summary, top causes, per-type breakdown and fixes."
    ),
)
def get_validation_report(
    handler: GetValidationReportQueryHandler = Depends(get_validation_report_query_handler),
) -> PlainTextResponse:
    result = handler.handle(GetValidationReportQuery(report_format=ReportFormat.TEXT))
    return PlainTextResponse(content=result.content, media_type=result.media_type)


@router.get(
    "/missing-data",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Missing catalog data as CSV",
    description="One row per missing required value, with a suggested fill where known.",
)
def get_missing_data(
    handler: GetValidationReportQueryHandler = Depends(get_validation_report_query_handler),
) -> Response:
    result = handler.handle(GetValidationReportQuery(report_format=ReportFormat.CSV))
    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": 'attachment; filename="missing_equipment_data.csv"'},
    )


@router.get(
    "/{equipment_id}",
    status_code=status.HTTP_200_OK,
    response_model=Equipment,
    summary="Get one catalog record",
    responses={
        404: {"model": ErrorResponse, "description": "Not Found - Unknown equipment id"},
    },
)
def get_equipment(
    equipment_id: str = Path(..., description="Catalog identifier, e.g. furn-001"),
    catalog: EquipmentCatalogProtocol = Depends(get_equipment_catalog),
) -> Equipment:
    """
    Return one record, active or not.

    Raises:
        EquipmentNotFoundError: Unknown id (mapped to HTTP 404 by the app)
    """
    return catalog.get_by_id(equipment_id)
