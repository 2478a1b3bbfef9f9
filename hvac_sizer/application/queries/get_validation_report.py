"""
GetValidationReportQuery - CQRS Read Query

Query object and handler for auditing the equipment catalog.

Responsibility:
    - Query: Which report format the caller wants
    - Handler: Runs the catalog audit and returns content + media type

Architecture Notes:
    - Part of Application Layer (orchestration)
    - Read-only: the catalog is never modified
    - API Layer turns ValidationReportResult into a plain-text or CSV response
"""

import logging
from enum import Enum

from pydantic import BaseModel, Field

from hvac_sizer.domain.equipment.repositories.equipment_catalog import (
    EquipmentCatalogProtocol,
)
from hvac_sizer.domain.equipment.services.validation_report import (
    generate_missing_data_csv,
    generate_validation_report,
)

logger = logging.getLogger(__name__)


class ReportFormat(str, Enum):
    """Available catalog audit outputs."""

    TEXT = "text"
    CSV = "csv"


MEDIA_TYPES: dict[ReportFormat, str] = {
    ReportFormat.TEXT: "text/plain",
    ReportFormat.CSV: "text/csv",
}


class GetValidationReportQuery(BaseModel):
    """
    Query object for the catalog audit.

    Attributes:
        report_format: text report or missing-data CSV
    """

    report_format: ReportFormat = Field(
        default=ReportFormat.TEXT, description="Report output format"
    )

    model_config = {"frozen": True}


class ValidationReportResult(BaseModel):
    """
    Result DTO returned by GetValidationReportQueryHandler.

    Attributes:
        report_format: Format that was produced
        media_type: HTTP content type for the content
        content: Report text or CSV text
    """

    report_format: ReportFormat
    media_type: str
    content: str


class GetValidationReportQueryHandler:
    """
    Handler that audits every catalog record, active or not.

    Usage:
        handler = GetValidationReportQueryHandler(catalog)
        result = handler.handle(GetValidationReportQuery(report_format=ReportFormat.CSV))
    """

    def __init__(self, catalog: EquipmentCatalogProtocol):
        self.catalog = catalog

    def handle(self, query: GetValidationReportQuery) -> ValidationReportResult:
        """
        Build the requested report.

        Args:
            query: GetValidationReportQuery with the wanted format

        Returns:
            ValidationReportResult with content and media type
        """
        equipment = self.catalog.get_all()
        logger.info(
            f"Generating {query.report_format.value} validation report "
            f"for {len(equipment)} records"
        )

        if query.report_format == ReportFormat.CSV:
            content = generate_missing_data_csv(equipment)
        else:
            content = generate_validation_report(equipment)

        return ValidationReportResult(
            report_format=query.report_format,
            media_type=MEDIA_TYPES[query.report_format],
            content=content,
        )
