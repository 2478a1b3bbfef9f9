"""
Application Queries (CQRS read side)

Contains:
    - GetValidationReportQuery / GetValidationReportQueryHandler: Catalog audit
"""

from .get_validation_report import (
    GetValidationReportQuery,
    GetValidationReportQueryHandler,
    ReportFormat,
    ValidationReportResult,
)

__all__ = [
    "GetValidationReportQuery",
    "GetValidationReportQueryHandler",
    "ReportFormat",
    "ValidationReportResult",
]
