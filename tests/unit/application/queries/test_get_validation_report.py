"""
Tests for GetValidationReportQuery and its handler.

Covers:
- Query defaults and immutability
- Text and CSV report generation
- Audit covers inactive records
"""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from hvac_sizer.application.queries.get_validation_report import (
    GetValidationReportQuery,
    GetValidationReportQueryHandler,
    ReportFormat,
)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_catalog(sample_catalog):
    """Create mock catalog returning every sample record."""
    catalog = MagicMock()
    catalog.get_all.return_value = sample_catalog
    return catalog


@pytest.fixture
def handler(mock_catalog):
    """Create handler over the mock catalog."""
    return GetValidationReportQueryHandler(catalog=mock_catalog)


# ============================================================================
# QUERY TESTS
# ============================================================================


def test_query_defaults_to_text():
    """Test default report format."""
    assert GetValidationReportQuery().report_format == ReportFormat.TEXT


def test_query_parses_format_string():
    """Test that the format can be given as a plain string."""
    assert GetValidationReportQuery(report_format="csv").report_format == ReportFormat.CSV


def test_query_rejects_unknown_format():
    """Test invalid report format."""
    with pytest.raises(ValidationError):
        GetValidationReportQuery(report_format="pdf")


# ============================================================================
# HANDLER TESTS
# ============================================================================


def test_handle_text_report(handler, mock_catalog):
    """Test text report over all records, including the inactive one."""
    result = handler.handle(GetValidationReportQuery())

    mock_catalog.get_all.assert_called_once_with()
    assert result.report_format == ReportFormat.TEXT
    assert result.media_type == "text/plain"
    assert "- Total equipment items: 7" in result.content
    assert "- Invalid equipment items: 1" in result.content


def test_handle_csv_report(handler):
    """Test missing-data CSV for the heat pump without HSPF."""
    result = handler.handle(GetValidationReportQuery(report_format=ReportFormat.CSV))

    assert result.media_type == "text/csv"
    lines = result.content.splitlines()
    assert lines[0] == "id,manufacturer,model,equipmentType,missingField,suggestedValue,notes"
    assert lines[1].startswith("hp-002,Carrier,25VNA036A003,heat_pump,hspf,9.0,")
    assert len(lines) == 2
