"""
Recommendation Excel Writer

Exports a CalculationResult to an Excel workbook using openpyxl.

Responsibility:
    - "Recommendations" sheet: one ranked row per recommendation, status
      column colored by sizing status
    - "Validation" sheet: summary counts and one row per validation error
    - Auto-size columns for readability

Architecture Notes:
    - Infrastructure Layer (depends on openpyxl library)
    - Used by scripts/calculate_recommendations.py
    - Writes a new workbook every time (no template, no backup)
"""

import logging
from pathlib import Path
from typing import Any, Optional

from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from hvac_sizer.domain.equipment.value_objects.recommendation import SizingStatus
from hvac_sizer.domain.equipment.value_objects.validation import CalculationResult

logger = logging.getLogger(__name__)


RECOMMENDATION_HEADERS = [
    "Rank",
    "Manufacturer",
    "Model",
    "Type",
    "Staging",
    "Status",
    "Sizing %",
    "Recommended CFM",
    "Backup Heat (kW)",
    "Price",
    "Warnings",
    "Instructions",
]

VALIDATION_HEADERS = [
    "Equipment ID",
    "Manufacturer",
    "Model",
    "Error Type",
    "Severity",
    "Message",
    "Details",
]

STATUS_COLUMN = RECOMMENDATION_HEADERS.index("Status") + 1


class RecommendationExcelWriter:
    """
    Writes calculation results to .xlsx.

    Examples:
        >>> writer = RecommendationExcelWriter()
        >>> writer.write(result, Path("/tmp/recommendations.xlsx"))
        PosixPath('/tmp/recommendations.xlsx')
    """

    # Color definitions for sizing status (RGB hex)
    COLOR_GREEN = "C6EFCE"  # optimal
    COLOR_YELLOW = "FFEB9C"  # acceptable
    COLOR_RED = "FFC7CE"  # oversized / undersized

    MAX_COLUMN_WIDTH = 80

    def __init__(self) -> None:
        self._status_colors: dict[SizingStatus, str] = {
            SizingStatus.OPTIMAL: self.COLOR_GREEN,
            SizingStatus.ACCEPTABLE: self.COLOR_YELLOW,
            SizingStatus.OVERSIZED: self.COLOR_RED,
            SizingStatus.UNDERSIZED: self.COLOR_RED,
        }

    def write(self, result: CalculationResult, output_path: Path) -> Path:
        """
        Write both sheets and save the workbook.

        Args:
            result: Engine output
            output_path: Destination .xlsx (parent directories are created)

        Returns:
            Path to saved file

        Raises:
            OSError: If file cannot be written
        """
        output_path = Path(output_path)
        workbook = Workbook()

        recommendations_sheet = workbook.active
        recommendations_sheet.title = "Recommendations"
        self._write_recommendations(recommendations_sheet, result)

        validation_sheet = workbook.create_sheet("Validation")
        self._write_validation(validation_sheet, result)

        for worksheet in (recommendations_sheet, validation_sheet):
            self._autosize_columns(worksheet)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(output_path)

        logger.info(
            f"Wrote {len(result.recommendations)} recommendations and "
            f"{len(result.validation_summary.errors)} validation errors to {output_path}"
        )
        return output_path

    def _write_recommendations(self, worksheet: Worksheet, result: CalculationResult) -> None:
        self._write_header(worksheet, RECOMMENDATION_HEADERS)

        for rank, recommendation in enumerate(result.recommendations, start=1):
            equipment = recommendation.equipment
            worksheet.append(
                [
                    rank,
                    equipment.manufacturer,
                    equipment.model,
                    equipment.equipment_type.value,
                    equipment.staging.value,
                    recommendation.sizing_status.value,
                    recommendation.sizing_percentage,
                    recommendation.recommended_cfm,
                    recommendation.backup_heat_required_kw,
                    equipment.price,
                    "\n".join(recommendation.warnings),
                    "\n".join(recommendation.instructions),
                ]
            )
            color = self._status_colors[recommendation.sizing_status]
            worksheet.cell(row=rank + 1, column=STATUS_COLUMN).fill = PatternFill(
                start_color=color, end_color=color, fill_type="solid"
            )

    def _write_validation(self, worksheet: Worksheet, result: CalculationResult) -> None:
        summary = result.validation_summary
        summary_rows: list[list[Any]] = [
            ["Total equipment", summary.total_equipment],
            ["Included", summary.included_equipment],
            ["Excluded", summary.excluded_equipment],
        ]
        for row in summary_rows:
            worksheet.append(row)
            worksheet.cell(row=worksheet.max_row, column=1).font = Font(bold=True)
        worksheet.append([])

        self._write_header(worksheet, VALIDATION_HEADERS)
        for error in summary.errors:
            worksheet.append(
                [
                    error.equipment_id,
                    error.manufacturer,
                    error.model,
                    error.error_type.value,
                    error.severity.value,
                    error.message,
                    error.technical_details,
                ]
            )

    @staticmethod
    def _write_header(worksheet: Worksheet, headers: list[str]) -> None:
        worksheet.append(headers)
        for cell in worksheet[worksheet.max_row]:
            cell.font = Font(bold=True)

    def _autosize_columns(self, worksheet: Worksheet, columns: Optional[list[str]] = None) -> None:
        """
        Auto-size columns based on the longest line of content.

        Args:
            worksheet: openpyxl Worksheet to modify
            columns: Column letters to size (default: every used column)
        """
        if columns is None:
            columns = [get_column_letter(i) for i in range(1, worksheet.max_column + 1)]

        for column_letter in columns:
            max_width = 0
            for cell in worksheet[column_letter]:
                if cell.value is None:
                    continue
                longest_line = max(len(line) for line in str(cell.value).split("\n"))
                max_width = max(max_width, longest_line)

            # Minimum width of 8 to ensure columns are visible
            adjusted_width = min(max(max_width + 2, 8), self.MAX_COLUMN_WIDTH)
            worksheet.column_dimensions[column_letter].width = adjusted_width
