#!/usr/bin/env python3
"""
CLI tool for auditing the equipment catalog.

Prints the catalog validation report (records whose populated fields do not
match their equipment type) and optionally writes a CSV of missing values
with suggested fills.

Usage:
    python scripts/validation_report.py
    python scripts/validation_report.py --catalog data/catalog.xlsx --csv missing.csv

Exit codes:
    0: every record is valid
    1: catalog could not be loaded
    2: catalog loaded but contains invalid records
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

from hvac_sizer.application.queries.get_validation_report import (
    GetValidationReportQuery,
    GetValidationReportQueryHandler,
    ReportFormat,
)
from hvac_sizer.domain.equipment.services.type_validator import is_valid_for_type
from hvac_sizer.domain.shared.exceptions import DomainException
from hvac_sizer.infrastructure.catalog.in_memory_catalog import InMemoryEquipmentCatalog

load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Audit an equipment catalog against the per-type field rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Audit the configured catalog
  python scripts/validation_report.py

  # Audit a spreadsheet and export missing values for manual completion
  python scripts/validation_report.py --catalog catalog.xlsx --csv missing.csv
        """,
    )

    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Catalog file (.json, .csv, .xlsx); default: EQUIPMENT_CATALOG_PATH or bundled",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Write the missing-data CSV to this path",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the text report to this path")

    return parser.parse_args()


def main():
    """Main execution function."""
    args = parse_args()

    try:
        catalog = InMemoryEquipmentCatalog.from_file(args.catalog)
    except DomainException as e:
        logger.error(f"Failed to load catalog: {e}")
        sys.exit(1)

    handler = GetValidationReportQueryHandler(catalog)

    report = handler.handle(GetValidationReportQuery(report_format=ReportFormat.TEXT))
    if args.output:
        args.output.write_text(report.content, encoding="utf-8")
        logger.info(f"Report saved to {args.output}")
    else:
        print(report.content)

    if args.csv:
        missing = handler.handle(GetValidationReportQuery(report_format=ReportFormat.CSV))
        args.csv.write_text(missing.content, encoding="utf-8")
        logger.info(f"Missing-data CSV saved to {args.csv}")

    invalid = [item for item in catalog.get_all() if not is_valid_for_type(item)]
    if invalid:
        logger.warning(f"{len(invalid)} invalid records in catalog")
        sys.exit(2)  # Warning exit code

    sys.exit(0)


if __name__ == "__main__":
    main()
