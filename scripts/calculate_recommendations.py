#!/usr/bin/env python3
"""
CLI tool for sizing HVAC equipment against design loads.

Runs the recommendation engine over an equipment catalog and logs the
ranked result. Optionally exports the result to Excel.

Usage:
    python scripts/calculate_recommendations.py --heating 60000 --cooling 36000 --sensible 28000
    python scripts/calculate_recommendations.py --heating 80000 --cooling 24000 --sensible 20000 \\
        --types heat_pump --sizing-preference size_to_heating --output result.xlsx

Configuration:
    - EQUIPMENT_CATALOG_PATH (or --catalog): catalog file, default bundled sample
    - LOG_LEVEL: logging level (default INFO), --verbose forces DEBUG
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
from pydantic import ValidationError

from hvac_sizer.application.services.calculate_recommendations_use_case import (
    CalculateRecommendationsUseCase,
)
from hvac_sizer.domain.equipment.entities.equipment import EquipmentType
from hvac_sizer.domain.equipment.value_objects.load_inputs import LoadInputs
from hvac_sizer.domain.equipment.value_objects.user_preferences import UserPreferences
from hvac_sizer.domain.shared.exceptions import DomainException
from hvac_sizer.infrastructure.catalog.in_memory_catalog import InMemoryEquipmentCatalog
from hvac_sizer.infrastructure.file_storage.excel_writer import RecommendationExcelWriter

load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _csv_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Rank catalog equipment against Manual J design loads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Furnace + AC + heat pump options for a 60k/36k house
  python scripts/calculate_recommendations.py --heating 60000 --cooling 36000 --sensible 28000

  # Heat pumps sized to heating at 5000 ft, exported to Excel
  python scripts/calculate_recommendations.py --heating 80000 --cooling 24000 --sensible 20000 \\
      --elevation 5000 --types heat_pump --sizing-preference size_to_heating --output hp.xlsx

  # Only Carrier and Trane, under $5000
  python scripts/calculate_recommendations.py --heating 60000 --cooling 36000 --sensible 28000 \\
      --brands Carrier,Trane --max-price 5000
        """,
    )

    loads = parser.add_argument_group("design loads")
    loads.add_argument("--heating", type=float, default=0.0, help="Total heating load (BTU/hr)")
    loads.add_argument("--cooling", type=float, default=0.0, help="Total cooling load (BTU/hr)")
    loads.add_argument(
        "--sensible",
        type=float,
        default=None,
        help="Sensible cooling load (BTU/hr, default: equal to --cooling)",
    )
    loads.add_argument("--elevation", type=float, default=None, help="Site elevation (ft)")
    loads.add_argument("--summer-temp", type=float, default=None, help="Outdoor summer design temp (F)")
    loads.add_argument("--winter-temp", type=float, default=None, help="Outdoor winter design temp (F)")
    loads.add_argument("--humidity", type=float, default=None, help="Indoor relative humidity (%%)")

    prefs = parser.add_argument_group("preferences")
    prefs.add_argument(
        "--types",
        type=_csv_list,
        default=[t.value for t in EquipmentType],
        help="Comma-separated equipment types (default: all)",
    )
    prefs.add_argument("--distribution", default=None, help="ducted, ductless or hydronic")
    prefs.add_argument(
        "--sizing-preference",
        default=None,
        help="Heat pump strategy: size_to_heating or size_to_cooling",
    )
    prefs.add_argument("--brands", type=_csv_list, default=[], help="Comma-separated manufacturers")
    prefs.add_argument("--staging", type=_csv_list, default=[], help="Comma-separated staging values")
    prefs.add_argument("--locations", type=_csv_list, default=[], help="Comma-separated unit locations")
    prefs.add_argument("--min-afue", type=float, default=None, help="Minimum AFUE (fraction, e.g. 0.95)")
    prefs.add_argument("--max-price", type=float, default=None, help="Maximum price (USD)")

    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Catalog file (.json, .csv, .xlsx); default: EQUIPMENT_CATALOG_PATH or bundled",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write results to this .xlsx file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args()


def main():
    """Main execution function."""
    args = parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Step 1: Validate inputs
    try:
        load_inputs = LoadInputs(
            total_heating_btu=args.heating,
            total_cooling_btu=args.cooling,
            sensible_cooling_btu=args.sensible if args.sensible is not None else args.cooling,
            outdoor_summer_design_temp=args.summer_temp,
            outdoor_winter_design_temp=args.winter_temp,
            elevation=args.elevation,
            indoor_humidity=args.humidity,
        )
        preferences = UserPreferences(
            equipment_types=args.types,
            distribution_type=args.distribution,
            sizing_preference=args.sizing_preference,
            brand_filter=args.brands,
            staging_filter=args.staging,
            unit_location_filter=args.locations,
            min_afue=args.min_afue,
            max_price=args.max_price,
        )
    except ValidationError as e:
        logger.error(f"Invalid input:\n{e}")
        sys.exit(1)

    # Step 2: Load catalog
    try:
        catalog = InMemoryEquipmentCatalog.from_file(args.catalog)
    except DomainException as e:
        logger.error(f"Failed to load catalog: {e}")
        sys.exit(1)

    # Step 3: Calculate
    result = CalculateRecommendationsUseCase(catalog).execute(load_inputs, preferences)

    # Step 4: Report
    print("\n" + "=" * 80)
    if not result.recommendations:
        print("No equipment fits these loads and preferences.")
    for rank, recommendation in enumerate(result.recommendations, start=1):
        equipment = recommendation.equipment
        extras = []
        if recommendation.recommended_cfm is not None:
            extras.append(f"{recommendation.recommended_cfm:,} CFM")
        if recommendation.backup_heat_required_kw is not None:
            extras.append(f"{recommendation.backup_heat_required_kw} kW backup")
        print(
            f"{rank:>2}. {equipment.display_name:<32} {equipment.equipment_type.value:<17} "
            f"{recommendation.sizing_status.value:<10} {recommendation.sizing_percentage:>4}%  "
            f"${equipment.price:,.0f}  {', '.join(extras)}"
        )
        for warning in recommendation.warnings:
            print(f"      ! {warning}")

    summary = result.validation_summary
    print("-" * 80)
    print(
        f"Evaluated {summary.total_equipment}: {summary.included_equipment} recommended, "
        f"{summary.excluded_equipment} excluded"
    )
    for error in summary.errors:
        print(f"  [{error.severity.value}] {error.equipment_id}: {error.message}")
    print("=" * 80)
    if summary.has_issues:
        logger.warning(
            f"{summary.excluded_equipment} candidates excluded, "
            f"{len(summary.errors)} catalog validation issues"
        )

    # Step 5: Optional Excel export
    if args.output:
        try:
            path = RecommendationExcelWriter().write(result, args.output)
        except OSError as e:
            logger.error(f"Failed to write {args.output}: {e}")
            sys.exit(1)
        logger.info(f"Results saved to {path}")

    sys.exit(0)


if __name__ == "__main__":
    main()
