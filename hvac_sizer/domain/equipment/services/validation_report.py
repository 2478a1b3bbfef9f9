"""
Catalog Validation Report

Audits a whole equipment catalog against the per-type field rules and
produces:
    - a human-readable text report (summary, top causes, per-type
      breakdown, fixing recommendations)
    - a CSV listing every missing required value with a suggested fill
      where one can be derived

Records are checked as stored (no normalization), so stray values in
fields that must be empty are reported too.
"""

import csv
import io
import logging
from collections import Counter
from typing import Iterable

from hvac_sizer.domain.equipment.entities.equipment import Equipment
from hvac_sizer.domain.equipment.services.type_validator import get_validation_details
from hvac_sizer.domain.equipment.value_objects.validation import ValidationDetail
from hvac_sizer.shared.utils.numeric import round_half_up

logger = logging.getLogger(__name__)

TOP_CAUSES_LIMIT = 5
LATENT_SHARE_OF_COOLING = 0.33
TYPICAL_HSPF = "9.0"

MISSING_DATA_HEADERS = [
    "id",
    "manufacturer",
    "model",
    "equipmentType",
    "missingField",
    "suggestedValue",
    "notes",
]


def _collect_invalid(
    equipment_list: Iterable[Equipment],
) -> tuple[int, list[tuple[Equipment, list[ValidationDetail]]]]:
    total = 0
    invalid = []
    for equipment in equipment_list:
        total += 1
        details = get_validation_details(equipment)
        if details:
            invalid.append((equipment, details))
    return total, invalid


def _fixing_recommendations(field: str, issue: str) -> list[str]:
    if field == "latent_cooling_btu" and issue.startswith("Required for"):
        return [
            "  - Calculate as 30-35% of total cooling capacity",
            "  - Formula: latent_cooling_btu = cooling_capacity_btu * 0.33",
        ]
    if field == "hspf" and issue.startswith("Required for"):
        return [
            "  - Look up manufacturer specifications",
            "  - Typical range: 8.0 - 10.5 for modern heat pumps",
        ]
    if issue.startswith("Must be null"):
        return [f"  - Set {field} to null for this equipment type"]
    return [f"  - Look up manufacturer specifications for {field}"]


def generate_validation_report(equipment_list: Iterable[Equipment]) -> str:
    """
    Build the text validation report for a catalog.

    Args:
        equipment_list: Catalog records (active and inactive)

    Returns:
        Multi-line report. When every record is valid the report ends after
        the summary with "ALL EQUIPMENT ITEMS ARE VALID".

    Examples:
        >>> print(generate_validation_report(catalog.get_all()))
        ================================================================================
        EQUIPMENT VALIDATION REPORT
        ...
        TOP CAUSES OF INVALIDATION:
        ----------------------------------------
        2 items: hspf: Required for heat pumps
    """
    total, invalid = _collect_invalid(equipment_list)
    logger.info(f"Validation report: {len(invalid)} of {total} records invalid")

    lines = []
    lines.append("=" * 80)
    lines.append("EQUIPMENT VALIDATION REPORT")
    lines.append("=" * 80)
    lines.append("")

    lines.append("SUMMARY:")
    lines.append(f"- Total equipment items: {total}")
    lines.append(f"- Valid equipment items: {total - len(invalid)}")
    lines.append(f"- Invalid equipment items: {len(invalid)}")
    lines.append("")

    if not invalid:
        lines.append("ALL EQUIPMENT ITEMS ARE VALID")
        lines.append("")
        return "\n".join(lines)

    # Counted per violation; ties keep first-seen order
    causes = Counter(detail.category for _, details in invalid for detail in details)
    top_causes = causes.most_common(TOP_CAUSES_LIMIT)

    lines.append("TOP CAUSES OF INVALIDATION:")
    lines.append("-" * 40)
    for category, count in top_causes:
        lines.append(f"{count} items: {category}")
    lines.append("")

    by_type: dict[str, list[tuple[Equipment, list[ValidationDetail]]]] = {}
    for equipment, details in invalid:
        by_type.setdefault(equipment.equipment_type.value, []).append((equipment, details))

    for type_name, items in by_type.items():
        lines.append(f"INVALID {type_name.upper()} EQUIPMENT ({len(items)} items):")
        lines.append("-" * 60)
        for equipment, details in items:
            lines.append(f"{equipment.display_name} ({equipment.id})")
            for detail in details:
                lines.append(
                    f"  x {detail.field}: Expected {detail.expected}, got {detail.actual}"
                )
                lines.append(f"    Issue: {detail.issue}")
            lines.append("")

    lines.append("FIXING RECOMMENDATIONS:")
    lines.append("-" * 40)
    for category, count in top_causes:
        field, issue = category.split(": ", 1)
        lines.append(f'For {count} items with "{category}":')
        lines.extend(_fixing_recommendations(field, issue))
        lines.append("")

    return "\n".join(lines)


def generate_missing_data_csv(equipment_list: Iterable[Equipment]) -> str:
    """
    List every missing required value as a CSV row for manual completion.

    Suggested values:
        - latent_cooling_btu: 33% of cooling capacity (when it is known)
        - hspf: 9.0 (typical, verify with manufacturer data)

    Stray values in forbidden fields are not listed (they need deleting,
    not filling).

    Returns:
        CSV text with header id, manufacturer, model, equipmentType,
        missingField, suggestedValue, notes
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(MISSING_DATA_HEADERS)

    _, invalid = _collect_invalid(equipment_list)
    rows = 0
    for equipment, details in invalid:
        for detail in details:
            if not detail.is_missing_value:
                continue

            suggested_value = ""
            notes = ""
            if detail.field == "latent_cooling_btu" and equipment.cooling_capacity_btu:
                suggested_value = str(
                    round_half_up(equipment.cooling_capacity_btu * LATENT_SHARE_OF_COOLING)
                )
                notes = "33% of cooling capacity"
            elif detail.field == "hspf":
                suggested_value = TYPICAL_HSPF
                notes = "Typical value - verify with manufacturer data"

            writer.writerow(
                [
                    equipment.id,
                    equipment.manufacturer,
                    equipment.model,
                    equipment.equipment_type.value,
                    detail.field,
                    suggested_value,
                    notes,
                ]
            )
            rows += 1

    logger.debug(f"Missing-data CSV: {rows} rows")
    return buffer.getvalue()
