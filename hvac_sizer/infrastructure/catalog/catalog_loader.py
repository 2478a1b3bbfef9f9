"""
Equipment Catalog Loader

Reads equipment records from JSON, CSV or Excel files and validates them
into Equipment entities.

Responsibility:
    - Resolve the catalog path (argument, EQUIPMENT_CATALOG_PATH, bundled JSON)
    - Parse JSON with the standard library, CSV/Excel with Polars
    - Validate every record with pydantic, naming the failing record
    - Wrap every failure in a CatalogLoadError

Architecture Notes:
    - Infrastructure Layer (depends on Polars library)
    - Used by InMemoryEquipmentCatalog and the scripts
    - Tabular files are read with every column as text; pydantic does the
      type coercion, so "0.95", "true" and "" are handled the same way in
      CSV and Excel
    - Field-rule violations (e.g. a heat pump without HSPF) are NOT load
      errors: those records load fine and are rejected later by the type
      validator
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

import polars as pl
from pydantic import ValidationError

from hvac_sizer.domain.equipment.entities.equipment import Equipment
from hvac_sizer.domain.shared.exceptions import (
    CatalogLoadError,
    UnsupportedCatalogFormatError,
)

logger = logging.getLogger(__name__)

CATALOG_PATH_ENV = "EQUIPMENT_CATALOG_PATH"
DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "equipment_catalog.json"

SUPPORTED_SUFFIXES = (".json", ".csv", ".xlsx", ".xls")


def resolve_catalog_path(path: Optional[str | Path] = None) -> Path:
    """
    Pick the catalog file to load.

    Order: explicit argument, EQUIPMENT_CATALOG_PATH, bundled sample catalog.
    """
    if path:
        return Path(path)
    env_path = os.getenv(CATALOG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return DEFAULT_CATALOG_PATH


class EquipmentCatalogLoader:
    """
    Loads and validates an equipment catalog file.

    Supported formats:
        - .json: list of records, or {"equipment": [...]}
        - .csv: header row with Equipment field names
        - .xlsx/.xls: first sheet, header row with Equipment field names

    Examples:
        >>> loader = EquipmentCatalogLoader()
        >>> equipment = loader.load(Path("catalog.csv"))
        >>> equipment[0].equipment_type
        <EquipmentType.FURNACE: 'furnace'>
    """

    def load(self, path: Optional[str | Path] = None) -> list[Equipment]:
        """
        Load every record of a catalog file.

        Args:
            path: Catalog file (default: see resolve_catalog_path)

        Returns:
            Equipment list in file order

        Raises:
            UnsupportedCatalogFormatError: Extension is not supported
            CatalogLoadError: File missing, unparseable, or a record is invalid
        """
        file_path = resolve_catalog_path(path)
        suffix = file_path.suffix.lower()

        if suffix not in SUPPORTED_SUFFIXES:
            raise UnsupportedCatalogFormatError(
                f"Unsupported catalog format (expected one of {', '.join(SUPPORTED_SUFFIXES)})",
                suffix=suffix or file_path.name,
            )
        if not file_path.exists():
            raise CatalogLoadError("Catalog file not found", file_path=str(file_path))

        if suffix == ".json":
            records = self._read_json(file_path)
        elif suffix == ".csv":
            records = self._read_csv(file_path)
        else:
            records = self._read_excel(file_path)

        equipment = [
            self._to_equipment(record, index, file_path)
            for index, record in enumerate(records, start=1)
        ]
        logger.info(f"Loaded {len(equipment)} equipment records from {file_path}")
        return equipment

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    @staticmethod
    def _read_json(file_path: Path) -> list[dict[str, Any]]:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(
                "Cannot parse JSON catalog", file_path=str(file_path), original_error=e
            ) from e

        if isinstance(data, dict):
            data = data.get("equipment")
        if not isinstance(data, list):
            raise CatalogLoadError(
                'JSON catalog must be a list of records or {"equipment": [...]}',
                file_path=str(file_path),
            )
        return data

    @staticmethod
    def _read_csv(file_path: Path) -> list[dict[str, Any]]:
        try:
            # infer_schema_length=0 reads every column as text
            df = pl.read_csv(file_path, infer_schema_length=0)
        except Exception as e:
            raise CatalogLoadError(
                "Cannot parse CSV catalog", file_path=str(file_path), original_error=e
            ) from e
        return df.to_dicts()

    @staticmethod
    def _read_excel(file_path: Path) -> list[dict[str, Any]]:
        df: Optional[pl.DataFrame] = None
        last_error: Optional[Exception] = None

        try:
            # First attempt: Default engine (Polars auto-selects best available)
            df = pl.read_excel(source=file_path)
        except Exception as e:
            last_error = e
            # Fallback: Try explicit openpyxl engine
            try:
                df = pl.read_excel(source=file_path, engine="openpyxl")
            except Exception as fallback_error:
                last_error = fallback_error

        if df is None:
            raise CatalogLoadError(
                "Cannot parse Excel catalog (tried default and openpyxl engines)",
                file_path=str(file_path),
                original_error=last_error,
            )

        return df.with_columns(pl.all().cast(pl.Utf8)).to_dicts()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _clean_record(record: dict[str, Any]) -> dict[str, Any]:
        """Drop empty cells so model defaults apply."""
        cleaned = {}
        for key, value in record.items():
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            cleaned[key] = value
        return cleaned

    def _to_equipment(self, record: Any, index: int, file_path: Path) -> Equipment:
        if not isinstance(record, dict):
            raise CatalogLoadError(
                f"Catalog record must be an object, got {type(record).__name__}",
                file_path=str(file_path),
                row=index,
            )
        try:
            return Equipment.model_validate(self._clean_record(record))
        except ValidationError as e:
            raise CatalogLoadError(
                f"Invalid equipment record '{record.get('id', '?')}'",
                file_path=str(file_path),
                original_error=e,
                row=index,
            ) from e
