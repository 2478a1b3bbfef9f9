"""
In-Memory Equipment Catalog

Read-only EquipmentCatalogProtocol implementation over a list loaded once
at startup.

Architecture Notes:
    - Implements Domain repository interface (Dependency Inversion)
    - Records are immutable pydantic models and the list is never modified,
      so one instance is safely shared by concurrent requests
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from hvac_sizer.domain.equipment.entities.equipment import Equipment
from hvac_sizer.domain.shared.exceptions import EquipmentNotFoundError
from hvac_sizer.infrastructure.catalog.catalog_loader import EquipmentCatalogLoader

logger = logging.getLogger(__name__)


class InMemoryEquipmentCatalog:
    """
    Equipment catalog held in memory.

    Examples:
        >>> catalog = InMemoryEquipmentCatalog.from_file()
        >>> len(catalog.get_active()) <= len(catalog.get_all())
        True
        >>> catalog.get_by_id("furn-001").manufacturer
        'Carrier'
    """

    def __init__(self, equipment: Iterable[Equipment]):
        self._equipment: tuple[Equipment, ...] = tuple(equipment)
        self._by_id: dict[str, Equipment] = {}
        for item in self._equipment:
            if item.id in self._by_id:
                logger.warning(f"Duplicate equipment id '{item.id}': keeping first record")
                continue
            self._by_id[item.id] = item

    @classmethod
    def from_file(
        cls,
        path: Optional[str | Path] = None,
        loader: Optional[EquipmentCatalogLoader] = None,
    ) -> "InMemoryEquipmentCatalog":
        """
        Build a catalog from a file.

        Args:
            path: Catalog file (default: EQUIPMENT_CATALOG_PATH or bundled JSON)
            loader: Loader to use (default: EquipmentCatalogLoader())

        Raises:
            CatalogLoadError, UnsupportedCatalogFormatError: See EquipmentCatalogLoader.load
        """
        loader = loader or EquipmentCatalogLoader()
        return cls(loader.load(path))

    def get_all(self) -> list[Equipment]:
        return list(self._equipment)

    def get_active(self) -> list[Equipment]:
        return [item for item in self._equipment if item.is_active]

    def get_by_id(self, equipment_id: str) -> Equipment:
        try:
            return self._by_id[equipment_id]
        except KeyError:
            raise EquipmentNotFoundError(equipment_id) from None

    def __len__(self) -> int:
        return len(self._equipment)
