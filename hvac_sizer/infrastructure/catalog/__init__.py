"""
Equipment catalog infrastructure.

Exports:
    - EquipmentCatalogLoader: JSON/CSV/Excel -> Equipment list
    - InMemoryEquipmentCatalog: EquipmentCatalogProtocol implementation
"""

from .catalog_loader import (
    CATALOG_PATH_ENV,
    DEFAULT_CATALOG_PATH,
    EquipmentCatalogLoader,
    resolve_catalog_path,
)
from .in_memory_catalog import InMemoryEquipmentCatalog

__all__ = [
    "CATALOG_PATH_ENV",
    "DEFAULT_CATALOG_PATH",
    "EquipmentCatalogLoader",
    "InMemoryEquipmentCatalog",
    "resolve_catalog_path",
]
