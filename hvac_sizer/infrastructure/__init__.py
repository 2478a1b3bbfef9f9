"""
Infrastructure Layer - External Dependencies

Implements technical capabilities that support the Domain Layer.

Architecture:
    - Implements Domain repository interfaces (Dependency Inversion)
    - Depends on external libraries (Polars, openpyxl)
    - No Domain business logic (only technical implementations)

Modules:
    - catalog: Catalog file loading (Polars) and in-memory catalog
    - file_storage: Excel export (openpyxl)

Exports:
    - EquipmentCatalogLoader, InMemoryEquipmentCatalog
    - RecommendationExcelWriter
"""

from hvac_sizer.infrastructure.catalog import (
    EquipmentCatalogLoader,
    InMemoryEquipmentCatalog,
)
from hvac_sizer.infrastructure.file_storage import RecommendationExcelWriter

__all__ = [
    "EquipmentCatalogLoader",
    "InMemoryEquipmentCatalog",
    "RecommendationExcelWriter",
]
