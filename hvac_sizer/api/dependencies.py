"""
API Dependency Injection

Provides the catalog, use case and query handler to the routers.

Architecture Notes:
    - The catalog is loaded once per process (lru_cache) from
      EQUIPMENT_CATALOG_PATH or the bundled sample catalog
    - Tests replace get_equipment_catalog via app.dependency_overrides
"""

import logging
from functools import lru_cache

from fastapi import Depends

from hvac_sizer.application.queries.get_validation_report import (
    GetValidationReportQueryHandler,
)
from hvac_sizer.application.services.calculate_recommendations_use_case import (
    CalculateRecommendationsUseCase,
)
from hvac_sizer.domain.equipment.repositories.equipment_catalog import (
    EquipmentCatalogProtocol,
)
from hvac_sizer.infrastructure.catalog.in_memory_catalog import InMemoryEquipmentCatalog

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_equipment_catalog() -> EquipmentCatalogProtocol:
    """
    Dependency injection for the equipment catalog.

    Returns:
        InMemoryEquipmentCatalog loaded from the configured file

    Raises:
        CatalogLoadError: If the catalog cannot be loaded (mapped to HTTP 500)
    """
    catalog = InMemoryEquipmentCatalog.from_file()
    logger.info(f"Equipment catalog ready: {len(catalog)} records")
    return catalog


def get_calculate_recommendations_use_case(
    catalog: EquipmentCatalogProtocol = Depends(get_equipment_catalog),
) -> CalculateRecommendationsUseCase:
    """Dependency injection for CalculateRecommendationsUseCase."""
    return CalculateRecommendationsUseCase(catalog)


def get_validation_report_query_handler(
    catalog: EquipmentCatalogProtocol = Depends(get_equipment_catalog),
) -> GetValidationReportQueryHandler:
    """Dependency injection for GetValidationReportQueryHandler."""
    return GetValidationReportQueryHandler(catalog)
