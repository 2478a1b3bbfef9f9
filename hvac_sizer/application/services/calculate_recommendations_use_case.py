"""
Calculate Recommendations Use Case - Application Orchestration

Responsibility:
    Feeds the catalog's active equipment, the user's loads and preferences
    to the RecommendationEngine and returns its result.

Architecture Notes:
    - Part of Application Layer (Services/Use Cases)
    - Depends on Domain Layer via EquipmentCatalogProtocol
    - Constructor injection: API and scripts decide which catalog to use
    - No HTTP handling (that's API Layer concern)

Does NOT contain:
    - Sizing rules (RecommendationEngine)
    - File parsing (EquipmentCatalogLoader)
"""

import logging
from typing import Optional

from hvac_sizer.domain.equipment.repositories.equipment_catalog import (
    EquipmentCatalogProtocol,
)
from hvac_sizer.domain.equipment.services.recommendation_engine import (
    RecommendationEngine,
)
from hvac_sizer.domain.equipment.value_objects.load_inputs import LoadInputs
from hvac_sizer.domain.equipment.value_objects.user_preferences import UserPreferences
from hvac_sizer.domain.equipment.value_objects.validation import CalculationResult

logger = logging.getLogger(__name__)


class CalculateRecommendationsUseCase:
    """
    Orchestrates one sizing calculation against a catalog.

    Flow:
        API Layer -> Use Case -> Catalog (active records) -> RecommendationEngine

    Example:
        >>> use_case = CalculateRecommendationsUseCase(catalog)
        >>> result = use_case.execute(load_inputs, preferences)
        >>> len(result.recommendations)
        4
    """

    def __init__(
        self,
        catalog: EquipmentCatalogProtocol,
        engine: Optional[RecommendationEngine] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            catalog: Source of equipment records
            engine: Sizing engine (default: RecommendationEngine with default config)
        """
        self.catalog = catalog
        self.engine = engine or RecommendationEngine()

    def execute(
        self, load_inputs: LoadInputs, preferences: UserPreferences
    ) -> CalculationResult:
        """
        Run the calculation over every active catalog record.

        Args:
            load_inputs: Validated design loads
            preferences: Validated user preferences

        Returns:
            CalculationResult from the engine
        """
        equipment = self.catalog.get_active()
        logger.debug(
            f"Executing calculation for types "
            f"{[t.value for t in preferences.equipment_types]} over {len(equipment)} records"
        )
        return self.engine.calculate(load_inputs, preferences, equipment)
