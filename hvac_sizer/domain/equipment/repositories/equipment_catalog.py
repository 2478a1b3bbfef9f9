"""
EquipmentCatalog Repository Interface

Read-only access contract for the equipment catalog.

Responsibility:
    - Define what the Application Layer needs from a catalog
    - Keep the domain independent of where records come from (JSON, CSV,
      Excel, database)

Architecture Notes:
    - Protocol-based interface (structural typing)
    - Implemented in Infrastructure Layer (InMemoryEquipmentCatalog)
    - Read-only: a calculation never mutates the catalog, so one instance
      can serve concurrent requests
"""

from typing import Protocol

from ..entities.equipment import Equipment


class EquipmentCatalogProtocol(Protocol):
    """
    Protocol for equipment catalog lookups.

    Usage:
        >>> class CalculateRecommendationsUseCase:
        ...     def __init__(self, catalog: EquipmentCatalogProtocol, engine):
        ...         self.catalog = catalog
        ...
        ...     def execute(self, load_inputs, preferences):
        ...         return self.engine.calculate(
        ...             load_inputs, preferences, self.catalog.get_active()
        ...         )
    """

    def get_all(self) -> list[Equipment]:
        """
        Return every record, active or not, in catalog order.

        Used by the catalog validation report.
        """
        ...

    def get_active(self) -> list[Equipment]:
        """Return records with is_active=True, in catalog order."""
        ...

    def get_by_id(self, equipment_id: str) -> Equipment:
        """
        Return one record.

        Raises:
            EquipmentNotFoundError: If no record has this id
        """
        ...
