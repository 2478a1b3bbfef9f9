"""
Equipment Repository Interfaces

Defined in Domain Layer, implemented in Infrastructure Layer.

This module exports:
    - EquipmentCatalogProtocol: Read-only catalog contract
"""

from .equipment_catalog import EquipmentCatalogProtocol

__all__ = [
    "EquipmentCatalogProtocol",
]
