"""
Shared Domain

Cross-subdomain concepts used by every part of the domain layer.

Exports:
    - DomainException: Base exception class
    - CatalogLoadError, UnsupportedCatalogFormatError, EquipmentNotFoundError
"""

from hvac_sizer.domain.shared.exceptions import (
    CatalogLoadError,
    DomainException,
    EquipmentNotFoundError,
    UnsupportedCatalogFormatError,
)

__all__ = [
    "DomainException",
    "CatalogLoadError",
    "UnsupportedCatalogFormatError",
    "EquipmentNotFoundError",
]
