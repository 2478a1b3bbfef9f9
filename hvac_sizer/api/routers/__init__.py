"""
API Routers Package

Contains all FastAPI routers grouped by functionality.

Available Routers:
    - recommendations_router: Sizing calculation endpoint
    - equipment_router: Catalog listing, lookup and validation reports
"""

from .equipment import router as equipment_router
from .recommendations import router as recommendations_router

__all__ = ["recommendations_router", "equipment_router"]
