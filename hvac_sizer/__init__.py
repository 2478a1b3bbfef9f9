"""
HVAC Sizer

Matches HVAC equipment (furnaces, air conditioners, heat pumps, boilers and
furnace/AC combo units) to a building's supplied heating and cooling loads
and produces ranked, annotated recommendations.

Layers:
    - domain: Sizing and validation engine (pure business rules)
    - application: Use cases orchestrating the catalog and the engine
    - infrastructure: Catalog loading and Excel export
    - api: FastAPI HTTP interface
    - shared: Cross-cutting helpers
"""

__version__ = "0.1.0"
