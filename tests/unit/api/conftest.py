"""
Common fixtures for API unit tests.

Provides shared test utilities:
- FastAPI TestClient wired to an in-memory sample catalog
- Request payload factory
"""

import pytest
from fastapi.testclient import TestClient

from hvac_sizer.api.dependencies import get_equipment_catalog
from hvac_sizer.api.main import app
from hvac_sizer.infrastructure.catalog.in_memory_catalog import InMemoryEquipmentCatalog


@pytest.fixture
def api_catalog(sample_catalog):
    """In-memory catalog served by the API during a test."""
    return InMemoryEquipmentCatalog(sample_catalog)


@pytest.fixture
def client(api_catalog):
    """
    FastAPI TestClient for testing endpoints.

    The catalog dependency is overridden with api_catalog so tests never
    read the bundled catalog file.
    """
    app.dependency_overrides[get_equipment_catalog] = lambda: api_catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def calculate_payload():
    """Factory for POST /api/recommendations/calculate bodies."""

    def _payload(load_inputs=None, preferences=None):
        return {
            "load_inputs": load_inputs
            or {
                "total_heating_btu": 50000,
                "total_cooling_btu": 36000,
                "sensible_cooling_btu": 28800,
            },
            "preferences": preferences
            or {
                "equipment_types": ["furnace", "ac", "heat_pump", "boiler", "furnace_ac_combo"]
            },
        }

    return _payload
