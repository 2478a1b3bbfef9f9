"""
Tests for the equipment router.

Covers:
- GET /api/equipment (active records only)
- GET /api/equipment/{equipment_id} (including 404 mapping)
- GET /api/equipment/validation-report (text)
- GET /api/equipment/missing-data (CSV download)
"""

from fastapi import status


def test_list_equipment_returns_active(client):
    """Test that inactive records are not listed."""
    response = client.get("/api/equipment")

    assert response.status_code == status.HTTP_200_OK
    ids = [item["id"] for item in response.json()]
    assert len(ids) == 6
    assert "furn-002" not in ids


def test_get_equipment_by_id(client):
    """Test lookup of an inactive record by id."""
    response = client.get("/api/equipment/furn-002")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == "furn-002"
    assert data["is_active"] is False


def test_get_unknown_equipment_returns_404(client):
    """Test EquipmentNotFoundError mapped to 404 with ErrorResponse body."""
    response = client.get("/api/equipment/furn-999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    data = response.json()
    assert data["code"] == "EQUIPMENT_NOT_FOUND"
    assert data["details"]["equipment_id"] == "furn-999"
    assert "furn-999" in data["message"]


def test_validation_report_is_plain_text(client):
    """Test catalog audit as text."""
    response = client.get("/api/equipment/validation-report")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("text/plain")
    assert "EQUIPMENT VALIDATION REPORT" in response.text
    assert "- Invalid equipment items: 1" in response.text
    assert "(hp-002)" in response.text


def test_missing_data_is_csv_attachment(client):
    """Test missing-data CSV download."""
    response = client.get("/api/equipment/missing-data")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("text/csv")
    assert "missing_equipment_data.csv" in response.headers["content-disposition"]

    lines = response.text.splitlines()
    assert lines[0].startswith("id,manufacturer,model")
    assert lines[1].startswith("hp-002,")
