"""Tests for tilecalc API."""

import pytest
from fastapi.testclient import TestClient

from tilecalc.application import app

client = TestClient(app)

REQUEST_DATA = {
    "windSpeed": "175",
    "meanHeight": "30",
    "exposure": "C",
    "roofZone": "3",
    "tileLength": "17",
    "tileWidth": "12",
    "liftCoefficient": "0.2",
    "providedResistance": "27.8",
}


def test_root_endpoint():
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data


def test_health_endpoint():
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_defaults_endpoint():
    response = client.get("/api/defaults")
    assert response.status_code == 200
    data = response.json()
    assert data["gcp_by_zone"] == {"1": -0.9, "2": -1.3, "3": -2.0}
    assert data["kd"] == 0.85
    assert data["inputs"]["wind_speed_mph"] == 175.0


def test_calculate_endpoint_valid():
    """Test calculate endpoint with the sample tile."""
    response = client.post("/api/calculate", json=REQUEST_DATA)
    assert response.status_code == 200

    data = response.json()
    assert data["Ma"] == pytest.approx(23.92, abs=0.01)
    assert data["GCp"] == -2.0
    assert data["Kd"] == 0.85
    assert data["Mf"] == 27.8
    assert data["result"] == "Pass"


def test_calculate_endpoint_without_resistance():
    payload = {k: v for k, v in REQUEST_DATA.items() if k != "providedResistance"}
    response = client.post("/api/calculate", json=payload)
    assert response.status_code == 200

    data = response.json()
    assert "Mf" not in data
    assert "result" not in data


def test_calculate_endpoint_overrides_need_advanced():
    payload = {**REQUEST_DATA, "gcp": "-1.0", "kd": "1.0"}

    plain = client.post("/api/calculate", json=payload).json()
    advanced = client.post("/api/calculate", json={**payload, "advanced": True}).json()

    assert plain["GCp"] == -2.0
    assert plain["Kd"] == 0.85
    assert advanced["GCp"] == -1.0
    assert advanced["Kd"] == 1.0


def test_calculate_endpoint_invalid():
    """Roof zone outside 1-3 is a validation error."""
    response = client.post("/api/calculate", json={**REQUEST_DATA, "roofZone": "4"})
    assert response.status_code == 422
    assert "roofZone" in response.json()["detail"]


@pytest.mark.parametrize("flag", ["false", "0", False, "off"])
def test_calculate_endpoint_false_flag_text_keeps_defaults(flag):
    payload = {**REQUEST_DATA, "gcp": "-0.5", "kd": "1.0", "advanced": flag}
    response = client.post("/api/calculate", json=payload)
    assert response.status_code == 200

    data = response.json()
    assert data["GCp"] == -2.0
    assert data["Kd"] == 0.85


def test_calculate_endpoint_true_flag_text_uses_overrides():
    payload = {**REQUEST_DATA, "gcp": "-0.5", "advanced": "true"}
    assert client.post("/api/calculate", json=payload).json()["GCp"] == -0.5


def test_calculate_endpoint_bad_flag():
    response = client.post("/api/calculate", json={**REQUEST_DATA, "advanced": "maybe"})
    assert response.status_code == 422
    assert "advanced" in response.json()["detail"]
