"""
API tests for the budget calculation endpoints.
"""
import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from wedding_budget.api.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "online"


def test_calculate_example(client):
    response = client.post("/calculate", json={
        "guest_count": 120,
        "location_type": "suburban",
        "catering_level": "standard",
        "venue_type": "banquet",
        "misc_budget": 5000,
    })
    assert response.status_code == 200
    body = response.json()

    assert body["breakdown"] == {
        "venue_cost": 6000,
        "catering_cost": 10200,
        "other_costs": 5000,
        "total_cost": 21200,
        "cost_per_guest": 177,
    }
    assert body["formatted"]["Estimated Total"] == "$21,200"
    assert body["rows"][-1]["is_total"] is True
    assert body["input"]["location_type"] == "suburban"
    assert len(body["trace"]) > 0


def test_calculate_uses_defaults(client):
    """Missing fields fall back to the form defaults."""
    response = client.post("/calculate", json={"guest_count": 0, "misc_budget": 0})
    assert response.status_code == 200
    body = response.json()

    assert body["breakdown"]["venue_cost"] == 6000
    assert body["breakdown"]["cost_per_guest"] == 0


def test_calculate_rejects_unknown_location(client):
    response = client.post("/calculate", json={"location_type": "moon"})
    assert response.status_code == 422


def test_options(client):
    response = client.get("/options")
    assert response.status_code == 200
    body = response.json()

    assert set(body) == {"location_type", "catering_level", "venue_type"}
    assert body["location_type"][0] == {"value": "rural", "label": "Rural", "multiplier": 0.7}


def test_tips(client):
    response = client.get("/tips")
    assert response.status_code == 200
    assert len(response.json()["tips"]) == 4


def test_calculate_failure_returns_500(client, monkeypatch):
    from wedding_budget.api import main

    def broken_calculate(wedding):
        raise RuntimeError("tables unavailable")

    monkeypatch.setattr(main.engine, "calculate", broken_calculate)
    response = client.post("/calculate", json={})

    assert response.status_code == 500
    assert response.json()["detail"] == "tables unavailable"
