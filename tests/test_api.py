"""
Tests for the HTTP surface in main.py

Tests cover:
- Status / health / catalog routes
- POST /readiness with stored-format payloads
- Household size rejection
- POST /recommendations
"""
import pytest
from fastapi.testclient import TestClient

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import app


@pytest.fixture
def client():
    return TestClient(app)


def _household(**overrides):
    household = {
        "householdSize": 2,
        "adultsCount": 2,
        "childrenCount": 0,
        "hazardProfile": "general",
        "hasEmergencyPlan": False,
    }
    household.update(overrides)
    return household


class TestStatusRoutes:

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"

    def test_health(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["household_size_policy"] in {"reject", "clamp"}

    def test_catalog(self, client):
        body = client.get("/catalog").json()
        assert set(body) == {"water", "food", "medical", "tools", "shelter"}
        water = {p["name"]: p for p in body["water"]}
        assert water["Water Bottles"]["daysPerUnit"] == 0.125


class TestReadinessRoute:

    def test_worked_example(self, client):
        payload = {
            "household": _household(),
            "inventory": [
                {"id": "1", "name": "Drinking Water", "category": "water", "quantity": 6,
                 "unit": "gallons", "expiryDate": "", "daysSupply": 6},
            ],
            "asOf": "2026-10-19",
        }

        r = client.post("/readiness", json=payload)

        assert r.status_code == 200
        body = r.json()
        assert body["result"]["overall_score"] == 32
        assert body["result"]["days_of_survival"] == 0
        assert body["result"]["category_breakdown"]["water"]["shortfall"] == pytest.approx(0.3)
        assert [g["category"] for g in body["result"]["top_gaps"]] == ["Medical", "Food", "Tools", "Shelter", "Water"]
        assert body["report"]["band"]["label"] == "At Risk"
        assert len(body["recommendations"]) == 5

    def test_days_supply_estimated_from_catalog(self, client):
        payload = {
            "household": _household(householdSize=1),
            "inventory": [{"name": "Dry Rice", "category": "food", "quantity": 3, "unit": "pounds"}],
        }

        body = client.post("/readiness", json=payload).json()

        assert body["result"]["category_breakdown"]["food"]["days_supply"] == 6

    def test_expiring_items_reported(self, client):
        payload = {
            "household": _household(),
            "inventory": [
                {"name": "Canned Food", "category": "food", "quantity": 6, "unit": "cans",
                 "expiryDate": "2026-10-30", "daysSupply": 1.98},
            ],
            "asOf": "2026-10-19",
        }

        body = client.post("/readiness", json=payload).json()

        expiring = body["report"]["expiring_items"]
        assert len(expiring) == 1
        assert expiring[0]["days_until_expiry"] == 11

    def test_zero_household_rejected(self, client):
        payload = {
            "household": _household(householdSize=0, adultsCount=0),
            "inventory": [{"category": "water", "daysSupply": 3}],
        }

        r = client.post("/readiness", json=payload)

        assert r.status_code == 422
        assert "household_size" in r.json()["error"]

    def test_negative_quantity_is_validation_error(self, client):
        payload = {
            "household": _household(),
            "inventory": [{"category": "water", "quantity": -1, "daysSupply": 3}],
        }
        assert client.post("/readiness", json=payload).status_code == 422

    def test_quantity_overflowing_days_is_rejected(self, client):
        # 1e307 flashlights at 365 days each is beyond float range
        payload = {
            "household": _household(householdSize=1),
            "inventory": [
                {"name": name, "category": category, "quantity": 1e307}
                for category, name in [
                    ("water", "Drinking Water"),
                    ("food", "Dry Rice"),
                    ("medical", "First Aid Kit"),
                    ("tools", "Flashlight"),
                    ("shelter", "Blankets"),
                ]
            ],
        }

        r = client.post("/readiness", json=payload)

        assert r.status_code == 422
        assert r.json()["status_code"] == 422

    def test_summed_days_overflowing_is_rejected(self, client):
        payload = {
            "household": _household(householdSize=1),
            "inventory": [
                {"category": "tools", "daysSupply": 1e308},
                {"category": "tools", "daysSupply": 1e308},
            ],
        }
        assert client.post("/readiness", json=payload).status_code == 422

    def test_large_finite_quantity_stays_numeric(self, client):
        payload = {
            "household": _household(householdSize=1),
            "inventory": [{"name": "Flashlight", "category": "tools", "quantity": 1e300}],
        }

        r = client.post("/readiness", json=payload)

        assert r.status_code == 200
        tools = r.json()["result"]["category_breakdown"]["tools"]
        assert tools["days_supply"] == pytest.approx(365e300)
        assert tools["score"] == 100


class TestRecommendationsRoute:

    def test_recommendations(self, client):
        payload = {
            "gaps": [{"category": "Water", "shortfall": 2.5}, {"category": "Pets", "shortfall": 1}],
            "householdSize": 3,
        }

        r = client.post("/recommendations", json=payload)

        assert r.status_code == 200
        recs = r.json()["recommendations"]
        assert recs == [{
            "category": "water",
            "item": "Water (drinking)",
            "quantity": 8,
            "unit": "gallons",
            "priority": "high",
        }]

    def test_household_size_must_be_positive(self, client):
        payload = {"gaps": [{"category": "Water", "shortfall": 1}], "householdSize": 0}
        assert client.post("/recommendations", json=payload).status_code == 422
