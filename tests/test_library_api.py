"""Integration tests for workout library endpoints."""
from __future__ import annotations

from fastapi.testclient import TestClient


def test_create_workout(test_client: TestClient, user_headers):
    payload = {
        "name": "Tempo 3x10",
        "category": "Distanspass",
        "description": "3x10 min at tempo pace",
        "duration_minutes": 60,
        "pace": "4:14",
        "effort": 7,
    }

    response = test_client.post("/api/library/", json=payload, headers=user_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Tempo 3x10"
    assert data["category"] == "distanspass"
    assert data["category_color"] == "#468771"
    assert data["effort_color"] == "#FF9900"
    assert data["effort_level"] == "medium"
    assert data["pace"] == "4:14"


def test_effort_defaults_to_five(test_client: TestClient, user_headers):
    response = test_client.post(
        "/api/library/",
        json={"name": "Core", "category": "styrka"},
        headers=user_headers,
    )

    assert response.status_code == 201
    assert response.json()["effort"] == 5


def test_create_workout_validation(test_client: TestClient, user_headers):
    unknown_category = test_client.post(
        "/api/library/",
        json={"name": "Swim", "category": "simning"},
        headers=user_headers,
    )
    assert unknown_category.status_code == 422

    blank_name = test_client.post(
        "/api/library/",
        json={"name": "   ", "category": "styrka"},
        headers=user_headers,
    )
    assert blank_name.status_code == 422

    effort_too_high = test_client.post(
        "/api/library/",
        json={"name": "Race", "category": "tävling", "effort": 11},
        headers=user_headers,
    )
    assert effort_too_high.status_code == 422


def test_list_is_sorted_and_scoped_to_user(test_client: TestClient, user_headers, make_workout):
    make_workout(name="Long run", category="långpass")
    make_workout(name="Easy run", category="distanspass")

    response = test_client.get("/api/library/", headers=user_headers)
    assert response.status_code == 200
    assert [w["name"] for w in response.json()] == ["Easy run", "Long run"]

    other = test_client.get("/api/library/", headers={"X-User-Id": "library-stranger"})
    assert other.json() == []


def test_update_workout(test_client: TestClient, user_headers, make_workout):
    workout = make_workout()

    response = test_client.put(
        f"/api/library/{workout['id']}",
        json={"name": "8x400m", "category": "intervallpass", "effort": 9},
        headers=user_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "8x400m"
    assert data["effort"] == 9
    assert data["description"] is None


def test_other_users_cannot_touch_workout(test_client: TestClient, make_workout):
    workout = make_workout()
    stranger = {"X-User-Id": "library-intruder"}

    assert test_client.get(f"/api/library/{workout['id']}", headers=stranger).status_code == 404
    assert test_client.delete(f"/api/library/{workout['id']}", headers=stranger).status_code == 404


def test_delete_workout(test_client: TestClient, user_headers, make_workout):
    workout = make_workout()

    response = test_client.delete(f"/api/library/{workout['id']}", headers=user_headers)
    assert response.status_code == 200
    assert "deleted successfully" in response.json()["message"]

    missing = test_client.get(f"/api/library/{workout['id']}", headers=user_headers)
    assert missing.status_code == 404


def test_apply_zone_copies_current_pace(test_client: TestClient, user_headers, make_workout):
    workout = make_workout(pace=None)

    no_zones = test_client.post(
        f"/api/library/{workout['id']}/apply-zone",
        json={"zone": "threshold"},
        headers=user_headers,
    )
    assert no_zones.status_code == 404

    test_client.post(
        "/api/pace-zones/calculate",
        json={"minutes": 20, "seconds": 0},
        headers=user_headers,
    )
    response = test_client.post(
        f"/api/library/{workout['id']}/apply-zone",
        json={"zone": "threshold"},
        headers=user_headers,
    )

    assert response.status_code == 200
    assert response.json()["pace"] == "4:07"


def test_apply_unknown_zone(test_client: TestClient, user_headers, make_workout):
    workout = make_workout()

    response = test_client.post(
        f"/api/library/{workout['id']}/apply-zone",
        json={"zone": "sprint"},
        headers=user_headers,
    )

    assert response.status_code == 422
