"""Tests for the Strava import service and endpoints."""
from __future__ import annotations

import time
from datetime import date
from types import SimpleNamespace
from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient

from pace_tracker.config import get_settings
from pace_tracker.services import strava_service
from pace_tracker.services.strava_service import (
    STRAVA_ACTIVITIES_URL,
    STRAVA_TOKEN_URL,
    StravaConfigError,
    StravaError,
    StravaService,
    day_bounds_utc,
    simplify_activity,
    token_expired,
)


RAW_ACTIVITIES = [
    {
        "id": 101,
        "name": "Morning Run",
        "distance": 10234.6,
        "moving_time": 2990,
        "start_date_local": "2026-10-14T07:02:11Z",
        "type": "Run",
    },
    {
        "id": 102,
        "name": "Commute",
        "distance": 5400.0,
        "moving_time": 1100,
        "start_date_local": "2026-10-14T17:30:00Z",
        "type": "Ride",
    },
]


class FakeSession:
    """Records requests and replays canned responses."""

    def __init__(self, responses: dict[str, list[SimpleNamespace]]):
        self.responses = responses
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _next(self, url: str) -> SimpleNamespace:
        return self.responses[url].pop(0)

    def post(self, url: str, **kwargs):
        self.calls.append(("POST", url, kwargs))
        return self._next(url)

    def get(self, url: str, **kwargs):
        self.calls.append(("GET", url, kwargs))
        return self._next(url)


def _response(status_code: int, payload: Any = None, text: str = "") -> SimpleNamespace:
    return SimpleNamespace(status_code=status_code, json=lambda: payload, text=text)


class TestHelpers:
    def test_day_bounds_utc(self):
        after, before = day_bounds_utc(date(2026, 10, 14))
        assert before - after == 86399
        assert after % 86400 == 0

    def test_token_expired(self):
        assert token_expired(1000, now=2000) is True
        assert token_expired(3000, now=2000) is False
        assert token_expired(int(time.time()) + 3600) is False

    def test_simplify_activity(self):
        simplified = simplify_activity(RAW_ACTIVITIES[0])
        assert simplified == {
            "id": 101,
            "name": "Morning Run",
            "distance": 10.23,
            "moving_time": 2990,
            "start_date": "2026-10-14T07:02:11Z",
            "type": "Run",
        }


class TestStravaService:
    def test_exchange_code(self):
        session = FakeSession(
            {STRAVA_TOKEN_URL: [_response(200, {"access_token": "a", "refresh_token": "r", "expires_at": 1})]}
        )
        service = StravaService(session=session)

        token_data = service.exchange_code("auth-code")

        assert token_data["access_token"] == "a"
        method, url, kwargs = session.calls[0]
        assert (method, url) == ("POST", STRAVA_TOKEN_URL)
        assert kwargs["json"]["grant_type"] == "authorization_code"
        assert kwargs["json"]["code"] == "auth-code"
        assert kwargs["json"]["client_id"] == "12345"

    def test_exchange_code_requires_code(self):
        service = StravaService(session=FakeSession({}))
        with pytest.raises(ValueError, match="Missing authorization code"):
            service.exchange_code("")

    def test_token_error_raises(self):
        session = FakeSession({STRAVA_TOKEN_URL: [_response(400, text="Bad Request")]})
        service = StravaService(session=session)

        with pytest.raises(StravaError, match="Bad Request"):
            service.refresh_token("stale")

    def test_network_error_raises(self):
        class BrokenSession(FakeSession):
            def get(self, url: str, **kwargs):
                raise requests.ConnectionError("connection refused")

        service = StravaService(session=BrokenSession({}))
        with pytest.raises(StravaError, match="connection refused"):
            service.fetch_activities_for_day("token", date(2026, 10, 14))

    def test_fetch_filters_by_type(self):
        session = FakeSession({STRAVA_ACTIVITIES_URL: [_response(200, RAW_ACTIVITIES)]})
        service = StravaService(session=session)

        activities = service.fetch_activities_for_day("token", date(2026, 10, 14), "Run")

        assert [a["id"] for a in activities] == [101]
        _, _, kwargs = session.calls[0]
        assert kwargs["headers"] == {"Authorization": "Bearer token"}
        assert kwargs["params"] == dict(zip(("after", "before"), day_bounds_utc(date(2026, 10, 14))))

    def test_missing_credentials(self, monkeypatch: pytest.MonkeyPatch):
        settings = get_settings().model_copy(update={"strava_client_secret": None})
        monkeypatch.setattr(strava_service, "get_settings", lambda: settings)

        with pytest.raises(StravaConfigError):
            StravaService()


class TestStravaEndpoints:
    def _install(self, monkeypatch: pytest.MonkeyPatch, session: FakeSession) -> None:
        original = StravaService.__init__

        def patched_init(self, session_arg=None):
            original(self, session=session)

        monkeypatch.setattr(StravaService, "__init__", patched_init)

    def _connect(self, monkeypatch, test_client: TestClient, headers, expires_at: int) -> FakeSession:
        session = FakeSession(
            {
                STRAVA_TOKEN_URL: [
                    _response(
                        200,
                        {
                            "access_token": "access-1",
                            "refresh_token": "refresh-1",
                            "expires_at": expires_at,
                            "athlete": {"id": 777, "firstname": "Karin"},
                        },
                    )
                ],
                STRAVA_ACTIVITIES_URL: [],
            }
        )
        self._install(monkeypatch, session)
        response = test_client.post("/api/strava/connect", json={"code": "abc"}, headers=headers)
        assert response.status_code == 200
        assert response.json() == {"success": True, "athlete": {"id": 777, "firstname": "Karin"}}
        return session

    def test_activities_require_connection(self, test_client: TestClient, user_headers):
        response = test_client.get(
            "/api/strava/activities?date=2026-10-14", headers=user_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Strava not connected"

    def test_fetch_with_valid_token(self, monkeypatch, test_client: TestClient, user_headers):
        session = self._connect(monkeypatch, test_client, user_headers, int(time.time()) + 3600)
        session.responses[STRAVA_ACTIVITIES_URL].append(_response(200, RAW_ACTIVITIES))

        response = test_client.get(
            "/api/strava/activities?date=2026-10-14&activity_type=Run", headers=user_headers
        )

        assert response.status_code == 200
        activities = response.json()["activities"]
        assert len(activities) == 1
        assert activities[0]["distance"] == 10.23
        assert session.calls[-1][2]["headers"]["Authorization"] == "Bearer access-1"

    def test_expired_token_is_refreshed(self, monkeypatch, test_client: TestClient, user_headers):
        session = self._connect(monkeypatch, test_client, user_headers, expires_at=1)
        session.responses[STRAVA_TOKEN_URL].append(
            _response(
                200,
                {"access_token": "access-2", "refresh_token": "refresh-2", "expires_at": int(time.time()) + 3600},
            )
        )
        session.responses[STRAVA_ACTIVITIES_URL].append(_response(200, RAW_ACTIVITIES))

        response = test_client.get("/api/strava/activities?date=2026-10-14", headers=user_headers)

        assert response.status_code == 200
        assert len(response.json()["activities"]) == 2
        refresh_call = session.calls[1]
        assert refresh_call[2]["json"]["grant_type"] == "refresh_token"
        assert refresh_call[2]["json"]["refresh_token"] == "refresh-1"
        assert session.calls[-1][2]["headers"]["Authorization"] == "Bearer access-2"

    def test_upstream_failure(self, monkeypatch, test_client: TestClient, user_headers):
        session = self._connect(monkeypatch, test_client, user_headers, int(time.time()) + 3600)
        session.responses[STRAVA_ACTIVITIES_URL].append(_response(500, text="Strava down"))

        response = test_client.get("/api/strava/activities?date=2026-10-14", headers=user_headers)

        assert response.status_code == 502
        assert "Strava down" in response.json()["detail"]

    def test_connect_without_credentials(self, monkeypatch, test_client: TestClient, user_headers):
        settings = get_settings().model_copy(update={"strava_client_id": None})
        monkeypatch.setattr(strava_service, "get_settings", lambda: settings)

        response = test_client.post("/api/strava/connect", json={"code": "abc"}, headers=user_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "Strava credentials not configured"
