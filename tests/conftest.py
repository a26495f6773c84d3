"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import os
import tempfile
import uuid
from pathlib import Path
from typing import Callable

import pytest
from fastapi.testclient import TestClient

_TMP_DIR = Path(tempfile.mkdtemp(prefix="pace_tracker_tests_"))

os.environ["SECRET_KEY"] = os.environ.get("SECRET_KEY") or "test-secret-key"
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["LOG_DIR"] = str(_TMP_DIR / "logs")
os.environ["STRAVA_CLIENT_ID"] = "12345"
os.environ["STRAVA_CLIENT_SECRET"] = "strava-test-secret"

from pace_tracker.logging_config import configure_logging

configure_logging()

from pace_tracker.database import Base, engine
from pace_tracker.models import database_models  # noqa: F401
from pace_tracker.main import app

Base.metadata.create_all(bind=engine)


@pytest.fixture(scope="session")
def test_client() -> TestClient:
    """Provide a FastAPI test client."""

    return TestClient(app)


@pytest.fixture
def user_headers() -> dict[str, str]:
    """Headers identifying a fresh user, so each test starts with empty data."""

    return {"X-User-Id": f"user-{uuid.uuid4()}"}


@pytest.fixture
def make_workout(test_client: TestClient, user_headers: dict[str, str]) -> Callable[..., dict]:
    """Create a library workout for the current test user."""

    def _make(**overrides) -> dict:
        payload = {
            "name": "6x800m",
            "category": "intervallpass",
            "description": "800m repeats with 90s jog",
            "duration_minutes": 55,
            "effort": 8,
        }
        payload.update(overrides)
        response = test_client.post("/api/library/", json=payload, headers=user_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
