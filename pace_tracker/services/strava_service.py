"""Service for exchanging Strava tokens and importing activities."""
from __future__ import annotations

import logging
import time
from datetime import date, datetime, time as dt_time, timezone
from typing import Any

import requests

from pace_tracker.config import get_settings


logger = logging.getLogger(__name__)

STRAVA_TOKEN_URL = "https://www.strava.com/oauth/token"
STRAVA_ACTIVITIES_URL = "https://www.strava.com/api/v3/athlete/activities"


class StravaError(RuntimeError):
    """Raised when Strava rejects a request or cannot be reached."""


class StravaConfigError(StravaError):
    """Raised when the Strava client credentials are not configured."""


class StravaService:
    """Thin wrapper around the Strava OAuth and activities endpoints."""

    def __init__(self, session: requests.Session | None = None) -> None:
        settings = get_settings()
        if not settings.strava_enabled:
            raise StravaConfigError("Strava credentials not configured")
        self._client_id = settings.strava_client_id
        self._client_secret = settings.strava_client_secret
        self._timeout = settings.strava_timeout_seconds
        self._session = session or requests.Session()

    def exchange_code(self, code: str) -> dict[str, Any]:
        """
        Exchange an OAuth authorisation code for tokens.

        Returns:
            Strava token payload with access_token, refresh_token, expires_at
            and the athlete summary
        """
        if not code:
            raise ValueError("Missing authorization code")

        logger.info("Exchanging Strava authorization code")
        token_data = self._post_token(
            {
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "code": code,
                "grant_type": "authorization_code",
            }
        )
        logger.info("Strava token exchange successful")
        return token_data

    def refresh_token(self, refresh_token: str) -> dict[str, Any]:
        """Obtain a fresh access token."""

        logger.info("Refreshing Strava access token")
        return self._post_token(
            {
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
            }
        )

    def fetch_activities_for_day(
        self,
        access_token: str,
        day: date,
        activity_type: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch the athlete's activities that started on a given UTC day.

        Args:
            access_token: Valid Strava access token
            day: Calendar day to fetch
            activity_type: Optional Strava type filter (e.g. "Run")

        Returns:
            List of simplified activity dicts
        """
        after, before = day_bounds_utc(day)
        logger.info(
            "Fetching Strava activities between %s and %s (type=%s)",
            datetime.fromtimestamp(after, tz=timezone.utc).isoformat(),
            datetime.fromtimestamp(before, tz=timezone.utc).isoformat(),
            activity_type,
        )

        try:
            resp = self._session.get(
                STRAVA_ACTIVITIES_URL,
                headers={"Authorization": f"Bearer {access_token}"},
                params={"after": after, "before": before},
                timeout=self._timeout,
            )
        except requests.RequestException as err:
            logger.exception("Strava activities request failed")
            raise StravaError(f"Failed to fetch Strava activities: {err}") from err

        if resp.status_code != 200:
            logger.error("Failed to fetch Strava activities: %s %s", resp.status_code, resp.text)
            raise StravaError(f"Failed to fetch Strava activities: {resp.text}")

        activities = resp.json()
        logger.info("Found %d Strava activities", len(activities))
        return [
            simplify_activity(activity)
            for activity in activities
            if not activity_type or activity.get("type") == activity_type
        ]

    def _post_token(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = self._session.post(STRAVA_TOKEN_URL, json=payload, timeout=self._timeout)
        except requests.RequestException as err:
            logger.exception("Strava token request failed")
            raise StravaError(f"Strava token request failed: {err}") from err

        if resp.status_code != 200:
            logger.error("Strava token error: %s %s", resp.status_code, resp.text)
            raise StravaError(f"Failed to exchange code for token: {resp.text}")
        return resp.json()


def day_bounds_utc(day: date) -> tuple[int, int]:
    """Return epoch seconds for the first and last second of a UTC day."""
    start = datetime.combine(day, dt_time.min, tzinfo=timezone.utc)
    end = datetime.combine(day, dt_time(23, 59, 59), tzinfo=timezone.utc)
    return int(start.timestamp()), int(end.timestamp())


def token_expired(expires_at: int, now: float | None = None) -> bool:
    """Whether a token with the given expiry (epoch seconds) must be refreshed."""
    current = time.time() if now is None else now
    return expires_at < int(current)


def simplify_activity(activity: dict[str, Any]) -> dict[str, Any]:
    """Reduce a Strava activity to the fields the schedule view uses."""
    return {
        "id": activity.get("id"),
        "name": activity.get("name"),
        "distance": round((activity.get("distance") or 0) / 1000, 2),  # km
        "moving_time": activity.get("moving_time"),  # seconds
        "start_date": activity.get("start_date_local"),
        "type": activity.get("type"),
    }
