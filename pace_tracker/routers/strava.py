"""API endpoints for connecting Strava and importing activities."""
from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, Query

from pace_tracker.dependencies import CurrentUser, DbSession
from pace_tracker.models.database_models import StravaConnection
from pace_tracker.models.schemas import (
    StravaActivitiesResponse,
    StravaConnectRequest,
    StravaConnectResponse,
)
from pace_tracker.services.strava_service import (
    StravaConfigError,
    StravaError,
    StravaService,
    token_expired,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/strava", tags=["strava"])


def _service() -> StravaService:
    try:
        return StravaService()
    except StravaConfigError as err:
        logger.error("Strava import requested but credentials are missing")
        raise HTTPException(status_code=500, detail=str(err))


@router.post("/connect", response_model=StravaConnectResponse)
async def connect_strava(
    request: StravaConnectRequest,
    user: CurrentUser,
    db: DbSession,
):
    """
    Exchange a Strava authorisation code and store the resulting tokens.

    Args:
        request: Authorisation code returned by Strava's consent screen

    Returns:
        StravaConnectResponse: Success flag and the athlete summary
    """
    service = _service()
    try:
        token_data = service.exchange_code(request.code)
    except StravaError as err:
        raise HTTPException(status_code=502, detail=str(err))

    athlete = token_data.get("athlete") or {}
    connection = (
        db.query(StravaConnection).filter(StravaConnection.user_id == user.id).first()
    )
    if connection is None:
        connection = StravaConnection(user_id=user.id)
        db.add(connection)

    connection.access_token = token_data["access_token"]
    connection.refresh_token = token_data["refresh_token"]
    connection.expires_at = token_data["expires_at"]
    connection.athlete_id = athlete.get("id")
    db.commit()

    logger.info("Stored Strava connection for user %s (athlete=%s)", user.id, connection.athlete_id)
    return {"success": True, "athlete": athlete or None}


@router.get("/activities", response_model=StravaActivitiesResponse)
async def get_strava_activities(
    user: CurrentUser,
    db: DbSession,
    day: date = Query(alias="date"),
    activity_type: str | None = Query(default=None),
):
    """
    Fetch the user's Strava activities for one day.

    The stored access token is refreshed first when it has expired.

    Args:
        day: Day to import (YYYY-MM-DD, UTC)
        activity_type: Optional Strava type filter such as "Run"

    Returns:
        StravaActivitiesResponse: Simplified activities
    """
    connection = (
        db.query(StravaConnection).filter(StravaConnection.user_id == user.id).first()
    )
    if connection is None:
        raise HTTPException(status_code=400, detail="Strava not connected")

    service = _service()
    try:
        if token_expired(connection.expires_at):
            refreshed = service.refresh_token(connection.refresh_token)
            connection.access_token = refreshed["access_token"]
            connection.refresh_token = refreshed["refresh_token"]
            connection.expires_at = refreshed["expires_at"]
            db.commit()
            logger.info("Strava token refreshed for user %s", user.id)

        activities = service.fetch_activities_for_day(
            connection.access_token, day, activity_type
        )
    except StravaError as err:
        raise HTTPException(status_code=502, detail=str(err))

    return {"activities": activities}
