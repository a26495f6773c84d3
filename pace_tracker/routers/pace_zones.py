"""API endpoints for the VDOT pace zone calculator."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from pace_tracker.config import get_settings
from pace_tracker.dependencies import CurrentUser, DbSession
from pace_tracker.models.database_models import PaceZoneRecord
from pace_tracker.models.schemas import (
    PaceZoneCalculationResponse,
    PaceZoneHistoryResponse,
    PaceZoneRequest,
    StoredPaceZoneResponse,
)
from pace_tracker.services.pace_zone_store import (
    get_current_zone_set,
    list_zone_history,
    record_paces,
    save_zone_set,
)
from pace_tracker.services.pace_zones import (
    ZONE_PAYLOAD_KEYS,
    PaceZoneValidationError,
    compute_zones,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pace-zones", tags=["pace_zones"])


def _stored_payload(record: PaceZoneRecord) -> dict:
    paces = record_paces(record)
    return {
        "id": record.id,
        "vdotScore": record.vdot_score,
        "time5kSeconds": record.time_5k,
        "paces": {ZONE_PAYLOAD_KEYS[zone]: pace for zone, pace in paces.items()},
        "createdAt": record.created_at,
    }


@router.post("/calculate", response_model=PaceZoneCalculationResponse, status_code=201)
async def calculate_pace_zones(
    race_time: PaceZoneRequest,
    user: CurrentUser,
    db: DbSession,
):
    """
    Compute pace zones from a 5K time and store them as the user's current set.

    A failed save does not hide the result: the zones are returned with
    ``saved`` set to false and the reason in ``saveError``.

    Args:
        race_time: 5K time as minutes and seconds

    Returns:
        PaceZoneCalculationResponse: VDOT score, 5K seconds and all zone paces
    """
    try:
        zone_set = compute_zones(race_time.minutes, race_time.seconds)
    except PaceZoneValidationError as err:
        logger.info("Rejected race time %r:%r (%s)", race_time.minutes, race_time.seconds, err.reason)
        raise HTTPException(status_code=400, detail=err.reason)

    payload = zone_set.as_dict()
    try:
        save_zone_set(db, user.id, zone_set)
        db.commit()
        payload.update(saved=True, saveError=None)
    except Exception:
        logger.exception("Failed to save pace zones for user %s", user.id)
        db.rollback()
        payload.update(saved=False, saveError="Could not save pace zones")

    return payload


@router.get("/current", response_model=StoredPaceZoneResponse)
async def get_current_pace_zones(user: CurrentUser, db: DbSession):
    """
    Get the user's most recently calculated zone set.

    Returns:
        StoredPaceZoneResponse: Latest zones, 404 if none were ever calculated
    """
    record = get_current_zone_set(db, user.id)
    if record is None:
        raise HTTPException(status_code=404, detail="No pace zones calculated yet")
    return _stored_payload(record)


@router.get("/history", response_model=PaceZoneHistoryResponse)
async def get_pace_zone_history(
    user: CurrentUser,
    db: DbSession,
    limit: int | None = Query(default=None, ge=1, le=100),
):
    """List previously calculated zone sets, newest first."""
    records = list_zone_history(db, user.id, limit or get_settings().zone_history_limit)
    return {
        "count": len(records),
        "zoneSets": [_stored_payload(record) for record in records],
    }
