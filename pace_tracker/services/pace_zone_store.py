"""Storage of computed pace zone sets."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from pace_tracker.models.database_models import PaceZoneRecord
from pace_tracker.services.pace_zones import ZONE_ORDER, PaceZoneSet


logger = logging.getLogger(__name__)

# Zone key -> PaceZoneRecord column
ZONE_COLUMNS: dict[str, str] = {
    "one_k": "pace_1k",
    "five_k": "pace_5k",
    "ten_k": "pace_10k",
    "half_marathon": "pace_half_marathon",
    "marathon": "pace_marathon",
    "easy": "pace_easy",
    "interval": "pace_interval",
    "threshold": "pace_threshold",
    "tempo": "pace_tempo",
    "long_run": "pace_long_run",
}


def save_zone_set(db: Session, user_id: int, zone_set: PaceZoneSet) -> PaceZoneRecord:
    """
    Append a zone set for a user.

    Existing rows are never touched; the new row becomes the user's current set
    by virtue of its creation timestamp.
    """
    record = PaceZoneRecord(
        user_id=user_id,
        vdot_score=zone_set.vdot_score,
        time_5k=zone_set.time_5k_seconds,
        **{ZONE_COLUMNS[zone]: zone_set.paces[zone] for zone in ZONE_ORDER},
    )
    db.add(record)
    db.flush()

    logger.info(
        "Stored pace zones: id=%s, user=%s, vdot=%d",
        record.id,
        user_id,
        record.vdot_score,
    )
    return record


def get_current_zone_set(db: Session, user_id: int) -> PaceZoneRecord | None:
    """Return the most recently created zone set for a user, if any."""
    return (
        db.query(PaceZoneRecord)
        .filter(PaceZoneRecord.user_id == user_id)
        .order_by(PaceZoneRecord.created_at.desc(), PaceZoneRecord.id.desc())
        .first()
    )


def list_zone_history(db: Session, user_id: int, limit: int = 20) -> list[PaceZoneRecord]:
    """Return a user's zone sets, newest first."""
    return (
        db.query(PaceZoneRecord)
        .filter(PaceZoneRecord.user_id == user_id)
        .order_by(PaceZoneRecord.created_at.desc(), PaceZoneRecord.id.desc())
        .limit(limit)
        .all()
    )


def record_paces(record: PaceZoneRecord) -> dict[str, str]:
    """Return the stored paces of a record keyed by zone."""
    return {zone: getattr(record, ZONE_COLUMNS[zone]) for zone in ZONE_ORDER}
