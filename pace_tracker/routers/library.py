"""API endpoints for the workout library."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from pace_tracker.dependencies import CurrentUser, DbSession
from pace_tracker.models.database_models import WorkoutTemplate
from pace_tracker.models.schemas import (
    ApplyZoneRequest,
    WorkoutTemplateCreate,
    WorkoutTemplateResponse,
)
from pace_tracker.services.pace_zone_store import get_current_zone_set, record_paces


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/library", tags=["library"])


def _get_template(db, user_id: int, workout_id: int) -> WorkoutTemplate:
    workout = (
        db.query(WorkoutTemplate)
        .filter(WorkoutTemplate.id == workout_id, WorkoutTemplate.user_id == user_id)
        .first()
    )
    if not workout:
        raise HTTPException(status_code=404, detail=f"Workout {workout_id} not found")
    return workout


@router.get("/", response_model=list[WorkoutTemplateResponse])
async def list_workouts(user: CurrentUser, db: DbSession):
    """List the user's library workouts ordered by name."""
    return (
        db.query(WorkoutTemplate)
        .filter(WorkoutTemplate.user_id == user.id)
        .order_by(WorkoutTemplate.name)
        .all()
    )


@router.post("/", response_model=WorkoutTemplateResponse, status_code=201)
async def create_workout(
    payload: WorkoutTemplateCreate,
    user: CurrentUser,
    db: DbSession,
):
    """
    Add a workout to the library.

    Args:
        payload: Name, category, and optional description, duration, pace, effort

    Returns:
        WorkoutTemplateResponse: Created workout
    """
    try:
        workout = WorkoutTemplate(
            user_id=user.id,
            name=payload.name,
            category=payload.category.value,
            description=payload.description,
            duration_minutes=payload.duration_minutes,
            pace=payload.pace,
            effort=payload.effort,
        )
        db.add(workout)
        db.commit()
        db.refresh(workout)

        logger.info("Created library workout: id=%s, category=%s", workout.id, workout.category)
        return workout

    except Exception as e:
        logger.exception("Failed to create library workout")
        db.rollback()
        raise HTTPException(
            status_code=500,
            detail=f"Failed to create workout: {str(e)}"
        )


@router.get("/{workout_id}", response_model=WorkoutTemplateResponse)
async def get_workout(workout_id: int, user: CurrentUser, db: DbSession):
    """Get a single library workout."""
    return _get_template(db, user.id, workout_id)


@router.put("/{workout_id}", response_model=WorkoutTemplateResponse)
async def update_workout(
    workout_id: int,
    payload: WorkoutTemplateCreate,
    user: CurrentUser,
    db: DbSession,
):
    """Replace the fields of a library workout."""
    workout = _get_template(db, user.id, workout_id)

    workout.name = payload.name
    workout.category = payload.category.value
    workout.description = payload.description
    workout.duration_minutes = payload.duration_minutes
    workout.pace = payload.pace
    workout.effort = payload.effort

    db.commit()
    db.refresh(workout)

    logger.info("Updated library workout %s", workout_id)
    return workout


@router.delete("/{workout_id}", status_code=200)
async def delete_workout(workout_id: int, user: CurrentUser, db: DbSession):
    """
    Delete a library workout.

    Scheduled occurrences of the workout are removed with it.
    """
    workout = _get_template(db, user.id, workout_id)
    db.delete(workout)
    db.commit()

    logger.info("Deleted library workout %s", workout_id)
    return {"message": f"Workout {workout_id} deleted successfully"}


@router.post("/{workout_id}/apply-zone", response_model=WorkoutTemplateResponse)
async def apply_zone_pace(
    workout_id: int,
    request: ApplyZoneRequest,
    user: CurrentUser,
    db: DbSession,
):
    """
    Copy a pace from the user's current zone set into a library workout.

    Args:
        request: Zone key, e.g. "threshold"

    Returns:
        WorkoutTemplateResponse: Workout with its pace replaced
    """
    workout = _get_template(db, user.id, workout_id)

    zones = get_current_zone_set(db, user.id)
    if zones is None:
        raise HTTPException(status_code=404, detail="No pace zones calculated yet")

    workout.pace = record_paces(zones)[request.zone]
    db.commit()
    db.refresh(workout)

    logger.info("Applied %s pace %s to workout %s", request.zone, workout.pace, workout_id)
    return workout
