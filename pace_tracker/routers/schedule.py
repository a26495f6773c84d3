"""API endpoints for scheduling library workouts onto dates."""
from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, timedelta

from fastapi import APIRouter, HTTPException, Query
from sqlalchemy.orm import joinedload

from pace_tracker.dependencies import CurrentUser, DbSession
from pace_tracker.models.database_models import ScheduledWorkout, WorkoutTemplate
from pace_tracker.models.schemas import (
    ScheduleCreate,
    ScheduleMove,
    ScheduledWorkoutResponse,
    TimelineResponse,
    WeekScheduleResponse,
    WorkoutCompletion,
)
from pace_tracker.services.colors import category_color


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedule", tags=["schedule"])


def week_bounds(day: date) -> tuple[date, date]:
    """Return the Monday and Sunday of the week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def _query_range(db, user_id: int, start: date, end: date) -> list[ScheduledWorkout]:
    return (
        db.query(ScheduledWorkout)
        .filter(
            ScheduledWorkout.user_id == user_id,
            ScheduledWorkout.scheduled_date >= start,
            ScheduledWorkout.scheduled_date <= end,
        )
        .options(joinedload(ScheduledWorkout.workout))
        .order_by(ScheduledWorkout.scheduled_date, ScheduledWorkout.id)
        .all()
    )


def _get_scheduled(db, user_id: int, scheduled_id: int) -> ScheduledWorkout:
    scheduled = (
        db.query(ScheduledWorkout)
        .filter(ScheduledWorkout.id == scheduled_id, ScheduledWorkout.user_id == user_id)
        .first()
    )
    if not scheduled:
        raise HTTPException(status_code=404, detail=f"Scheduled workout {scheduled_id} not found")
    return scheduled


@router.get("/week", response_model=WeekScheduleResponse)
async def get_week(
    user: CurrentUser,
    db: DbSession,
    start: date | None = None,
):
    """
    Get the Monday-based week containing ``start`` (default today).

    Returns:
        WeekScheduleResponse: Workouts of the week with completion totals
    """
    week_start, week_end = week_bounds(start or date.today())
    workouts = _query_range(db, user.id, week_start, week_end)

    stats = {
        "completed": sum(1 for w in workouts if w.completed),
        "total_time": sum(w.trained_time or 0 for w in workouts),
        "total_distance": round(sum(w.distance or 0.0 for w in workouts), 2),
    }

    logger.info(
        "Retrieved week %s: workouts=%d, completed=%d",
        week_start.isoformat(),
        len(workouts),
        stats["completed"],
    )
    return {
        "week_start": week_start,
        "week_end": week_end,
        "workouts": workouts,
        "stats": stats,
    }


@router.get("/timeline", response_model=TimelineResponse)
async def get_timeline(
    user: CurrentUser,
    db: DbSession,
    year: int | None = Query(default=None, ge=1900, le=9999),
):
    """
    Completed workouts of a year grouped by day, for the yearly heat-map.

    Each day lists the categories trained and their display colours.
    """
    target_year = year or date.today().year
    completed = [
        w for w in _query_range(db, user.id, date(target_year, 1, 1), date(target_year, 12, 31))
        if w.completed
    ]

    by_day: dict[date, list[str]] = defaultdict(list)
    for workout in completed:
        by_day[workout.scheduled_date].append(workout.workout.category)

    days = [
        {
            "date": day,
            "count": len(categories),
            "categories": categories,
            "colors": [category_color(category) for category in categories],
        }
        for day, categories in sorted(by_day.items())
    ]
    return {"year": target_year, "total_completed": len(completed), "days": days}


@router.get("/", response_model=list[ScheduledWorkoutResponse])
async def list_scheduled(
    user: CurrentUser,
    db: DbSession,
    start: date,
    end: date,
):
    """List scheduled workouts between two dates (inclusive)."""
    if end < start:
        raise HTTPException(status_code=400, detail="End date must not be before start date")
    return _query_range(db, user.id, start, end)


@router.post("/", response_model=ScheduledWorkoutResponse, status_code=201)
async def schedule_workout(
    request: ScheduleCreate,
    user: CurrentUser,
    db: DbSession,
):
    """
    Put a library workout on the calendar.

    Args:
        request: Library workout id and target date

    Returns:
        ScheduledWorkoutResponse: The new, not yet completed entry
    """
    template = (
        db.query(WorkoutTemplate)
        .filter(WorkoutTemplate.id == request.workout_id, WorkoutTemplate.user_id == user.id)
        .first()
    )
    if not template:
        raise HTTPException(status_code=404, detail=f"Workout {request.workout_id} not found")

    scheduled = ScheduledWorkout(
        user_id=user.id,
        workout_id=template.id,
        scheduled_date=request.scheduled_date,
        completed=False,
    )
    db.add(scheduled)
    db.commit()
    db.refresh(scheduled)

    logger.info(
        "Scheduled workout %s on %s (entry=%s)",
        template.id,
        request.scheduled_date.isoformat(),
        scheduled.id,
    )
    return scheduled


@router.patch("/{scheduled_id}/move", response_model=ScheduledWorkoutResponse)
async def move_workout(
    scheduled_id: int,
    request: ScheduleMove,
    user: CurrentUser,
    db: DbSession,
):
    """Reschedule a workout to another date."""
    scheduled = _get_scheduled(db, user.id, scheduled_id)
    previous = scheduled.scheduled_date
    scheduled.scheduled_date = request.scheduled_date

    db.commit()
    db.refresh(scheduled)

    logger.info(
        "Moved scheduled workout %s from %s to %s",
        scheduled_id,
        previous.isoformat(),
        request.scheduled_date.isoformat(),
    )
    return scheduled


@router.put("/{scheduled_id}/complete", response_model=ScheduledWorkoutResponse)
async def complete_workout(
    scheduled_id: int,
    completion: WorkoutCompletion,
    user: CurrentUser,
    db: DbSession,
):
    """
    Mark a scheduled workout as complete with actual performance data.

    Args:
        scheduled_id: Scheduled workout ID
        completion: Trained time, distance, pace, notes and joy rating

    Returns:
        ScheduledWorkoutResponse: Updated entry
    """
    scheduled = _get_scheduled(db, user.id, scheduled_id)

    scheduled.completed = True
    scheduled.trained_time = completion.trained_time
    scheduled.distance = completion.distance
    scheduled.pace = completion.pace
    scheduled.notes = completion.notes
    scheduled.joy_rating = completion.joy_rating

    db.commit()
    db.refresh(scheduled)

    logger.info("Marked scheduled workout %s as complete", scheduled_id)
    return scheduled


@router.delete("/{scheduled_id}/complete", response_model=ScheduledWorkoutResponse)
async def uncomplete_workout(scheduled_id: int, user: CurrentUser, db: DbSession):
    """Unmark a completed workout and clear its recorded actuals."""
    scheduled = _get_scheduled(db, user.id, scheduled_id)

    scheduled.completed = False
    scheduled.trained_time = None
    scheduled.distance = None
    scheduled.pace = None
    scheduled.notes = None
    scheduled.joy_rating = None

    db.commit()
    db.refresh(scheduled)

    logger.info("Marked scheduled workout %s as incomplete", scheduled_id)
    return scheduled


@router.delete("/{scheduled_id}", status_code=200)
async def delete_scheduled(scheduled_id: int, user: CurrentUser, db: DbSession):
    """Remove a workout from the calendar."""
    scheduled = _get_scheduled(db, user.id, scheduled_id)
    db.delete(scheduled)
    db.commit()

    logger.info("Deleted scheduled workout %s", scheduled_id)
    return {"message": f"Scheduled workout {scheduled_id} deleted successfully"}
