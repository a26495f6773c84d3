"""Pydantic models describing API payloads."""
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from pace_tracker.services.colors import (
    WorkoutCategory,
    category_color,
    effort_color,
    effort_level,
)
from pace_tracker.services.pace_zones import ZONE_ORDER


PACE_PATTERN = r"^\d+:\d{2}$"


# Pace zone schemas
class PaceZoneRequest(BaseModel):
    """5K race time as entered in the calculator form.

    Values are passed through untouched; parse_race_time validates them.
    """

    minutes: Any = None
    seconds: Any = 0


class ZonePaces(BaseModel):
    """Per-kilometre paces for every zone, formatted "M:SS"."""

    model_config = ConfigDict(populate_by_name=True)

    one_k: str = Field(alias="oneK")
    five_k: str = Field(alias="fiveK")
    ten_k: str = Field(alias="tenK")
    half_marathon: str = Field(alias="halfMarathon")
    marathon: str
    easy: str
    interval: str
    threshold: str
    tempo: str
    long_run: str = Field(alias="longRun")


class PaceZoneResult(BaseModel):
    """A computed zone set."""

    model_config = ConfigDict(populate_by_name=True)

    vdot_score: int = Field(alias="vdotScore")
    time_5k_seconds: int = Field(alias="time5kSeconds", gt=0)
    paces: ZonePaces


class PaceZoneCalculationResponse(PaceZoneResult):
    """Calculation result plus the outcome of saving it."""

    saved: bool
    save_error: str | None = Field(default=None, alias="saveError")


class StoredPaceZoneResponse(PaceZoneResult):
    """A persisted zone set."""

    id: int
    created_at: datetime = Field(alias="createdAt")


class PaceZoneHistoryResponse(BaseModel):
    count: int
    zone_sets: list[StoredPaceZoneResponse] = Field(default_factory=list, alias="zoneSets")

    model_config = ConfigDict(populate_by_name=True)


# Workout library schemas
class WorkoutTemplateBase(BaseModel):
    """Base schema for library workouts."""

    name: str = Field(min_length=1, max_length=200)
    category: WorkoutCategory
    description: str | None = None
    duration_minutes: int | None = Field(None, ge=0)
    pace: str | None = Field(None, max_length=20)
    effort: int = Field(5, ge=1, le=10)

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, value):
        """Accept category labels in any letter case."""

        if isinstance(value, WorkoutCategory):
            return value
        category = WorkoutCategory.parse(value) if isinstance(value, str) else None
        if category is None:
            raise ValueError(
                f"category must be one of {', '.join(member.value for member in WorkoutCategory)}"
            )
        return category

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped


class WorkoutTemplateCreate(WorkoutTemplateBase):
    """Schema for creating or replacing a library workout."""


class WorkoutTemplateResponse(BaseModel):
    """Schema for library workout API responses."""

    id: int
    name: str
    category: str
    description: str | None = None
    duration_minutes: int | None = None
    pace: str | None = None
    effort: int | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @computed_field
    @property
    def category_color(self) -> str:
        return category_color(self.category)

    @computed_field
    @property
    def effort_color(self) -> str:
        return effort_color(self.effort)

    @computed_field
    @property
    def effort_level(self) -> str:
        return effort_level(self.effort)


class ApplyZoneRequest(BaseModel):
    """Copy one of the current zone paces into a library workout."""

    zone: str

    @field_validator("zone")
    @classmethod
    def validate_zone(cls, value: str) -> str:
        if value not in ZONE_ORDER:
            raise ValueError(f"zone must be one of {', '.join(ZONE_ORDER)}")
        return value


# Schedule schemas
class ScheduleCreate(BaseModel):
    """Place a library workout on a date."""

    workout_id: int
    scheduled_date: date


class ScheduleMove(BaseModel):
    """Move a scheduled workout to another date."""

    scheduled_date: date


class WorkoutCompletion(BaseModel):
    """Actual performance recorded when marking a workout complete."""

    trained_time: int | None = Field(None, ge=0, description="Minutes")
    distance: float | None = Field(None, ge=0, description="Kilometres")
    pace: str | None = Field(None, pattern=PACE_PATTERN)
    notes: str | None = None
    joy_rating: int = Field(3, ge=1, le=5)


class ScheduledWorkoutResponse(BaseModel):
    """Schema for scheduled workout API responses."""

    id: int
    workout_id: int
    scheduled_date: date
    completed: bool
    trained_time: int | None = None
    distance: float | None = None
    pace: str | None = None
    joy_rating: int | None = None
    notes: str | None = None
    workout: WorkoutTemplateResponse
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class WeekStats(BaseModel):
    completed: int = 0
    total_time: int = 0
    total_distance: float = 0.0


class WeekScheduleResponse(BaseModel):
    """A Monday-to-Sunday week of scheduled workouts."""

    week_start: date
    week_end: date
    workouts: list[ScheduledWorkoutResponse] = []
    stats: WeekStats


class TimelineDay(BaseModel):
    date: date
    count: int
    categories: list[str] = []
    colors: list[str] = []


class TimelineResponse(BaseModel):
    """Completed workouts of one year, grouped by day."""

    year: int
    total_completed: int
    days: list[TimelineDay] = []


# Profile schemas
class ProfileResponse(BaseModel):
    id: int
    external_id: str
    full_name: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProfileUpdate(BaseModel):
    full_name: str | None = Field(None, max_length=200)


# Strava schemas
class StravaConnectRequest(BaseModel):
    code: str = Field(min_length=1)


class StravaConnectResponse(BaseModel):
    success: bool
    athlete: dict | None = None


class StravaActivity(BaseModel):
    id: int | None = None
    name: str | None = None
    distance: float
    moving_time: int | None = None
    start_date: str | None = None
    type: str | None = None


class StravaActivitiesResponse(BaseModel):
    activities: list[StravaActivity] = []
