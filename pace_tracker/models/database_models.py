"""SQLAlchemy ORM models for workouts, schedules and pace zones."""
from datetime import date, datetime, timezone
from sqlalchemy import Integer, BigInteger, Date, DateTime, Float, String, Boolean, Text, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pace_tracker.database import Base


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns below."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Profile(Base):
    """A tracker user, keyed by the identity supplied by the auth backend."""

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    external_id: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    full_name: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)


class PaceZoneRecord(Base):
    """One computed pace zone set. Rows are append-only; newest is current."""

    __tablename__ = "pace_zones"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )

    vdot_score: Mapped[int] = mapped_column(Integer, nullable=False)
    time_5k: Mapped[int] = mapped_column(Integer, nullable=False)  # seconds

    # Paces as "M:SS" per km
    pace_1k: Mapped[str] = mapped_column(String(10), nullable=False)
    pace_5k: Mapped[str] = mapped_column(String(10), nullable=False)
    pace_10k: Mapped[str] = mapped_column(String(10), nullable=False)
    pace_half_marathon: Mapped[str] = mapped_column(String(10), nullable=False)
    pace_marathon: Mapped[str] = mapped_column(String(10), nullable=False)
    pace_easy: Mapped[str] = mapped_column(String(10), nullable=False)
    pace_interval: Mapped[str] = mapped_column(String(10), nullable=False)
    pace_threshold: Mapped[str] = mapped_column(String(10), nullable=False)
    pace_tempo: Mapped[str] = mapped_column(String(10), nullable=False)
    pace_long_run: Mapped[str] = mapped_column(String(10), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        # Latest zone set per user
        Index("ix_pace_zones_user_recent", "user_id", "created_at"),
    )


class WorkoutTemplate(Base):
    """A reusable workout in the user's library."""

    __tablename__ = "workout_library"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)  # intervallpass, distanspass, långpass, styrka, tävling
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pace: Mapped[str | None] = mapped_column(String(20), nullable=True)
    effort: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1-10 scale

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationship
    scheduled: Mapped[list["ScheduledWorkout"]] = relationship(
        "ScheduledWorkout", back_populates="workout", cascade="all, delete-orphan"
    )


class ScheduledWorkout(Base):
    """A library workout placed on a calendar date, with actuals once done."""

    __tablename__ = "scheduled_workouts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    workout_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("workout_library.id", ondelete="CASCADE"), nullable=False, index=True
    )
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    # Completion tracking
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    trained_time: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    distance: Mapped[float | None] = mapped_column(Float, nullable=True)  # km
    pace: Mapped[str | None] = mapped_column(String(20), nullable=True)
    joy_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1-5 scale
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationship
    workout: Mapped["WorkoutTemplate"] = relationship("WorkoutTemplate", back_populates="scheduled")


class StravaConnection(Base):
    """Stored Strava OAuth tokens, one row per user."""

    __tablename__ = "strava_connections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id", ondelete="CASCADE"), unique=True, nullable=False
    )

    access_token: Mapped[str] = mapped_column(String(255), nullable=False)
    refresh_token: Mapped[str] = mapped_column(String(255), nullable=False)
    expires_at: Mapped[int] = mapped_column(BigInteger, nullable=False)  # epoch seconds
    athlete_id: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)
