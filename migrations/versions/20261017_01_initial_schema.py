"""Initial pace tracker schema."""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261017_01"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("external_id", sa.String(length=100), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_profiles_external_id", "profiles", ["external_id"], unique=True)

    op.create_table(
        "pace_zones",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("vdot_score", sa.Integer(), nullable=False),
        sa.Column("time_5k", sa.Integer(), nullable=False),
        sa.Column("pace_1k", sa.String(length=10), nullable=False),
        sa.Column("pace_5k", sa.String(length=10), nullable=False),
        sa.Column("pace_10k", sa.String(length=10), nullable=False),
        sa.Column("pace_half_marathon", sa.String(length=10), nullable=False),
        sa.Column("pace_marathon", sa.String(length=10), nullable=False),
        sa.Column("pace_easy", sa.String(length=10), nullable=False),
        sa.Column("pace_interval", sa.String(length=10), nullable=False),
        sa.Column("pace_threshold", sa.String(length=10), nullable=False),
        sa.Column("pace_tempo", sa.String(length=10), nullable=False),
        sa.Column("pace_long_run", sa.String(length=10), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    )
    op.create_index("ix_pace_zones_user_id", "pace_zones", ["user_id"], unique=False)
    op.create_index(
        "ix_pace_zones_user_recent",
        "pace_zones",
        ["user_id", "created_at"],
        unique=False,
    )

    op.create_table(
        "workout_library",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("duration_minutes", sa.Integer(), nullable=True),
        sa.Column("pace", sa.String(length=20), nullable=True),
        sa.Column("effort", sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_workout_library_user_id", "workout_library", ["user_id"], unique=False)

    op.create_table(
        "scheduled_workouts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "workout_id",
            sa.Integer(),
            sa.ForeignKey("workout_library.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("scheduled_date", sa.Date(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("trained_time", sa.Integer(), nullable=True),
        sa.Column("distance", sa.Float(), nullable=True),
        sa.Column("pace", sa.String(length=20), nullable=True),
        sa.Column("joy_rating", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_scheduled_workouts_user_id", "scheduled_workouts", ["user_id"], unique=False)
    op.create_index("ix_scheduled_workouts_workout_id", "scheduled_workouts", ["workout_id"], unique=False)
    op.create_index(
        "ix_scheduled_workouts_scheduled_date",
        "scheduled_workouts",
        ["scheduled_date"],
        unique=False,
    )

    op.create_table(
        "strava_connections",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("access_token", sa.String(length=255), nullable=False),
        sa.Column("refresh_token", sa.String(length=255), nullable=False),
        sa.Column("expires_at", sa.BigInteger(), nullable=False),
        sa.Column("athlete_id", sa.BigInteger(), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("strava_connections")
    op.drop_index("ix_scheduled_workouts_scheduled_date", table_name="scheduled_workouts")
    op.drop_index("ix_scheduled_workouts_workout_id", table_name="scheduled_workouts")
    op.drop_index("ix_scheduled_workouts_user_id", table_name="scheduled_workouts")
    op.drop_table("scheduled_workouts")
    op.drop_index("ix_workout_library_user_id", table_name="workout_library")
    op.drop_table("workout_library")
    op.drop_index("ix_pace_zones_user_recent", table_name="pace_zones")
    op.drop_index("ix_pace_zones_user_id", table_name="pace_zones")
    op.drop_table("pace_zones")
    op.drop_index("ix_profiles_external_id", table_name="profiles")
    op.drop_table("profiles")
