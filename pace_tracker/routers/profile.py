"""API endpoints for the user's profile."""
from __future__ import annotations

import logging

from fastapi import APIRouter

from pace_tracker.dependencies import CurrentUser, DbSession
from pace_tracker.models.schemas import ProfileResponse, ProfileUpdate


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("/", response_model=ProfileResponse)
async def get_profile(user: CurrentUser):
    """Return the calling user's profile, creating it on first access."""
    return user


@router.put("/", response_model=ProfileResponse)
async def update_profile(update: ProfileUpdate, user: CurrentUser, db: DbSession):
    """Update the display name."""
    user.full_name = update.full_name.strip() if update.full_name else None
    db.commit()
    db.refresh(user)

    logger.info("Updated profile %s", user.id)
    return user
