"""Request-scoped dependencies shared by the routers."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from pace_tracker.database import get_db
from pace_tracker.models.database_models import Profile


logger = logging.getLogger(__name__)


def get_current_user(
    db: Annotated[Session, Depends(get_db)],
    x_user_id: Annotated[str | None, Header()] = None,
) -> Profile:
    """
    Resolve the calling user from the ``X-User-Id`` header.

    Authentication happens upstream; the header carries the verified identity.
    A profile row is created the first time an identity is seen.
    """
    external_id = (x_user_id or "").strip()
    if not external_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")

    profile = db.query(Profile).filter(Profile.external_id == external_id).first()
    if profile is None:
        profile = Profile(external_id=external_id)
        db.add(profile)
        db.flush()
        logger.info("Created profile: id=%s, external_id=%s", profile.id, external_id)
    return profile


CurrentUser = Annotated[Profile, Depends(get_current_user)]
DbSession = Annotated[Session, Depends(get_db)]
