"""Router exposing basic system endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

from pace_tracker.database import SessionLocal


logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/status")
async def get_status() -> dict[str, str]:
    """Return a minimal status payload."""
    return {"status": "online"}


@router.get("/database")
async def get_database_status() -> dict[str, str]:
    """Check that the database answers a trivial query."""
    db = SessionLocal()

    try:
        db.execute(text("SELECT 1"))
        return {"database": "ok"}
    except Exception:
        logger.exception("Database health check failed")
        db.rollback()
        raise HTTPException(status_code=500, detail="Database unavailable")
    finally:
        db.close()
