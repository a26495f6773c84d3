"""FastAPI application entry point."""
from fastapi import FastAPI

from pace_tracker.logging_config import configure_logging
from pace_tracker.routers import health, library, pace_zones, profile, schedule, strava


configure_logging()

app = FastAPI(title="Pace Tracker API")


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Simple health probe for liveness checks."""
    return {"status": "ok"}


# Include routers
app.include_router(health.router)
app.include_router(pace_zones.router)
app.include_router(library.router)
app.include_router(schedule.router)
app.include_router(profile.router)
app.include_router(strava.router)


if __name__ == "__main__":
    import uvicorn

    from pace_tracker.config import get_settings

    settings = get_settings()
    uvicorn.run("pace_tracker.main:app", host=settings.app_host, port=settings.app_port, reload=settings.debug)
