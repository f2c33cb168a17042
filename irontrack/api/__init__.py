"""API router aggregation."""

from fastapi import APIRouter

from irontrack.api.endpoints import backup, cardio_types, exercises, health, splits, stats, workouts
from irontrack.schemas.common import ErrorResponse

# Error bodies every resource router can return (see irontrack.api.errors)
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    404: {"model": ErrorResponse, "description": "Not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    exercises.router, prefix="/exercises", tags=["exercises"], responses=ERROR_RESPONSES
)
api_router.include_router(
    cardio_types.router, prefix="/cardio-types", tags=["cardio-types"], responses=ERROR_RESPONSES
)
api_router.include_router(splits.router, prefix="/splits", tags=["splits"], responses=ERROR_RESPONSES)
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"], responses=ERROR_RESPONSES)
api_router.include_router(stats.router, prefix="/stats", tags=["stats"], responses=ERROR_RESPONSES)
api_router.include_router(backup.router, tags=["backup"], responses=ERROR_RESPONSES)
