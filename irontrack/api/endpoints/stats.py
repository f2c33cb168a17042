"""Exercise progress endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.db.session import get_db
from irontrack.schemas.stats import ExerciseStatsPoint
from irontrack.services.exercise_stats import get_exercise_stats

router = APIRouter()


@router.get("/{exercise_id}", response_model=list[ExerciseStatsPoint])
async def exercise_stats(
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
):
    """One point per UTC day: heaviest set (weight, reps, unit) and total volume."""
    return await get_exercise_stats(db, exercise_id)
