"""Exercise catalog endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.errors import NotFoundError
from irontrack.db.session import get_db
from irontrack.repositories import exercises as repo
from irontrack.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(db: AsyncSession = Depends(get_db)):
    """List exercises ordered by name."""
    return await repo.list_exercises(db)


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create an exercise. Names are unique."""
    return await repo.create_exercise(db, payload.model_dump())


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
):
    exercise = await repo.get_exercise(db, exercise_id)
    if exercise is None:
        raise NotFoundError("Exercise not found")
    return exercise


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: int,
    payload: ExerciseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an exercise (partial)."""
    return await repo.update_exercise(db, exercise_id, payload.model_dump(exclude_unset=True))
