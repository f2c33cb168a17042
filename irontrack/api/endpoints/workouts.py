"""Workout endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.errors import NotFoundError
from irontrack.db.session import get_db
from irontrack.repositories import workouts as repo
from irontrack.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate

router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(db: AsyncSession = Depends(get_db)):
    """List workouts (newest first) with sets and cardio sessions."""
    return await repo.list_workouts(db)


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    db: AsyncSession = Depends(get_db),
):
    """Log a workout with its sets and cardio sessions."""
    return await repo.create_workout(
        db,
        date=payload.date,
        notes=payload.notes,
        split_id=payload.split_id,
        sets=payload.sets,
        cardio_sessions=payload.cardio_sessions,
    )


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: int,
    db: AsyncSession = Depends(get_db),
):
    workout = await repo.get_workout(db, workout_id)
    if workout is None:
        raise NotFoundError("Workout not found")
    return workout


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Apply a sparse diff:
    - deletedSetIds / deletedCardioSessionIds are removed
    - entries with an id replace that child, entries without one are inserted
    - notes change only when sent
    """
    return await repo.update_workout(db, workout_id, payload)


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: int,
    db: AsyncSession = Depends(get_db),
):
    await repo.delete_workout(db, workout_id)
    return None
