"""Split endpoints: templates with per-day exercise and cardio slots."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.errors import NotFoundError
from irontrack.db.session import get_db
from irontrack.repositories import splits as repo
from irontrack.schemas.split import SplitCreate, SplitRead
from irontrack.schemas.workout import WorkoutRead

router = APIRouter()


@router.get("", response_model=list[SplitRead])
async def list_splits(db: AsyncSession = Depends(get_db)):
    """List splits with their slots, ordered by name."""
    return await repo.list_splits(db)


@router.post("", response_model=SplitRead, status_code=201)
async def create_split(
    payload: SplitCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a split and all of its slots in one transaction."""
    return await repo.create_split(
        db,
        name=payload.name,
        description=payload.description,
        number_of_days=payload.number_of_days,
        split_exercises=payload.split_exercises,
        split_cardio=payload.split_cardio,
    )


@router.get("/{split_id}", response_model=SplitRead)
async def get_split(
    split_id: int,
    db: AsyncSession = Depends(get_db),
):
    split = await repo.get_split(db, split_id)
    if split is None:
        raise NotFoundError("Split not found")
    return split


@router.delete("/{split_id}", status_code=204)
async def delete_split(
    split_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a split and its slots. Workouts logged against it are kept."""
    await repo.delete_split(db, split_id)
    return None


@router.get("/{split_id}/workouts", response_model=list[WorkoutRead])
async def list_split_workouts(
    split_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Workouts logged against this split, newest first."""
    return await repo.list_split_workouts(db, split_id)
