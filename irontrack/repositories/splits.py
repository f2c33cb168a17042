"""Split persistence: split rows own their exercise and cardio slots."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.errors import NotFoundError, ValidationError
from irontrack.db.session import transaction
from irontrack.models.cardio_type import CardioType
from irontrack.models.exercise import Exercise
from irontrack.models.split import Split, SplitCardio, SplitExercise
from irontrack.models.workout import Workout
from irontrack.repositories.lookup import load_by_ids, load_children
from irontrack.repositories.workouts import compose_workouts
from irontrack.schemas.cardio_type import CardioTypeRead
from irontrack.schemas.exercise import ExerciseRead
from irontrack.schemas.split import (
    SplitCardioInput,
    SplitCardioRead,
    SplitExerciseInput,
    SplitExerciseRead,
    SplitRead,
)
from irontrack.schemas.workout import WorkoutRead

logger = logging.getLogger(__name__)


async def compose_splits(db: AsyncSession, splits: Sequence[Split]) -> list[SplitRead]:
    """Attach slots (and the exercise / cardio type each slot points at) to each split."""
    split_ids = [s.id for s in splits]
    exercise_slots = await load_children(
        db, SplitExercise, "split_id", split_ids, order_by=(SplitExercise.day_number,)
    )
    cardio_slots = await load_children(
        db, SplitCardio, "split_id", split_ids, order_by=(SplitCardio.day_number,)
    )
    exercises = await load_by_ids(
        db, Exercise, (slot.exercise_id for slots in exercise_slots.values() for slot in slots)
    )
    cardio_types = await load_by_ids(
        db, CardioType, (slot.cardio_type_id for slots in cardio_slots.values() for slot in slots)
    )

    composed = []
    for split in splits:
        composed.append(
            SplitRead(
                **split.as_dict(),
                split_exercises=[
                    SplitExerciseRead(
                        **slot.as_dict(),
                        exercise=_exercise_read(exercises.get(slot.exercise_id)),
                    )
                    for slot in exercise_slots.get(split.id, [])
                ],
                split_cardio=[
                    SplitCardioRead(
                        **slot.as_dict(),
                        cardio_type=_cardio_type_read(cardio_types.get(slot.cardio_type_id)),
                    )
                    for slot in cardio_slots.get(split.id, [])
                ],
            )
        )
    return composed


def _exercise_read(exercise: Exercise | None) -> ExerciseRead | None:
    return ExerciseRead.model_validate(exercise) if exercise is not None else None


def _cardio_type_read(cardio_type: CardioType | None) -> CardioTypeRead | None:
    return CardioTypeRead.model_validate(cardio_type) if cardio_type is not None else None


async def find_split_by_name(db: AsyncSession, name: str) -> Split | None:
    result = await db.execute(select(Split).where(Split.name == name))
    return result.scalars().first()


async def list_splits(db: AsyncSession) -> list[SplitRead]:
    result = await db.execute(select(Split).order_by(Split.name))
    return await compose_splits(db, result.scalars().all())


async def get_split(db: AsyncSession, split_id: int) -> SplitRead | None:
    result = await db.execute(select(Split).where(Split.id == split_id))
    split = result.scalar_one_or_none()
    if split is None:
        return None
    (composed,) = await compose_splits(db, [split])
    return composed


async def create_split(
    db: AsyncSession,
    name: str,
    description: str | None,
    number_of_days: int,
    split_exercises: Sequence[SplitExerciseInput],
    split_cardio: Sequence[SplitCardioInput] = (),
) -> SplitRead:
    """Insert the split and all its slots atomically, then return the composed split."""
    async with transaction(db):
        if await find_split_by_name(db, name) is not None:
            raise ValidationError(f"Split '{name}' already exists", field="name")
        split = Split(name=name, description=description, number_of_days=number_of_days or 1)
        db.add(split)
        await db.flush()

        db.add_all(
            SplitExercise(split_id=split.id, **slot.model_dump())
            for slot in split_exercises
        )
        db.add_all(
            SplitCardio(split_id=split.id, **slot.model_dump())
            for slot in split_cardio
        )
        await db.flush()

    logger.info(
        "domain_event event=split_created split_id=%s exercise_slots=%s cardio_slots=%s",
        split.id,
        len(split_exercises),
        len(split_cardio),
    )
    return await get_split(db, split.id)


async def delete_split(db: AsyncSession, split_id: int) -> None:
    """Delete slots first, then the split. Workouts keep their loose split_id."""
    async with transaction(db):
        split = await db.get(Split, split_id)
        if split is None:
            raise NotFoundError("Split not found")
        await db.execute(delete(SplitExercise).where(SplitExercise.split_id == split_id))
        await db.execute(delete(SplitCardio).where(SplitCardio.split_id == split_id))
        await db.execute(delete(Split).where(Split.id == split_id))
    logger.info("domain_event event=split_deleted split_id=%s", split_id)


async def list_split_workouts(db: AsyncSession, split_id: int) -> list[WorkoutRead]:
    if await db.get(Split, split_id) is None:
        raise NotFoundError("Split not found")
    result = await db.execute(
        select(Workout)
        .where(Workout.split_id == split_id)
        .order_by(Workout.date.desc(), Workout.id.desc())
    )
    return await compose_workouts(db, result.scalars().all())
