"""Workout persistence: workouts own their sets and cardio sessions.

Updates are reconciled from a sparse client diff. The diff is first turned
into an explicit operation list (`DeleteChild` / `UpsertChild`) so applying
it never depends on which optional fields happen to be present.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Union

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.errors import NotFoundError
from irontrack.db.base import Base
from irontrack.db.session import transaction
from irontrack.models.cardio_type import CardioType
from irontrack.models.exercise import Exercise
from irontrack.models.workout import CardioSession, Workout, WorkoutSet
from irontrack.repositories.lookup import load_by_ids, load_children
from irontrack.schemas.cardio_type import CardioTypeRead
from irontrack.schemas.common import CamelModel
from irontrack.schemas.exercise import ExerciseRead
from irontrack.schemas.workout import (
    CardioSessionInput,
    CardioSessionRead,
    WorkoutRead,
    WorkoutSetInput,
    WorkoutSetRead,
    WorkoutUpdate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteChild:
    id: int


@dataclass(frozen=True)
class UpsertChild:
    """Replace child `existing_id` with `fields`, or insert a new child when it is None."""

    existing_id: int | None
    fields: dict[str, Any] = field(default_factory=dict)


ChildOperation = Union[DeleteChild, UpsertChild]


def plan_child_operations(items: Iterable[CamelModel], deleted_ids: Iterable[int]) -> list[ChildOperation]:
    """Deletes first, then one upsert per incoming item, in payload order.

    An item whose id is also being deleted is dropped: the delete wins.
    """
    deleted = list(dict.fromkeys(deleted_ids))
    operations: list[ChildOperation] = [DeleteChild(child_id) for child_id in deleted]
    for item in items:
        existing_id = getattr(item, "id", None)
        if existing_id is not None and existing_id in deleted:
            continue
        operations.append(UpsertChild(existing_id, item.model_dump(exclude={"id"})))
    return operations


async def apply_child_operations(
    db: AsyncSession,
    model: type[Base],
    workout_id: int,
    operations: Sequence[ChildOperation],
) -> None:
    """Apply deletes, then in-place replacements, then inserts; all scoped to `workout_id`."""
    delete_ids = [op.id for op in operations if isinstance(op, DeleteChild)]
    if delete_ids:
        await db.execute(
            delete(model).where(model.id.in_(delete_ids), model.workout_id == workout_id)
        )

    upserts = [op for op in operations if isinstance(op, UpsertChild)]
    for op in upserts:
        if op.existing_id is None:
            continue
        result = await db.execute(
            select(model).where(model.id == op.existing_id, model.workout_id == workout_id)
        )
        child = result.scalar_one_or_none()
        if child is None:
            raise NotFoundError(f"{model.__name__} {op.existing_id} not found in workout {workout_id}")
        for key, value in op.fields.items():
            setattr(child, key, value)
    db.add_all(
        model(workout_id=workout_id, **op.fields) for op in upserts if op.existing_id is None
    )
    await db.flush()


async def compose_workouts(db: AsyncSession, workouts: Sequence[Workout]) -> list[WorkoutRead]:
    """Attach sets (by set_number) and cardio sessions, each with its referenced entity."""
    workout_ids = [w.id for w in workouts]
    sets_by_workout = await load_children(
        db, WorkoutSet, "workout_id", workout_ids, order_by=(WorkoutSet.set_number,)
    )
    cardio_by_workout = await load_children(db, CardioSession, "workout_id", workout_ids)
    exercises = await load_by_ids(
        db, Exercise, (s.exercise_id for rows in sets_by_workout.values() for s in rows)
    )
    cardio_types = await load_by_ids(
        db, CardioType, (c.cardio_type_id for rows in cardio_by_workout.values() for c in rows)
    )

    composed = []
    for workout in workouts:
        sets = [
            WorkoutSetRead(
                **s.as_dict(),
                exercise=ExerciseRead.model_validate(exercises[s.exercise_id])
                if s.exercise_id in exercises
                else None,
            )
            for s in sets_by_workout.get(workout.id, [])
        ]
        cardio_sessions = [
            CardioSessionRead(
                **c.as_dict(),
                cardio_type=CardioTypeRead.model_validate(cardio_types[c.cardio_type_id])
                if c.cardio_type_id in cardio_types
                else None,
            )
            for c in cardio_by_workout.get(workout.id, [])
        ]
        composed.append(
            WorkoutRead(**workout.as_dict(), sets=sets, cardio_sessions=cardio_sessions)
        )
    return composed


async def list_workouts(db: AsyncSession) -> list[WorkoutRead]:
    result = await db.execute(select(Workout).order_by(Workout.date.desc(), Workout.id.desc()))
    return await compose_workouts(db, result.scalars().all())


async def get_workout(db: AsyncSession, workout_id: int) -> WorkoutRead | None:
    result = await db.execute(select(Workout).where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if workout is None:
        return None
    (composed,) = await compose_workouts(db, [workout])
    return composed


async def create_workout(
    db: AsyncSession,
    date: datetime,
    notes: str | None,
    split_id: int | None,
    sets: Sequence[WorkoutSetInput],
    cardio_sessions: Sequence[CardioSessionInput] = (),
) -> WorkoutRead:
    async with transaction(db):
        workout = Workout(date=date, notes=notes, split_id=split_id)
        db.add(workout)
        await db.flush()
        db.add_all(WorkoutSet(workout_id=workout.id, **s.model_dump()) for s in sets)
        db.add_all(CardioSession(workout_id=workout.id, **c.model_dump()) for c in cardio_sessions)
        await db.flush()

    logger.info(
        "domain_event event=workout_created workout_id=%s split_id=%s set_count=%s cardio_count=%s",
        workout.id,
        split_id,
        len(sets),
        len(cardio_sessions),
    )
    return await get_workout(db, workout.id)


async def update_workout(db: AsyncSession, workout_id: int, payload: WorkoutUpdate) -> WorkoutRead:
    """Reconcile the workout's children against a sparse diff in one transaction."""
    set_ops = plan_child_operations(payload.sets, payload.deleted_set_ids)
    cardio_ops = plan_child_operations(payload.cardio_sessions or [], payload.deleted_cardio_session_ids)

    async with transaction(db):
        workout = await db.get(Workout, workout_id)
        if workout is None:
            raise NotFoundError("Workout not found")
        if "notes" in payload.model_fields_set:
            workout.notes = payload.notes
        await apply_child_operations(db, WorkoutSet, workout_id, set_ops)
        await apply_child_operations(db, CardioSession, workout_id, cardio_ops)

    logger.info(
        "domain_event event=workout_updated workout_id=%s set_ops=%s cardio_ops=%s",
        workout_id,
        len(set_ops),
        len(cardio_ops),
    )
    return await get_workout(db, workout_id)


async def delete_workout(db: AsyncSession, workout_id: int) -> None:
    """Delete sets, then cardio sessions, then the workout."""
    async with transaction(db):
        workout = await db.get(Workout, workout_id)
        if workout is None:
            raise NotFoundError("Workout not found")
        await db.execute(delete(WorkoutSet).where(WorkoutSet.workout_id == workout_id))
        await db.execute(delete(CardioSession).where(CardioSession.workout_id == workout_id))
        await db.execute(delete(Workout).where(Workout.id == workout_id))
    logger.info("domain_event event=workout_deleted workout_id=%s", workout_id)
