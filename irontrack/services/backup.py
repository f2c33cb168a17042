"""Backup export and merge-by-name import."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.constants import BACKUP_VERSION, DEFAULT_WEIGHT_UNIT
from irontrack.core.errors import ImportFormatError
from irontrack.db.session import transaction
from irontrack.models.cardio_type import CardioType
from irontrack.models.exercise import Exercise
from irontrack.models.split import Split, SplitCardio, SplitExercise
from irontrack.models.workout import CardioSession, Workout, WorkoutSet
from irontrack.repositories.cardio_types import find_cardio_type_by_name
from irontrack.repositories.exercises import find_exercise_by_name
from irontrack.repositories.splits import find_split_by_name
from irontrack.schemas.backup import (
    BackupCardioSession,
    BackupCardioType,
    BackupDocument,
    BackupExercise,
    BackupSet,
    BackupSplit,
    BackupSplitCardio,
    BackupSplitExercise,
    BackupWorkout,
    ImportCounts,
    ImportResult,
)

logger = logging.getLogger(__name__)

INVALID_FORMAT = "Invalid import data format"
INVALID_STRUCTURE = (
    "Invalid backup file structure. Expected version, exercises, workouts, and splits arrays."
)


def _group_by(rows: Iterable[Any], attr: str) -> dict[int, list[Any]]:
    grouped: dict[int, list[Any]] = defaultdict(list)
    for row in rows:
        grouped[getattr(row, attr)].append(row)
    return grouped


async def _all(db: AsyncSession, stmt) -> list[Any]:
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def export_all(db: AsyncSession) -> BackupDocument:
    """Snapshot every user-owned row; built-in cardio types are left out."""
    exercises = await _all(db, select(Exercise).order_by(Exercise.id))
    cardio_types = await _all(
        db, select(CardioType).where(CardioType.is_built_in.is_(False)).order_by(CardioType.id)
    )
    splits = await _all(db, select(Split).order_by(Split.id))
    split_exercises = _group_by(
        await _all(db, select(SplitExercise).order_by(SplitExercise.day_number, SplitExercise.id)),
        "split_id",
    )
    split_cardio = _group_by(
        await _all(db, select(SplitCardio).order_by(SplitCardio.day_number, SplitCardio.id)),
        "split_id",
    )
    workouts = await _all(db, select(Workout).order_by(Workout.date, Workout.id))
    sets = _group_by(
        await _all(db, select(WorkoutSet).order_by(WorkoutSet.set_number, WorkoutSet.id)),
        "workout_id",
    )
    cardio_sessions = _group_by(
        await _all(db, select(CardioSession).order_by(CardioSession.id)),
        "workout_id",
    )

    document = BackupDocument(
        version=BACKUP_VERSION,
        exported_at=datetime.now(timezone.utc),
        exercises=[BackupExercise.model_validate(e) for e in exercises],
        cardio_types=[BackupCardioType.model_validate(c) for c in cardio_types],
        splits=[
            BackupSplit(
                **split.as_dict(),
                split_exercises=[
                    BackupSplitExercise.model_validate(slot) for slot in split_exercises.get(split.id, [])
                ],
                split_cardio=[
                    BackupSplitCardio.model_validate(slot) for slot in split_cardio.get(split.id, [])
                ],
            )
            for split in splits
        ],
        workouts=[
            BackupWorkout(
                **workout.as_dict(),
                sets=[BackupSet.model_validate(s) for s in sets.get(workout.id, [])],
                cardio_sessions=[
                    BackupCardioSession.model_validate(c) for c in cardio_sessions.get(workout.id, [])
                ],
            )
            for workout in workouts
        ],
    )
    logger.info(
        "domain_event event=export_completed exercises=%s cardio_types=%s splits=%s workouts=%s",
        len(document.exercises),
        len(document.cardio_types),
        len(document.splits),
        len(document.workouts),
    )
    return document


def parse_backup(data: Any) -> BackupDocument:
    """Check the document envelope, then validate every entry.

    Raises ImportFormatError with a message specific to the first problem found.
    """
    if not isinstance(data, dict):
        raise ImportFormatError(INVALID_FORMAT)
    if (
        "version" not in data
        or not isinstance(data.get("exercises"), list)
        or not isinstance(data.get("workouts"), list)
        or not isinstance(data.get("splits"), list)
    ):
        raise ImportFormatError(INVALID_STRUCTURE)
    if data["version"] != BACKUP_VERSION:
        raise ImportFormatError(f"Unsupported backup version: {data['version']}")

    try:
        return BackupDocument.model_validate(data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        path = ".".join(str(part) for part in first["loc"])
        raise ImportFormatError(f"Invalid backup entry at {path}: {first['msg']}", field=path) from exc


def _remap(ids: dict[int, int], incoming_id: int) -> int:
    """Stored id for an incoming id; unknown ids are kept as they are."""
    return ids.get(incoming_id, incoming_id)


def _flag(value: bool | None, default: bool) -> bool:
    return default if value is None else value


async def import_all(db: AsyncSession, document: BackupDocument) -> ImportResult:
    """Merge a backup into the store in one transaction.

    Exercises, cardio types and splits merge by name (existing rows win and only
    contribute an id mapping). Workouts are always inserted, so importing the
    same backup twice duplicates its workouts.
    """
    counts = ImportCounts()
    exercise_ids: dict[int, int] = {}
    cardio_type_ids: dict[int, int] = {}
    split_ids: dict[int, int] = {}

    async with transaction(db):
        for incoming in document.exercises:
            exercise = await find_exercise_by_name(db, incoming.name)
            if exercise is None:
                exercise = Exercise(name=incoming.name, description=incoming.description)
                db.add(exercise)
                await db.flush()
                counts.exercises += 1
            exercise_ids[incoming.id] = exercise.id

        for incoming in document.cardio_types:
            cardio_type = await find_cardio_type_by_name(db, incoming.name)
            if cardio_type is None:
                cardio_type = CardioType(
                    name=incoming.name,
                    description=incoming.description,
                    category=incoming.category or "other",
                    is_built_in=False,
                    default_distance_unit=incoming.default_distance_unit,
                    show_distance=_flag(incoming.show_distance, True),
                    show_pace=_flag(incoming.show_pace, True),
                    show_speed=_flag(incoming.show_speed, False),
                    pace_unit=incoming.pace_unit,
                    speed_unit=incoming.speed_unit,
                )
                db.add(cardio_type)
                await db.flush()
                counts.cardio_types += 1
            cardio_type_ids[incoming.id] = cardio_type.id

        for incoming in document.splits:
            split = await find_split_by_name(db, incoming.name)
            if split is not None:
                split_ids[incoming.id] = split.id
                continue
            split = Split(
                name=incoming.name,
                description=incoming.description,
                number_of_days=incoming.number_of_days or 1,
            )
            db.add(split)
            await db.flush()
            split_ids[incoming.id] = split.id
            counts.splits += 1
            db.add_all(
                SplitExercise(
                    split_id=split.id,
                    exercise_id=_remap(exercise_ids, slot.exercise_id),
                    day_number=slot.day_number or 1,
                    sets=slot.sets,
                    rep_min=slot.rep_min,
                    rep_max=slot.rep_max,
                    notes=slot.notes,
                )
                for slot in incoming.split_exercises
            )
            db.add_all(
                SplitCardio(
                    split_id=split.id,
                    cardio_type_id=_remap(cardio_type_ids, slot.cardio_type_id),
                    day_number=slot.day_number or 1,
                    target_duration_seconds=slot.target_duration_seconds,
                    target_distance=slot.target_distance,
                    target_distance_unit=slot.target_distance_unit,
                    notes=slot.notes,
                )
                for slot in incoming.split_cardio
            )
            await db.flush()

        for incoming in document.workouts:
            workout = Workout(
                date=incoming.date,
                notes=incoming.notes,
                split_id=_remap(split_ids, incoming.split_id) if incoming.split_id else None,
            )
            db.add(workout)
            await db.flush()
            counts.workouts += 1
            db.add_all(
                WorkoutSet(
                    workout_id=workout.id,
                    exercise_id=_remap(exercise_ids, s.exercise_id),
                    set_number=s.set_number,
                    weight=s.weight,
                    reps=s.reps,
                    weight_unit=s.weight_unit or DEFAULT_WEIGHT_UNIT,
                    exercise_note=s.exercise_note,
                )
                for s in incoming.sets
            )
            db.add_all(
                CardioSession(
                    workout_id=workout.id,
                    **{
                        **c.model_dump(exclude={"id", "workout_id", "cardio_type_id"}),
                        "cardio_type_id": _remap(cardio_type_ids, c.cardio_type_id),
                        "is_intervals": bool(c.is_intervals),
                    },
                )
                for c in incoming.cardio_sessions
            )
            await db.flush()

    logger.info(
        "domain_event event=import_completed exercises=%s cardio_types=%s splits=%s workouts=%s",
        counts.exercises,
        counts.cardio_types,
        counts.splits,
        counts.workouts,
    )
    return ImportResult(imported=counts)
