"""Exercise progress: per-day best set and training volume."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import NamedTuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.errors import NotFoundError
from irontrack.models.exercise import Exercise
from irontrack.models.workout import Workout, WorkoutSet
from irontrack.schemas.stats import ExerciseStatsPoint


class SetRow(NamedTuple):
    date: datetime
    weight: int
    reps: int
    weight_unit: str


def utc_day(value: datetime) -> str:
    """YYYY-MM-DD of the UTC calendar day; naive datetimes are already UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d")


def aggregate_daily_stats(rows: Iterable[SetRow]) -> list[ExerciseStatsPoint]:
    """
    Fold chronologically ordered sets into one point per UTC day.

    The heaviest set of the day provides maxWeight/maxWeightReps/maxWeightUnit;
    on a tie the earlier set is kept. totalVolume adds weight * reps of every
    set regardless of unit.
    """
    days: dict[str, dict] = {}
    for row in rows:
        key = utc_day(row.date)
        day = days.get(key)
        if day is None:
            days[key] = {
                "date": key,
                "max_weight": row.weight,
                "max_weight_reps": row.reps,
                "max_weight_unit": row.weight_unit,
                "total_volume": row.weight * row.reps,
            }
            continue
        if row.weight > day["max_weight"]:
            day["max_weight"] = row.weight
            day["max_weight_reps"] = row.reps
            day["max_weight_unit"] = row.weight_unit
        day["total_volume"] += row.weight * row.reps

    return [ExerciseStatsPoint(**day) for _, day in sorted(days.items())]


async def get_exercise_stats(db: AsyncSession, exercise_id: int) -> list[ExerciseStatsPoint]:
    if await db.get(Exercise, exercise_id) is None:
        raise NotFoundError("Exercise not found")

    result = await db.execute(
        select(Workout.date, WorkoutSet.weight, WorkoutSet.reps, WorkoutSet.weight_unit)
        .join(Workout, Workout.id == WorkoutSet.workout_id)
        .where(WorkoutSet.exercise_id == exercise_id)
        .order_by(Workout.date, Workout.id, WorkoutSet.set_number, WorkoutSet.id)
    )
    return aggregate_daily_stats(SetRow(*row) for row in result.all())
