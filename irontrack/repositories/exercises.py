"""Exercise persistence."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.errors import NotFoundError, ValidationError
from irontrack.db.session import transaction
from irontrack.models.exercise import Exercise

logger = logging.getLogger(__name__)


async def find_exercise_by_name(db: AsyncSession, name: str) -> Exercise | None:
    result = await db.execute(select(Exercise).where(Exercise.name == name))
    return result.scalars().first()


async def _ensure_name_free(db: AsyncSession, name: str, exclude_id: int | None = None) -> None:
    existing = await find_exercise_by_name(db, name)
    if existing is not None and existing.id != exclude_id:
        raise ValidationError(f"Exercise '{name}' already exists", field="name")


async def list_exercises(db: AsyncSession) -> list[Exercise]:
    result = await db.execute(select(Exercise).order_by(Exercise.name))
    return list(result.scalars().all())


async def get_exercise(db: AsyncSession, exercise_id: int) -> Exercise | None:
    return await db.get(Exercise, exercise_id)


async def create_exercise(db: AsyncSession, data: dict[str, Any]) -> Exercise:
    async with transaction(db):
        await _ensure_name_free(db, data["name"])
        exercise = Exercise(**data)
        db.add(exercise)
        await db.flush()
    logger.info("domain_event event=exercise_created exercise_id=%s", exercise.id)
    return exercise


async def update_exercise(db: AsyncSession, exercise_id: int, changes: dict[str, Any]) -> Exercise:
    """Merge `changes` (only the fields the caller sent) into the exercise."""
    async with transaction(db):
        exercise = await db.get(Exercise, exercise_id)
        if exercise is None:
            raise NotFoundError("Exercise not found")
        if "name" in changes:
            await _ensure_name_free(db, changes["name"], exclude_id=exercise_id)
        for key, value in changes.items():
            setattr(exercise, key, value)
        await db.flush()
    return exercise
