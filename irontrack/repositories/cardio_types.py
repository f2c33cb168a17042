"""Cardio type persistence, including the built-in catalog seed."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.constants import BUILT_IN_CARDIO_TYPES
from irontrack.core.errors import NotFoundError, ValidationError
from irontrack.db.session import transaction
from irontrack.models.cardio_type import CardioType

logger = logging.getLogger(__name__)


async def find_cardio_type_by_name(db: AsyncSession, name: str) -> CardioType | None:
    result = await db.execute(select(CardioType).where(CardioType.name == name))
    return result.scalars().first()


async def _ensure_name_free(db: AsyncSession, name: str, exclude_id: int | None = None) -> None:
    existing = await find_cardio_type_by_name(db, name)
    if existing is not None and existing.id != exclude_id:
        raise ValidationError(f"Cardio type '{name}' already exists", field="name")


async def list_cardio_types(db: AsyncSession) -> list[CardioType]:
    result = await db.execute(select(CardioType).order_by(CardioType.name))
    return list(result.scalars().all())


async def get_cardio_type(db: AsyncSession, cardio_type_id: int) -> CardioType | None:
    return await db.get(CardioType, cardio_type_id)


async def create_cardio_type(db: AsyncSession, data: dict[str, Any]) -> CardioType:
    async with transaction(db):
        await _ensure_name_free(db, data["name"])
        cardio_type = CardioType(**{**data, "is_built_in": False})
        db.add(cardio_type)
        await db.flush()
    logger.info("domain_event event=cardio_type_created cardio_type_id=%s", cardio_type.id)
    return cardio_type


async def update_cardio_type(db: AsyncSession, cardio_type_id: int, changes: dict[str, Any]) -> CardioType:
    async with transaction(db):
        cardio_type = await db.get(CardioType, cardio_type_id)
        if cardio_type is None:
            raise NotFoundError("Cardio type not found")
        if "name" in changes:
            await _ensure_name_free(db, changes["name"], exclude_id=cardio_type_id)
        for key, value in changes.items():
            setattr(cardio_type, key, value)
        await db.flush()
    return cardio_type


async def delete_cardio_type(db: AsyncSession, cardio_type_id: int) -> None:
    """Delete a cardio type. Sessions and split slots keep their (now dangling) id."""
    async with transaction(db):
        cardio_type = await db.get(CardioType, cardio_type_id)
        if cardio_type is None:
            raise NotFoundError("Cardio type not found")
        await db.execute(delete(CardioType).where(CardioType.id == cardio_type_id))
    logger.info("domain_event event=cardio_type_deleted cardio_type_id=%s", cardio_type_id)


async def seed_built_in_cardio_types(db: AsyncSession) -> int:
    """Insert each built-in type whose name is not taken yet. Returns rows inserted.

    Existing rows, including user edits to a built-in, are never touched.
    """
    inserted = 0
    async with transaction(db):
        for definition in BUILT_IN_CARDIO_TYPES:
            if await find_cardio_type_by_name(db, definition["name"]) is not None:
                continue
            db.add(CardioType(**definition, is_built_in=True))
            await db.flush()
            inserted += 1
    logger.info("domain_event event=cardio_types_seeded inserted=%s", inserted)
    return inserted
