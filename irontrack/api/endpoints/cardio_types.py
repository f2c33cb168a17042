"""Cardio type endpoints (built-in catalog plus user-defined types)."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.errors import NotFoundError
from irontrack.db.session import get_db
from irontrack.repositories import cardio_types as repo
from irontrack.schemas.cardio_type import CardioTypeCreate, CardioTypeRead, CardioTypeUpdate

router = APIRouter()


@router.get("", response_model=list[CardioTypeRead])
async def list_cardio_types(db: AsyncSession = Depends(get_db)):
    return await repo.list_cardio_types(db)


@router.post("", response_model=CardioTypeRead, status_code=201)
async def create_cardio_type(
    payload: CardioTypeCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a custom cardio type (never built-in)."""
    return await repo.create_cardio_type(db, payload.model_dump())


@router.get("/{cardio_type_id}", response_model=CardioTypeRead)
async def get_cardio_type(
    cardio_type_id: int,
    db: AsyncSession = Depends(get_db),
):
    cardio_type = await repo.get_cardio_type(db, cardio_type_id)
    if cardio_type is None:
        raise NotFoundError("Cardio type not found")
    return cardio_type


@router.patch("/{cardio_type_id}", response_model=CardioTypeRead)
async def update_cardio_type(
    cardio_type_id: int,
    payload: CardioTypeUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a cardio type (partial). Built-in types may be edited too."""
    return await repo.update_cardio_type(db, cardio_type_id, payload.model_dump(exclude_unset=True))


@router.delete("/{cardio_type_id}", status_code=204)
async def delete_cardio_type(
    cardio_type_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a cardio type. Sessions referencing it keep their id and render it as null."""
    await repo.delete_cardio_type(db, cardio_type_id)
    return None
