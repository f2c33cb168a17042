"""Batched lookups for the two-phase (parents, then children) composed reads."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


async def load_by_ids(db: AsyncSession, model: type[ModelT], ids: Iterable[int]) -> dict[int, ModelT]:
    """One IN query for all ids; missing ids are simply absent from the result."""
    wanted = set(ids)
    if not wanted:
        return {}
    result = await db.execute(select(model).where(model.id.in_(wanted)))
    return {row.id: row for row in result.scalars().all()}


async def load_children(
    db: AsyncSession,
    model: type[ModelT],
    parent_column: str,
    parent_ids: Iterable[int],
    order_by: tuple = (),
) -> dict[int, list[ModelT]]:
    """Children of every parent in one query, grouped by parent id in memory."""
    wanted = set(parent_ids)
    grouped: dict[int, list[ModelT]] = defaultdict(list)
    if not wanted:
        return grouped
    column = getattr(model, parent_column)
    stmt = select(model).where(column.in_(wanted)).order_by(*order_by, model.id)
    result = await db.execute(stmt)
    for row in result.scalars().all():
        grouped[getattr(row, parent_column)].append(row)
    return grouped
