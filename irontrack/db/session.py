"""Async database engine, session factory and unit-of-work helper."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from irontrack.core.config import Settings
from irontrack.core.errors import IronTrackError, InternalError, ValidationError
from irontrack.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Engine + session factory. Built once at startup, disposed at shutdown."""

    def __init__(self, url: str, *, echo: bool = False, **engine_kwargs: Any) -> None:
        self.url = url
        self.engine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = settings.async_database_url
        if url.startswith("sqlite"):
            return cls(url, echo=settings.debug)
        return cls(
            url,
            echo=settings.debug,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    async def create_all(self) -> None:
        import irontrack.models  # noqa: F401 - register all tables on Base.metadata

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an async DB session from the app's Database.

    Writes commit through `transaction`; anything left open is rolled back.
    """
    database: Database = request.app.state.database
    async with database.session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Commit everything issued inside the block, or roll all of it back.

    IntegrityError surfaces as ValidationError, other database failures as
    InternalError; domain errors pass through after the rollback.
    """
    try:
        yield session
        await session.commit()
    except IronTrackError:
        await session.rollback()
        raise
    except IntegrityError as exc:
        await session.rollback()
        logger.info("transaction_rolled_back reason=integrity error=%s", exc.orig)
        raise ValidationError("Write violates a uniqueness or integrity constraint") from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("transaction_rolled_back reason=database_error")
        raise InternalError() from exc
    except Exception:
        await session.rollback()
        raise
