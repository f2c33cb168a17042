"""Health check endpoints for load balancers and monitoring."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.db.session import get_db

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
async def health():
    """Liveness. Includes built_at when IRONTRACK_BUILT_AT is set."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("IRONTRACK_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Readiness: app + DB connectivity."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("readiness_check_failed")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": "unreachable"},
        )
    return {"status": "ok", "database": "connected"}
