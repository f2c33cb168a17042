"""Backup download and restore."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from irontrack.core.constants import BACKUP_FILENAME_PREFIX
from irontrack.db.session import get_db
from irontrack.schemas.backup import ImportResult
from irontrack.services.backup import export_all, import_all, parse_backup

router = APIRouter()


@router.get("/export")
async def export_backup(db: AsyncSession = Depends(get_db)):
    """Download every user-owned row as one JSON document."""
    document = await export_all(db)
    filename = f"{BACKUP_FILENAME_PREFIX}-{datetime.now(timezone.utc):%Y-%m-%d}.json"
    return JSONResponse(
        content=document.model_dump(mode="json", by_alias=True),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=ImportResult)
async def import_backup(
    data: Any = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Merge a backup document: catalog rows by name, workouts always appended."""
    document = parse_backup(data)
    return await import_all(db, document)
