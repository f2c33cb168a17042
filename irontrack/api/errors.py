"""Exception handlers: every error leaves the API as {message, field?}."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from irontrack.core.errors import InternalError, IronTrackError

logger = logging.getLogger(__name__)

_LOCATION_ROOTS = {"body", "path", "query"}


async def irontrack_error_handler(request: Request, exc: IronTrackError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("internal_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reshape FastAPI's 422 into a 400 naming the first offending field."""
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content={"message": "Invalid request"})
    first = errors[0]
    location = [str(part) for part in first.get("loc", ())]
    if location and location[0] in _LOCATION_ROOTS:
        location = location[1:]
    content = {"message": first.get("msg", "Invalid request")}
    if location:
        content["field"] = ".".join(location)
    return JSONResponse(status_code=400, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IronTrackError, irontrack_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
