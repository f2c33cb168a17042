"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from irontrack.api import api_router
from irontrack.api.errors import register_exception_handlers
from irontrack.core.config import Settings, get_settings
from irontrack.db.session import Database
from irontrack.middleware.request_logging import RequestLoggingMiddleware
from irontrack.repositories.cardio_types import seed_built_in_cardio_types

logger = logging.getLogger(__name__)


def _cors_origins(settings: Settings) -> list[str]:
    # Any origin in debug; local dev servers in development; CORS_ORIGINS env otherwise
    if settings.debug:
        return ["*"]
    if settings.environment == "development":
        return ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:5173"]
    return [o.strip() for o in settings.cors_origins.split(",") if o.strip()]


def create_application(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: open the database, optionally create tables, seed cardio types; shutdown: dispose."""
        db = database or Database.from_settings(settings)
        app.state.database = db
        if settings.auto_create_tables:
            await db.create_all()
        async with db.session_maker() as session:
            await seed_built_in_cardio_types(session)
        logger.info("startup_complete environment=%s", settings.environment)
        yield
        if database is None:
            await db.dispose()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    if database is not None:
        app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=not settings.debug,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


logging.basicConfig(level=get_settings().log_level)
app = create_application()
