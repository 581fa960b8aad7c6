"""Assignment Tracker — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tracker.adapters.persistence.database import Base, engine
from tracker.adapters.persistence.models import AssignmentModel  # noqa: F401 — register table
from tracker.config import settings
from tracker.infrastructure.api.dependencies import address_scorer
from tracker.infrastructure.api.errors import register_exception_handlers
from tracker.infrastructure.api.routes_assignments import router as assignments_router
from tracker.infrastructure.api.routes_events import router as events_router
from tracker.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(
        "Address matching with %s scorer (floor %.2f)",
        address_scorer.method,
        settings.match_score_floor,
    )
    try:
        async with engine.begin() as conn:
            if settings.auto_create_schema:
                await conn.run_sync(Base.metadata.create_all)
                logger.info("Database schema ensured")
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    if settings.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    app = FastAPI(
        title="Assignment Tracker",
        description="Assignment records and calendar event reconciliation",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(assignments_router, prefix="/api")
    app.include_router(events_router, prefix="/api")

    return app


app = create_app()
