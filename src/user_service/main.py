"""
User Service API - Main Application Entry Point

Hosts the persistence layer inside a FastAPI process:
- Logging setup
- Database engine lifecycle
- Health and readiness endpoints

User routes belong to the larger service; they obtain repositories through
``user_service.deps.get_registry``.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from user_service import __version__
from user_service.core.config import settings
from user_service.core.database import check_db, close_db, init_db
from user_service.core.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    Application lifespan manager.

    Connects the database on startup and disposes the engine on shutdown.
    Outside production a failed connection is logged and startup continues.
    """
    configure_logging(settings.log_level)
    logger.info(f"Starting user service in {settings.python_env} mode...")

    try:
        await init_db()
        logger.info("Database connected")
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        if settings.is_production:
            raise

    yield  # Application runs here

    logger.info("Shutting down user service...")
    await close_db()
    logger.info("Cleanup complete")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    application = FastAPI(
        title="User Service",
        description="User identity persistence layer",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Liveness probe for container orchestration."""
        return {"status": "healthy"}

    @application.get("/ready", tags=["Health"])
    async def readiness_check():
        """Readiness probe; fails while the database is unreachable."""
        if await check_db():
            return {"status": "ready"}
        return JSONResponse(status_code=503, content={"status": "unavailable"})

    return application


app = create_app()
