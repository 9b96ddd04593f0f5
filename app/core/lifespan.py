"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (logging, DB engine dispose).
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging, yield, then dispose the SQL engine on exit.

    The engine itself is created lazily by the first request that needs a session.
    """
    setup_logging()
    settings = get_settings()
    if not settings.database_url:
        logger.warning("DATABASE_URL is not set; search requests will return 503")
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    from app.infrastructure.persistence import database

    await database.dispose_engine()
