"""Process entry point: logging, pool lifecycle and health check."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from urllib.parse import urlsplit

import structlog

from src.config import settings
from src.db import QueryError, close_db_pool, get_db_pool, ping
from src.logging_config import configure_logging
from src.models import HealthResponse

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan() -> AsyncGenerator[None, None]:
    """Open the shared pool for the duration of the block."""
    configure_logging()
    dsn = urlsplit(settings.dsn)
    logger.info(
        "Starting LightBnB data layer",
        host=dsn.hostname,
        database=dsn.path.lstrip("/"),
    )
    await get_db_pool()
    try:
        yield
    finally:
        logger.info("Shutting down LightBnB data layer")
        await close_db_pool()


async def health_check() -> HealthResponse:
    """Report whether the database is reachable."""
    try:
        healthy = await ping()
    except QueryError as e:
        logger.warning("Health check failed", error=str(e))
        healthy = False
    return HealthResponse(status="healthy" if healthy else "unhealthy")


async def _main() -> None:
    async with lifespan():
        print((await health_check()).model_dump_json())


if __name__ == "__main__":
    asyncio.run(_main())
