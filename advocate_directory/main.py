# =============================================================================
# FastAPI Application
# =============================================================================
#
# Run locally:
#   uvicorn advocate_directory.main:app --reload
#
# The lifespan hook owns the shared connection pool: tables are optionally
# created at startup and the pool is disposed exactly once, at shutdown.
# =============================================================================

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from advocate_directory.api import advocates, seed
from advocate_directory.config import settings
from advocate_directory.db.engine import dispose_engine, get_engine
from advocate_directory.db.models import Base
from advocate_directory.models.responses import HealthResponse

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.create_tables_on_startup:
        logger.info("Creating database tables")
        Base.metadata.create_all(get_engine())
    yield
    logger.info("Disposing database connection pool")
    dispose_engine()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(advocates.router)
app.include_router(seed.router)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(version=settings.app_version, service=settings.app_name)
