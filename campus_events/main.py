"""Main FastAPI application entry point.

Run with:
    uvicorn campus_events.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from campus_events.core.config import settings
from campus_events.core.container import get_cache, get_database, get_logger
from campus_events.presentation.routers import system_router, v1_router
from campus_events.presentation.routers.api.middleware import TraceMiddleware
from campus_events.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: create the schema (development/testing only; other
      environments run Alembic migrations)
    - Shutdown: close the cache client and dispose the connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()

    if settings.is_development or settings.is_testing:
        await database.create_all()

    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
        cache_backend=settings.cache_backend,
    )

    yield

    await get_cache().close()
    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Campus event catalog, registration and admission API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

# RFC 7807 error responses
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
