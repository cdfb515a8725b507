"""System router for non-versioned application endpoints.

Provides root and health endpoints that are not part of the versioned API
contract.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from campus_events.core.config import settings
from campus_events.core.container import get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Welcome message with API status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check for monitoring and load balancers.

    Reports store connectivity; 503 when the database cannot be reached.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy", "database": "connected"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "database": "unavailable"},
    )
