"""API v1 routers.

Resources:
    /api/v1/events          - Event catalog and admission
    /api/v1/registrations   - Registration ledger
    /api/v1/stats           - Dashboard counters
"""

from fastapi import APIRouter

from campus_events.core.config import settings
from campus_events.presentation.routers.api.v1 import events, registrations, stats

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(events.router)
v1_router.include_router(registrations.router)
v1_router.include_router(stats.router)

__all__ = ["v1_router"]
