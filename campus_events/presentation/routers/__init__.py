"""Application routers.

Exports:
    system_router: Non-versioned endpoints (root, health)
    v1_router: Versioned API endpoints
"""

from campus_events.presentation.routers.api.v1 import v1_router
from campus_events.presentation.routers.system import system_router

__all__ = ["system_router", "v1_router"]
