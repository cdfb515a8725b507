"""Request middleware and dependencies."""

from campus_events.presentation.routers.api.middleware.identity_dependencies import (
    CurrentUser,
    OptionalUser,
    get_current_user,
    get_current_user_optional,
)
from campus_events.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = [
    "CurrentUser",
    "OptionalUser",
    "TraceMiddleware",
    "get_current_user",
    "get_current_user_optional",
    "get_trace_id",
]
