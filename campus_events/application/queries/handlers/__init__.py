"""Query handlers."""

from campus_events.application.queries.handlers.event_query_handlers import (
    GetEventHandler,
    ListEventsHandler,
)
from campus_events.application.queries.handlers.registration_query_handlers import (
    GetCatalogStatsHandler,
    ListAllRegistrationsHandler,
    ListEventRegistrationsHandler,
    ListMyRegistrationsHandler,
)

__all__ = [
    "GetCatalogStatsHandler",
    "GetEventHandler",
    "ListAllRegistrationsHandler",
    "ListEventRegistrationsHandler",
    "ListEventsHandler",
    "ListMyRegistrationsHandler",
]
