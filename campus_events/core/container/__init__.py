"""Container module - centralized dependency injection.

Submodules:
- infrastructure: Database, cache, admission locks, logging
- repositories: Repository factories
- handlers: Command and query handler factories

Usage:
    from campus_events.core.container import get_logger, get_register_for_event_handler
"""

from campus_events.core.container.handlers import (
    build_aggregate_view,
    get_catalog_stats_handler,
    get_change_registration_status_handler,
    get_create_event_handler,
    get_delete_event_handler,
    get_get_event_handler,
    get_list_all_registrations_handler,
    get_list_event_registrations_handler,
    get_list_events_handler,
    get_list_my_registrations_handler,
    get_register_for_event_handler,
    get_update_event_handler,
)
from campus_events.core.container.infrastructure import (
    get_admission_locks,
    get_cache,
    get_cache_keys,
    get_database,
    get_db_session,
    get_logger,
)
from campus_events.core.container.repositories import (
    get_event_repository,
    get_registration_repository,
)

__all__ = [
    # Infrastructure
    "get_admission_locks",
    "get_cache",
    "get_cache_keys",
    "get_database",
    "get_db_session",
    "get_logger",
    # Repositories
    "get_event_repository",
    "get_registration_repository",
    # Handlers
    "build_aggregate_view",
    "get_catalog_stats_handler",
    "get_change_registration_status_handler",
    "get_create_event_handler",
    "get_delete_event_handler",
    "get_get_event_handler",
    "get_list_all_registrations_handler",
    "get_list_event_registrations_handler",
    "get_list_events_handler",
    "get_list_my_registrations_handler",
    "get_register_for_event_handler",
    "get_update_event_handler",
]
