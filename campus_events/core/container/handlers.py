"""Handler dependency factories (request-scoped).

Every handler in a request shares the request's database session. The
admission lock registry, cache and logger are app-scoped.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_events.core.config import settings
from campus_events.core.container.infrastructure import (
    get_admission_locks,
    get_cache,
    get_cache_keys,
    get_db_session,
    get_logger,
)

if TYPE_CHECKING:
    from campus_events.application.commands.handlers import (
        ChangeRegistrationStatusHandler,
        CreateEventHandler,
        DeleteEventHandler,
        RegisterForEventHandler,
        UpdateEventHandler,
    )
    from campus_events.application.queries.handlers import (
        GetCatalogStatsHandler,
        GetEventHandler,
        ListAllRegistrationsHandler,
        ListEventRegistrationsHandler,
        ListEventsHandler,
        ListMyRegistrationsHandler,
    )
    from campus_events.application.services import AggregateView


def build_aggregate_view(session: AsyncSession) -> "AggregateView":
    """Create an AggregateView over the ledger visible through ``session``."""
    from campus_events.application.services import AggregateView
    from campus_events.infrastructure.persistence.repositories import (
        RegistrationRepository,
    )

    return AggregateView(
        registration_repo=RegistrationRepository(session=session),
        cache=get_cache(),
        cache_keys=get_cache_keys(),
        logger=get_logger(),
        ttl_seconds=settings.aggregate_cache_ttl_seconds,
    )


# ============================================================================
# Command Handlers
# ============================================================================


async def get_register_for_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterForEventHandler":
    """Get RegisterForEvent command handler (request-scoped)."""
    from campus_events.application.commands.handlers import RegisterForEventHandler
    from campus_events.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )

    return RegisterForEventHandler(
        event_repo=EventRepository(session=session),
        registration_repo=RegistrationRepository(session=session),
        admission_locks=get_admission_locks(),
        aggregate_view=build_aggregate_view(session),
        logger=get_logger(),
        timezone=settings.timezone,
    )


async def get_change_registration_status_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ChangeRegistrationStatusHandler":
    """Get ChangeRegistrationStatus command handler (request-scoped)."""
    from campus_events.application.commands.handlers import (
        ChangeRegistrationStatusHandler,
    )
    from campus_events.infrastructure.persistence.repositories import (
        RegistrationRepository,
    )

    return ChangeRegistrationStatusHandler(
        registration_repo=RegistrationRepository(session=session),
        aggregate_view=build_aggregate_view(session),
        logger=get_logger(),
    )


async def get_create_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateEventHandler":
    """Get CreateEvent command handler (request-scoped)."""
    from campus_events.application.commands.handlers import CreateEventHandler
    from campus_events.infrastructure.persistence.repositories import EventRepository

    return CreateEventHandler(
        event_repo=EventRepository(session=session), logger=get_logger()
    )


async def get_update_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateEventHandler":
    """Get UpdateEvent command handler (request-scoped)."""
    from campus_events.application.commands.handlers import UpdateEventHandler
    from campus_events.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )

    return UpdateEventHandler(
        event_repo=EventRepository(session=session),
        registration_repo=RegistrationRepository(session=session),
        admission_locks=get_admission_locks(),
        logger=get_logger(),
    )


async def get_delete_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteEventHandler":
    """Get DeleteEvent command handler (request-scoped)."""
    from campus_events.application.commands.handlers import DeleteEventHandler
    from campus_events.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )

    return DeleteEventHandler(
        event_repo=EventRepository(session=session),
        registration_repo=RegistrationRepository(session=session),
        admission_locks=get_admission_locks(),
        logger=get_logger(),
    )


# ============================================================================
# Query Handlers
# ============================================================================


async def get_list_events_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListEventsHandler":
    """Get ListEvents query handler (request-scoped)."""
    from campus_events.application.queries.handlers import ListEventsHandler
    from campus_events.infrastructure.persistence.repositories import EventRepository

    return ListEventsHandler(
        event_repo=EventRepository(session=session),
        aggregate_view=build_aggregate_view(session),
        default_limit=settings.default_event_list_limit,
    )


async def get_get_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetEventHandler":
    """Get GetEvent query handler (request-scoped)."""
    from campus_events.application.queries.handlers import GetEventHandler
    from campus_events.infrastructure.persistence.repositories import EventRepository

    return GetEventHandler(
        event_repo=EventRepository(session=session),
        aggregate_view=build_aggregate_view(session),
    )


async def get_list_event_registrations_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListEventRegistrationsHandler":
    """Get ListEventRegistrations query handler (request-scoped)."""
    from campus_events.application.queries.handlers import (
        ListEventRegistrationsHandler,
    )
    from campus_events.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )

    return ListEventRegistrationsHandler(
        event_repo=EventRepository(session=session),
        registration_repo=RegistrationRepository(session=session),
        limit=settings.registration_list_limit,
    )


async def get_list_my_registrations_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListMyRegistrationsHandler":
    """Get ListMyRegistrations query handler (request-scoped)."""
    from campus_events.application.queries.handlers import ListMyRegistrationsHandler
    from campus_events.infrastructure.persistence.repositories import (
        RegistrationRepository,
    )

    return ListMyRegistrationsHandler(
        registration_repo=RegistrationRepository(session=session),
        limit=settings.registration_list_limit,
    )


async def get_list_all_registrations_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListAllRegistrationsHandler":
    """Get ListAllRegistrations query handler (request-scoped)."""
    from campus_events.application.queries.handlers import ListAllRegistrationsHandler
    from campus_events.infrastructure.persistence.repositories import (
        RegistrationRepository,
    )

    return ListAllRegistrationsHandler(
        registration_repo=RegistrationRepository(session=session),
        limit=settings.registration_list_limit,
    )


async def get_catalog_stats_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetCatalogStatsHandler":
    """Get GetCatalogStats query handler (request-scoped)."""
    from campus_events.application.queries.handlers import GetCatalogStatsHandler
    from campus_events.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )

    return GetCatalogStatsHandler(
        event_repo=EventRepository(session=session),
        registration_repo=RegistrationRepository(session=session),
    )
