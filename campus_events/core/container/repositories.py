"""Repository dependency factories (request-scoped)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_events.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from campus_events.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )


async def get_event_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "EventRepository":
    """Get event repository bound to the request's session."""
    from campus_events.infrastructure.persistence.repositories import EventRepository

    return EventRepository(session=session)


async def get_registration_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "RegistrationRepository":
    """Get registration repository bound to the request's session."""
    from campus_events.infrastructure.persistence.repositories import (
        RegistrationRepository,
    )

    return RegistrationRepository(session=session)
