"""EventRepository - SQLAlchemy implementation.

Maps between domain Event entities and EventModel rows.
"""

from contextlib import suppress
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_events.core.errors import StoreUnavailableError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.entities import Event
from campus_events.domain.enums import (
    EventCategory,
    EventSort,
    EventStatus,
    RegistrationStatus,
)
from campus_events.domain.value_objects import EventFilter
from campus_events.infrastructure.errors import store_unavailable
from campus_events.infrastructure.persistence.models import EventModel, RegistrationModel

_SORT_COLUMNS = {
    "date": EventModel.date,
    "created_date": EventModel.created_at,
}


class EventRepository:
    """SQLAlchemy implementation of the EventRepository protocol.

    Does NOT inherit from the protocol (structural typing).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = EventRepository(session)
        ...     result = await repo.find_by_id(event_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(
        self, event_id: UUID, *, for_update: bool = False
    ) -> Result[Event | None, StoreUnavailableError]:
        """Find event by ID.

        With ``for_update`` the row stays locked (``SELECT ... FOR UPDATE``)
        until the session commits or rolls back.
        """
        try:
            model = await self.session.get(
                EventModel,
                event_id,
                with_for_update=for_update or None,
                populate_existing=for_update,
            )
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("event_find_by_id", e)

        return Success(value=self._to_domain(model) if model is not None else None)

    async def find_all(
        self, event_filter: EventFilter, limit: int
    ) -> Result[list[Event], StoreUnavailableError]:
        """List events matching the filter, in the filter's order."""
        stmt = select(EventModel)

        if event_filter.search:
            stmt = stmt.where(
                or_(
                    EventModel.title.icontains(event_filter.search, autoescape=True),
                    EventModel.description.icontains(
                        event_filter.search, autoescape=True
                    ),
                )
            )
        if event_filter.category is not None:
            stmt = stmt.where(EventModel.category == event_filter.category.value)
        if event_filter.status is not None:
            stmt = stmt.where(EventModel.status == event_filter.status.value)

        stmt = stmt.order_by(*self._ordering(event_filter.sort)).limit(
            event_filter.limit or limit
        )

        try:
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("event_find_all", e)

        return Success(value=[self._to_domain(model) for model in models])

    async def save(self, event: Event) -> Result[bool, StoreUnavailableError]:
        """Create or update an event.

        An update that sets ``max_capacity`` is a conditional write: it only
        lands while the stored confirmed count still fits under the new
        capacity, checked in the same statement.

        Returns:
            Success(True) if written, Success(False) if the confirmed count
            exceeds the new capacity (nothing written).
        """
        try:
            existing = await self.session.get(EventModel, event.id)
            if existing is None:
                self.session.add(self._to_model(event))
                await self.session.commit()
                return Success(value=True)

            stmt = (
                update(EventModel)
                .where(EventModel.id == event.id)
                .values(**self._column_values(event))
                .execution_options(synchronize_session=False)
            )
            if event.max_capacity is not None:
                confirmed = (
                    select(func.count())
                    .select_from(RegistrationModel)
                    .where(
                        RegistrationModel.event_id == event.id,
                        RegistrationModel.status == RegistrationStatus.CONFIRMED.value,
                    )
                    .scalar_subquery()
                )
                stmt = stmt.where(confirmed <= event.max_capacity)
            result = await self.session.execute(stmt)
            await self.session.commit()
            self.session.expire(existing)
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("event_save", e)

        return Success(value=result.rowcount == 1)

    async def delete(self, event_id: UUID) -> Result[bool, StoreUnavailableError]:
        """Delete an event and its remaining (cancelled) registrations.

        Callers refuse deletion while active registrations exist; the
        registration delete here only clears history rows.
        """
        try:
            model = await self.session.get(EventModel, event_id)
            if model is None:
                return Success(value=False)

            await self.session.execute(
                delete(RegistrationModel).where(
                    RegistrationModel.event_id == event_id,
                    RegistrationModel.status == RegistrationStatus.CANCELLED.value,
                )
            )
            await self.session.delete(model)
            await self.session.commit()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("event_delete", e)

        return Success(value=True)

    async def count_by_status(
        self,
    ) -> Result[dict[EventStatus, int], StoreUnavailableError]:
        """Count events per status."""
        stmt = select(EventModel.status, func.count()).group_by(EventModel.status)
        try:
            result = await self.session.execute(stmt)
            rows = result.all()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("event_count_by_status", e)

        return Success(value={EventStatus(status): count for status, count in rows})

    @staticmethod
    def _ordering(sort: EventSort) -> list:
        column = _SORT_COLUMNS[sort.field_name]
        if sort.descending:
            return [column.desc(), EventModel.id.desc()]
        return [column.asc(), EventModel.id.asc()]

    async def _fail(
        self, operation: str, error: Exception
    ) -> Failure[StoreUnavailableError]:
        with suppress(SQLAlchemyError, OSError):
            await self.session.rollback()
        return Failure(error=store_unavailable(operation, error))

    def _to_domain(self, model: EventModel) -> Event:
        """Convert database model to domain entity."""
        return Event(
            id=model.id,
            title=model.title,
            description=model.description,
            date=model.date,
            start_time=model.start_time,
            end_time=model.end_time,
            venue=model.venue,
            category=EventCategory(model.category),
            organizer=model.organizer,
            contact_email=model.contact_email,
            image_url=model.image_url,
            status=EventStatus(model.status),
            max_capacity=model.max_capacity,
            registration_deadline=model.registration_deadline,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, event: Event) -> EventModel:
        """Convert domain entity to database model."""
        return EventModel(
            id=event.id, created_at=event.created_at, **self._column_values(event)
        )

    @staticmethod
    def _column_values(event: Event) -> dict[str, Any]:
        return {
            "title": event.title,
            "description": event.description,
            "date": event.date,
            "start_time": event.start_time,
            "end_time": event.end_time,
            "venue": event.venue,
            "category": event.category.value,
            "organizer": event.organizer,
            "contact_email": event.contact_email,
            "image_url": event.image_url,
            "status": event.status.value,
            "max_capacity": event.max_capacity,
            "registration_deadline": event.registration_deadline,
            "updated_at": event.updated_at,
        }
