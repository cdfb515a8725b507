"""RegistrationRepository - SQLAlchemy implementation.

Maps between domain Registration entities and RegistrationModel rows.

``admit`` is the conditional write behind admission. In one transaction it
locks the event row (``SELECT ... FOR UPDATE`` on PostgreSQL; SQLite already
serializes writers), re-reads the stored status and capacity, and inserts the
registration with ``INSERT ... SELECT ... WHERE <guard>``, where the guard
re-checks that the user holds no active registration and that the confirmed
count is below the stored capacity. A zero-row insert means another writer got
there first. The partial unique index on (event_id, user_email) backs the
duplicate rule.
"""

from contextlib import suppress
from uuid import UUID

from sqlalchemy import (
    DateTime,
    String,
    Uuid,
    and_,
    distinct,
    exists,
    func,
    insert,
    literal,
    or_,
    select,
    true,
    update,
)
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_events.core.enums import ErrorCode
from campus_events.core.errors import (
    ConflictError,
    DomainError,
    StoreUnavailableError,
    ValidationError,
)
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.entities import Registration
from campus_events.domain.enums import EventStatus, RegistrationStatus
from campus_events.domain.errors import (
    AlreadyRegisteredError,
    EventFullError,
    EventNotOpenError,
)
from campus_events.infrastructure.errors import store_unavailable
from campus_events.infrastructure.persistence.models import EventModel, RegistrationModel

_CANCELLED = RegistrationStatus.CANCELLED.value
_CONFIRMED = RegistrationStatus.CONFIRMED.value
_UPCOMING = EventStatus.UPCOMING.value

# A zero-row insert with no rule to blame (the blocking row changed in
# between) is retried once.
_ADMIT_ATTEMPTS = 2


class RegistrationRepository:
    """SQLAlchemy implementation of the RegistrationRepository protocol.

    Does NOT inherit from the protocol (structural typing).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = RegistrationRepository(session)
        ...     result = await repo.admit(registration)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(
        self, registration_id: UUID
    ) -> Result[Registration | None, StoreUnavailableError]:
        """Find registration by ID."""
        try:
            model = await self.session.get(RegistrationModel, registration_id)
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("registration_find_by_id", e)

        return Success(value=self._to_domain(model) if model is not None else None)

    async def find_active(
        self, event_id: UUID, user_email: str
    ) -> Result[Registration | None, StoreUnavailableError]:
        """Find the user's non-cancelled registration for an event."""
        stmt = select(RegistrationModel).where(
            RegistrationModel.event_id == event_id,
            RegistrationModel.user_email == user_email,
            RegistrationModel.status != _CANCELLED,
        )
        try:
            result = await self.session.execute(stmt)
            model = result.scalars().first()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("registration_find_active", e)

        return Success(value=self._to_domain(model) if model is not None else None)

    async def count_confirmed(self, event_id: UUID) -> Result[int, StoreUnavailableError]:
        """Count confirmed registrations for an event."""
        return await self._count(
            "registration_count_confirmed",
            RegistrationModel.event_id == event_id,
            RegistrationModel.status == _CONFIRMED,
        )

    async def count_active(self, event_id: UUID) -> Result[int, StoreUnavailableError]:
        """Count non-cancelled registrations for an event."""
        return await self._count(
            "registration_count_active",
            RegistrationModel.event_id == event_id,
            RegistrationModel.status != _CANCELLED,
        )

    async def count_active_for_user(
        self, user_email: str
    ) -> Result[int, StoreUnavailableError]:
        """Count a user's non-cancelled registrations across all events."""
        return await self._count(
            "registration_count_active_for_user",
            RegistrationModel.user_email == user_email,
            RegistrationModel.status != _CANCELLED,
        )

    async def count_confirmed_many(
        self, event_ids: list[UUID]
    ) -> Result[dict[UUID, int], StoreUnavailableError]:
        """Count confirmed registrations for several events in one query."""
        counts = {event_id: 0 for event_id in event_ids}
        if not event_ids:
            return Success(value=counts)

        stmt = (
            select(RegistrationModel.event_id, func.count())
            .where(
                RegistrationModel.event_id.in_(event_ids),
                RegistrationModel.status == _CONFIRMED,
            )
            .group_by(RegistrationModel.event_id)
        )
        try:
            result = await self.session.execute(stmt)
            rows = result.all()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("registration_count_confirmed_many", e)

        counts.update({event_id: count for event_id, count in rows})
        return Success(value=counts)

    async def active_event_ids(
        self, user_email: str, event_ids: list[UUID]
    ) -> Result[set[UUID], StoreUnavailableError]:
        """Return the events among ``event_ids`` the user is registered for."""
        if not event_ids:
            return Success(value=set())

        stmt = select(RegistrationModel.event_id).where(
            RegistrationModel.user_email == user_email,
            RegistrationModel.event_id.in_(event_ids),
            RegistrationModel.status != _CANCELLED,
        )
        try:
            result = await self.session.execute(stmt)
            found = set(result.scalars().all())
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("registration_active_event_ids", e)

        return Success(value=found)

    async def admit(self, registration: Registration) -> Result[Registration, DomainError]:
        """Insert a confirmed registration if the admission guard still holds.

        The guard uses the capacity and status stored on the locked event
        row, not values the caller read earlier.

        Returns:
            Success(Registration): Row committed.
            Failure(EventNotOpenError): Event stopped accepting registrations.
            Failure(AlreadyRegisteredError | EventFullError): Guard failed at
                write time.
            Failure(ValidationError): Event no longer exists.
            Failure(ConflictError): Insert refused twice with no rule to blame.
            Failure(StoreUnavailableError): Store did not respond or commit.
        """
        for _ in range(_ADMIT_ATTEMPTS):
            attempt = await self._insert_guarded(registration)
            if isinstance(attempt, Failure):
                return attempt
            if attempt.value:
                return Success(value=registration)

            rejection = await self._explain_rejection(registration)
            if rejection is not None:
                return rejection

        return Failure(
            error=ConflictError(
                code=ErrorCode.REGISTRATION_ADMISSION_CONFLICT,
                message="Registration could not be admitted, try again",
                resource_type="Registration",
                details={"event_id": str(registration.event_id)},
            )
        )

    async def update_status(
        self, registration: Registration, *, from_status: RegistrationStatus
    ) -> Result[bool, StoreUnavailableError]:
        """Write a status change only if the stored status is still ``from_status``."""
        stmt = (
            update(RegistrationModel)
            .where(
                RegistrationModel.id == registration.id,
                RegistrationModel.status == from_status.value,
            )
            .values(
                status=registration.status.value,
                updated_at=registration.updated_at,
            )
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("registration_update_status", e)

        return Success(value=result.rowcount == 1)

    async def list_for_event(
        self, event_id: UUID, limit: int
    ) -> Result[list[Registration], StoreUnavailableError]:
        """List an event's registrations, most recent first."""
        return await self._list(
            "registration_list_for_event", limit, RegistrationModel.event_id == event_id
        )

    async def list_for_user(
        self, user_email: str, limit: int
    ) -> Result[list[Registration], StoreUnavailableError]:
        """List a user's registrations, most recent first."""
        return await self._list(
            "registration_list_for_user", limit, RegistrationModel.user_email == user_email
        )

    async def list_all(
        self, limit: int
    ) -> Result[list[Registration], StoreUnavailableError]:
        """List all registrations, most recent first."""
        return await self._list("registration_list_all", limit, true())

    async def summary(self) -> Result[tuple[int, int], StoreUnavailableError]:
        """Return (confirmed registrations, distinct registrant emails)."""
        confirmed = (
            select(func.count())
            .select_from(RegistrationModel)
            .where(RegistrationModel.status == _CONFIRMED)
            .scalar_subquery()
        )
        registrants = select(
            func.count(distinct(RegistrationModel.user_email))
        ).scalar_subquery()
        try:
            result = await self.session.execute(select(confirmed, registrants))
            confirmed_count, registrant_count = result.one()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("registration_summary", e)

        return Success(value=(confirmed_count, registrant_count))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _insert_guarded(
        self, registration: Registration
    ) -> Result[bool, DomainError]:
        """Lock the event row and run the conditional insert.

        Returns:
            Success(True) if a row was committed, Success(False) if the guard
            or the unique index refused it (transaction rolled back).
        """
        event_id = registration.event_id
        try:
            locked = await self.session.execute(
                select(EventModel.status)
                .where(EventModel.id == event_id)
                .with_for_update()
            )
            status = locked.scalar_one_or_none()
            if status is None:
                await self.session.rollback()
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.EVENT_NOT_FOUND,
                        message="Event does not exist",
                        field="event_id",
                    )
                )
            if status != _UPCOMING:
                await self.session.rollback()
                return Failure(
                    error=EventNotOpenError(event_id=str(event_id), event_status=status)
                )

            result = await self.session.execute(self._conditional_insert(registration))
            inserted = result.scalar_one_or_none()
            if inserted is not None:
                await self.session.commit()
                return Success(value=True)

            await self.session.rollback()
        except IntegrityError:
            await self.session.rollback()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("registration_admit", e)

        return Success(value=False)

    def _conditional_insert(self, registration: Registration):
        # Status and capacity come from the stored event inside the statement,
        # so the guard holds even where FOR UPDATE is a no-op.
        event_id = registration.event_id
        event_open = exists().where(
            EventModel.id == event_id,
            EventModel.status == _UPCOMING,
        )
        has_active = exists().where(
            RegistrationModel.event_id == event_id,
            RegistrationModel.user_email == registration.user_email,
            RegistrationModel.status != _CANCELLED,
        )
        stored_capacity = (
            select(EventModel.max_capacity)
            .where(EventModel.id == event_id)
            .scalar_subquery()
        )
        confirmed = (
            select(func.count())
            .select_from(RegistrationModel)
            .where(
                RegistrationModel.event_id == event_id,
                RegistrationModel.status == _CONFIRMED,
            )
            .scalar_subquery()
        )
        guard = and_(
            event_open,
            ~has_active,
            or_(stored_capacity.is_(None), confirmed < stored_capacity),
        )

        row = select(
            literal(registration.id, Uuid()),
            literal(registration.event_id, Uuid()),
            literal(registration.event_title, String()),
            literal(registration.user_email, String()),
            literal(registration.user_name, String()),
            literal(registration.status.value, String()),
            literal(registration.registration_date, DateTime(timezone=True)),
            literal(registration.registration_date, DateTime(timezone=True)),
            literal(registration.updated_at, DateTime(timezone=True)),
        ).where(guard)

        return (
            insert(RegistrationModel)
            .from_select(
                [
                    RegistrationModel.id,
                    RegistrationModel.event_id,
                    RegistrationModel.event_title,
                    RegistrationModel.user_email,
                    RegistrationModel.user_name,
                    RegistrationModel.status,
                    RegistrationModel.registration_date,
                    RegistrationModel.created_at,
                    RegistrationModel.updated_at,
                ],
                row,
            )
            .returning(RegistrationModel.id)
        )

    async def _explain_rejection(
        self, registration: Registration
    ) -> Failure[DomainError] | None:
        """Name the rule that refused an insert, or None if none applies now.

        Rules are checked in admission order: open, duplicate, capacity.
        """
        event_id = registration.event_id
        try:
            result = await self.session.execute(
                select(EventModel.status, EventModel.max_capacity).where(
                    EventModel.id == event_id
                )
            )
            stored = result.one_or_none()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail("registration_explain_rejection", e)
        if stored is None:
            return None
        status, max_capacity = stored
        if status != _UPCOMING:
            return Failure(
                error=EventNotOpenError(event_id=str(event_id), event_status=status)
            )

        existing = await self.find_active(event_id, registration.user_email)
        match existing:
            case Failure():
                return existing
            case Success(value=Registration() as found):
                return Failure(
                    error=AlreadyRegisteredError(
                        event_id=str(event_id),
                        registration_id=str(found.id),
                    )
                )

        if max_capacity is None:
            return None
        count = await self.count_confirmed(event_id)
        match count:
            case Failure():
                return count
            case Success(value=confirmed_count) if confirmed_count >= max_capacity:
                return Failure(
                    error=EventFullError(
                        event_id=str(event_id),
                        max_capacity=max_capacity,
                        confirmed_count=confirmed_count,
                    )
                )
        return None

    async def _count(self, operation: str, *criteria) -> Result[int, StoreUnavailableError]:
        stmt = select(func.count()).select_from(RegistrationModel).where(*criteria)
        try:
            result = await self.session.execute(stmt)
            count = result.scalar_one()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail(operation, e)

        return Success(value=count)

    async def _list(
        self, operation: str, limit: int, criterion
    ) -> Result[list[Registration], StoreUnavailableError]:
        stmt = (
            select(RegistrationModel)
            .where(criterion)
            .order_by(
                RegistrationModel.registration_date.desc(), RegistrationModel.id.desc()
            )
            .limit(limit)
        )
        try:
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            return await self._fail(operation, e)

        return Success(value=[self._to_domain(model) for model in models])

    async def _fail(
        self, operation: str, error: Exception
    ) -> Failure[StoreUnavailableError]:
        with suppress(SQLAlchemyError, OSError):
            await self.session.rollback()
        return Failure(error=store_unavailable(operation, error))

    def _to_domain(self, model: RegistrationModel) -> Registration:
        """Convert database model to domain entity."""
        return Registration(
            id=model.id,
            event_id=model.event_id,
            event_title=model.event_title,
            user_email=model.user_email,
            user_name=model.user_name,
            status=RegistrationStatus(model.status),
            registration_date=model.registration_date,
            updated_at=model.updated_at,
        )
