"""Registration repository protocol.

Defines the interface for the registration ledger. The only way to create a
registration is ``admit``, a conditional write that enforces the
one-active-registration-per-user and capacity rules in the store itself.
"""

from typing import Protocol
from uuid import UUID

from campus_events.core.errors import DomainError, StoreUnavailableError
from campus_events.core.result import Result
from campus_events.domain.entities import Registration
from campus_events.domain.enums import RegistrationStatus


class RegistrationRepository(Protocol):
    """Protocol for registration ledger persistence.

    **Design Principles**:
    - Read methods return domain entities (Registration), not database models
    - "Active" means any status other than cancelled
    - Connectivity and timeout failures surface as StoreUnavailableError

    **Implementation Notes**:
    - ``admit`` must commit only if, at commit time, the user holds no active
      registration for the event and (for bounded events) the confirmed count
      is below ``max_capacity``
    - Status updates go through ``update_status``; registrations are never deleted
      except together with their event
    """

    async def find_by_id(
        self, registration_id: UUID
    ) -> Result[Registration | None, StoreUnavailableError]:
        """Find registration by ID.

        Returns:
            Success(Registration) if found, Success(None) otherwise.
        """
        ...

    async def find_active(
        self, event_id: UUID, user_email: str
    ) -> Result[Registration | None, StoreUnavailableError]:
        """Find the user's non-cancelled registration for an event.

        Args:
            event_id: Event identifier.
            user_email: Normalized user email.

        Returns:
            Success(Registration) if one exists, Success(None) otherwise.
        """
        ...

    async def count_confirmed(
        self, event_id: UUID
    ) -> Result[int, StoreUnavailableError]:
        """Count confirmed registrations for an event."""
        ...

    async def count_confirmed_many(
        self, event_ids: list[UUID]
    ) -> Result[dict[UUID, int], StoreUnavailableError]:
        """Count confirmed registrations for several events.

        Returns:
            Success(dict): Every requested id mapped to its count (0 included).
        """
        ...

    async def count_active(self, event_id: UUID) -> Result[int, StoreUnavailableError]:
        """Count non-cancelled registrations for an event."""
        ...

    async def active_event_ids(
        self, user_email: str, event_ids: list[UUID]
    ) -> Result[set[UUID], StoreUnavailableError]:
        """Return the subset of ``event_ids`` the user holds an active registration for."""
        ...

    async def admit(self, registration: Registration) -> Result[Registration, DomainError]:
        """Insert a confirmed registration if the admission guard still holds.

        Status and capacity are read from the stored event under its row lock.

        Args:
            registration: New registration (status confirmed).

        Returns:
            Success(Registration): Row committed.
            Failure(EventNotOpenError): Event is no longer upcoming.
            Failure(AlreadyRegisteredError): User already holds an active registration.
            Failure(EventFullError): Confirmed count reached the stored capacity.
            Failure(StoreUnavailableError): Store did not respond or commit.
        """
        ...

    async def update_status(
        self, registration: Registration, *, from_status: RegistrationStatus
    ) -> Result[bool, StoreUnavailableError]:
        """Persist a status change if the stored status is still ``from_status``.

        Returns:
            Success(True) if written, Success(False) if another writer changed
            the status first.
        """
        ...

    async def list_for_event(
        self, event_id: UUID, limit: int
    ) -> Result[list[Registration], StoreUnavailableError]:
        """List an event's registrations, most recent first."""
        ...

    async def list_for_user(
        self, user_email: str, limit: int
    ) -> Result[list[Registration], StoreUnavailableError]:
        """List a user's registrations, most recent first."""
        ...

    async def list_all(
        self, limit: int
    ) -> Result[list[Registration], StoreUnavailableError]:
        """List all registrations, most recent first."""
        ...

    async def summary(self) -> Result[tuple[int, int], StoreUnavailableError]:
        """Return ``(confirmed registrations, distinct registrant emails)`` across all events."""
        ...

    async def count_active_for_user(
        self, user_email: str
    ) -> Result[int, StoreUnavailableError]:
        """Count a user's non-cancelled registrations across all events."""
        ...
