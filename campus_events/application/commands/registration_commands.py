"""Registration commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID

from campus_events.domain.enums import RegistrationStatus
from campus_events.domain.value_objects import UserIdentity


@dataclass(frozen=True, kw_only=True)
class RegisterForEvent:
    """Request a seat at an event for the calling user.

    The registration is created ``confirmed`` if the event admits it; the
    user's identity is snapshotted onto the record.

    Example:
        >>> result = await handler.handle(
        ...     RegisterForEvent(event_id=event.id, actor=current_user)
        ... )
    """

    event_id: UUID
    actor: UserIdentity


@dataclass(frozen=True, kw_only=True)
class ChangeRegistrationStatus:
    """Move a registration to a new status.

    ``CANCELLED`` is allowed for the registration's own user, ``ATTENDED``
    for administrators, and both only from ``CONFIRMED``.

    Attributes:
        registration_id: Registration to change.
        status: Requested status.
        actor: Caller requesting the change.
    """

    registration_id: UUID
    status: RegistrationStatus
    actor: UserIdentity
