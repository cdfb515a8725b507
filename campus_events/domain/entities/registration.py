"""Registration domain entity.

A user's seat at an event. Registrations are created ``confirmed`` by the
admission flow only; afterwards the status follows the transition table in
``RegistrationStatus``. Who may request a transition is checked here, at the
entity boundary, before whether the transition is legal.

Usage:
    previous = registration.status
    match registration.cancel(actor):
        case Success():
            await registration_repo.update_status(registration, from_status=previous)
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from campus_events.core.enums import ErrorCode
from campus_events.core.errors import AuthorizationError, DomainError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.enums import RegistrationStatus, UserRole
from campus_events.domain.errors import IllegalTransitionError
from campus_events.domain.value_objects import UserIdentity


@dataclass
class Registration:
    """A user's registration for an event.

    Attributes:
        id: Unique registration identifier.
        event_id: Event this registration is for (reference, not ownership).
        event_title: Event title as it was at registration time. Never
            re-synchronized with later event edits.
        user_email: Registering user's normalized email.
        user_name: Registering user's display name at registration time.
        status: Current status.
        registration_date: Creation timestamp (immutable).
        updated_at: Last status change.
    """

    id: UUID
    event_id: UUID
    event_title: str
    user_email: str
    user_name: str
    status: RegistrationStatus = RegistrationStatus.CONFIRMED
    registration_date: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_active(self) -> bool:
        """Check whether this registration still counts as "registered"."""
        return self.status in RegistrationStatus.active_states()

    def is_confirmed(self) -> bool:
        """Check whether this registration holds a seat."""
        return self.status == RegistrationStatus.CONFIRMED

    def cancel(self, actor: UserIdentity) -> Result[None, DomainError]:
        """Release the seat. Only the registration's own user may cancel."""
        return self.transition_to(RegistrationStatus.CANCELLED, actor)

    def mark_attended(self, actor: UserIdentity) -> Result[None, DomainError]:
        """Record attendance. Administrators only."""
        return self.transition_to(RegistrationStatus.ATTENDED, actor)

    def transition_to(
        self, target: RegistrationStatus, actor: UserIdentity
    ) -> Result[None, DomainError]:
        """Move to ``target`` on behalf of ``actor``.

        Args:
            target: Requested status.
            actor: Caller requesting the change.

        Returns:
            Success(None): Status changed.
            Failure(AuthorizationError): Actor lacks the role for ``target``.
            Failure(IllegalTransitionError): ``self.status → target`` is not
                in the transition table.

        Side Effects (on success):
            - Sets status
            - Updates updated_at
        """
        permission_error = self._check_actor(target, actor)
        if permission_error is not None:
            return Failure(error=permission_error)

        if not self.status.can_transition_to(target):
            return Failure(
                error=IllegalTransitionError(
                    message=(
                        f"Cannot change registration from {self.status.value} "
                        f"to {target.value}"
                    ),
                    from_status=self.status.value,
                    to_status=target.value,
                    details={"registration_id": str(self.id)},
                )
            )

        self.status = target
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def _check_actor(
        self, target: RegistrationStatus, actor: UserIdentity
    ) -> AuthorizationError | None:
        if target == RegistrationStatus.CANCELLED and not actor.owns(self.user_email):
            return AuthorizationError(
                code=ErrorCode.RESOURCE_NOT_OWNED,
                message="Only the registered user can cancel this registration",
                required_permission="registration_owner",
            )
        if target == RegistrationStatus.ATTENDED and actor.role is not UserRole.ADMIN:
            return AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message="Only administrators can record attendance",
                required_permission=UserRole.ADMIN.value,
            )
        return None
