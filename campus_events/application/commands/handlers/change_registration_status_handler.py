"""Change registration status handler.

Flow:
1. Find registration
2. Apply the transition on the entity (checks the actor's role, then the
   transition table)
3. Write it only if the stored status is still the one we transitioned from
4. Invalidate the cached aggregates for (event, user)
5. Return the updated registration
"""

from campus_events.application.commands.registration_commands import (
    ChangeRegistrationStatus,
)
from campus_events.application.services.aggregate_view import AggregateView
from campus_events.core.enums import ErrorCode
from campus_events.core.errors import DomainError, NotFoundError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.entities import Registration
from campus_events.domain.errors import IllegalTransitionError
from campus_events.domain.protocols import LoggerProtocol, RegistrationRepository


class ChangeRegistrationStatusHandler:
    """Handler for cancel / mark-attended requests."""

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        aggregate_view: AggregateView,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            registration_repo: Ledger repository.
            aggregate_view: Aggregates to invalidate after a write.
            logger: Structured logger.
        """
        self._registration_repo = registration_repo
        self._aggregate_view = aggregate_view
        self._logger = logger

    async def handle(
        self, cmd: ChangeRegistrationStatus
    ) -> Result[Registration, DomainError]:
        """Handle a status change request.

        Returns:
            Success(Registration): Status changed.
            Failure(NotFoundError): Registration does not exist.
            Failure(AuthorizationError): Actor lacks the role for the transition.
            Failure(IllegalTransitionError): Transition not in the table, or
                another request changed the status first.
            Failure(StoreUnavailableError): Store did not respond or commit.
        """
        log = self._logger.bind(
            registration_id=str(cmd.registration_id),
            to_status=cmd.status.value,
            actor_email=cmd.actor.email,
        )

        found = await self._registration_repo.find_by_id(cmd.registration_id)
        if isinstance(found, Failure):
            log.error("registration_store_unavailable", details=found.error.details)
            return found
        registration = found.value
        if registration is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.REGISTRATION_NOT_FOUND,
                    message="Registration not found",
                    resource_type="Registration",
                    resource_id=str(cmd.registration_id),
                )
            )

        from_status = registration.status
        transition = registration.transition_to(cmd.status, cmd.actor)
        if isinstance(transition, Failure):
            log.info(
                "registration_status_change_rejected",
                from_status=from_status.value,
                error_code=transition.error.code.value,
            )
            return transition

        written = await self._registration_repo.update_status(
            registration, from_status=from_status
        )
        match written:
            case Failure(error=error):
                log.error("registration_store_unavailable", details=error.details)
                return Failure(error=error)
            case Success(value=False):
                log.info("registration_status_changed_concurrently")
                return Failure(
                    error=IllegalTransitionError(
                        message="Registration status was changed by another request",
                        from_status=from_status.value,
                        to_status=cmd.status.value,
                        details={"registration_id": str(registration.id)},
                    )
                )

        await self._aggregate_view.invalidate(registration.event_id, registration.user_email)
        log.info(
            "registration_status_changed",
            event_id=str(registration.event_id),
            from_status=from_status.value,
        )
        return Success(value=registration)
