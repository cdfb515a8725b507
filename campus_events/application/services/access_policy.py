"""Role checks for catalog administration."""

from campus_events.core.enums import ErrorCode
from campus_events.core.errors import AuthorizationError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.enums import UserRole
from campus_events.domain.value_objects import UserIdentity


def require_admin(actor: UserIdentity, action: str) -> Result[None, AuthorizationError]:
    """Allow ``action`` only for administrators.

    Args:
        actor: Caller.
        action: Short description used in the error message (e.g. "delete events").

    Returns:
        Success(None) for administrators, Failure(AuthorizationError) otherwise.
    """
    if actor.is_admin:
        return Success(value=None)
    return Failure(
        error=AuthorizationError(
            code=ErrorCode.PERMISSION_DENIED,
            message=f"Only administrators can {action}",
            required_permission=UserRole.ADMIN.value,
        )
    )
