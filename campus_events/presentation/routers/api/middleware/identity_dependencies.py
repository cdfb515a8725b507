"""Caller identity dependencies.

Identity is asserted by the upstream identity provider (gateway) through
trusted request headers. Header names are configurable:

    X-User-Email  caller email (required for authenticated routes)
    X-User-Name   display name (defaults to the email)
    X-User-Role   "admin" or anything else (treated as "user")

Usage:
    @router.get("/protected")
    async def protected_route(current_user: CurrentUser):
        return {"email": current_user.email}

    @router.get("/optional")
    async def optional_route(viewer: OptionalUser):
        ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from campus_events.core.config import settings
from campus_events.domain.enums import UserRole
from campus_events.domain.value_objects import Email, UserIdentity


def _identity_from_headers(request: Request) -> UserIdentity | None:
    raw_email = request.headers.get(settings.identity_email_header, "").strip()
    if not raw_email:
        return None

    try:
        email = Email(raw_email)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Caller identity is not a valid email address",
        ) from e

    full_name = request.headers.get(settings.identity_name_header, "").strip()
    return UserIdentity(
        email=email.value,
        full_name=full_name or email.value,
        role=UserRole.from_raw(request.headers.get(settings.identity_role_header)),
    )


async def get_current_user(request: Request) -> UserIdentity:
    """Get the authenticated caller.

    Raises:
        HTTPException 401: If no identity was supplied or it is malformed.
    """
    identity = _identity_from_headers(request)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return identity


async def get_current_user_optional(request: Request) -> UserIdentity | None:
    """Get the caller if one was supplied, else None (anonymous)."""
    return _identity_from_headers(request)


CurrentUser = Annotated[UserIdentity, Depends(get_current_user)]
OptionalUser = Annotated[UserIdentity | None, Depends(get_current_user_optional)]
