"""Registrations resource router.

Endpoints:
    GET   /api/v1/registrations/me     - Caller's registrations
    GET   /api/v1/registrations        - All registrations (admin)
    PATCH /api/v1/registrations/{id}   - Cancel or mark attended
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from campus_events.application.commands import ChangeRegistrationStatus
from campus_events.application.commands.handlers import ChangeRegistrationStatusHandler
from campus_events.application.queries import ListAllRegistrations, ListMyRegistrations
from campus_events.application.queries.handlers import (
    ListAllRegistrationsHandler,
    ListMyRegistrationsHandler,
)
from campus_events.core.container import (
    get_change_registration_status_handler,
    get_list_all_registrations_handler,
    get_list_my_registrations_handler,
)
from campus_events.core.result import Failure, Success
from campus_events.presentation.routers.api.middleware import CurrentUser, get_trace_id
from campus_events.presentation.routers.api.v1.errors import ErrorResponseBuilder
from campus_events.schemas.registration_schemas import (
    MyRegistrationsResponse,
    RegistrationListResponse,
    RegistrationResponse,
    RegistrationStatusChangeRequest,
)

router = APIRouter(prefix="/registrations", tags=["Registrations"])


@router.get("/me", response_model=MyRegistrationsResponse, summary="My registrations")
async def list_my_registrations(
    request: Request,
    current_user: CurrentUser,
    handler: ListMyRegistrationsHandler = Depends(get_list_my_registrations_handler),
) -> MyRegistrationsResponse | JSONResponse:
    """List the caller's registrations, most recent first.

    GET /api/v1/registrations/me → 200 OK
    """
    result = await handler.handle(ListMyRegistrations(actor=current_user))

    match result:
        case Success(value=mine):
            return MyRegistrationsResponse.from_dto(mine)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.get("", response_model=RegistrationListResponse, summary="All registrations")
async def list_all_registrations(
    request: Request,
    current_user: CurrentUser,
    handler: ListAllRegistrationsHandler = Depends(get_list_all_registrations_handler),
) -> RegistrationListResponse | JSONResponse:
    """List every registration, most recent first (administrators only).

    GET /api/v1/registrations → 200 OK
    """
    result = await handler.handle(ListAllRegistrations(actor=current_user))

    match result:
        case Success(value=registrations):
            return RegistrationListResponse.from_entities(registrations)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.patch(
    "/{registration_id}",
    response_model=RegistrationResponse,
    summary="Change registration status",
)
async def change_registration_status(
    request: Request,
    current_user: CurrentUser,
    registration_id: Annotated[UUID, Path(description="Registration UUID")],
    data: RegistrationStatusChangeRequest,
    handler: ChangeRegistrationStatusHandler = Depends(
        get_change_registration_status_handler
    ),
) -> RegistrationResponse | JSONResponse:
    """Cancel (own registration) or mark attended (administrators).

    PATCH /api/v1/registrations/{id} → 200 OK
    """
    command = ChangeRegistrationStatus(
        registration_id=registration_id,
        status=data.target(),
        actor=current_user,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=registration):
            return RegistrationResponse.from_entity(registration)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
