"""Events resource router.

Endpoints:
    GET    /api/v1/events                      - List events (search/filter/sort)
    POST   /api/v1/events                      - Create event (admin)
    GET    /api/v1/events/{id}                 - Get event
    PATCH  /api/v1/events/{id}                 - Update event (admin)
    DELETE /api/v1/events/{id}                 - Delete event (admin)
    POST   /api/v1/events/{id}/registrations   - Register for event
    GET    /api/v1/events/{id}/registrations   - List event registrations (admin)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse, Response

from campus_events.application.commands import (
    CreateEvent,
    DeleteEvent,
    RegisterForEvent,
    UpdateEvent,
)
from campus_events.application.commands.handlers import (
    CreateEventHandler,
    DeleteEventHandler,
    RegisterForEventHandler,
    UpdateEventHandler,
)
from campus_events.application.queries import (
    GetEvent,
    ListEventRegistrations,
    ListEvents,
)
from campus_events.application.queries.handlers import (
    GetEventHandler,
    ListEventRegistrationsHandler,
    ListEventsHandler,
)
from campus_events.core.enums import ErrorCode
from campus_events.core.errors import ValidationError
from campus_events.core.result import Failure, Success
from campus_events.core.container import (
    get_create_event_handler,
    get_delete_event_handler,
    get_get_event_handler,
    get_list_event_registrations_handler,
    get_list_events_handler,
    get_register_for_event_handler,
    get_update_event_handler,
)
from campus_events.domain.enums import EventSort
from campus_events.domain.value_objects import EventFilter
from campus_events.presentation.routers.api.middleware import (
    CurrentUser,
    OptionalUser,
    get_trace_id,
)
from campus_events.presentation.routers.api.v1.errors import ErrorResponseBuilder
from campus_events.schemas.event_schemas import (
    EventCreateRequest,
    EventListResponse,
    EventResponse,
    EventUpdateRequest,
)
from campus_events.schemas.registration_schemas import (
    RegistrationListResponse,
    RegistrationResponse,
)

router = APIRouter(prefix="/events", tags=["Events"])

EventId = Annotated[UUID, Path(description="Event UUID")]


@router.get("", response_model=EventListResponse, summary="List events")
async def list_events(
    request: Request,
    viewer: OptionalUser,
    search: Annotated[
        str | None, Query(description="Substring of title or description")
    ] = None,
    category: Annotated[str | None, Query(description="Category or 'all'")] = None,
    status_filter: Annotated[
        str | None, Query(alias="status", description="Status or 'all'")
    ] = None,
    sort: Annotated[EventSort, Query(description="Ordering key")] = EventSort.DATE_DESC,
    limit: Annotated[int | None, Query(ge=1, description="Maximum events")] = None,
    handler: ListEventsHandler = Depends(get_list_events_handler),
) -> EventListResponse | JSONResponse:
    """List catalog events.

    GET /api/v1/events → 200 OK

    Each event carries its confirmed registration count and whether the
    caller is registered. An empty match is an empty list.
    """
    try:
        event_filter = EventFilter.from_params(
            search=search,
            category=category,
            status=status_filter,
            sort=sort,
            limit=limit,
        )
    except ValueError as e:
        return ErrorResponseBuilder.from_domain_error(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=str(e),
            ),
            request=request,
            trace_id=get_trace_id() or "",
        )

    result = await handler.handle(ListEvents(event_filter=event_filter, viewer=viewer))

    match result:
        case Success(value=views):
            return EventListResponse.from_views(views)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=EventResponse,
    summary="Create event",
)
async def create_event(
    request: Request,
    current_user: CurrentUser,
    data: EventCreateRequest,
    handler: CreateEventHandler = Depends(get_create_event_handler),
) -> EventResponse | JSONResponse:
    """Create a catalog event (administrators only).

    POST /api/v1/events → 201 Created
    """
    command = CreateEvent(actor=current_user, **data.model_dump())
    result = await handler.handle(command)

    match result:
        case Success(value=event):
            return EventResponse.from_new_event(event)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.get("/{event_id}", response_model=EventResponse, summary="Get event")
async def get_event(
    request: Request,
    viewer: OptionalUser,
    event_id: EventId,
    handler: GetEventHandler = Depends(get_get_event_handler),
) -> EventResponse | JSONResponse:
    """Get one event with its registration aggregates.

    GET /api/v1/events/{id} → 200 OK
    """
    result = await handler.handle(GetEvent(event_id=event_id, viewer=viewer))

    match result:
        case Success(value=view):
            return EventResponse.from_view(view)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.patch("/{event_id}", response_model=EventResponse, summary="Update event")
async def update_event(
    request: Request,
    current_user: CurrentUser,
    event_id: EventId,
    data: EventUpdateRequest,
    update_handler: UpdateEventHandler = Depends(get_update_event_handler),
    get_handler: GetEventHandler = Depends(get_get_event_handler),
) -> EventResponse | JSONResponse:
    """Apply a partial edit (administrators only).

    PATCH /api/v1/events/{id} → 200 OK

    Orchestrates 2 handlers:
    1. UpdateEvent - validate and persist the edit
    2. GetEvent - reload with aggregates for the response
    """
    command = UpdateEvent(actor=current_user, event_id=event_id, changes=data.to_changes())
    update_result = await update_handler.handle(command)

    match update_result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
        case Success():
            pass

    get_result = await get_handler.handle(GetEvent(event_id=event_id, viewer=current_user))

    match get_result:
        case Success(value=view):
            return EventResponse.from_view(view)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete event",
)
async def delete_event(
    request: Request,
    current_user: CurrentUser,
    event_id: EventId,
    handler: DeleteEventHandler = Depends(get_delete_event_handler),
) -> Response:
    """Delete an event without active registrations (administrators only).

    DELETE /api/v1/events/{id} → 204 No Content
    """
    result = await handler.handle(DeleteEvent(actor=current_user, event_id=event_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.post(
    "/{event_id}/registrations",
    status_code=status.HTTP_201_CREATED,
    response_model=RegistrationResponse,
    summary="Register for event",
)
async def register_for_event(
    request: Request,
    current_user: CurrentUser,
    event_id: EventId,
    handler: RegisterForEventHandler = Depends(get_register_for_event_handler),
) -> RegistrationResponse | JSONResponse:
    """Take a seat at an event for the caller.

    POST /api/v1/events/{id}/registrations → 201 Created

    Rejections (409): event not open, deadline passed, already registered,
    event full. 503 when the store is unavailable; nothing is retried here.
    """
    result = await handler.handle(RegisterForEvent(event_id=event_id, actor=current_user))

    match result:
        case Success(value=registration):
            return RegistrationResponse.from_entity(registration)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.get(
    "/{event_id}/registrations",
    response_model=RegistrationListResponse,
    summary="List event registrations",
)
async def list_event_registrations(
    request: Request,
    current_user: CurrentUser,
    event_id: EventId,
    handler: ListEventRegistrationsHandler = Depends(
        get_list_event_registrations_handler
    ),
) -> RegistrationListResponse | JSONResponse:
    """List an event's registrations, most recent first (administrators only).

    GET /api/v1/events/{id}/registrations → 200 OK
    """
    result = await handler.handle(
        ListEventRegistrations(event_id=event_id, actor=current_user)
    )

    match result:
        case Success(value=registrations):
            return RegistrationListResponse.from_entities(registrations)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
