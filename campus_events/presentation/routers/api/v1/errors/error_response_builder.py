"""Error response builder for RFC 7807 Problem Details.

Converts domain errors returned by handlers into Problem Details responses.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from campus_events.core.config import settings
from campus_events.core.enums import ErrorCode
from campus_events.core.errors import DomainError, ValidationError
from campus_events.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# Seconds a client should wait before retrying a store-unavailable failure.
RETRY_AFTER_SECONDS = 1

_STATUS_BY_CODE: dict[ErrorCode, tuple[int, str]] = {
    # Validation
    ErrorCode.VALIDATION_FAILED: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    ErrorCode.INVALID_EVENT_TITLE: (status.HTTP_400_BAD_REQUEST, "Invalid Event Title"),
    ErrorCode.INVALID_EVENT_CAPACITY: (status.HTTP_400_BAD_REQUEST, "Invalid Event Capacity"),
    ErrorCode.INVALID_REGISTRATION_DEADLINE: (
        status.HTTP_400_BAD_REQUEST,
        "Invalid Registration Deadline",
    ),
    ErrorCode.INVALID_TIME_RANGE: (status.HTTP_400_BAD_REQUEST, "Invalid Time Range"),
    ErrorCode.INVALID_REGISTRATION_STATUS: (
        status.HTTP_400_BAD_REQUEST,
        "Invalid Registration Status",
    ),
    # Not found
    ErrorCode.EVENT_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Event Not Found"),
    ErrorCode.REGISTRATION_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Registration Not Found"),
    # Conflict
    ErrorCode.EVENT_HAS_ACTIVE_REGISTRATIONS: (
        status.HTTP_409_CONFLICT,
        "Event Has Active Registrations",
    ),
    ErrorCode.EVENT_CAPACITY_BELOW_CONFIRMED: (
        status.HTTP_409_CONFLICT,
        "Capacity Below Confirmed Registrations",
    ),
    ErrorCode.REGISTRATION_ADMISSION_CONFLICT: (
        status.HTTP_409_CONFLICT,
        "Admission Conflict",
    ),
    ErrorCode.REGISTRATION_TRANSITION_ILLEGAL: (
        status.HTTP_409_CONFLICT,
        "Illegal Status Transition",
    ),
    # Admission
    ErrorCode.EVENT_NOT_OPEN: (status.HTTP_409_CONFLICT, "Event Not Open"),
    ErrorCode.REGISTRATION_DEADLINE_PASSED: (
        status.HTTP_409_CONFLICT,
        "Registration Deadline Passed",
    ),
    ErrorCode.REGISTRATION_ALREADY_EXISTS: (status.HTTP_409_CONFLICT, "Already Registered"),
    ErrorCode.EVENT_FULL: (status.HTTP_409_CONFLICT, "Event Full"),
    # Identity
    ErrorCode.AUTHENTICATION_REQUIRED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
    ),
    ErrorCode.PERMISSION_DENIED: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ErrorCode.RESOURCE_NOT_OWNED: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    # Store
    ErrorCode.STORE_UNAVAILABLE: (
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Service Unavailable",
    ),
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=EventFullError(event_id=event_id, max_capacity=50, confirmed_count=50),
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> response.status_code
        409
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Error returned by a handler.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code, title = ErrorResponseBuilder.status_and_title(error.code)
        if isinstance(error, ValidationError):
            # e.g. EVENT_NOT_FOUND raised as a bad event_id in a request body
            status_code = status.HTTP_400_BAD_REQUEST

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(field=error.field, code=error.code.value, message=error.message)
            ]

        headers = {"Retry-After": str(RETRY_AFTER_SECONDS)} if error.is_retryable else None
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def status_and_title(code: ErrorCode) -> tuple[int, str]:
        """Map an error code to (HTTP status, title).

        Example:
            >>> ErrorResponseBuilder.status_and_title(ErrorCode.EVENT_FULL)
            (409, 'Event Full')
        """
        return _STATUS_BY_CODE.get(
            code, (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
        )
