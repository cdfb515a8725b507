"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/event_full",
        ...     title="Event Full",
        ...     status=409,
        ...     detail="Event has reached maximum capacity",
        ...     instance="/api/v1/events/0192.../registrations",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/event_full"],
    )
    title: str = Field(..., description="Short, human-readable summary", examples=["Event Full"])
    status: int = Field(..., description="HTTP status code", examples=[409])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Event has reached maximum capacity"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/events/0192f0c1-0000-7000-8000-000000000000/registrations"],
    )
    errors: list[ErrorDetail] | None = Field(None, description="List of field-specific errors")
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
