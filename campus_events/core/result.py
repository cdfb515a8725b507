"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising, so every failure
mode is visible in the signature and can be asserted on directly in tests.

Usage:
    def admit(...) -> Result[Registration, DomainError]:
        if event.status is not EventStatus.UPCOMING:
            return Failure(error=EventNotOpenError(...))
        return Success(value=registration)

    match await handler.handle(command):
        case Success(value=registration):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
