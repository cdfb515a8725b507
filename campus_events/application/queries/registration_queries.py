"""Registration ledger queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID

from campus_events.domain.value_objects import UserIdentity


@dataclass(frozen=True, kw_only=True)
class ListEventRegistrations:
    """List an event's registrations, most recent first (administrators only)."""

    event_id: UUID
    actor: UserIdentity


@dataclass(frozen=True, kw_only=True)
class ListMyRegistrations:
    """List the caller's own registrations, most recent first."""

    actor: UserIdentity


@dataclass(frozen=True, kw_only=True)
class ListAllRegistrations:
    """List every registration, most recent first (administrators only)."""

    actor: UserIdentity


@dataclass(frozen=True, kw_only=True)
class GetCatalogStats:
    """Dashboard counters.

    Ledger-wide figures are included for administrators only.
    """

    actor: UserIdentity
