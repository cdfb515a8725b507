"""Application commands."""

from campus_events.application.commands.event_commands import (
    CreateEvent,
    DeleteEvent,
    UpdateEvent,
)
from campus_events.application.commands.registration_commands import (
    ChangeRegistrationStatus,
    RegisterForEvent,
)

__all__ = [
    "ChangeRegistrationStatus",
    "CreateEvent",
    "DeleteEvent",
    "RegisterForEvent",
    "UpdateEvent",
]
