"""Command handlers."""

from campus_events.application.commands.handlers.change_registration_status_handler import (
    ChangeRegistrationStatusHandler,
)
from campus_events.application.commands.handlers.create_event_handler import (
    CreateEventHandler,
)
from campus_events.application.commands.handlers.delete_event_handler import (
    DeleteEventHandler,
)
from campus_events.application.commands.handlers.register_for_event_handler import (
    RegisterForEventHandler,
)
from campus_events.application.commands.handlers.update_event_handler import (
    UpdateEventHandler,
)

__all__ = [
    "ChangeRegistrationStatusHandler",
    "CreateEventHandler",
    "DeleteEventHandler",
    "RegisterForEventHandler",
    "UpdateEventHandler",
]
