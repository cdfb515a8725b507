"""Database models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from campus_events.infrastructure.persistence.models.event import EventModel
from campus_events.infrastructure.persistence.models.registration import (
    RegistrationModel,
)

__all__ = ["EventModel", "RegistrationModel"]
