"""Domain protocols (ports implemented by infrastructure adapters)."""

from campus_events.domain.protocols.admission_lock_protocol import AdmissionLockProtocol
from campus_events.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from campus_events.domain.protocols.cache_protocol import CacheProtocol
from campus_events.domain.protocols.event_repository import EventRepository
from campus_events.domain.protocols.logger_protocol import LoggerProtocol
from campus_events.domain.protocols.registration_repository import (
    RegistrationRepository,
)

__all__ = [
    "AdmissionLockProtocol",
    "CacheKeysProtocol",
    "CacheProtocol",
    "EventRepository",
    "LoggerProtocol",
    "RegistrationRepository",
]
