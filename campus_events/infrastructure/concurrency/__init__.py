"""Concurrency primitives."""

from campus_events.infrastructure.concurrency.admission_locks import (
    InProcessAdmissionLocks,
)

__all__ = ["InProcessAdmissionLocks"]
