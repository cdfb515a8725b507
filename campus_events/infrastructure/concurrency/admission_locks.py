"""In-process per-event admission locks.

Implements AdmissionLockProtocol with one ``asyncio.Lock`` per event id.
Locks exist only while someone holds or waits for them, so the registry does
not grow with the catalog.

This serializes admissions handled by one process. Admissions from other
processes are ordered by the store's conditional write.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID


class InProcessAdmissionLocks:
    """Registry of per-event asyncio locks.

    Example:
        >>> locks = InProcessAdmissionLocks()
        >>> async with locks.hold(event_id):
        ...     ...
    """

    def __init__(self) -> None:
        self._locks: dict[UUID, asyncio.Lock] = {}
        self._users: dict[UUID, int] = {}

    @asynccontextmanager
    async def hold(self, event_id: UUID) -> AsyncIterator[None]:
        """Enter the exclusive section for ``event_id``."""
        lock = self._locks.setdefault(event_id, asyncio.Lock())
        self._users[event_id] = self._users.get(event_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[event_id] -= 1
            if self._users[event_id] == 0:
                del self._users[event_id]
                del self._locks[event_id]

    def active_count(self) -> int:
        """Number of events with a held or awaited lock."""
        return len(self._locks)
