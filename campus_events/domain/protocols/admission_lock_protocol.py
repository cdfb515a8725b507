"""Per-event admission serialization protocol."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol
from uuid import UUID


class AdmissionLockProtocol(Protocol):
    """Exclusive section keyed by event id.

    Admission attempts and capacity edits for the same event run one at a
    time inside ``hold``. Different events never block each other.

    Example:
        >>> async with locks.hold(event_id):
        ...     ...  # read ledger state, decide, write
    """

    def hold(self, event_id: UUID) -> AbstractAsyncContextManager[None]:
        """Enter the exclusive section for ``event_id``."""
        ...
