"""Event status enumeration.

Only ``UPCOMING`` events accept new registrations. Status changes are plain
administrator edits; there is no enforced ordering between event statuses.
"""

from enum import Enum


class EventStatus(str, Enum):
    """Lifecycle status of an event."""

    UPCOMING = "upcoming"
    """Scheduled and open for registration."""

    ONGOING = "ongoing"
    """Currently running. Closed for registration."""

    COMPLETED = "completed"
    """Finished. Closed for registration."""

    CANCELLED = "cancelled"
    """Called off by the organizers. Closed for registration."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            list[str]: List of status values.
        """
        return [status.value for status in cls]

    @classmethod
    def open_states(cls) -> list["EventStatus"]:
        """Get states that accept new registrations.

        Returns:
            list[EventStatus]: Registration-accepting states.
        """
        return [cls.UPCOMING]
