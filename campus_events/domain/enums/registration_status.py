"""Registration status enumeration and its transition table.

State Machine:
    CONFIRMED → CANCELLED   (the registration's own user)
    CONFIRMED → ATTENDED    (an administrator)
    CANCELLED, ATTENDED     (terminal)

A cancelled registration is never revived; the user registers again instead,
which creates a new record.
"""

from enum import Enum


class RegistrationStatus(str, Enum):
    """Lifecycle status of a registration."""

    CONFIRMED = "confirmed"
    """Seat held. Counts toward event capacity."""

    CANCELLED = "cancelled"
    """Released by the registered user. Terminal."""

    ATTENDED = "attended"
    """Attendance recorded by an administrator. Terminal."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            list[str]: List of status values.
        """
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid status.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid status.
        """
        return value in cls.values()

    @classmethod
    def active_states(cls) -> list["RegistrationStatus"]:
        """Get states that mean "this user is registered".

        Returns:
            list[RegistrationStatus]: Non-cancelled states.
        """
        return [cls.CONFIRMED, cls.ATTENDED]

    @classmethod
    def terminal_states(cls) -> list["RegistrationStatus"]:
        """Get terminal states (no further transitions).

        Returns:
            list[RegistrationStatus]: Terminal states.
        """
        return [cls.CANCELLED, cls.ATTENDED]

    def can_transition_to(self, target: "RegistrationStatus") -> bool:
        """Check whether the transition table allows ``self → target``.

        Args:
            target: Requested new status.

        Returns:
            bool: True if the transition is in the table.
        """
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[RegistrationStatus, frozenset[RegistrationStatus]] = {
    RegistrationStatus.CONFIRMED: frozenset(
        {RegistrationStatus.CANCELLED, RegistrationStatus.ATTENDED}
    ),
    RegistrationStatus.CANCELLED: frozenset(),
    RegistrationStatus.ATTENDED: frozenset(),
}
