"""User roles.

The identity provider hands over a free-form role string. It is normalized
into this closed enumeration once, at the boundary, and only ``ADMIN`` grants
anything extra.

Usage:
    from campus_events.domain.enums import UserRole

    role = UserRole.from_raw(headers.get("X-User-Role"))
    if role is UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Closed role enumeration: administrator vs everyone else."""

    ADMIN = "admin"
    """Manages the catalog and records attendance."""

    USER = "user"
    """Browses events and manages their own registrations."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['admin', 'user'].
        """
        return [role.value for role in cls]

    @classmethod
    def from_raw(cls, value: str | None) -> "UserRole":
        """Normalize an identity-provider role string.

        Args:
            value: Raw role (any casing, may be None).

        Returns:
            UserRole: ADMIN for "admin", USER for anything else.
        """
        if value is not None and value.strip().lower() == cls.ADMIN.value:
            return cls.ADMIN
        return cls.USER
