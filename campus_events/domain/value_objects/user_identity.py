"""Identity of the caller, as supplied by the identity provider."""

from dataclasses import dataclass

from campus_events.domain.enums.user_role import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class UserIdentity:
    """Authenticated caller.

    Attributes:
        email: Normalized email (the ledger's user key).
        full_name: Display name, snapshotted onto new registrations.
        role: Normalized role.
    """

    email: str
    full_name: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        """Whether the caller is an administrator."""
        return self.role is UserRole.ADMIN

    def owns(self, user_email: str) -> bool:
        """Whether ``user_email`` belongs to this caller."""
        return self.email == user_email.lower()
