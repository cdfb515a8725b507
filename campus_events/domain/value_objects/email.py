"""Email value object with validation."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Email address normalized for case-insensitive comparison.

    Registrations are keyed by ``(event_id, user_email)``, so every email that
    reaches the ledger goes through this object first. The whole address is
    lowercased after RFC validation.

    Attributes:
        value: The normalized email address.

    Raises:
        ValueError: If the email format is invalid.

    Example:
        >>> str(Email("Ada@Campus.EDU"))
        'ada@campus.edu'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the address.

        Raises:
            ValueError: If email format is invalid.
        """
        try:
            validated = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", validated.normalized.lower())

    def __str__(self) -> str:
        return self.value
