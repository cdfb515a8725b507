"""Sort keys accepted by catalog listings.

Values use the "-field" convention for descending order.
"""

from enum import Enum


class EventSort(str, Enum):
    """Catalog ordering."""

    DATE_DESC = "-date"
    """Most recent event date first (browsing default)."""

    DATE_ASC = "date"
    """Soonest event date first."""

    CREATED_DESC = "-created_date"
    """Most recently created first (administration default)."""

    CREATED_ASC = "created_date"
    """Oldest creation first."""

    @property
    def descending(self) -> bool:
        """Whether this key sorts in descending order."""
        return self.value.startswith("-")

    @property
    def field_name(self) -> str:
        """Event attribute the key sorts on."""
        return self.value.lstrip("-")
