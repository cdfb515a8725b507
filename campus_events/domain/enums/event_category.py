"""Event category enumeration."""

from enum import Enum


class EventCategory(str, Enum):
    """Fixed set of event categories shown in the catalog."""

    ACADEMIC = "academic"
    CULTURAL = "cultural"
    SPORTS = "sports"
    WORKSHOP = "workshop"
    SEMINAR = "seminar"
    FEST = "fest"
    OTHER = "other"

    @classmethod
    def values(cls) -> list[str]:
        """Get all category values as strings."""
        return [category.value for category in cls]
