"""Catalog filter value object."""

from dataclasses import dataclass

from campus_events.domain.enums import EventCategory, EventSort, EventStatus

ALL = "all"


@dataclass(frozen=True, slots=True, kw_only=True)
class EventFilter:
    """Predicates and ordering for a catalog listing.

    ``None`` disables a predicate. Use ``from_params`` to build one from raw
    query values, where ``"all"`` and blank strings also disable a predicate.

    Attributes:
        search: Case-insensitive substring matched against title or description.
        category: Exact category.
        status: Exact status.
        sort: Ordering key.
        limit: Maximum number of events (None = repository default).
    """

    search: str | None = None
    category: EventCategory | None = None
    status: EventStatus | None = None
    sort: EventSort = EventSort.DATE_DESC
    limit: int | None = None

    @classmethod
    def from_params(
        cls,
        *,
        search: str | None = None,
        category: str | None = None,
        status: str | None = None,
        sort: EventSort = EventSort.DATE_DESC,
        limit: int | None = None,
    ) -> "EventFilter":
        """Build a filter from raw listing parameters.

        Raises:
            ValueError: If category or status is not a known value.
        """

        def _active(value: str | None) -> str | None:
            if value is None:
                return None
            value = value.strip()
            if not value or value.lower() == ALL:
                return None
            return value

        raw_category = _active(category)
        raw_status = _active(status)
        return cls(
            search=_active(search),
            category=EventCategory(raw_category.lower()) if raw_category else None,
            status=EventStatus(raw_status.lower()) if raw_status else None,
            sort=sort,
            limit=limit,
        )
