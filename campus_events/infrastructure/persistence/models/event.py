"""Event database model.

Indexes:
    - idx_events_date: (date) for browse ordering
    - idx_events_status: (status) for status filters
    - idx_events_category: (category) for category filters
"""

import datetime as dt

from sqlalchemy import CheckConstraint, Date, Index, Integer, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column

from campus_events.domain.enums import EventCategory, EventStatus
from campus_events.infrastructure.persistence.base import BaseMutableModel


def _in_values(column: str, values: list[str]) -> str:
    quoted = ", ".join(f"'{value}'" for value in values)
    return f"{column} IN ({quoted})"


class EventModel(BaseMutableModel):
    """Catalog event row."""

    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    start_time: Mapped[dt.time | None] = mapped_column(Time, nullable=True)
    end_time: Mapped[dt.time | None] = mapped_column(Time, nullable=True)
    venue: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, default=EventCategory.ACADEMIC.value
    )
    organizer: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=EventStatus.UPCOMING.value
    )
    max_capacity: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Seat limit; NULL means unbounded",
    )
    registration_deadline: Mapped[dt.date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Last day registrations are accepted; NULL means no cutoff",
    )

    __table_args__ = (
        CheckConstraint(
            "max_capacity IS NULL OR max_capacity > 0",
            name="ck_events_max_capacity_positive",
        ),
        CheckConstraint(
            _in_values("category", EventCategory.values()),
            name="ck_events_category",
        ),
        CheckConstraint(
            _in_values("status", EventStatus.values()),
            name="ck_events_status",
        ),
        Index("idx_events_date", "date"),
        Index("idx_events_status", "status"),
        Index("idx_events_category", "category"),
    )
