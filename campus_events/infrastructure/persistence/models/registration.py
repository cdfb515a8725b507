"""Registration database model.

The partial unique index ``uq_registrations_event_user_active`` allows at most
one non-cancelled registration per (event_id, user_email). Cancelled rows are
kept as history and do not block a new registration.

Indexes:
    - uq_registrations_event_user_active: unique (event_id, user_email) WHERE status <> 'cancelled'
    - idx_registrations_event_status: (event_id, status) for seat counts
    - idx_registrations_user_email: (user_email) for "my registrations"
    - idx_registrations_registration_date: (registration_date) for admin listing
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, String, func, text
from sqlalchemy.orm import Mapped, mapped_column

from campus_events.domain.enums import RegistrationStatus
from campus_events.infrastructure.persistence.base import BaseMutableModel

_ACTIVE = text(f"status <> '{RegistrationStatus.CANCELLED.value}'")


class RegistrationModel(BaseMutableModel):
    """Registration ledger row."""

    __tablename__ = "registrations"

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
    )
    event_title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="Event title at registration time (not kept in sync)",
    )
    user_email: Mapped[str] = mapped_column(String(320), nullable=False)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=RegistrationStatus.CONFIRMED.value
    )
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('confirmed', 'cancelled', 'attended')",
            name="ck_registrations_status",
        ),
        Index(
            "uq_registrations_event_user_active",
            "event_id",
            "user_email",
            unique=True,
            postgresql_where=_ACTIVE,
            sqlite_where=_ACTIVE,
        ),
        Index("idx_registrations_event_status", "event_id", "status"),
        Index("idx_registrations_user_email", "user_email"),
        Index("idx_registrations_registration_date", "registration_date"),
    )
