"""create_events_and_registrations

Revision ID: 3f6b2a9c1d40
Revises:
Create Date: 2026-10-18 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f6b2a9c1d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ACTIVE = sa.text("status <> 'cancelled'")


def upgrade() -> None:
    """Create events and registrations tables."""
    op.create_table(
        "events",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        # Catalog fields
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=True),
        sa.Column("end_time", sa.Time(), nullable=True),
        sa.Column("venue", sa.String(length=255), nullable=True),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("organizer", sa.String(length=255), nullable=True),
        sa.Column("contact_email", sa.String(length=320), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        # Admission inputs
        sa.Column(
            "max_capacity",
            sa.Integer(),
            nullable=True,
            comment="Seat limit; NULL means unbounded",
        ),
        sa.Column(
            "registration_deadline",
            sa.Date(),
            nullable=True,
            comment="Last day registrations are accepted; NULL means no cutoff",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "max_capacity IS NULL OR max_capacity > 0",
            name="ck_events_max_capacity_positive",
        ),
        sa.CheckConstraint(
            "category IN ('academic', 'cultural', 'sports', 'workshop', 'seminar', 'fest', 'other')",
            name="ck_events_category",
        ),
        sa.CheckConstraint(
            "status IN ('upcoming', 'ongoing', 'completed', 'cancelled')",
            name="ck_events_status",
        ),
    )
    op.create_index("idx_events_date", "events", ["date"])
    op.create_index("idx_events_status", "events", ["status"])
    op.create_index("idx_events_category", "events", ["category"])

    op.create_table(
        "registrations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("event_id", sa.Uuid(), nullable=False),
        sa.Column(
            "event_title",
            sa.String(length=200),
            nullable=False,
            comment="Event title at registration time (not kept in sync)",
        ),
        sa.Column("user_email", sa.String(length=320), nullable=False),
        sa.Column("user_name", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column(
            "registration_date",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "status IN ('confirmed', 'cancelled', 'attended')",
            name="ck_registrations_status",
        ),
    )
    # At most one non-cancelled registration per (event, user)
    op.create_index(
        "uq_registrations_event_user_active",
        "registrations",
        ["event_id", "user_email"],
        unique=True,
        postgresql_where=_ACTIVE,
        sqlite_where=_ACTIVE,
    )
    op.create_index(
        "idx_registrations_event_status", "registrations", ["event_id", "status"]
    )
    op.create_index("idx_registrations_user_email", "registrations", ["user_email"])
    op.create_index(
        "idx_registrations_registration_date", "registrations", ["registration_date"]
    )


def downgrade() -> None:
    """Drop registrations and events tables."""
    op.drop_index("idx_registrations_registration_date", table_name="registrations")
    op.drop_index("idx_registrations_user_email", table_name="registrations")
    op.drop_index("idx_registrations_event_status", table_name="registrations")
    op.drop_index("uq_registrations_event_user_active", table_name="registrations")
    op.drop_table("registrations")
    op.drop_index("idx_events_category", table_name="events")
    op.drop_index("idx_events_status", table_name="events")
    op.drop_index("idx_events_date", table_name="events")
    op.drop_table("events")
