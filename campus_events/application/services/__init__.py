"""Application services."""

from campus_events.application.services.access_policy import require_admin
from campus_events.application.services.aggregate_view import AggregateView

__all__ = ["AggregateView", "require_admin"]
