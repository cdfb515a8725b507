"""Persistence layer (SQLAlchemy async)."""

from campus_events.infrastructure.persistence.base import BaseModel, BaseMutableModel
from campus_events.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
