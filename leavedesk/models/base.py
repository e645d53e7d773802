from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


def _id_factory() -> str:
    """Generate a new opaque identifier."""
    return str(uuid.uuid4())


def _now_utc() -> datetime:
    """Return the current UTC time."""
    return datetime.now(UTC)


class IdentifiedBase(SQLModel):
    """Base model with an opaque string identifier."""

    id: str = Field(default_factory=_id_factory, min_length=1)


class TimestampMixin(SQLModel):
    """Mixin that adds a created_at timestamp."""

    created_at: datetime = Field(default_factory=_now_utc)
