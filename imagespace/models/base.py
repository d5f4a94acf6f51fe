"""Base model helpers shared by imagespace records."""

import uuid
from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate a fresh opaque record id."""
    return str(uuid.uuid4())


class CreatedAtMixin(SQLModel):
    """Mixin for records stamped with their creation time."""

    created_at: datetime = Field(default_factory=utcnow)
