"""Store entry model - durable key/value rows behind the persistence port."""

from datetime import datetime

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

from .base import utcnow


class StoreEntry(SQLModel, table=True):
    """StoreEntry database model - one JSON document per key."""

    __tablename__ = "store_entries"

    key: str = Field(primary_key=True, max_length=255)
    value: str = Field(sa_column=Column(Text, nullable=False))
    updated_at: datetime = Field(default_factory=utcnow)
