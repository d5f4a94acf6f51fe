"""Image and annotation models."""

from datetime import datetime
from typing import List

from sqlmodel import Field, SQLModel

from .base import CreatedAtMixin, new_id, utcnow


class Annotation(CreatedAtMixin):
    """Free-text note owned by exactly one image."""

    id: str = Field(default_factory=new_id)
    content: str


class Image(SQLModel):
    """Image record in the gallery catalog.

    ``tags`` holds tag ids in insertion order without duplicates. The
    reference is weak: a deleted tag leaves its id behind.
    """

    id: str = Field(default_factory=new_id)
    name: str
    url: str
    tags: List[str] = Field(default_factory=list)
    is_starred: bool = False
    annotations: List[Annotation] = Field(default_factory=list)
    upload_date: datetime = Field(default_factory=utcnow)
