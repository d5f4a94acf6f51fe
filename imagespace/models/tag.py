"""Tag model - classification labels attached to images."""

from sqlmodel import Field

from .base import CreatedAtMixin, new_id


class Tag(CreatedAtMixin):
    """Tag record. Names are unique ignoring case within a catalog."""

    id: str = Field(default_factory=new_id)
    name: str
