"""Unified SQLModel definitions for imagespace."""

from .base import CreatedAtMixin, new_id, utcnow
from .image import Annotation, Image
from .preferences import AppConfig, DatasetContent, MediaSection
from .store import StoreEntry
from .tag import Tag

__all__ = [
    "Annotation",
    "AppConfig",
    "CreatedAtMixin",
    "DatasetContent",
    "Image",
    "MediaSection",
    "StoreEntry",
    "Tag",
    "new_id",
    "utcnow",
]
