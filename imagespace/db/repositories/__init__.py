"""Database repositories for data access."""

from .base import BaseRepository
from .store import StoreEntryRepository

__all__ = ["BaseRepository", "StoreEntryRepository"]
