"""Store entry repository for the key/value persistence port."""

from typing import List, Optional

from sqlmodel import Session, select

from ...models.base import utcnow
from ...models.store import StoreEntry
from .base import BaseRepository


class StoreEntryRepository(BaseRepository[StoreEntry]):
    """Repository for StoreEntry operations."""

    def __init__(self, session: Session):
        """Initialize store entry repository.

        Args:
            session: SQLModel database session
        """
        super().__init__(session, StoreEntry)

    def get_value(self, key: str) -> Optional[str]:
        """Get the raw stored document for a key.

        Args:
            key: Entry key

        Returns:
            Stored text, or None if the key is absent
        """
        entry = self.get(key)
        return entry.value if entry else None

    def put_value(self, key: str, value: str) -> StoreEntry:
        """Insert or replace the document stored under a key.

        Args:
            key: Entry key
            value: Serialized document

        Returns:
            The stored entry
        """
        entry = self.get(key)
        if entry is None:
            return self.add(StoreEntry(key=key, value=value))

        entry.value = value
        entry.updated_at = utcnow()
        self.session.add(entry)
        self.session.flush()
        return entry

    def delete_key(self, key: str) -> bool:
        """Delete the entry for a key.

        Returns:
            True if an entry was deleted
        """
        entry = self.get(key)
        if entry is None:
            return False
        self.delete(entry)
        return True

    def keys(self) -> List[str]:
        """List stored keys in sorted order."""
        stmt = select(StoreEntry.key).order_by(StoreEntry.key)
        return list(self.session.exec(stmt).all())
