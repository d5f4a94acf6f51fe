"""Persistence port - synchronous key/value storage for catalog state.

Values are JSON documents. Every backend failure, including values that
cannot be serialized, is logged and swallowed: callers keep their in-memory
state as the source of truth and the next successful write resynchronizes.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import ValidationError
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from .db import get_db_session
from .db.repositories.store import StoreEntryRepository

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=SQLModel)


class KeyValueStore:
    """Base class for persistence backends.

    Subclasses implement ``_read``, ``_write`` and ``_delete`` on raw JSON
    text and may raise freely; the public methods never do.
    """

    def get(self, key: str) -> Optional[Any]:
        """Load the value stored under ``key``, None if absent or unreadable."""
        try:
            raw = self._read(key)
            return json.loads(raw) if raw else None
        except Exception as e:
            logger.error(f"Error reading '{key}' from store: {e}")
            return None

    def set(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key``. Returns False if the write failed."""
        try:
            self._write(key, json.dumps(value))
            return True
        except Exception as e:
            logger.error(f"Error saving '{key}' to store: {e}")
            return False

    def remove(self, key: str) -> bool:
        """Remove ``key``. Returns False if the delete failed."""
        try:
            self._delete(key)
            return True
        except Exception as e:
            logger.error(f"Error removing '{key}' from store: {e}")
            return False

    def _read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _write(self, key: str, raw: str) -> None:
        raise NotImplementedError

    def _delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Process-local store, lost on exit."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def keys(self) -> List[str]:
        return sorted(self._data)

    def _read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _write(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def _delete(self, key: str) -> None:
        self._data.pop(key, None)


class DatabaseStore(KeyValueStore):
    """Store backed by the ``store_entries`` table.

    Each call runs in its own short session and commits immediately.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def keys(self) -> List[str]:
        with get_db_session(self.engine) as session:
            return StoreEntryRepository(session).keys()

    def _read(self, key: str) -> Optional[str]:
        with get_db_session(self.engine) as session:
            return StoreEntryRepository(session).get_value(key)

    def _write(self, key: str, raw: str) -> None:
        with get_db_session(self.engine) as session:
            repo = StoreEntryRepository(session)
            try:
                repo.put_value(key, raw)
                repo.commit()
            except Exception:
                repo.rollback()
                raise

    def _delete(self, key: str) -> None:
        with get_db_session(self.engine) as session:
            repo = StoreEntryRepository(session)
            try:
                repo.delete_key(key)
                repo.commit()
            except Exception:
                repo.rollback()
                raise


def dump_records(records: List[SQLModel]) -> List[Dict[str, Any]]:
    """Serialize records to JSON-compatible dicts (datetimes as ISO strings)."""
    return [record.model_dump(mode="json") for record in records]


def load_records(store: KeyValueStore, key: str, model: Type[M]) -> List[M]:
    """Load a persisted record list, rehydrating timestamps.

    Args:
        store: Persistence backend
        key: Key holding the list
        model: Record class to validate each item against

    Returns:
        Loaded records; empty if absent or malformed
    """
    saved = store.get(key)
    if not saved:
        return []
    if not isinstance(saved, list):
        logger.error(f"Ignoring '{key}': expected a list, got {type(saved).__name__}")
        return []

    try:
        return [model.model_validate(item) for item in saved]
    except ValidationError as e:
        logger.error(f"Ignoring malformed '{key}' records: {e}")
        return []
