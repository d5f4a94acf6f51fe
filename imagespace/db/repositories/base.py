"""Base repository pattern for data access."""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Generic repository with CRUD operations for SQLModel tables."""

    def __init__(self, session: Session, model: Type[T]):
        """Initialize repository with session and model type.

        Args:
            session: Database session
            model: The model class this repository operates on
        """
        self.session: Any = session
        self.model = model

    def get(self, id: str) -> Optional[T]:
        """Get entity by primary key, None if absent."""
        return self.session.get(self.model, id)

    def add(self, entity: T) -> T:
        """Add new entity and flush it."""
        self.session.add(entity)
        self.session.flush()
        return entity

    def delete(self, entity: T) -> None:
        """Delete entity and flush."""
        self.session.delete(entity)
        self.session.flush()

    def commit(self) -> None:
        """Commit transaction."""
        self.session.commit()

    def rollback(self) -> None:
        """Rollback transaction."""
        self.session.rollback()
