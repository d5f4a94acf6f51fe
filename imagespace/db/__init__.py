"""Database engine and session helpers."""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from .config import Settings, settings

_engine: Optional[Engine] = None


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine and make sure the schema exists."""
    connect_args: Dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=echo, connect_args=connect_args)

    # Register table models before create_all
    from ..models import StoreEntry  # noqa: F401

    SQLModel.metadata.create_all(engine)
    return engine


def get_engine() -> Engine:
    """Get or create the global engine from settings."""
    global _engine
    if _engine is None:
        _engine = make_engine(settings.database_url, echo=settings.sql_echo)
    return _engine


@contextmanager
def get_db_session(engine: Optional[Engine] = None) -> Iterator[Session]:
    """Open a session that is closed on exit."""
    with Session(engine or get_engine()) as session:
        yield session


__all__ = ["Settings", "get_db_session", "get_engine", "make_engine", "settings"]
