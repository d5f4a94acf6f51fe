"""Test database configuration and fixtures.

Uses an in-memory SQLite database shared across connections so each test
starts from an empty schema.
"""

from typing import Generator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from imagespace.models import StoreEntry  # noqa: F401


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create a fresh in-memory engine with all tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    """Create a database session with automatic rollback."""
    with Session(engine) as session:
        yield session
        session.rollback()
