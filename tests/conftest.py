"""Shared fixtures for imagespace tests."""

import pytest

from imagespace.catalog import Catalog
from imagespace.storage import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    """Empty in-memory persistence backend."""
    return MemoryStore()


@pytest.fixture
def catalog(store: MemoryStore) -> Catalog:
    """Catalog hydrated from an empty store: default tags, no images."""
    return Catalog.open(store)
