"""Pytest configuration for API tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from imagespace.catalog import Catalog


@pytest.fixture
def client(catalog: Catalog) -> Generator[TestClient, None, None]:
    """Create a test client wired to the in-memory catalog."""
    from imagespace.api.app import app
    from imagespace.api.deps import get_catalog

    app.dependency_overrides[get_catalog] = lambda: catalog

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin(catalog: Catalog) -> Catalog:
    """Catalog with admin mode enabled."""
    catalog.config.set_admin(True)
    return catalog
