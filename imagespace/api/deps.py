"""Shared FastAPI dependencies."""

import threading
from typing import Iterator, Optional

from fastapi import Depends, HTTPException, Query

from ..catalog import Catalog
from ..db import get_engine, settings
from ..storage import DatabaseStore

_catalog: Optional[Catalog] = None

# Endpoints run in FastAPI's threadpool; one request touches the catalog at a time
catalog_lock = threading.Lock()


def _open_catalog() -> Catalog:
    global _catalog
    if _catalog is None:
        _catalog = Catalog.open(
            DatabaseStore(get_engine()),
            seed_demo_images=settings.seed_demo_images,
        )
    return _catalog


def get_catalog() -> Iterator[Catalog]:
    """Process-wide catalog, hydrated from the database on first use.

    The catalog lock is held until the request's dependencies are torn
    down. Waiting gives up after ``settings.catalog_lock_timeout`` seconds
    so blocked requests cannot exhaust the threadpool.
    """
    if not catalog_lock.acquire(timeout=settings.catalog_lock_timeout):
        raise HTTPException(status_code=503, detail="Catalog is busy, retry later")
    try:
        yield _open_catalog()
    finally:
        catalog_lock.release()


def require_admin(catalog: Catalog = Depends(get_catalog)) -> Catalog:
    """Gate destructive operations behind admin mode."""
    if not catalog.config.is_admin:
        raise HTTPException(status_code=403, detail="Admin mode required")
    return catalog


def require_confirmation(confirm: bool = Query(False)) -> None:
    """Destructive operations must be explicitly confirmed."""
    if not confirm:
        raise HTTPException(
            status_code=428, detail="Confirmation required: pass confirm=true"
        )
