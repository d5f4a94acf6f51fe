"""Tests for the store entry repository."""

from sqlmodel import Session

from imagespace.db.repositories.store import StoreEntryRepository


def test_put_value_inserts_then_updates(db_session: Session) -> None:
    """Should upsert the document stored under a key."""
    repo = StoreEntryRepository(db_session)

    repo.put_value("images", "[]")
    repo.commit()

    repo.put_value("images", '[{"id": "x"}]')
    repo.commit()

    assert repo.get_value("images") == '[{"id": "x"}]'
    assert repo.keys() == ["images"]


def test_get_value_missing(db_session: Session) -> None:
    """Should return None for absent keys."""
    assert StoreEntryRepository(db_session).get_value("tags") is None


def test_delete_key(db_session: Session) -> None:
    """Should report whether a key was deleted."""
    repo = StoreEntryRepository(db_session)
    repo.put_value("tags", "[]")
    repo.commit()

    assert repo.delete_key("tags") is True
    assert repo.delete_key("tags") is False
    assert repo.keys() == []


def test_keys_sorted(db_session: Session) -> None:
    """Should list keys alphabetically."""
    repo = StoreEntryRepository(db_session)
    for key in ("tags", "appConfig", "images"):
        repo.put_value(key, "null")
    repo.commit()

    assert repo.keys() == ["appConfig", "images", "tags"]
