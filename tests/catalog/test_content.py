"""Tests for the dataset content store."""

from imagespace.catalog.content import CONTENT_KEY, ContentStore
from imagespace.models.preferences import DatasetContent
from imagespace.storage import MemoryStore


def test_defaults_when_nothing_saved(store: MemoryStore) -> None:
    """Should start with empty content."""
    content = ContentStore(store)
    content.load()
    assert content.content == DatasetContent()


def test_save_and_reload(store: MemoryStore) -> None:
    """Should persist content and load it back."""
    content = ContentStore(store)
    saved = DatasetContent(title="Solder joints", defect_types=["Burst"])

    assert content.save(saved) is True
    assert store.get(CONTENT_KEY)["title"] == "Solder joints"

    reloaded = ContentStore(store)
    reloaded.load()
    assert reloaded.content == saved


def test_malformed_content_ignored(store: MemoryStore) -> None:
    """Should keep defaults when the saved document is malformed."""
    store.set(CONTENT_KEY, {"defect_types": "not a list"})
    content = ContentStore(store)
    content.load()
    assert content.content == DatasetContent()
