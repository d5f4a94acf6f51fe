"""Content store - the dataset documentation page."""

import logging

from pydantic import ValidationError

from ..models.preferences import DatasetContent
from ..storage import KeyValueStore

logger = logging.getLogger(__name__)

CONTENT_KEY = "datasetPageContent"


class ContentStore:
    def __init__(self, store: KeyValueStore):
        self.store = store
        self.content = DatasetContent()

    def load(self) -> None:
        saved = self.store.get(CONTENT_KEY)
        if not isinstance(saved, dict):
            return
        try:
            self.content = DatasetContent.model_validate(saved)
        except ValidationError as e:
            logger.error(f"Ignoring malformed '{CONTENT_KEY}': {e}")

    def save(self, content: DatasetContent) -> bool:
        """Replace the page content and persist it."""
        self.content = content
        return self.store.set(CONTENT_KEY, content.model_dump(mode="json"))
