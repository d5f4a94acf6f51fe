"""Config store - UI preferences and the admin flag."""

import logging

from pydantic import ValidationError

from ..models.preferences import (
    DEFAULT_ITEMS_PER_ROW,
    MAX_ITEMS_PER_ROW,
    MIN_ITEMS_PER_ROW,
    AppConfig,
)
from ..storage import KeyValueStore

logger = logging.getLogger(__name__)

APP_CONFIG_KEY = "appConfig"
ADMIN_KEY = "isAdmin"


class ConfigStore:
    """Grid layout preference and admin mode, persisted independently."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.config = AppConfig()
        self.is_admin = False

    @property
    def items_per_row(self) -> int:
        return self.config.items_per_row

    def load(self) -> None:
        saved = self.store.get(APP_CONFIG_KEY)
        if isinstance(saved, dict):
            try:
                self.config = AppConfig.model_validate(saved)
            except ValidationError as e:
                logger.error(f"Ignoring malformed '{APP_CONFIG_KEY}': {e}")
                self.config = AppConfig()

        if not MIN_ITEMS_PER_ROW <= self.config.items_per_row <= MAX_ITEMS_PER_ROW:
            self.config.items_per_row = DEFAULT_ITEMS_PER_ROW

        self.is_admin = self.store.get(ADMIN_KEY) is True

    def save(self) -> None:
        self.store.set(APP_CONFIG_KEY, self.config.model_dump(mode="json"))
        self.store.set(ADMIN_KEY, self.is_admin)

    def set_items_per_row(self, count: int) -> bool:
        """Change the grid width. Only 2 to 4 images per row are allowed."""
        if not MIN_ITEMS_PER_ROW <= count <= MAX_ITEMS_PER_ROW:
            return False

        self.config.items_per_row = count
        self.save()
        return True

    def set_admin(self, enabled: bool) -> None:
        self.is_admin = enabled
        self.save()
