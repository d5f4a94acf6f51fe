"""Catalog engine - composes the tag, image and config stores.

The catalog owns the transient browsing state (search text, tag filter,
selection) and exposes the full command and query surface used by the
HTTP API and the CLI. It is single-threaded: every command runs to
completion and persists its slice of state before returning.
"""

import logging
import re
from datetime import datetime
from typing import Collection, Iterable, List, Optional, Set

from ..models.image import Annotation, Image
from ..models.tag import Tag
from ..storage import KeyValueStore
from .app_config import ConfigStore
from .content import ContentStore
from .images import ImageStore
from .query import filtered_view
from .tags import TagStore

logger = logging.getLogger(__name__)

# Extensions dropped from names by the export action
_EXPORT_EXTENSION = re.compile(r"\.(png|jpe?g)$", re.IGNORECASE)


def strip_image_extension(name: str) -> str:
    """Drop a trailing .png/.jpg/.jpeg from a file name."""
    return _EXPORT_EXTENSION.sub("", name)


class Catalog:
    """Process-wide gallery state handed to consumers by reference."""

    def __init__(self, store: KeyValueStore, seed_demo_images: bool = False):
        self.store = store
        self.tag_store = TagStore(store)
        self.image_store = ImageStore(store)
        self.config = ConfigStore(store)
        self.content = ContentStore(store)
        self.seed_demo_images = seed_demo_images

        self.search_query = ""
        self.tag_filter: Set[str] = set()
        self.selection: Set[str] = set()

    @classmethod
    def open(cls, store: KeyValueStore, seed_demo_images: bool = False) -> "Catalog":
        """Create a catalog and hydrate it from ``store``."""
        catalog = cls(store, seed_demo_images=seed_demo_images)
        catalog.load()
        return catalog

    def load(self) -> None:
        self.tag_store.load()
        self.image_store.load(seed_demo_images=self.seed_demo_images)
        self.config.load()
        self.content.load()
        logger.info(
            f"Loaded catalog with {len(self.images)} images and {len(self.tags)} tags"
        )

    @property
    def images(self) -> List[Image]:
        return self.image_store.images

    @property
    def tags(self) -> List[Tag]:
        return self.tag_store.tags

    # Images

    def get_image(self, image_id: str) -> Optional[Image]:
        return self.image_store.get(image_id)

    def add_image(
        self, name: str, url: str, upload_date: Optional[datetime] = None
    ) -> Image:
        return self.image_store.add_image(name, url, upload_date=upload_date)

    def update_image_tags(
        self, image_id: str, tag_ids: Iterable[str]
    ) -> Optional[Image]:
        return self.image_store.update_image_tags(image_id, tag_ids)

    def toggle_star(self, image_id: str) -> Optional[Image]:
        return self.image_store.toggle_star(image_id)

    def add_annotation(self, image_id: str, content: str) -> Optional[Annotation]:
        return self.image_store.add_annotation(image_id, content)

    def delete_annotation(self, image_id: str, annotation_id: str) -> bool:
        return self.image_store.delete_annotation(image_id, annotation_id)

    def delete_image(self, image_id: str) -> bool:
        return self.batch_delete_images([image_id]) == 1

    def batch_delete_images(self, image_ids: Collection[str]) -> int:
        """Delete images and drop them from the selection.

        Returns:
            Number of images deleted
        """
        if not image_ids:
            return 0
        removed = self.image_store.delete_images(image_ids)
        self.selection -= removed
        if removed:
            logger.info(f"Deleted {len(removed)} images")
        return len(removed)

    # Browsing state

    def set_search_query(self, query: str) -> None:
        self.search_query = query

    def set_tag_filter(self, tag_ids: Iterable[str]) -> None:
        self.tag_filter = set(tag_ids)

    def filtered_view(self) -> List[Image]:
        """Images to display for the current search and tag filter."""
        return filtered_view(
            self.images,
            self.search_query,
            self.tag_filter,
            self.tag_store.get_tag_name,
        )

    # Selection

    def toggle_image_selection(self, image_id: str) -> bool:
        """Flip selection of one image.

        Returns:
            True if the image is selected afterwards
        """
        if image_id in self.selection:
            self.selection.discard(image_id)
            return False
        self.selection.add(image_id)
        return True

    def select_all(self) -> None:
        """Select exactly the images in the current filtered view."""
        self.selection = {img.id for img in self.filtered_view()}

    def deselect_all(self) -> None:
        self.selection = set()

    def selected_images(self) -> List[Image]:
        """Selected images in catalog order."""
        return [img for img in self.images if img.id in self.selection]

    def batch_add_tags(self, tag_ids: Iterable[str]) -> int:
        """Add tags to every selected image.

        Returns:
            Number of images updated
        """
        tag_ids = list(tag_ids)
        if not self.selection or not tag_ids:
            return 0
        return self.image_store.add_tags(self.selection, tag_ids)

    def batch_remove_tags(self, tag_ids: Iterable[str]) -> int:
        """Remove tags from every selected image.

        Returns:
            Number of images updated
        """
        tag_ids = list(tag_ids)
        if not self.selection or not tag_ids:
            return 0
        return self.image_store.remove_tags(self.selection, tag_ids)

    def copy_names(self) -> str:
        """Comma-joined names of the selected images without extensions."""
        return ",".join(
            strip_image_extension(img.name) for img in self.selected_images()
        )

    # Tags

    def get_tag_name(self, tag_id: str) -> str:
        return self.tag_store.get_tag_name(tag_id)

    def get_tag_id(self, name: str) -> Optional[str]:
        return self.tag_store.get_tag_id(name)

    def add_tag(self, name: str) -> bool:
        return self.tag_store.add_tag(name)

    def rename_tag(self, tag_id: str, name: str) -> bool:
        return self.tag_store.rename_tag(tag_id, name)

    def delete_tag(self, tag_id: str) -> bool:
        return self.tag_store.delete_tag(tag_id)
