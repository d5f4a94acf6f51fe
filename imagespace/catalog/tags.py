"""Tag store - owns the tag list and its lifecycle rules."""

import logging
from typing import List, Optional

from ..models.tag import Tag
from ..storage import KeyValueStore, dump_records, load_records

logger = logging.getLogger(__name__)

TAGS_KEY = "tags"

# Sentinel applied to images with no explicit classification
SENTINEL_TAG_ID = "unclassified"
UNCERTAIN_TAG_ID = "uncertain"
SURFACE_DEFECT_TAG_ID = "surface_defect"

PROTECTED_TAG_IDS = frozenset({SENTINEL_TAG_ID, UNCERTAIN_TAG_ID, SURFACE_DEFECT_TAG_ID})

# Display label for ids whose tag was deleted
UNKNOWN_TAG_LABEL = "Unknown tag"

DEFAULT_TAGS = [
    (SENTINEL_TAG_ID, "Unclassified"),
    (UNCERTAIN_TAG_ID, "Uncertain"),
    (SURFACE_DEFECT_TAG_ID, "Surface defect"),
    ("burst", "Burst"),
    ("offset", "Offset"),
    ("over_soldering", "Over-soldering"),
    ("under_soldering", "Under-soldering"),
]


def default_tags() -> List[Tag]:
    """Build the built-in tag set seeded on first run."""
    return [Tag(id=tag_id, name=name) for tag_id, name in DEFAULT_TAGS]


class TagStore:
    """Tag list with case-insensitive unique names."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.tags: List[Tag] = []

    def load(self) -> None:
        """Hydrate from storage, seeding the defaults when nothing is saved."""
        saved = load_records(self.store, TAGS_KEY, Tag)
        if saved:
            self.tags = saved
            return

        self.tags = default_tags()
        logger.info(f"Seeded {len(self.tags)} default tags")
        self.save()

    def save(self) -> bool:
        return self.store.set(TAGS_KEY, dump_records(self.tags))

    def get(self, tag_id: str) -> Optional[Tag]:
        return next((tag for tag in self.tags if tag.id == tag_id), None)

    def get_tag_name(self, tag_id: str) -> str:
        """Resolve a tag id to its display name.

        Tag deletion does not cascade into images, so ids may dangle. This
        is the single place that decides how a dangling id is shown.
        """
        tag = self.get(tag_id)
        return tag.name if tag else UNKNOWN_TAG_LABEL

    def get_tag_id(self, name: str) -> Optional[str]:
        """Find a tag id by name, ignoring case."""
        wanted = name.strip().lower()
        tag = next((t for t in self.tags if t.name.lower() == wanted), None)
        return tag.id if tag else None

    def name_taken(self, name: str, exclude_id: Optional[str] = None) -> bool:
        wanted = name.lower()
        return any(
            tag.name.lower() == wanted and tag.id != exclude_id for tag in self.tags
        )

    def add_tag(self, name: str) -> bool:
        """Create a tag.

        Returns:
            False if the name is blank or already used (ignoring case)
        """
        name = name.strip()
        if not name or self.name_taken(name):
            return False

        self.tags.append(Tag(name=name))
        self.save()
        return True

    def rename_tag(self, tag_id: str, name: str) -> bool:
        """Rename a tag in place.

        Returns:
            False if the tag is unknown, or the name is blank or used by
            another tag
        """
        name = name.strip()
        tag = self.get(tag_id)
        if tag is None or not name or self.name_taken(name, exclude_id=tag_id):
            return False

        tag.name = name
        self.save()
        return True

    def delete_tag(self, tag_id: str) -> bool:
        """Remove a tag from the list. Protected tags are silently kept.

        Images referencing the tag keep the id.

        Returns:
            True if a tag was removed
        """
        if tag_id in PROTECTED_TAG_IDS:
            return False

        remaining = [tag for tag in self.tags if tag.id != tag_id]
        if len(remaining) == len(self.tags):
            return False

        self.tags = remaining
        self.save()
        return True
