"""Image store - owns the image list and per-image commands."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Collection, Iterable, List, Optional, Set

from ..models.base import utcnow
from ..models.image import Annotation, Image
from ..storage import KeyValueStore, dump_records, load_records
from .tags import SENTINEL_TAG_ID

logger = logging.getLogger(__name__)

IMAGES_KEY = "images"


def normalize_tags(tag_ids: Iterable[str]) -> List[str]:
    """Apply the image tag invariants.

    Duplicates are dropped keeping first occurrence, the sentinel is
    removed when any other tag is present, and an empty result becomes
    just the sentinel.
    """
    ordered = list(dict.fromkeys(tag_ids))
    if len(ordered) > 1 and SENTINEL_TAG_ID in ordered:
        ordered.remove(SENTINEL_TAG_ID)
    return ordered or [SENTINEL_TAG_ID]


def generate_demo_images(count: int = 20) -> List[Image]:
    """Placeholder images for demo catalogs.

    Every fifth image is starred, every third carries a sample annotation,
    and upload dates step back one day per image.
    """
    now = utcnow()
    images = []
    for i in range(count):
        number = i + 1
        annotations = []
        if i % 3 == 0:
            annotations.append(
                Annotation(content=f"Sample annotation for image {number}.")
            )
        images.append(
            Image(
                name=f"solder_joint_{number}.png",
                url=f"https://placehold.co/512x512/png?text=solder+joint+{number}",
                tags=[SENTINEL_TAG_ID],
                is_starred=i % 5 == 0,
                annotations=annotations,
                upload_date=now - timedelta(days=i),
            )
        )
    return images


class ImageStore:
    """Ordered image list, most recent upload first."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.images: List[Image] = []

    def load(self, seed_demo_images: bool = False) -> None:
        """Hydrate from storage.

        Args:
            seed_demo_images: Fill an empty catalog with placeholder images
        """
        self.images = load_records(self.store, IMAGES_KEY, Image)
        for image in self.images:
            image.tags = normalize_tags(image.tags)
        if not self.images and seed_demo_images:
            self.images = generate_demo_images()
            logger.info(f"Seeded {len(self.images)} demo images")
            self.save()

    def save(self) -> bool:
        return self.store.set(IMAGES_KEY, dump_records(self.images))

    def get(self, image_id: str) -> Optional[Image]:
        return next((img for img in self.images if img.id == image_id), None)

    def add_image(
        self, name: str, url: str, upload_date: Optional[datetime] = None
    ) -> Image:
        """Create an unclassified image at the front of the list."""
        image = Image(name=name, url=url, tags=[SENTINEL_TAG_ID])
        if upload_date is not None:
            image.upload_date = upload_date
        self.images.insert(0, image)
        self.save()
        return image

    def update_image_tags(
        self, image_id: str, tag_ids: Iterable[str]
    ) -> Optional[Image]:
        """Replace an image's tags, enforcing the tag invariants."""
        image = self.get(image_id)
        if image is None:
            return None

        image.tags = normalize_tags(tag_ids)
        self.save()
        return image

    def toggle_star(self, image_id: str) -> Optional[Image]:
        image = self.get(image_id)
        if image is None:
            return None

        image.is_starred = not image.is_starred
        self.save()
        return image

    def add_annotation(self, image_id: str, content: str) -> Optional[Annotation]:
        """Append an annotation. Blank content is rejected."""
        content = content.strip()
        image = self.get(image_id)
        if image is None or not content:
            return None

        annotation = Annotation(content=content)
        image.annotations.append(annotation)
        self.save()
        return annotation

    def delete_annotation(self, image_id: str, annotation_id: str) -> bool:
        image = self.get(image_id)
        if image is None:
            return False

        remaining = [a for a in image.annotations if a.id != annotation_id]
        if len(remaining) == len(image.annotations):
            return False

        image.annotations = remaining
        self.save()
        return True

    def delete_images(self, image_ids: Collection[str]) -> Set[str]:
        """Remove images by id.

        Returns:
            Ids that were actually removed
        """
        wanted = set(image_ids)
        removed = {img.id for img in self.images if img.id in wanted}
        if not removed:
            return removed

        self.images = [img for img in self.images if img.id not in removed]
        self.save()
        return removed

    def add_tags(self, image_ids: Collection[str], tag_ids: Iterable[str]) -> int:
        """Union ``tag_ids`` into every listed image's tags.

        Returns:
            Number of images touched
        """
        added = list(tag_ids)
        return self._retag(image_ids, lambda tags: tags + added)

    def remove_tags(self, image_ids: Collection[str], tag_ids: Iterable[str]) -> int:
        """Subtract ``tag_ids`` from every listed image's tags.

        Returns:
            Number of images touched
        """
        dropped = set(tag_ids)
        return self._retag(
            image_ids, lambda tags: [tag for tag in tags if tag not in dropped]
        )

    def _retag(
        self, image_ids: Collection[str], change: Callable[[List[str]], List[str]]
    ) -> int:
        wanted = set(image_ids)
        touched = 0
        for image in self.images:
            if image.id in wanted:
                image.tags = normalize_tags(change(list(image.tags)))
                touched += 1

        if touched:
            self.save()
        return touched
