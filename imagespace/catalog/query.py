"""Pure functions for building the visible image list.

These functions filter and order image records without touching catalog
state or storage. Tag names are resolved through a caller-supplied
function so the dangling-id policy lives in one place.
"""

from typing import Callable, Collection, List, Sequence, Tuple, TypeVar

from ..models.image import Image
from .tags import SENTINEL_TAG_ID, UNCERTAIN_TAG_ID

T = TypeVar("T")


def is_unclassified(image: Image) -> bool:
    """True when the image has no tag other than the sentinel."""
    return all(tag_id == SENTINEL_TAG_ID for tag_id in image.tags)


def matches_search(
    image: Image,
    query: str,
    tag_name: Callable[[str], str],
) -> bool:
    """Case-insensitive substring match on the name or joined tag names.

    Args:
        image: Image to test
        query: Search text; empty matches everything
        tag_name: Resolves a tag id to its display name

    Returns:
        True if the image should be shown for this query
    """
    if not query:
        return True

    needle = query.lower()
    if needle in image.name.lower():
        return True

    tag_names = " ".join(tag_name(tag_id) for tag_id in image.tags)
    return needle in tag_names.lower()


def matches_tags(image: Image, tag_filter: Collection[str]) -> bool:
    """True if the filter is empty or shares any tag with the image."""
    if not tag_filter:
        return True
    return any(tag_id in tag_filter for tag_id in image.tags)


def sort_key(image: Image) -> Tuple[bool, bool, bool, float]:
    """Ordering key for the gallery.

    Selection criteria (in order):
    1. Starred before unstarred
    2. Classified before unclassified
    3. Not "uncertain" before "uncertain"
    4. Newest upload first
    """
    return (
        not image.is_starred,
        is_unclassified(image),
        UNCERTAIN_TAG_ID in image.tags,
        -image.upload_date.timestamp(),
    )


def sort_images(images: Sequence[Image]) -> List[Image]:
    """Sort images for display. Stable for equal keys."""
    return sorted(images, key=sort_key)


def filtered_view(
    images: Sequence[Image],
    query: str,
    tag_filter: Collection[str],
    tag_name: Callable[[str], str],
) -> List[Image]:
    """Images matching both the search text and the tag filter, sorted.

    Args:
        images: Catalog images in stored order
        query: Search text
        tag_filter: Tag ids; an image matches if it has any of them
        tag_name: Resolves a tag id to its display name

    Returns:
        Sorted list of matching images
    """
    matching = [
        img
        for img in images
        if matches_search(img, query, tag_name) and matches_tags(img, tag_filter)
    ]
    return sort_images(matching)


def paginate(items: Sequence[T], limit: int, offset: int = 0) -> List[T]:
    """Slice one page out of an ordered sequence."""
    if limit <= 0 or offset < 0:
        return []
    return list(items[offset : offset + limit])
