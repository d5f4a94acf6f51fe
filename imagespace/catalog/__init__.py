"""Gallery catalog: tag, image and config state plus the filtered view."""

from .engine import Catalog, strip_image_extension
from .images import ImageStore, normalize_tags
from .tags import (
    PROTECTED_TAG_IDS,
    SENTINEL_TAG_ID,
    UNCERTAIN_TAG_ID,
    UNKNOWN_TAG_LABEL,
    TagStore,
)

__all__ = [
    "Catalog",
    "ImageStore",
    "PROTECTED_TAG_IDS",
    "SENTINEL_TAG_ID",
    "TagStore",
    "UNCERTAIN_TAG_ID",
    "UNKNOWN_TAG_LABEL",
    "normalize_tags",
    "strip_image_extension",
]
