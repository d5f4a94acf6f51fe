"""Request and response models shared by the API routers."""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from ..catalog import Catalog
from ..models.image import Image


class TagIdsRequest(BaseModel):
    """A set of tag ids to apply or remove."""

    tag_ids: List[str]


class AnnotationResponse(BaseModel):
    """Response model for an annotation."""

    id: str
    content: str
    created_at: datetime


class ImageResponse(BaseModel):
    """Response model for image data, with tag names resolved."""

    id: str
    name: str
    url: str
    tags: List[str]
    tag_names: List[str]
    is_starred: bool
    annotations: List[AnnotationResponse]
    upload_date: datetime
    selected: bool = False


def image_to_response(catalog: Catalog, image: Image) -> ImageResponse:
    """Convert an Image record to its response model."""
    return ImageResponse(
        id=image.id,
        name=image.name,
        url=image.url,
        tags=list(image.tags),
        tag_names=[catalog.get_tag_name(tag_id) for tag_id in image.tags],
        is_starred=image.is_starred,
        annotations=[
            AnnotationResponse(id=a.id, content=a.content, created_at=a.created_at)
            for a in image.annotations
        ],
        upload_date=image.upload_date,
        selected=image.id in catalog.selection,
    )
