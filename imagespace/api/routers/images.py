"""Images API router.

Handles image operations for the gallery UI:
- Listing the filtered, sorted view with pagination
- Adding images
- Tagging, starring and annotating
- Deletion (admin, confirmed)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from ...catalog import Catalog
from ...catalog.query import paginate
from ...db.config import settings
from ...models.image import Image
from ...uploads import validate_image_url
from ..deps import get_catalog, require_admin, require_confirmation
from ..schemas import (
    AnnotationResponse,
    ImageResponse,
    TagIdsRequest,
    image_to_response,
)

logger = logging.getLogger(__name__)


class ImagePage(BaseModel):
    """One page of the filtered view."""

    total: int
    limit: int
    offset: int
    items: List[ImageResponse]


class ImageCreate(BaseModel):
    """Image submitted by the client as a data URL or remote reference."""

    name: str
    url: str


class AnnotationCreate(BaseModel):
    content: str


router = APIRouter(prefix="/images", tags=["images"])


def _get_or_404(catalog: Catalog, image_id: str) -> Image:
    image = catalog.get_image(image_id)
    if image is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return image


@router.get("", response_model=ImagePage)
def list_images(
    query: str = "",
    tags: List[str] = Query([]),
    limit: int = Query(settings.page_size, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    catalog: Catalog = Depends(get_catalog),
) -> ImagePage:
    """List the filtered view. Updates the catalog's search and tag filter."""
    catalog.set_search_query(query)
    catalog.set_tag_filter(tags)
    view = catalog.filtered_view()
    return ImagePage(
        total=len(view),
        limit=limit,
        offset=offset,
        items=[image_to_response(catalog, img) for img in paginate(view, limit, offset)],
    )


@router.post("", response_model=ImageResponse, status_code=201)
def add_image(
    request: ImageCreate,
    catalog: Catalog = Depends(get_catalog),
) -> ImageResponse:
    """Add an image to the front of the catalog."""
    name = request.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Image name is required")

    reason = validate_image_url(request.url)
    if reason:
        logger.warning(f"Rejected upload {name}: {reason}")
        raise HTTPException(status_code=400, detail=f"Rejected {name}: {reason}")

    image = catalog.add_image(name, request.url)
    return image_to_response(catalog, image)


@router.get("/{image_id}", response_model=ImageResponse)
def get_image(
    image_id: str,
    catalog: Catalog = Depends(get_catalog),
) -> ImageResponse:
    """Get a single image by ID."""
    return image_to_response(catalog, _get_or_404(catalog, image_id))


@router.put("/{image_id}/tags", response_model=ImageResponse)
def update_image_tags(
    image_id: str,
    request: TagIdsRequest,
    catalog: Catalog = Depends(get_catalog),
) -> ImageResponse:
    """Replace an image's tags."""
    image = catalog.update_image_tags(image_id, request.tag_ids)
    if image is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return image_to_response(catalog, image)


@router.post("/{image_id}/star", response_model=ImageResponse)
def toggle_star(
    image_id: str,
    catalog: Catalog = Depends(get_catalog),
) -> ImageResponse:
    """Flip the starred flag."""
    image = catalog.toggle_star(image_id)
    if image is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return image_to_response(catalog, image)


@router.post(
    "/{image_id}/annotations", response_model=AnnotationResponse, status_code=201
)
def add_annotation(
    image_id: str,
    request: AnnotationCreate,
    catalog: Catalog = Depends(get_catalog),
) -> AnnotationResponse:
    """Attach an annotation to an image."""
    _get_or_404(catalog, image_id)
    annotation = catalog.add_annotation(image_id, request.content)
    if annotation is None:
        raise HTTPException(status_code=400, detail="Annotation content is required")
    return AnnotationResponse(
        id=annotation.id,
        content=annotation.content,
        created_at=annotation.created_at,
    )


@router.delete("/{image_id}/annotations/{annotation_id}")
def delete_annotation(
    image_id: str,
    annotation_id: str,
    catalog: Catalog = Depends(get_catalog),
) -> dict:
    """Remove an annotation."""
    _get_or_404(catalog, image_id)
    if not catalog.delete_annotation(image_id, annotation_id):
        raise HTTPException(status_code=404, detail="Annotation not found")
    return {"status": "deleted"}


@router.delete(
    "/{image_id}",
    dependencies=[Depends(require_admin), Depends(require_confirmation)],
)
def delete_image(
    image_id: str,
    catalog: Catalog = Depends(get_catalog),
) -> dict:
    """Delete an image."""
    if not catalog.delete_image(image_id):
        raise HTTPException(status_code=404, detail="Image not found")
    return {"status": "deleted"}
