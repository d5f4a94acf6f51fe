"""Selection API router - multi-select and batch operations."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...catalog import Catalog
from ..deps import get_catalog, require_admin, require_confirmation
from ..schemas import TagIdsRequest


class SelectionResponse(BaseModel):
    """Selected image ids in catalog order."""

    image_ids: List[str]
    count: int


class BatchResult(BaseModel):
    """Number of images affected by a batch operation."""

    count: int


router = APIRouter(prefix="/selection", tags=["selection"])


def _selection_response(catalog: Catalog) -> SelectionResponse:
    ids = [img.id for img in catalog.selected_images()]
    return SelectionResponse(image_ids=ids, count=len(ids))


@router.get("", response_model=SelectionResponse)
def get_selection(catalog: Catalog = Depends(get_catalog)) -> SelectionResponse:
    """Current selection."""
    return _selection_response(catalog)


@router.delete("", response_model=SelectionResponse)
def deselect_all(catalog: Catalog = Depends(get_catalog)) -> SelectionResponse:
    """Clear the selection."""
    catalog.deselect_all()
    return _selection_response(catalog)


@router.post("/all", response_model=SelectionResponse)
def select_all(catalog: Catalog = Depends(get_catalog)) -> SelectionResponse:
    """Select every image in the current filtered view."""
    catalog.select_all()
    return _selection_response(catalog)


@router.post("/{image_id}/toggle")
def toggle_selection(
    image_id: str,
    catalog: Catalog = Depends(get_catalog),
) -> dict:
    """Flip selection of one image."""
    if catalog.get_image(image_id) is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return {"selected": catalog.toggle_image_selection(image_id)}


@router.post("/tags/add", response_model=BatchResult)
def batch_add_tags(
    request: TagIdsRequest,
    catalog: Catalog = Depends(get_catalog),
) -> BatchResult:
    """Add tags to every selected image."""
    return BatchResult(count=catalog.batch_add_tags(request.tag_ids))


@router.post("/tags/remove", response_model=BatchResult)
def batch_remove_tags(
    request: TagIdsRequest,
    catalog: Catalog = Depends(get_catalog),
) -> BatchResult:
    """Remove tags from every selected image."""
    return BatchResult(count=catalog.batch_remove_tags(request.tag_ids))


@router.get("/names")
def copy_names(catalog: Catalog = Depends(get_catalog)) -> dict:
    """Selected image names without extensions, comma-joined."""
    if not catalog.selection:
        raise HTTPException(status_code=400, detail="No images selected")
    return {"names": catalog.copy_names(), "count": len(catalog.selection)}


@router.post(
    "/delete",
    response_model=BatchResult,
    dependencies=[Depends(require_admin), Depends(require_confirmation)],
)
def batch_delete(catalog: Catalog = Depends(get_catalog)) -> BatchResult:
    """Delete every selected image."""
    return BatchResult(count=catalog.batch_delete_images(list(catalog.selection)))
