"""Tags API router."""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...catalog import PROTECTED_TAG_IDS, Catalog
from ...models.tag import Tag
from ..deps import get_catalog, require_admin, require_confirmation


class TagResponse(BaseModel):
    """Response model for tag data."""

    id: str
    name: str
    created_at: datetime
    protected: bool


class TagRequest(BaseModel):
    name: str


router = APIRouter(prefix="/tags", tags=["tags"])


def _tag_to_response(tag: Tag) -> TagResponse:
    return TagResponse(
        id=tag.id,
        name=tag.name,
        created_at=tag.created_at,
        protected=tag.id in PROTECTED_TAG_IDS,
    )


def _check_name(
    catalog: Catalog, name: str, exclude_id: Optional[str] = None
) -> None:
    if not name.strip():
        raise HTTPException(status_code=400, detail="Tag name is required")
    if catalog.tag_store.name_taken(name.strip(), exclude_id=exclude_id):
        raise HTTPException(status_code=409, detail=f"Tag '{name}' already exists")


@router.get("", response_model=List[TagResponse])
def list_tags(catalog: Catalog = Depends(get_catalog)) -> List[TagResponse]:
    """List all tags."""
    return [_tag_to_response(tag) for tag in catalog.tags]


@router.post("", response_model=TagResponse, status_code=201)
def create_tag(
    request: TagRequest,
    catalog: Catalog = Depends(get_catalog),
) -> TagResponse:
    """Create a tag with a unique name."""
    _check_name(catalog, request.name)
    catalog.add_tag(request.name)
    tag_id = catalog.get_tag_id(request.name)
    tag = catalog.tag_store.get(tag_id) if tag_id else None
    if tag is None:
        raise HTTPException(status_code=500, detail="Tag was not created")
    return _tag_to_response(tag)


@router.patch("/{tag_id}", response_model=TagResponse)
def rename_tag(
    tag_id: str,
    request: TagRequest,
    catalog: Catalog = Depends(get_catalog),
) -> TagResponse:
    """Rename a tag."""
    tag = catalog.tag_store.get(tag_id)
    if tag is None:
        raise HTTPException(status_code=404, detail="Tag not found")
    _check_name(catalog, request.name, exclude_id=tag_id)
    catalog.rename_tag(tag_id, request.name)
    return _tag_to_response(tag)


@router.delete(
    "/{tag_id}",
    dependencies=[Depends(require_admin), Depends(require_confirmation)],
)
def delete_tag(
    tag_id: str,
    catalog: Catalog = Depends(get_catalog),
) -> dict:
    """Delete a tag. Images keep referencing its id."""
    if tag_id in PROTECTED_TAG_IDS:
        raise HTTPException(status_code=403, detail="Tag is protected")
    if not catalog.delete_tag(tag_id):
        raise HTTPException(status_code=404, detail="Tag not found")
    return {"status": "deleted"}
