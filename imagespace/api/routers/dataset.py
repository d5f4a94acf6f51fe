"""Dataset documentation API router."""

from fastapi import APIRouter, Depends

from ...catalog import Catalog
from ...models.preferences import DatasetContent
from ..deps import get_catalog, require_admin

router = APIRouter(prefix="/dataset", tags=["dataset"])


@router.get("", response_model=DatasetContent)
def get_content(catalog: Catalog = Depends(get_catalog)) -> DatasetContent:
    """Dataset documentation page content."""
    return catalog.content.content


@router.put("", response_model=DatasetContent)
def save_content(
    content: DatasetContent,
    catalog: Catalog = Depends(require_admin),
) -> DatasetContent:
    """Replace the documentation content (admin only)."""
    catalog.content.save(content)
    return catalog.content.content
