"""Config API router - grid layout and admin mode."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...catalog import Catalog
from ..deps import get_catalog


class ConfigResponse(BaseModel):
    items_per_row: int
    is_admin: bool


class ConfigUpdate(BaseModel):
    items_per_row: Optional[int] = None
    is_admin: Optional[bool] = None


router = APIRouter(prefix="/config", tags=["config"])


def _config_response(catalog: Catalog) -> ConfigResponse:
    return ConfigResponse(
        items_per_row=catalog.config.items_per_row,
        is_admin=catalog.config.is_admin,
    )


@router.get("", response_model=ConfigResponse)
def get_config(catalog: Catalog = Depends(get_catalog)) -> ConfigResponse:
    """Current UI preferences."""
    return _config_response(catalog)


@router.patch("", response_model=ConfigResponse)
def update_config(
    request: ConfigUpdate,
    catalog: Catalog = Depends(get_catalog),
) -> ConfigResponse:
    """Update UI preferences."""
    if request.items_per_row is not None:
        if not catalog.config.set_items_per_row(request.items_per_row):
            raise HTTPException(
                status_code=400, detail="items_per_row must be between 2 and 4"
            )
    if request.is_admin is not None:
        catalog.config.set_admin(request.is_admin)
    return _config_response(catalog)
