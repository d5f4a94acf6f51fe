"""UI preference and dataset documentation models."""

from typing import List, Optional

from sqlmodel import Field, SQLModel

from .base import new_id

DEFAULT_ITEMS_PER_ROW = 3
MIN_ITEMS_PER_ROW = 2
MAX_ITEMS_PER_ROW = 4


class AppConfig(SQLModel):
    """Grid layout preferences."""

    items_per_row: int = DEFAULT_ITEMS_PER_ROW


class MediaSection(SQLModel):
    """Image or video block on the dataset documentation page."""

    id: str = Field(default_factory=new_id)
    name: str
    url: Optional[str] = None


class DatasetContent(SQLModel):
    """Admin-editable documentation for the dataset."""

    title: str = ""
    introduction: str = ""
    overview: str = ""
    collection_env: List[str] = Field(default_factory=list)
    defect_types: List[str] = Field(default_factory=list)
    usage_instructions: str = ""
    text_sections: List[str] = Field(default_factory=list)
    image_sections: List[MediaSection] = Field(default_factory=list)
    video_sections: List[MediaSection] = Field(default_factory=list)
