# newsarchive/schemas.py
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator


class CamelModel(BaseModel):
    # Stored JSON uses camelCase keys; accept both forms on input
    model_config = ConfigDict(populate_by_name=True)


class ImageRef(BaseModel):
    src: str                                 # relative to the asset root
    alt: str = ""
    width: PositiveInt
    height: PositiveInt


class NewsItem(BaseModel):
    text: str
    url: str
    image: Optional[ImageRef] = None         # absent or malformed -> text-only item

    @field_validator("image", mode="wrap")
    @classmethod
    def _drop_malformed_image(cls, value: Any, handler):
        try:
            return handler(value)
        except ValidationError:
            return None


class SnapshotPayload(CamelModel):
    main_headline: NewsItem = Field(alias="mainHeadline")
    top_stories: List[NewsItem] = Field(default_factory=list, alias="topStories")
    left_column: List[NewsItem] = Field(default_factory=list, alias="leftColumn")
    center_column: List[NewsItem] = Field(default_factory=list, alias="centerColumn")
    right_column: List[NewsItem] = Field(default_factory=list, alias="rightColumn")
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")

    @field_validator("top_stories", "left_column", "center_column", "right_column", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


# --- API responses ---------------------------------------

class ResolvedImage(BaseModel):
    src: str
    url: str                                 # public URL, base path included
    alt: str
    width: int
    height: int


class ResolvedNewsItem(BaseModel):
    text: str
    url: str
    image: Optional[ResolvedImage] = None


class SnapshotResponse(CamelModel):
    slug: Optional[str] = None               # None for the current snapshot
    archive_date: Optional[str] = Field(default=None, alias="archiveDate")
    main_headline: ResolvedNewsItem = Field(alias="mainHeadline")
    top_stories: List[ResolvedNewsItem] = Field(default_factory=list, alias="topStories")
    left_column: List[ResolvedNewsItem] = Field(default_factory=list, alias="leftColumn")
    center_column: List[ResolvedNewsItem] = Field(default_factory=list, alias="centerColumn")
    right_column: List[ResolvedNewsItem] = Field(default_factory=list, alias="rightColumn")
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")
    last_updated_display: Optional[str] = Field(default=None, alias="lastUpdatedDisplay")


class ArchiveEntry(BaseModel):
    slug: str
    timestamp: str                           # ISO-8601, local time, no offset
    display: str
    time_ago: str = Field(alias="timeAgo")
    href: str

    model_config = ConfigDict(populate_by_name=True)


class ArchiveDayGroup(BaseModel):
    day: str                                 # ISO date
    label: str                               # e.g. "Mon Jan 15 2024"
    entries: List[ArchiveEntry]


class ArchiveIndexResponse(CamelModel):
    as_of: str = Field(alias="asOf")
    total: int
    groups: List[ArchiveDayGroup]
