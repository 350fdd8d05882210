from datetime import datetime
from typing import ClassVar, Optional

from pydantic import ConfigDict, Field, HttpUrl

from notemark.schemas.base import CamelModel, PatchModel


class BookmarkBase(CamelModel):
    url: HttpUrl
    title: Optional[str] = None
    description: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    is_favorite: bool = False


class BookmarkCreate(BookmarkBase):
    """An empty or missing title is filled from the page's metadata."""


class BookmarkUpdate(PatchModel):
    nullable: ClassVar[frozenset[str]] = frozenset({"description"})

    url: Optional[HttpUrl] = None
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    is_favorite: Optional[bool] = None

    def changes(self) -> dict:
        changes = super().changes()
        if "url" in changes:
            changes["url"] = str(self.url)
        return changes


class BookmarkRead(CamelModel):
    id: int
    title: str
    url: str
    description: Optional[str] = None
    tags: list[str]
    is_favorite: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
