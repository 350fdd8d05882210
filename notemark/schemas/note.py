from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from notemark.schemas.base import CamelModel, PatchModel


class NoteBase(CamelModel):
    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    is_favorite: bool = False


class NoteCreate(NoteBase):
    pass


class NoteUpdate(PatchModel):
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[list[str]] = None
    is_favorite: Optional[bool] = None


class NoteRead(NoteBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
