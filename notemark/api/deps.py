from dataclasses import dataclass
from typing import Annotated, Optional, TypeVar

from fastapi import Depends, Request

from notemark.database import Database
from notemark.models import Bookmark, Note, Record
from notemark.services.metadata import MetadataService
from notemark.store import RecordStore

T = TypeVar("T", bound=Record)


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_note_store(db: Annotated[Database, Depends(get_db)]) -> RecordStore[Note]:
    return db.notes


def get_bookmark_store(
    db: Annotated[Database, Depends(get_db)],
) -> RecordStore[Bookmark]:
    return db.bookmarks


def get_metadata_service(request: Request) -> MetadataService:
    return request.app.state.metadata_service


@dataclass
class RecordQuery:
    """Collection query parameters; the first one given wins."""

    search: Optional[str] = None
    tag: Optional[str] = None
    favorites: Optional[str] = None

    def run(self, store: RecordStore[T]) -> list[T]:
        if self.search:
            return store.search(self.search)
        if self.tag:
            return store.filter_by_tag(self.tag)
        if self.favorites == "true":
            return store.filter_favorites()
        return store.list_all()
