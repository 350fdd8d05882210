from __future__ import annotations

from dataclasses import dataclass, field

from notemark.models import Bookmark, Note, bookmark_search_fields, note_search_fields
from notemark.store import Clock, RecordStore, by_created_at, by_updated_at, utcnow


def create_note_store(clock: Clock = utcnow) -> RecordStore[Note]:
    """Notes surface by most recent edit."""
    return RecordStore(
        Note,
        search_fields=note_search_fields,
        order_key=by_updated_at,
        clock=clock,
    )


def create_bookmark_store(clock: Clock = utcnow) -> RecordStore[Bookmark]:
    """Bookmarks surface by most recent addition."""
    return RecordStore(
        Bookmark,
        search_fields=bookmark_search_fields,
        order_key=by_created_at,
        clock=clock,
    )


@dataclass
class Database:
    """Process-lifetime storage: one store per record kind."""

    notes: RecordStore[Note] = field(default_factory=create_note_store)
    bookmarks: RecordStore[Bookmark] = field(default_factory=create_bookmark_store)


def init_db(clock: Clock = utcnow) -> Database:
    return Database(
        notes=create_note_store(clock),
        bookmarks=create_bookmark_store(clock),
    )
