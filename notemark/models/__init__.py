from notemark.models.base import Record
from notemark.models.bookmark import Bookmark, bookmark_search_fields
from notemark.models.note import Note, note_search_fields

__all__ = [
    "Bookmark",
    "Note",
    "Record",
    "bookmark_search_fields",
    "note_search_fields",
]
