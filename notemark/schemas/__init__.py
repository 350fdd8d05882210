from notemark.schemas.bookmark import BookmarkCreate, BookmarkRead, BookmarkUpdate
from notemark.schemas.note import NoteCreate, NoteRead, NoteUpdate

__all__ = [
    "BookmarkCreate",
    "BookmarkRead",
    "BookmarkUpdate",
    "NoteCreate",
    "NoteRead",
    "NoteUpdate",
]
