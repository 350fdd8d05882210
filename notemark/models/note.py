from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from notemark.models.base import Record


@dataclass(frozen=True, kw_only=True)
class Note(Record):
    title: str
    content: str


def note_search_fields(note: Note) -> Iterable[str]:
    yield note.title
    yield note.content
    yield from note.tags
