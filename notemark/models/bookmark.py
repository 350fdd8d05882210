from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from notemark.models.base import Record


@dataclass(frozen=True, kw_only=True)
class Bookmark(Record):
    title: str
    url: str
    description: Optional[str] = None


def bookmark_search_fields(bookmark: Bookmark) -> Iterable[str | None]:
    yield bookmark.title
    yield bookmark.description
    yield bookmark.url
    yield from bookmark.tags
