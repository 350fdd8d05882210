from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class Record:
    """Fields shared by every stored record kind."""

    id: int
    tags: tuple[str, ...] = ()
    is_favorite: bool = False
    created_at: datetime
    updated_at: datetime
