"""In-memory record store shared by notes and bookmarks.

One ``RecordStore`` owns every record of a single kind together with the id
counter for that kind. Kind-specific behaviour (which fields a free-text
search looks at, which timestamp orders results) is passed in as plain
callables rather than expressed through subclasses.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from notemark.models.base import Record

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)

Clock = Callable[[], datetime]
OrderKey = Callable[[Record], datetime]

# Assigned by the store, never taken from caller input.
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def by_updated_at(record: Record) -> datetime:
    return record.updated_at


def by_created_at(record: Record) -> datetime:
    return record.created_at


class RecordStore(Generic[T]):
    """Thread-safe id-indexed collection of one record kind.

    Every query returns a new list sorted newest first by ``order_key``;
    records with equal keys keep insertion order. Missing ids are reported
    as ``None``/``False``, never raised.
    """

    def __init__(
        self,
        record_type: type[T],
        *,
        search_fields: Callable[[T], Iterable[Optional[str]]],
        order_key: OrderKey,
        clock: Clock = utcnow,
    ) -> None:
        self._record_type = record_type
        self._search_fields = search_fields
        self._order_key = order_key
        self._clock = clock
        self._records: dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    @property
    def kind(self) -> str:
        return self._record_type.__name__

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def create(self, **fields: Any) -> T:
        values = {k: v for k, v in fields.items() if k not in PROTECTED_FIELDS}
        values["tags"] = tuple(values.get("tags") or ())
        values["is_favorite"] = bool(values.get("is_favorite", False))
        with self._lock:
            now = self._clock()
            record = self._record_type(
                id=self._next_id, created_at=now, updated_at=now, **values
            )
            self._records[record.id] = record
            self._next_id += 1
        logger.debug("Created %s id=%s", self.kind, record.id)
        return record

    def get_by_id(self, record_id: int) -> Optional[T]:
        with self._lock:
            return self._records.get(record_id)

    def update(self, record_id: int, **changes: Any) -> Optional[T]:
        """Apply a shallow patch; supplied fields replace the stored values."""
        values = {k: v for k, v in changes.items() if k not in PROTECTED_FIELDS}
        if "tags" in values:
            values["tags"] = tuple(values["tags"] or ())
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            # A clock stepping backwards must not produce updated_at < created_at.
            now = max(self._clock(), existing.created_at)
            record = dataclasses.replace(existing, updated_at=now, **values)
            self._records[record_id] = record
        logger.debug("Updated %s id=%s fields=%s", self.kind, record_id, sorted(values))
        return record

    def delete(self, record_id: int) -> bool:
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is not None:
            logger.debug("Deleted %s id=%s", self.kind, record_id)
        return removed is not None

    def list_all(self) -> list[T]:
        return self._sorted(self._snapshot())

    def search(self, query: str) -> list[T]:
        """Case-insensitive substring match over the kind's searchable fields."""
        if not query:
            return self.list_all()
        needle = query.lower()
        return self._sorted(
            record
            for record in self._snapshot()
            if any(
                value is not None and needle in value.lower()
                for value in self._search_fields(record)
            )
        )

    def filter_by_tag(self, tag: str) -> list[T]:
        wanted = tag.lower()
        return self._sorted(
            record
            for record in self._snapshot()
            if any(t.lower() == wanted for t in record.tags)
        )

    def filter_favorites(self) -> list[T]:
        return self._sorted(r for r in self._snapshot() if r.is_favorite)

    def list_tags(self) -> list[str]:
        """Distinct tags across all records, sorted case-insensitively."""
        tags = {tag for record in self._snapshot() for tag in record.tags}
        return sorted(tags, key=lambda t: (t.lower(), t))

    def _snapshot(self) -> list[T]:
        with self._lock:
            return list(self._records.values())

    def _sorted(self, records: Iterable[T]) -> list[T]:
        # sorted() is stable under reverse=True, so equal keys stay in id order.
        return sorted(records, key=self._order_key, reverse=True)
