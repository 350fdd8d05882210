import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from notemark.api.deps import RecordQuery, get_bookmark_store, get_metadata_service
from notemark.models import Bookmark
from notemark.schemas import BookmarkCreate, BookmarkRead, BookmarkUpdate
from notemark.services.metadata import MetadataService
from notemark.store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

BookmarkStore = Annotated[RecordStore[Bookmark], Depends(get_bookmark_store)]


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Bookmark not found"
    )


@router.get("", response_model=list[BookmarkRead])
def list_bookmarks(
    store: BookmarkStore,
    query: Annotated[RecordQuery, Depends()],
) -> list[BookmarkRead]:
    """List bookmarks, most recently added first."""
    return [BookmarkRead.model_validate(b) for b in query.run(store)]


@router.get("/tags", response_model=list[str])
def list_bookmark_tags(store: BookmarkStore) -> list[str]:
    return store.list_tags()


@router.post("", response_model=BookmarkRead, status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    payload: BookmarkCreate,
    store: BookmarkStore,
    metadata_service: Annotated[MetadataService, Depends(get_metadata_service)],
) -> BookmarkRead:
    """Create a bookmark, filling a missing title from the page itself."""
    fields = payload.model_dump()
    fields["url"] = str(payload.url)
    fields["description"] = payload.description or None

    if not payload.title:
        metadata = await metadata_service.extract(fields["url"])
        fields["title"] = metadata.title
        if not payload.description and metadata.description:
            fields["description"] = metadata.description

    bookmark = store.create(**fields)
    logger.info("Created bookmark id=%s url=%s", bookmark.id, bookmark.url)
    return BookmarkRead.model_validate(bookmark)


@router.get("/{bookmark_id}", response_model=BookmarkRead)
def get_bookmark(bookmark_id: int, store: BookmarkStore) -> BookmarkRead:
    bookmark = store.get_by_id(bookmark_id)
    if not bookmark:
        raise _not_found()
    return BookmarkRead.model_validate(bookmark)


@router.put("/{bookmark_id}", response_model=BookmarkRead)
def update_bookmark(
    bookmark_id: int,
    payload: BookmarkUpdate,
    store: BookmarkStore,
) -> BookmarkRead:
    """Update only the fields present in the request body."""
    bookmark = store.update(bookmark_id, **payload.changes())
    if not bookmark:
        raise _not_found()
    return BookmarkRead.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bookmark(bookmark_id: int, store: BookmarkStore) -> Response:
    if not store.delete(bookmark_id):
        raise _not_found()
    logger.info("Deleted bookmark id=%s", bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
