import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from notemark.api.deps import RecordQuery, get_note_store
from notemark.models import Note
from notemark.schemas import NoteCreate, NoteRead, NoteUpdate
from notemark.store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])

NoteStore = Annotated[RecordStore[Note], Depends(get_note_store)]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")


@router.get("", response_model=list[NoteRead])
def list_notes(
    store: NoteStore,
    query: Annotated[RecordQuery, Depends()],
) -> list[NoteRead]:
    """List notes, most recently edited first."""
    return [NoteRead.model_validate(note) for note in query.run(store)]


@router.get("/tags", response_model=list[str])
def list_note_tags(store: NoteStore) -> list[str]:
    return store.list_tags()


@router.post("", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
def create_note(payload: NoteCreate, store: NoteStore) -> NoteRead:
    note = store.create(**payload.model_dump())
    logger.info("Created note id=%s", note.id)
    return NoteRead.model_validate(note)


@router.get("/{note_id}", response_model=NoteRead)
def get_note(note_id: int, store: NoteStore) -> NoteRead:
    note = store.get_by_id(note_id)
    if not note:
        raise _not_found()
    return NoteRead.model_validate(note)


@router.put("/{note_id}", response_model=NoteRead)
def update_note(note_id: int, payload: NoteUpdate, store: NoteStore) -> NoteRead:
    """Update only the fields present in the request body."""
    note = store.update(note_id, **payload.changes())
    if not note:
        raise _not_found()
    return NoteRead.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(note_id: int, store: NoteStore) -> Response:
    if not store.delete(note_id):
        raise _not_found()
    logger.info("Deleted note id=%s", note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
