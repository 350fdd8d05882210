from fastapi import APIRouter

from notemark.api.v1 import bookmarks, notes

api_router = APIRouter(prefix="/api")
api_router.include_router(notes.router)
api_router.include_router(bookmarks.router)

__all__ = ["api_router"]
