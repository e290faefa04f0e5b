from typing import List

from fastapi import APIRouter, Depends

from edunotes.dependencies import get_portal, get_student_id
from edunotes.schemas.bookmark_schema import BookmarkState
from edunotes.schemas.note_schema import NoteSummary
from edunotes.services.portal import Portal
from edunotes.utils.exceptions import NotFoundError

router = APIRouter()


def _require_note(portal: Portal, note_id: str) -> None:
    if portal.notes.get(note_id) is None:
        raise NotFoundError(f"Note {note_id} not found")


@router.get("", response_model=List[NoteSummary])
def bookmarked_notes(
        student_id: str = Depends(get_student_id),
        portal: Portal = Depends(get_portal)
):
    return [NoteSummary.from_note(note) for note in portal.bookmarks.bookmarked_notes(student_id)]


@router.post("/{note_id}", response_model=BookmarkState)
def add_bookmark(
        note_id: str,
        student_id: str = Depends(get_student_id),
        portal: Portal = Depends(get_portal)
):
    _require_note(portal, note_id)
    with portal.store.lock(portal.bookmarks.collection_key):
        if not portal.bookmarks.is_bookmarked(note_id, student_id):
            portal.bookmarks.add(note_id, student_id)
    return BookmarkState(note_id=note_id, bookmarked=True)


@router.delete("/{note_id}", response_model=BookmarkState)
def remove_bookmark(
        note_id: str,
        student_id: str = Depends(get_student_id),
        portal: Portal = Depends(get_portal)
):
    portal.bookmarks.remove(note_id, student_id)
    return BookmarkState(note_id=note_id, bookmarked=False)


@router.post("/{note_id}/toggle", response_model=BookmarkState)
def toggle_bookmark(
        note_id: str,
        student_id: str = Depends(get_student_id),
        portal: Portal = Depends(get_portal)
):
    _require_note(portal, note_id)
    bookmarked = portal.bookmarks.toggle(note_id, student_id)
    return BookmarkState(note_id=note_id, bookmarked=bookmarked)
