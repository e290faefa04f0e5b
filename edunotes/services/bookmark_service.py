from datetime import datetime, timezone
from typing import List

from edunotes.core.logging import get_logger
from edunotes.db.store import KeyValueStore
from edunotes.db.utils import BaseRepository
from edunotes.schemas.bookmark_schema import Bookmark
from edunotes.schemas.note_schema import Note
from edunotes.schemas.types import new_id
from edunotes.services.note_service import NoteRepository

logger = get_logger(__name__)


class BookmarkRepository(BaseRepository[Bookmark]):
    """Student to note bookmarks.

    (note_id, student_id) pairs are not unique in storage: ``add`` appends
    unconditionally, so callers check ``is_bookmarked`` first or use
    ``toggle``. ``remove`` clears every matching pair.
    """

    collection_key = "edu_notes_bookmarks"

    def __init__(self, store: KeyValueStore, notes: NoteRepository):
        super().__init__(store, Bookmark)
        self.notes = notes

    def is_bookmarked(self, note_id: str, student_id: str) -> bool:
        return any(
            b.note_id == note_id and b.student_id == student_id
            for b in self.list_all()
        )

    def for_student(self, student_id: str) -> List[Bookmark]:
        return [b for b in self.list_all() if b.student_id == student_id]

    def add(self, note_id: str, student_id: str) -> Bookmark:
        bookmark = Bookmark(
            id=new_id(),
            note_id=note_id,
            student_id=student_id,
            bookmarked_at=datetime.now(timezone.utc),
        )
        with self._mutate() as bookmarks:
            bookmarks.append(bookmark)
        logger.info(f"Student {student_id} bookmarked note {note_id}", extra={"student_id": student_id, "note_id": note_id})
        return bookmark

    def remove(self, note_id: str, student_id: str) -> int:
        with self._mutate() as bookmarks:
            kept = [b for b in bookmarks if not (b.note_id == note_id and b.student_id == student_id)]
            removed = len(bookmarks) - len(kept)
            bookmarks[:] = kept
        if removed:
            logger.info(f"Student {student_id} removed {removed} bookmark(s) for note {note_id}")
        return removed

    def toggle(self, note_id: str, student_id: str) -> bool:
        """Flip the bookmark state atomically and return the new state"""
        with self.store.lock(self.collection_key):
            if self.is_bookmarked(note_id, student_id):
                self.remove(note_id, student_id)
                return False
            self.add(note_id, student_id)
            return True

    def bookmarked_notes(self, student_id: str) -> List[Note]:
        """Notes bookmarked by the student, in bookmark order.

        Bookmarks pointing at deleted notes are skipped.
        """
        notes_by_id = {note.id: note for note in self.notes.list_all()}
        result = []
        for bookmark in self.for_student(student_id):
            note = notes_by_id.get(bookmark.note_id)
            if note is None:
                logger.debug(f"Skipping bookmark {bookmark.id}: note {bookmark.note_id} no longer exists")
                continue
            result.append(note)
        return result
