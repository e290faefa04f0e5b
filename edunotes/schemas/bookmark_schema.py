from datetime import datetime

from edunotes.schemas.types import BookmarkId, CamelModel, NoteId, StudentId


class Bookmark(CamelModel):
    id: BookmarkId
    note_id: NoteId
    student_id: StudentId
    bookmarked_at: datetime


class BookmarkState(CamelModel):
    note_id: NoteId
    bookmarked: bool
