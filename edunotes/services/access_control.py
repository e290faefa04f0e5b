"""Semester gating for notes.

A viewer in semester V may see and download a note only when the note's
semester is V or earlier. Semesters are ints here, so the comparison is
numeric.
"""
from typing import Iterable, List

from edunotes.core.logging import get_logger
from edunotes.schemas.note_schema import Note
from edunotes.utils.exceptions import AuthorizationError

logger = get_logger(__name__)


def is_accessible(note: Note, viewer_semester: int) -> bool:
    return note.semester <= viewer_semester


def filter_accessible(notes: Iterable[Note], viewer_semester: int) -> List[Note]:
    return [note for note in notes if is_accessible(note, viewer_semester)]


def ensure_downloadable(note: Note, viewer_semester: int) -> None:
    if not is_accessible(note, viewer_semester):
        logger.warning(
            f"Blocked download of note {note.id} (semester {note.semester}) for viewer in semester {viewer_semester}",
            extra={"note_id": note.id}
        )
        raise AuthorizationError(f"Available in Semester {note.semester}")
