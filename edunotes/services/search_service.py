from typing import Dict, Iterable, List, Optional, Union

from edunotes.core.logging import get_logger
from edunotes.schemas.note_schema import Note
from edunotes.schemas.types import ALL, semester_or_none
from edunotes.services.note_service import NoteRepository
from edunotes.utils.exceptions import InputValidationError

logger = get_logger(__name__)


def matches_query(note: Note, term: str) -> bool:
    """Case-insensitive substring match on title, subject, description or any tag"""
    fields = [note.title, note.subject, note.description or ""]
    fields.extend(note.tags or [])
    return any(term in field.casefold() for field in fields)


def group_by_semester(notes: Iterable[Note]) -> Dict[int, List[Note]]:
    """Group notes per semester, semesters ascending, order kept within a group"""
    groups: Dict[int, List[Note]] = {}
    for note in notes:
        groups.setdefault(note.semester, []).append(note)
    return {semester: groups[semester] for semester in sorted(groups)}


class NoteSearchService:
    """Text and categorical filtering over the notes a viewer may see"""

    def __init__(self, notes: NoteRepository):
        self.notes = notes

    def search(
            self,
            query: Optional[str] = None,
            semester_filter: Union[str, int] = ALL,
            subject_filter: str = ALL,
            viewer_semester: Optional[int] = None
    ) -> List[Note]:
        """Filter notes by free text, semester and subject.

        Without ``viewer_semester`` every note is searched (admin view);
        with it only notes the viewer can access are. All active filters
        must match and the base order is preserved.
        """
        try:
            semester = semester_or_none(semester_filter)
        except ValueError as e:
            raise InputValidationError(str(e), "semester", semester_filter)

        if viewer_semester is None:
            results = self.notes.list_all()
        else:
            results = self.notes.accessible_to(viewer_semester)

        term = (query or "").strip().casefold()
        if term:
            results = [note for note in results if matches_query(note, term)]

        if semester is not None:
            results = [note for note in results if note.semester == semester]

        if subject_filter and subject_filter != ALL:
            results = [note for note in results if note.subject == subject_filter]

        logger.debug(f"Search '{term}' semester={semester_filter} subject={subject_filter} -> {len(results)} note(s)")
        return results
