from datetime import date, timedelta
from typing import List, Optional

from edunotes.core.logging import get_logger
from edunotes.db.store import KeyValueStore
from edunotes.db.utils import BaseRepository
from edunotes.schemas.note_schema import Note
from edunotes.services.access_control import filter_accessible
from edunotes.services.seed_data import default_notes
from edunotes.utils.exceptions import ValidationError

logger = get_logger(__name__)


class NoteRepository(BaseRepository[Note]):
    """Study materials, newest first"""

    collection_key = "edu_notes_files"

    def __init__(self, store: KeyValueStore, seed: bool = True):
        super().__init__(store, Note)
        if seed:
            self.ensure_seeded()

    def ensure_seeded(self) -> bool:
        """Store the sample notes if no notes collection exists yet"""
        return self._seed_if_absent(default_notes())

    def get(self, note_id: str) -> Optional[Note]:
        return next((note for note in self.list_all() if note.id == note_id), None)

    def add(self, note: Note) -> Note:
        with self._mutate() as notes:
            notes.insert(0, note)
        logger.info(f"Added note {note.id} ({note.title})", extra={"note_id": note.id})
        return note

    def delete(self, note_id: str) -> bool:
        with self._mutate() as notes:
            remaining = [note for note in notes if note.id != note_id]
            removed = len(notes) - len(remaining)
            notes[:] = remaining

        if removed:
            logger.info(f"Deleted note {note_id}", extra={"note_id": note_id})
        else:
            logger.debug(f"Note {note_id} not found, nothing deleted")
        return bool(removed)

    def accessible_to(self, current_semester: int) -> List[Note]:
        return filter_accessible(self.list_all(), current_semester)

    def recent(self, days: int = 7, limit: int = 10, today: Optional[date] = None) -> List[Note]:
        """Notes uploaded within the last ``days`` days, in stored order"""
        if days < 0 or limit < 0:
            raise ValidationError("days and limit must not be negative", details={"days": days, "limit": limit})

        cutoff = (today or date.today()) - timedelta(days=days)
        return [note for note in self.list_all() if note.upload_date >= cutoff][:limit]

    def unique_subjects(self) -> List[str]:
        return sorted({note.subject for note in self.list_all()})
