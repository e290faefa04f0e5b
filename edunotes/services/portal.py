from typing import List, Optional, Tuple

from edunotes.core.config import Settings, settings as default_settings
from edunotes.core.logging import get_logger
from edunotes.db.store import KeyValueStore, open_store
from edunotes.schemas.note_schema import Note
from edunotes.services.access_control import ensure_downloadable, filter_accessible
from edunotes.services.admin_service import AdminService
from edunotes.services.bookmark_service import BookmarkRepository
from edunotes.services.feedback_service import FeedbackRepository
from edunotes.services.file_codec import decode_data_url
from edunotes.services.note_service import NoteRepository
from edunotes.services.notification_service import NotificationRepository
from edunotes.services.profile_service import ProfileRepository
from edunotes.services.search_service import NoteSearchService
from edunotes.utils.exceptions import NotFoundError

logger = get_logger(__name__)


class Portal:
    """Owns the store handle and every repository built on it.

    Open one per process with ``Portal.open()`` and close it on shutdown.
    Constructing a Portal seeds the notes and notifications collections
    when they have never been stored.
    """

    def __init__(self, store: KeyValueStore, config: Optional[Settings] = None):
        self.store = store
        self.config = config or default_settings

        self.notes = NoteRepository(store)
        self.notifications = NotificationRepository(store)
        self.bookmarks = BookmarkRepository(store, self.notes)
        self.feedback = FeedbackRepository(store)
        self.profiles = ProfileRepository(store)

        self.search = NoteSearchService(self.notes)
        self.admin = AdminService(self.notes, self.notifications, self.feedback, self.config)

    @classmethod
    def open(cls, config: Optional[Settings] = None) -> "Portal":
        config = config or default_settings
        store = open_store(config)
        logger.info(f"Portal opened with {store.backend} storage", extra={"backend": store.backend})
        return cls(store, config)

    def close(self) -> None:
        self.store.close()
        logger.info("Portal closed")

    def __enter__(self) -> "Portal":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def recent_for(self, viewer_semester: Optional[int] = None) -> List[Note]:
        """Recent uploads the viewer may open, using the configured window"""
        recent = self.notes.recent(days=self.config.RECENT_DAYS, limit=self.config.RECENT_LIMIT)
        if viewer_semester is None:
            return recent
        return filter_accessible(recent, viewer_semester)

    def download(self, note_id: str, viewer_semester: Optional[int] = None) -> Tuple[Note, bytes, str]:
        """File bytes and media type of a note, gated by the viewer's semester"""
        note = self.notes.get(note_id)
        if note is None:
            raise NotFoundError(f"Note {note_id} not found")
        if viewer_semester is not None:
            ensure_downloadable(note, viewer_semester)

        content, content_type = decode_data_url(note.file_url)
        return note, content, content_type
