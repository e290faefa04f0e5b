from datetime import date
from typing import List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from edunotes.core.config import Settings
from edunotes.core.logging import get_logger
from edunotes.core.security import verify_admin_code
from edunotes.schemas.feedback_schema import Feedback, FeedbackStatus
from edunotes.schemas.note_schema import Note, NoteType
from edunotes.schemas.notification_schema import Notification
from edunotes.schemas.types import ALL, new_id
from edunotes.services.feedback_service import FeedbackRepository
from edunotes.services.file_codec import (
    encode_data_url,
    file_extension,
    format_file_size,
    get_content_type,
    sanitize_filename,
    validate_file_type,
)
from edunotes.services.note_service import NoteRepository
from edunotes.services.notification_service import NotificationRepository
from edunotes.utils.exceptions import (
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
    ValidationError,
)

logger = get_logger(__name__)


def parse_tags(tags: Union[str, List[str], None]) -> Optional[List[str]]:
    """Comma separated or list input to a clean tag list, None when empty"""
    if tags is None:
        return None
    if isinstance(tags, str):
        tags = tags.split(",")
    cleaned = [tag.strip() for tag in tags if tag and tag.strip()]
    return cleaned or None


def _validation_error(message: str, e: PydanticValidationError) -> ValidationError:
    errors = [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in e.errors()
    ]
    return ValidationError(message, details={"validation_errors": errors})


class AdminService:
    """Workflows behind the admin passphrase: uploads, broadcasts, feedback review"""

    def __init__(
            self,
            notes: NoteRepository,
            notifications: NotificationRepository,
            feedback: FeedbackRepository,
            config: Settings
    ):
        self.notes = notes
        self.notifications = notifications
        self.feedback = feedback
        self.config = config

    def login(self, code: str) -> bool:
        return verify_admin_code(code, self.config.ADMIN_CODE)

    def upload_material(
            self,
            title: str,
            subject: str,
            semester: Union[int, str],
            file_name: str,
            content: bytes,
            content_type: Optional[str] = None,
            description: Optional[str] = None,
            tags: Union[str, List[str], None] = None,
            today: Optional[date] = None
    ) -> Note:
        """Store an uploaded file as a note and announce it to its semester"""
        file_name = sanitize_filename(file_name)
        allowed = self.config.ALLOWED_FILE_TYPES
        if not validate_file_type(file_name, allowed):
            raise UnsupportedMediaTypeError(
                f"Unsupported file type: {file_extension(file_name) or 'none'}",
                provided_type=file_extension(file_name),
                allowed_types=allowed,
            )

        if not content:
            raise ValidationError("File is empty", details={"field": "file"})
        if len(content) > self.config.MAX_FILE_SIZE:
            raise PayloadTooLargeError(
                f"File exceeds maximum size of {self.config.MAX_FILE_SIZE} bytes",
                max_size=self.config.MAX_FILE_SIZE,
                actual_size=len(content),
            )

        if not content_type or content_type == "application/octet-stream":
            content_type = get_content_type(file_name)
        try:
            note = Note(
                id=new_id(),
                title=(title or "").strip(),
                subject=(subject or "").strip(),
                semester=semester,
                upload_date=today or date.today(),
                file_size=format_file_size(len(content)),
                type=NoteType.PDF if file_extension(file_name) == "pdf" else NoteType.DOC,
                file_url=encode_data_url(content, content_type),
                file_name=file_name,
                description=(description or "").strip() or None,
                tags=parse_tags(tags),
            )
        except PydanticValidationError as e:
            raise _validation_error("Invalid study material", e)

        self.notes.add(note)
        self.notifications.broadcast(
            "New Study Material Available",
            f"{note.title} has been uploaded for {note.subject} (Semester {note.semester})",
            target_semester=str(note.semester),
            today=note.upload_date,
        )
        logger.info(f"Uploaded {file_name} as note {note.id}", extra={"note_id": note.id})
        return note

    def send_notification(self, title: str, message: str, target_semester: str = ALL) -> Notification:
        try:
            return self.notifications.broadcast(title, message, target_semester)
        except PydanticValidationError as e:
            raise _validation_error("Invalid notification", e)

    def set_feedback_status(self, feedback_id: str, status: FeedbackStatus) -> Optional[Feedback]:
        return self.feedback.set_status(feedback_id, status)
