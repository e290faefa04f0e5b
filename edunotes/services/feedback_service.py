from datetime import datetime, timezone
from typing import List, Optional

from edunotes.core.logging import get_logger
from edunotes.db.store import KeyValueStore
from edunotes.db.utils import BaseRepository
from edunotes.schemas.feedback_schema import Feedback, FeedbackStatus, FeedbackType
from edunotes.schemas.types import new_id

logger = get_logger(__name__)


class FeedbackRepository(BaseRepository[Feedback]):

    collection_key = "edu_notes_feedback"

    def __init__(self, store: KeyValueStore):
        super().__init__(store, Feedback)

    def submit(self, student_id: str, type: FeedbackType, title: str, message: str) -> Feedback:
        """Record new feedback as pending, newest first"""
        feedback = Feedback(
            id=new_id(),
            student_id=student_id,
            type=type,
            title=title,
            message=message,
            status=FeedbackStatus.PENDING,
            submitted_at=datetime.now(timezone.utc),
        )
        with self._mutate() as feedback_list:
            feedback_list.insert(0, feedback)
        logger.info(f"Feedback {feedback.id} ({feedback.type.value}) submitted by {student_id}", extra={"student_id": student_id})
        return feedback

    def get(self, feedback_id: str) -> Optional[Feedback]:
        return next((f for f in self.list_all() if f.id == feedback_id), None)

    def for_student(self, student_id: str) -> List[Feedback]:
        return [f for f in self.list_all() if f.student_id == student_id]

    def set_status(self, feedback_id: str, status: FeedbackStatus) -> Optional[Feedback]:
        # no transition rules: reviewers may move an item back to pending
        updated = None
        with self._mutate() as feedback_list:
            for i, feedback in enumerate(feedback_list):
                if feedback.id == feedback_id:
                    updated = feedback_list[i] = feedback.model_copy(update={"status": FeedbackStatus(status)})

        if updated is None:
            logger.debug(f"Feedback {feedback_id} not found, status unchanged")
        else:
            logger.info(f"Feedback {feedback_id} marked {updated.status.value}")
        return updated
