from datetime import date
from typing import Optional

from edunotes.core.logging import get_logger
from edunotes.db.store import KeyValueStore
from edunotes.db.utils import BaseRepository
from edunotes.schemas.notification_schema import Notification
from edunotes.schemas.types import ALL, new_id
from edunotes.services.seed_data import default_notifications

logger = get_logger(__name__)


class NotificationRepository(BaseRepository[Notification]):
    """Broadcast notifications, newest first.

    Notifications are never deleted; the only change after creation is
    marking one as read.
    """

    collection_key = "edu_notes_notifications"

    def __init__(self, store: KeyValueStore, seed: bool = True):
        super().__init__(store, Notification)
        if seed:
            self.ensure_seeded()

    def ensure_seeded(self, today: Optional[date] = None) -> bool:
        return self._seed_if_absent(default_notifications(today or date.today()))

    def add(self, notification: Notification) -> Notification:
        with self._mutate() as notifications:
            notifications.insert(0, notification)
        logger.info(f"Notification {notification.id} sent to {notification.target_semester}")
        return notification

    def broadcast(
            self,
            title: str,
            message: str,
            target_semester: str = ALL,
            today: Optional[date] = None
    ) -> Notification:
        notification = Notification(
            id=new_id(),
            title=title,
            message=message,
            date=today or date.today(),
            is_read=False,
            target_semester=target_semester,
        )
        return self.add(notification)

    def mark_read(self, notification_id: str) -> bool:
        with self._mutate() as notifications:
            changed = False
            for i, notification in enumerate(notifications):
                if notification.id == notification_id and not notification.is_read:
                    notifications[i] = notification.model_copy(update={"is_read": True})
                    changed = True

        if not changed:
            logger.debug(f"Notification {notification_id} not found or already read")
        return changed

    def unread_count(self) -> int:
        return sum(1 for notification in self.list_all() if not notification.is_read)

