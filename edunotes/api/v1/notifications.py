from fastapi import APIRouter, Depends, status

from edunotes.dependencies import get_portal, require_admin
from edunotes.schemas.notification_schema import Notification, NotificationCreate, NotificationList
from edunotes.services.portal import Portal

router = APIRouter()


@router.get("", response_model=NotificationList)
def list_notifications(portal: Portal = Depends(get_portal)):
    notifications = portal.notifications.list_all()
    return NotificationList(
        notifications=notifications,
        unread_count=sum(1 for n in notifications if not n.is_read)
    )


@router.post("", response_model=Notification, status_code=status.HTTP_201_CREATED)
def send_notification(
        payload: NotificationCreate,
        _: bool = Depends(require_admin),
        portal: Portal = Depends(get_portal)
):
    return portal.admin.send_notification(payload.title, payload.message, payload.target_semester)


@router.post("/{notification_id}/read")
def mark_read(notification_id: str, portal: Portal = Depends(get_portal)):
    updated = portal.notifications.mark_read(notification_id)
    return {"updated": updated, "unreadCount": portal.notifications.unread_count()}
