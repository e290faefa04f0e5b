import datetime as dt
from typing import List

from pydantic import Field

from edunotes.schemas.types import ALL, CamelModel, NotificationId, SemesterTarget


class Notification(CamelModel):
    id: NotificationId
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    date: dt.date
    is_read: bool = False
    target_semester: SemesterTarget = ALL


class NotificationCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    target_semester: SemesterTarget = ALL


class NotificationList(CamelModel):
    notifications: List[Notification]
    unread_count: int
