from datetime import datetime
from enum import Enum

from pydantic import Field

from edunotes.schemas.types import CamelModel, FeedbackId, StudentId


class FeedbackType(str, Enum):
    BUG = "bug"
    SUGGESTION = "suggestion"
    GENERAL = "general"


class FeedbackStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"


class Feedback(CamelModel):
    id: FeedbackId
    student_id: StudentId
    type: FeedbackType
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    status: FeedbackStatus = FeedbackStatus.PENDING
    submitted_at: datetime


class FeedbackCreate(CamelModel):
    type: FeedbackType = FeedbackType.GENERAL
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)


class FeedbackStatusUpdate(CamelModel):
    status: FeedbackStatus
