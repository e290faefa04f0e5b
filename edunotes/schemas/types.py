import uuid
from typing import Annotated, Any, NewType, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

MIN_SEMESTER = 1
MAX_SEMESTER = 8
ALL = "all"

NoteId = NewType("NoteId", str)
NotificationId = NewType("NotificationId", str)
BookmarkId = NewType("BookmarkId", str)
FeedbackId = NewType("FeedbackId", str)
StudentId = NewType("StudentId", str)


def new_id() -> str:
    return uuid.uuid4().hex


def parse_semester(value: Any) -> int:
    """Convert an external semester representation ("3" or 3) to an int.

    Range checking is left to the field constraints so the error names the
    offending bound.
    """
    if isinstance(value, bool):
        raise ValueError("semester must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
    raise ValueError(f"semester must be a number, got {value!r}")


def parse_semester_target(value: Any) -> str:
    """Normalise a notification target to "all" or a canonical semester string."""
    if isinstance(value, str) and value.strip().lower() == ALL:
        return ALL
    semester = parse_semester(value)
    if not MIN_SEMESTER <= semester <= MAX_SEMESTER:
        raise ValueError(f"semester must be between {MIN_SEMESTER} and {MAX_SEMESTER}")
    return str(semester)


Semester = Annotated[int, BeforeValidator(parse_semester), Field(ge=MIN_SEMESTER, le=MAX_SEMESTER)]
SemesterTarget = Annotated[str, BeforeValidator(parse_semester_target)]


def semester_or_none(value: Any) -> Optional[int]:
    """Parse a "all"-or-semester filter value; None means no filtering."""
    if value is None or (isinstance(value, str) and value.strip().lower() == ALL):
        return None
    semester = parse_semester(value)
    if not MIN_SEMESTER <= semester <= MAX_SEMESTER:
        raise ValueError(f"semester must be between {MIN_SEMESTER} and {MAX_SEMESTER}")
    return semester


class CamelModel(BaseModel):
    """Base for records persisted and returned with camelCase field names"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
