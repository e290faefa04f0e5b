from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_serializer

from edunotes.schemas.types import CamelModel, NoteId, Semester


class NoteType(str, Enum):
    PDF = "pdf"
    DOC = "doc"


class Note(CamelModel):
    id: NoteId
    title: str = Field(..., min_length=1, max_length=255)
    subject: str = Field(..., min_length=1, max_length=255)
    semester: Semester
    upload_date: date
    file_size: str = Field(..., description="Human readable size, e.g. '2.5 MB'")
    type: NoteType
    file_url: str = Field(..., description="Self-contained data URL holding the file")
    file_name: str = Field(..., max_length=255)
    description: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_serializer("semester")
    def serialize_semester(self, semester: int) -> str:
        return str(semester)


class NoteSummary(CamelModel):
    """Note without its file payload, for listings"""

    id: NoteId
    title: str
    subject: str
    semester: Semester
    upload_date: date
    file_size: str
    type: NoteType
    file_name: str
    description: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_serializer("semester")
    def serialize_semester(self, semester: int) -> str:
        return str(semester)

    @classmethod
    def from_note(cls, note: Note) -> "NoteSummary":
        return cls(**note.model_dump(exclude={"file_url"}))
