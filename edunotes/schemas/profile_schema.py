from typing import Optional

from pydantic import Field

from edunotes.schemas.types import CamelModel, Semester, StudentId


class StudentProfile(CamelModel):
    student_id: StudentId = Field(..., min_length=1, max_length=128)
    current_semester: Semester
    name: Optional[str] = Field(None, max_length=100)
    course: Optional[str] = Field(None, max_length=100)


class StudentProfileUpdate(CamelModel):
    current_semester: Semester
    name: Optional[str] = Field(None, max_length=100)
    course: Optional[str] = Field(None, max_length=100)
