import pytest
from pydantic import ValidationError as PydanticValidationError

from edunotes.schemas.feedback_schema import FeedbackStatus, FeedbackType
from edunotes.schemas.profile_schema import StudentProfile
from edunotes.services.feedback_service import FeedbackRepository
from edunotes.services.profile_service import ProfileRepository


def test_feedback_submitted_as_pending_newest_first(store):
    feedback = FeedbackRepository(store)
    first = feedback.submit("s1", FeedbackType.BUG, "Download fails", "The PDF does not open")
    second = feedback.submit("s2", "suggestion", "Dark mode", "Please add it")

    assert first.status == FeedbackStatus.PENDING
    assert second.type == FeedbackType.SUGGESTION
    assert [f.id for f in feedback.list_all()] == [second.id, first.id]
    assert feedback.for_student("s1") == [first]


def test_feedback_rejects_unknown_type(store):
    with pytest.raises(PydanticValidationError):
        FeedbackRepository(store).submit("s1", "complaint", "t", "m")


def test_set_status(store):
    feedback = FeedbackRepository(store)
    item = feedback.submit("s1", FeedbackType.GENERAL, "Thanks", "Great portal")

    updated = feedback.set_status(item.id, FeedbackStatus.RESOLVED)
    assert updated.status == FeedbackStatus.RESOLVED
    assert feedback.get(item.id).status == FeedbackStatus.RESOLVED
    assert feedback.set_status("missing", FeedbackStatus.REVIEWED) is None


def test_profile_upsert(store):
    profiles = ProfileRepository(store)
    assert profiles.get("s1") is None

    profiles.upsert(StudentProfile(student_id="s1", current_semester=2))
    profiles.upsert(StudentProfile(student_id="s2", current_semester="5", name="Grace"))
    profiles.upsert(StudentProfile(student_id="s1", current_semester=3, course="CS"))

    assert [p.student_id for p in profiles.list_all()] == ["s1", "s2"]
    assert profiles.get("s1").current_semester == 3
    assert profiles.get("s1").course == "CS"
    assert profiles.get("s2").name == "Grace"


@pytest.mark.parametrize("semester", [0, 9, "eight", True])
def test_profile_semester_out_of_range(semester):
    with pytest.raises(PydanticValidationError):
        StudentProfile(student_id="s1", current_semester=semester)
