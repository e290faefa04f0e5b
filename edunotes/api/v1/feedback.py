from typing import List

from fastapi import APIRouter, Depends, status

from edunotes.dependencies import get_portal, get_student_id, require_admin
from edunotes.schemas.feedback_schema import Feedback, FeedbackCreate, FeedbackStatusUpdate
from edunotes.services.portal import Portal
from edunotes.utils.exceptions import NotFoundError

router = APIRouter()


@router.post("", response_model=Feedback, status_code=status.HTTP_201_CREATED)
def submit_feedback(
        payload: FeedbackCreate,
        student_id: str = Depends(get_student_id),
        portal: Portal = Depends(get_portal)
):
    return portal.feedback.submit(student_id, payload.type, payload.title, payload.message)


@router.get("/mine", response_model=List[Feedback])
def my_feedback(
        student_id: str = Depends(get_student_id),
        portal: Portal = Depends(get_portal)
):
    return portal.feedback.for_student(student_id)


@router.get("", response_model=List[Feedback])
def list_feedback(
        _: bool = Depends(require_admin),
        portal: Portal = Depends(get_portal)
):
    return portal.feedback.list_all()


@router.patch("/{feedback_id}", response_model=Feedback)
def update_feedback_status(
        feedback_id: str,
        payload: FeedbackStatusUpdate,
        _: bool = Depends(require_admin),
        portal: Portal = Depends(get_portal)
):
    feedback = portal.admin.set_feedback_status(feedback_id, payload.status)
    if feedback is None:
        raise NotFoundError(f"Feedback {feedback_id} not found")
    return feedback
