from typing import Optional
from fastapi import Depends, Header, Request

from edunotes.schemas.profile_schema import StudentProfile
from edunotes.services.portal import Portal
from edunotes.utils.exceptions import AuthenticationError, NotFoundError
from edunotes.core.logging import get_logger

logger = get_logger(__name__)


def get_portal(request: Request) -> Portal:
    return request.app.state.portal


def require_admin(
        x_admin_code: Optional[str] = Header(None),
        portal: Portal = Depends(get_portal)
) -> bool:
    return portal.admin.login(x_admin_code or "")


def get_student_id(x_student_id: Optional[str] = Header(None)) -> str:
    student_id = (x_student_id or "").strip()
    if not student_id:
        raise AuthenticationError("Missing X-Student-Id header")
    return student_id


def get_student_profile(
        student_id: str = Depends(get_student_id),
        portal: Portal = Depends(get_portal)
) -> StudentProfile:
    profile = portal.profiles.get(student_id)
    if profile is None:
        raise NotFoundError("Student profile not found; set your current semester first")
    return profile


def get_viewer_semester(
        x_admin_code: Optional[str] = Header(None),
        x_student_id: Optional[str] = Header(None),
        portal: Portal = Depends(get_portal)
) -> Optional[int]:
    """Semester to gate note listings by; None for the unfiltered admin view"""
    if x_admin_code is not None:
        portal.admin.login(x_admin_code)
        return None

    profile = get_student_profile(get_student_id(x_student_id), portal)
    return profile.current_semester
