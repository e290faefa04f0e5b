from fastapi import APIRouter, Depends

from edunotes.dependencies import get_portal, get_student_id, get_student_profile
from edunotes.schemas.profile_schema import StudentProfile, StudentProfileUpdate
from edunotes.services.portal import Portal

router = APIRouter()


@router.get("/me", response_model=StudentProfile)
def my_profile(profile: StudentProfile = Depends(get_student_profile)):
    return profile


@router.put("/me", response_model=StudentProfile)
def save_my_profile(
        payload: StudentProfileUpdate,
        student_id: str = Depends(get_student_id),
        portal: Portal = Depends(get_portal)
):
    profile = StudentProfile(student_id=student_id, **payload.model_dump())
    return portal.profiles.upsert(profile)
