from typing import Optional

from edunotes.core.logging import get_logger
from edunotes.db.store import KeyValueStore
from edunotes.db.utils import BaseRepository
from edunotes.schemas.profile_schema import StudentProfile

logger = get_logger(__name__)


class ProfileRepository(BaseRepository[StudentProfile]):
    """One profile per student id"""

    collection_key = "edu_notes_profiles"

    def __init__(self, store: KeyValueStore):
        super().__init__(store, StudentProfile)

    def get(self, student_id: str) -> Optional[StudentProfile]:
        return next((p for p in self.list_all() if p.student_id == student_id), None)

    def upsert(self, profile: StudentProfile) -> StudentProfile:
        with self._mutate() as profiles:
            for i, existing in enumerate(profiles):
                if existing.student_id == profile.student_id:
                    profiles[i] = profile
                    logger.info(f"Updated profile for {profile.student_id}", extra={"student_id": profile.student_id})
                    break
            else:
                profiles.append(profile)
                logger.info(f"Created profile for {profile.student_id}", extra={"student_id": profile.student_id})
        return profile
