# pawfam/services/profile_service.py
from sqlmodel import Session

from pawfam.core.clock import utcnow
from pawfam.models.profile import Profile
from pawfam.models.user import User
from pawfam.repositories.profile_repo import ProfileRepository
from pawfam.schemas.profile import ProfileRead, ProfileResponse, ProfileUpdate


class ProfileService:
    def __init__(self, repo: ProfileRepository):
        self.repo = repo

    def get_profile(self, session: Session, user: User) -> ProfileResponse:
        profile = self.repo.get_for_user(session, user.id)
        if profile is None:
            return ProfileResponse(has_profile=False)
        return ProfileResponse(
            has_profile=True,
            profile=ProfileRead.model_validate(profile, from_attributes=True),
        )

    def upsert_profile(self, session: Session, user: User, payload: ProfileUpdate) -> ProfileResponse:
        """Create the caller's profile or replace its fields."""
        profile = self.repo.get_for_user(session, user.id) or Profile(user_id=user.id, name=payload.name)
        profile.name = payload.name
        profile.mobile_number = payload.mobile_number
        profile.residential_address = payload.residential_address
        profile.updated_at = utcnow()
        profile = self.repo.save(session, profile)
        return ProfileResponse(
            has_profile=True,
            profile=ProfileRead.model_validate(profile, from_attributes=True),
        )
