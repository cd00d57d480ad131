# pawfam/repositories/profile_repo.py
import uuid

from sqlmodel import Session, select

from pawfam.models.profile import Profile


class ProfileRepository:
    def get_for_user(self, session: Session, user_id: uuid.UUID) -> Profile | None:
        stmt = select(Profile).where(Profile.user_id == user_id)
        return session.exec(stmt).first()

    def save(self, session: Session, profile: Profile) -> Profile:
        session.add(profile)
        session.commit()
        session.refresh(profile)
        return profile
