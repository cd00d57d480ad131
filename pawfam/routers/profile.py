# pawfam/routers/profile.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from pawfam.core.auth import get_current_user
from pawfam.database import get_session
from pawfam.models.user import User
from pawfam.repositories.profile_repo import ProfileRepository
from pawfam.schemas.profile import ProfileResponse, ProfileUpdate
from pawfam.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["Profile"])

repo = ProfileRepository()
service = ProfileService(repo)


@router.get("", response_model=ProfileResponse)
def read_profile(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Return the caller's profile.

    `has_profile` is false until the user saves one.
    """
    return service.get_profile(session, current_user)


@router.put("", response_model=ProfileResponse)
def save_profile(
    payload: ProfileUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.upsert_profile(session, current_user, payload)
