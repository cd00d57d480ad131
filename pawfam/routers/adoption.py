# pawfam/routers/adoption.py
from functools import lru_cache

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from pawfam.core.auth import get_current_user
from pawfam.core.config import get_settings
from pawfam.core.listing_client import VendorListingClient
from pawfam.database import get_session
from pawfam.models.user import User
from pawfam.repositories.adoption_repo import AdoptionRepository
from pawfam.schemas.adoption import (
    AdoptionApplicationCreate,
    AdoptionApplicationRead,
    PetListing,
)
from pawfam.services.adoption_service import AdoptionService
from pawfam.services.listing_service import ListingService

router = APIRouter(prefix="/adoption", tags=["Adoption"])

repo = AdoptionRepository()
service = AdoptionService(repo)


@lru_cache
def get_listing_service() -> ListingService:
    return ListingService(repo, VendorListingClient.from_settings(get_settings()))


@router.get("/pets", response_model=list[PetListing])
def list_pets(
    search: str | None = Query(default=None, max_length=100),
    session: Session = Depends(get_session),
    listings: ListingService = Depends(get_listing_service),
):
    """
    Public adoption catalogue.

    Combines vendor posts and the remote vendor feed, normalized into one
    shape. `search` filters case-insensitively on name, type, breed, age,
    gender, size, shelter and description.
    """
    return listings.search(session, search)


@router.post(
    "/applications",
    response_model=AdoptionApplicationRead,
    status_code=status.HTTP_201_CREATED,
)
def submit_application(
    payload: AdoptionApplicationCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Submit an adoption application for a listing.

    Auth:
      - Any logged-in user.
    """
    return service.submit_application(session, current_user, payload)


@router.get("/applications", response_model=list[AdoptionApplicationRead])
def list_my_applications(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """List the caller's applications, newest first."""
    return service.list_applications(session, current_user)
