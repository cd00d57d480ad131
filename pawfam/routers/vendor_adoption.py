# pawfam/routers/vendor_adoption.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from pawfam.core.auth import require_vendor
from pawfam.database import get_session
from pawfam.models.user import User
from pawfam.repositories.adoption_repo import AdoptionRepository
from pawfam.schemas.adoption import VendorPetCreate, VendorPetRead
from pawfam.services.adoption_service import AdoptionService

router = APIRouter(prefix="/vendor/adoption", tags=["Vendor Adoption"])

repo = AdoptionRepository()
service = AdoptionService(repo)


@router.post("/pets", response_model=VendorPetRead, status_code=status.HTTP_201_CREATED)
def create_pet(
    payload: VendorPetCreate,
    session: Session = Depends(get_session),
    vendor: User = Depends(require_vendor),
):
    """Publish an adoption post. The shelter name defaults to the vendor's username."""
    return service.create_pet(session, vendor, payload)


@router.get("/pets", response_model=list[VendorPetRead])
def list_my_pets(
    session: Session = Depends(get_session),
    vendor: User = Depends(require_vendor),
):
    return service.list_vendor_pets(session, vendor)


@router.delete("/pets/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pet(
    pet_id: uuid.UUID,
    session: Session = Depends(get_session),
    vendor: User = Depends(require_vendor),
):
    """Remove one of the vendor's own posts (404 otherwise)."""
    service.delete_pet(session, vendor, pet_id)
