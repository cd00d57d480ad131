# pawfam/services/adoption_service.py
import logging
import uuid
from collections.abc import Callable
from datetime import datetime

from sqlmodel import Session

from pawfam.core.clock import utcnow
from pawfam.core.errors import BadRequestError, NotFoundError
from pawfam.models.adoption import AdoptionApplication, VendorPet
from pawfam.models.user import User
from pawfam.repositories.adoption_repo import AdoptionRepository
from pawfam.schemas.adoption import AdoptionApplicationCreate, VendorPetCreate

logger = logging.getLogger(__name__)


class AdoptionService:
    """
    Business logic for vendor adoption posts and adoption applications.
    """

    def __init__(self, repo: AdoptionRepository, clock: Callable[[], datetime] = utcnow):
        self.repo = repo
        self.clock = clock

    # -------- Vendor posts --------

    def create_pet(self, session: Session, vendor: User, payload: VendorPetCreate) -> VendorPet:
        pet = VendorPet(
            vendor_id=vendor.id,
            name=payload.name,
            animal_type=payload.animal_type,
            breed=payload.breed,
            age=payload.age,
            gender=payload.gender,
            size=payload.size,
            description=payload.description,
            image=payload.image,
            shelter=(payload.shelter or "").strip() or vendor.username,
        )
        pet = self.repo.create_pet(session, pet)
        logger.info("Vendor %s posted pet %s", vendor.id, pet.id)
        return pet

    def list_vendor_pets(self, session: Session, vendor: User) -> list[VendorPet]:
        return self.repo.list_pets_for_vendor(session, vendor.id)

    def delete_pet(self, session: Session, vendor: User, pet_id: uuid.UUID) -> None:
        """
        Remove one of the vendor's own posts.

        - 404 if the post does not exist or belongs to another vendor.
        """
        pet = self.repo.get_pet(session, pet_id)
        if not pet or pet.vendor_id != vendor.id:
            raise NotFoundError("Pet not found")
        self.repo.delete_pet(session, pet)

    # -------- Applications --------

    def submit_application(
        self,
        session: Session,
        user: User,
        payload: AdoptionApplicationCreate,
    ) -> AdoptionApplication:
        """
        Store an adoption application.

        Rules:
          - the visit cannot be scheduled before today (UTC)
        """
        if payload.visit_schedule.date < self.clock().date():
            raise BadRequestError("Visit date cannot be in the past")

        application = AdoptionApplication(
            user_id=user.id,
            pet_id=payload.pet.id,
            pet_name=payload.pet.name,
            pet_type=payload.pet.type,
            pet_breed=payload.pet.breed,
            pet_age=payload.pet.age,
            pet_shelter=payload.pet.shelter,
            full_name=payload.personal_info.full_name,
            email=payload.personal_info.email,
            phone=payload.personal_info.phone,
            address=payload.personal_info.address,
            experience_level=payload.experience.level,
            experience_details=payload.experience.details,
            other_pets=payload.experience.other_pets,
            other_pets_details=payload.experience.other_pets_details,
            visit_date=payload.visit_schedule.date,
            visit_time=payload.visit_schedule.time,
            adoption_reason=payload.adoption_reason,
        )
        application = self.repo.create_application(session, application)
        logger.info("User %s applied to adopt pet %s", user.id, application.pet_id)
        return application

    def list_applications(self, session: Session, user: User) -> list[AdoptionApplication]:
        return self.repo.list_applications_for_user(session, user.id)
