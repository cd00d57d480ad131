# pawfam/repositories/adoption_repo.py
import uuid

from sqlmodel import Session, select

from pawfam.models.adoption import AdoptionApplication, VendorPet


class AdoptionRepository:
    """
    Data access layer for vendor_pets and adoption_applications.
    """

    # ---- Vendor posts ----

    def list_pets(self, session: Session) -> list[VendorPet]:
        """All vendor posts, newest first."""
        stmt = select(VendorPet).order_by(VendorPet.created_at.desc())
        return list(session.exec(stmt).all())

    def list_pets_for_vendor(self, session: Session, vendor_id: uuid.UUID) -> list[VendorPet]:
        stmt = (
            select(VendorPet)
            .where(VendorPet.vendor_id == vendor_id)
            .order_by(VendorPet.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def get_pet(self, session: Session, pet_id: uuid.UUID) -> VendorPet | None:
        return session.get(VendorPet, pet_id)

    def create_pet(self, session: Session, pet: VendorPet) -> VendorPet:
        session.add(pet)
        session.commit()
        session.refresh(pet)
        return pet

    def delete_pet(self, session: Session, pet: VendorPet) -> None:
        session.delete(pet)
        session.commit()

    # ---- Applications ----

    def create_application(
        self,
        session: Session,
        application: AdoptionApplication,
    ) -> AdoptionApplication:
        session.add(application)
        session.commit()
        session.refresh(application)
        return application

    def list_applications_for_user(
        self,
        session: Session,
        user_id: uuid.UUID,
    ) -> list[AdoptionApplication]:
        stmt = (
            select(AdoptionApplication)
            .where(AdoptionApplication.user_id == user_id)
            .order_by(AdoptionApplication.created_at.desc())
        )
        return list(session.exec(stmt).all())
