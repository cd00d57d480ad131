# pawfam/repositories/booking_repo.py
import uuid

from sqlmodel import Session, select

from pawfam.models.daycare import DaycareBooking


class BookingRepository:
    """
    Data access layer for daycare_bookings.
    """

    def list_for_user(self, session: Session, user_id: uuid.UUID) -> list[DaycareBooking]:
        stmt = (
            select(DaycareBooking)
            .where(DaycareBooking.user_id == user_id)
            .order_by(DaycareBooking.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def create(self, session: Session, booking: DaycareBooking) -> DaycareBooking:
        session.add(booking)
        session.commit()
        session.refresh(booking)
        return booking
