# pawfam/services/booking_service.py
import logging

from sqlmodel import Session

from pawfam.models.daycare import DaycareBooking
from pawfam.models.user import User
from pawfam.repositories.booking_repo import BookingRepository
from pawfam.schemas.daycare import BookingCreate

logger = logging.getLogger(__name__)


class BookingService:
    """
    Business logic for daycare bookings.
    """

    def __init__(self, repo: BookingRepository):
        self.repo = repo

    def create_booking(self, session: Session, user: User, payload: BookingCreate) -> DaycareBooking:
        center = (payload.daycare_center or "").strip() or None
        booking = DaycareBooking(
            user_id=user.id,
            daycare_center=center,
            pet_name=payload.pet_name,
            pet_type=payload.pet_type,
            start_date=payload.start_date,
            end_date=payload.end_date,
            total_amount=payload.total_amount,
            status="confirmed",
        )
        booking = self.repo.create(session, booking)
        logger.info("User %s booked daycare %s", user.id, booking.id)
        return booking

    def list_bookings(self, session: Session, user: User) -> list[DaycareBooking]:
        """List the user's bookings, newest first."""
        return self.repo.list_for_user(session, user.id)
