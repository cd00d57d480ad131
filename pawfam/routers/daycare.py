# pawfam/routers/daycare.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from pawfam.core.auth import get_current_user
from pawfam.database import get_session
from pawfam.models.user import User
from pawfam.repositories.booking_repo import BookingRepository
from pawfam.schemas.daycare import BookingCreate, BookingRead
from pawfam.services.booking_service import BookingService

router = APIRouter(prefix="/daycare", tags=["Daycare"])

repo = BookingRepository()
service = BookingService(repo)


@router.post("/bookings", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Book a daycare stay.

    Validation:
      - end_date >= start_date
      - total_amount >= 0
    """
    return service.create_booking(session, current_user, payload)


@router.get("/bookings", response_model=list[BookingRead])
def list_my_bookings(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.list_bookings(session, current_user)
