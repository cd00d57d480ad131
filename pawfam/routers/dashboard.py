# pawfam/routers/dashboard.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from pawfam.core.auth import get_current_user
from pawfam.database import get_session
from pawfam.models.user import User
from pawfam.repositories.booking_repo import BookingRepository
from pawfam.schemas.stats import CustomerDashboardStats
from pawfam.services.stats_service import StatsService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

repo = BookingRepository()


def get_stats_service() -> StatsService:
    return StatsService(repo)


@router.get("/customer", response_model=CustomerDashboardStats)
def get_customer_dashboard(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
    service: StatsService = Depends(get_stats_service),
):
    """
    Booking totals for the caller: all-time and trailing 7 days, plus
    amount and count per daycare center for the charts.
    """
    return service.get_customer_dashboard_stats(session, current_user)
