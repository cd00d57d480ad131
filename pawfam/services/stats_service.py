# pawfam/services/stats_service.py
import math
from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from sqlmodel import Session

from pawfam.core.clock import as_utc, utcnow
from pawfam.models.daycare import DaycareBooking
from pawfam.models.user import User
from pawfam.repositories.booking_repo import BookingRepository
from pawfam.schemas.stats import CenterAmount, CenterBookings, CustomerDashboardStats

UNKNOWN_CENTER = "Unknown Center"
WEEK = timedelta(days=7)


def compute_booking_stats(
    bookings: Iterable[DaycareBooking],
    now: datetime,
) -> CustomerDashboardStats:
    """
    Aggregate a customer's bookings for the dashboard.

    - "last week" means created_at >= now - 7 days
    - a missing amount counts as 0, a missing center as "Unknown Center"
    - per-center groupings are sorted by name, so the result does not
      depend on the order of `bookings`
    """
    week_ago = as_utc(now) - WEEK

    # fsum keeps float totals exact regardless of summation order
    amounts: list[float] = []
    amounts_last_week: list[float] = []
    amounts_by_center: dict[str, list[float]] = defaultdict(list)

    for booking in bookings:
        amount = booking.total_amount or 0.0
        center = booking.daycare_center or UNKNOWN_CENTER

        amounts.append(amount)
        if as_utc(booking.created_at) >= week_ago:
            amounts_last_week.append(amount)
        amounts_by_center[center].append(amount)

    return CustomerDashboardStats(
        total_bookings=len(amounts),
        bookings_last_week=len(amounts_last_week),
        total_amount_spent=math.fsum(amounts),
        amount_spent_last_week=math.fsum(amounts_last_week),
        amount_by_center=[
            CenterAmount(name=name, value=math.fsum(amounts_by_center[name]))
            for name in sorted(amounts_by_center)
        ],
        bookings_by_center=[
            CenterBookings(name=name, bookings=len(amounts_by_center[name]))
            for name in sorted(amounts_by_center)
        ],
    )


class StatsService:
    """
    Orchestrates the customer dashboard statistics.
    """

    def __init__(self, repo: BookingRepository, clock: Callable[[], datetime] = utcnow):
        self.repo = repo
        self.clock = clock

    def get_customer_dashboard_stats(self, session: Session, user: User) -> CustomerDashboardStats:
        bookings = self.repo.list_for_user(session, user.id)
        return compute_booking_stats(bookings, self.clock())
