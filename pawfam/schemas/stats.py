# pawfam/schemas/stats.py
from pydantic import ConfigDict
from sqlmodel import SQLModel


class CenterAmount(SQLModel):
    """
    Amount spent at one daycare center (pie chart input).
    """
    model_config = ConfigDict(extra="forbid")

    name: str
    value: float


class CenterBookings(SQLModel):
    """
    Number of bookings at one daycare center (bar chart input).
    """
    model_config = ConfigDict(extra="forbid")

    name: str
    bookings: int


class CustomerDashboardStats(SQLModel):
    """
    Full payload for the customer dashboard.
    """
    model_config = ConfigDict(extra="forbid")

    total_bookings: int
    bookings_last_week: int
    total_amount_spent: float
    amount_spent_last_week: float
    amount_by_center: list[CenterAmount]
    bookings_by_center: list[CenterBookings]
