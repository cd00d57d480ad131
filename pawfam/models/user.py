# pawfam/models/user.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Account for both customers and vendors.

    Role:
      - "customer" | "vendor"

    Password recovery:
      - reset_code / reset_code_expiry are set together when an OTP is
        requested and cleared together when it is consumed or expires.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    username: str = Field(
        max_length=50,
        unique=True,
        index=True,
        description="Public handle, unique",
    )

    email: str = Field(
        max_length=255,
        unique=True,
        index=True,
        description="Lower-cased email, unique",
    )

    # Salted argon2 hash; plaintext is never stored
    password_hash: str = Field(max_length=255)

    role: str = Field(
        default="customer",
        index=True,
        description="Application role: customer | vendor",
    )

    reset_code: str | None = Field(
        default=None,
        max_length=6,
        description="Pending password-reset OTP (upper-case)",
    )

    reset_code_expiry: datetime | None = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        description="Absolute UTC expiry of reset_code",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
