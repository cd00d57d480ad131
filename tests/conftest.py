import os
import uuid
from datetime import datetime, timedelta, timezone

# Settings are read at import time; configure before importing the app.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ.pop("VENDOR_LISTINGS_URL", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from pawfam.core.auth import get_token_issuer
from pawfam.core.errors import MailDeliveryError
from pawfam.core.listing_client import VendorListingClient
from pawfam.core.security import TokenIssuer
from pawfam.database import get_session
from pawfam.main import app
from pawfam.repositories.adoption_repo import AdoptionRepository
from pawfam.repositories.booking_repo import BookingRepository
from pawfam.repositories.user_repo import UserRepository
from pawfam.routers.adoption import get_listing_service
from pawfam.routers.auth import get_auth_service
from pawfam.routers.dashboard import get_stats_service
from pawfam.services.auth_service import AuthService
from pawfam.services.listing_service import ListingService
from pawfam.services.stats_service import StatsService


class FakeClock:
    """Settable clock; starts at the real current time."""

    def __init__(self):
        self.now = datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeNotifier:
    """Records outgoing account emails instead of talking to SMTP."""

    def __init__(self):
        self.otp_emails: list[tuple[str, str]] = []
        self.password_emails: list[tuple[str, str, str]] = []
        self.fail = False

    def send_otp_email(self, address: str, code: str) -> None:
        if self.fail:
            raise MailDeliveryError()
        self.otp_emails.append((address, code))

    def send_temporary_password_email(self, address: str, password: str, display_name: str) -> None:
        if self.fail:
            raise MailDeliveryError()
        self.password_emails.append((address, password, display_name))

    @property
    def last_code(self) -> str:
        return self.otp_emails[-1][1]

    @property
    def last_password(self) -> str:
        return self.password_emails[-1][1]


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def tokens():
    return TokenIssuer(secret="test-secret", lifetime=timedelta(days=7))


@pytest.fixture
def listing_client():
    return VendorListingClient(url=None)


@pytest.fixture
def client(engine, clock, notifier, tokens, listing_client):
    """
    TestClient bound to the app with every external collaborator replaced.
    The lifespan hook is not run; tables come from the engine fixture.
    """

    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_token_issuer] = lambda: tokens
    app.dependency_overrides[get_auth_service] = lambda: AuthService(
        repo=UserRepository(),
        tokens=tokens,
        notifier=notifier,
        otp_ttl=timedelta(minutes=10),
        clock=clock,
    )
    app.dependency_overrides[get_listing_service] = lambda: ListingService(
        AdoptionRepository(),
        listing_client,
    )
    app.dependency_overrides[get_stats_service] = lambda: StatsService(BookingRepository(), clock)

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """
    Factory: register an account and return (response json, auth headers).
    """

    def _register(
        username: str | None = None,
        email: str | None = None,
        password: str = "Secret123!",
        vendor: bool = False,
    ) -> tuple[dict, dict[str, str]]:
        username = username or f"user_{uuid.uuid4().hex[:6]}"
        email = email or f"{username}@example.com"
        path = "/api/auth/vendor/register" if vendor else "/api/auth/register"
        resp = client.post(path, json={"username": username, "email": email, "password": password})
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return body, {"Authorization": f"Bearer {body['token']}"}

    return _register
